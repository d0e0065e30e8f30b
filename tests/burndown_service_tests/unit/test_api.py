"""
Tests for the Burndown Service HTTP API
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

import httpx
from fastapi.testclient import TestClient

from burndown_service.analytics.adapters.base import BaseBurndownAdapter
from burndown_service.analytics.service import BurndownService
from burndown_service.dependencies import get_burndown_service
from burndown_service.main import app


@pytest.fixture
def adapter(ten_day_sprint, ten_point_tasks):
    adapter = MagicMock(spec=BaseBurndownAdapter)
    adapter.get_burndown_snapshot = AsyncMock(return_value=([ten_day_sprint], ten_point_tasks))
    return adapter


@pytest.fixture
def client(adapter):
    app.dependency_overrides[get_burndown_service] = lambda: BurndownService(adapter=adapter)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    """Tests for service endpoints."""
    
    def test_health(self, client):
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
    
    def test_root(self, client):
        assert client.get("/").json()["health"] == "/health"


class TestProjectBurndown:
    """Tests for project burndown endpoints."""
    
    def test_series(self, client):
        response = client.get(
            "/api/v1/projects/proj-1/burndown",
            params={"now": "2024-01-05T12:00:00"}
        )
        
        assert response.status_code == 200
        data = response.json()
        assert data["project_id"] == "proj-1"
        assert len(data["points"]) == 10
        assert data["points"][0] == {
            "date": "2024-01-01",
            "ideal": 10,
            "actual": 10,
            "formattedDate": "Jan 01",
        }
        assert [p["actual"] for p in data["points"]] == [10, 10, 5, 5, 5, 5, 5, 5, 5, 5]
    
    def test_chart(self, client):
        response = client.get(
            "/api/v1/projects/proj-1/burndown/chart",
            params={"now": "2024-01-05T12:00:00"}
        )
        
        assert response.status_code == 200
        data = response.json()
        assert data["chart_type"] == "burndown"
        assert [series["name"] for series in data["series"]] == ["Ideal", "Actual"]
        assert data["metadata"]["on_track"] is True
    
    def test_store_failure_returns_503(self, client, adapter):
        adapter.get_burndown_snapshot.side_effect = httpx.ConnectError("connection refused")
        
        response = client.get("/api/v1/projects/proj-1/burndown")
        
        assert response.status_code == 503
        body = response.json()
        assert body["error"] == "data_unavailable"
        assert body["project_id"] == "proj-1"


class TestComputeBurndown:
    """Tests for computing a burndown from a posted snapshot."""
    
    def test_posted_snapshot(self, client):
        response = client.post("/api/v1/burndown", json={
            "sprints": [
                {"id": "s1", "project_id": "p1", "start_date": "2024-01-01", "end_date": "2024-01-10"},
            ],
            "tasks": [
                {"id": "t1", "status": "done", "story_points": 5, "updated_at": "2024-01-03T10:00:00Z"},
                {"id": "t2", "status": "in-progress", "story_points": 5},
            ],
            "now": "2024-01-05T12:00:00Z",
        })
        
        assert response.status_code == 200
        points = response.json()["points"]
        assert [p["ideal"] for p in points] == [10, 9, 8, 7, 6, 4, 3, 2, 1, 0]
        assert [p["actual"] for p in points] == [10, 10, 5, 5, 5, 5, 5, 5, 5, 5]
    
    def test_posted_snapshot_in_camel_case(self, client):
        response = client.post("/api/v1/burndown", json={
            "sprints": [
                {"id": "s1", "projectId": "p1", "startDate": "2024-01-01", "endDate": "2024-01-10"},
            ],
            "tasks": [
                {"id": "t1", "sprintId": "s1", "status": "Done", "storyPoints": 5, "updatedAt": "2024-01-03T10:00:00Z"},
                {"id": "t2", "sprintId": "s1", "status": "In Progress", "storyPoints": 5},
            ],
            "now": "2024-01-05T12:00:00Z",
        })
        
        assert response.status_code == 200
        points = response.json()["points"]
        assert [p["ideal"] for p in points] == [10, 9, 8, 7, 6, 4, 3, 2, 1, 0]
        assert [p["actual"] for p in points] == [10, 10, 5, 5, 5, 5, 5, 5, 5, 5]
    
    def test_empty_snapshot_uses_default_window(self, client):
        response = client.post("/api/v1/burndown", json={"now": "2024-01-05T12:00:00Z"})
        
        assert response.status_code == 200
        points = response.json()["points"]
        assert len(points) == 21
        assert points[0]["date"] == "2024-01-05"
        assert points[0]["ideal"] == 100
        assert all(p["actual"] == p["ideal"] for p in points)
