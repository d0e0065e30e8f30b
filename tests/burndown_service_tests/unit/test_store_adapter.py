"""
Unit tests for DataStoreBurndownAdapter
"""

import pytest
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import httpx

from burndown_service.analytics.adapters.store_adapter import DataStoreBurndownAdapter
from burndown_service.analytics.models import TaskStatus


SPRINTS = [
    {"id": "s1", "projectId": "p1", "startDate": "2024-01-01", "endDate": "2024-01-07", "name": "Sprint 1"},
    {"id": "s2", "startDate": "2024-01-08T00:00:00.000Z", "endDate": "2024-01-14T00:00:00.000Z"},
    {"id": "s3", "startDate": "soon", "endDate": "2024-01-21"},
    {"startDate": "2024-01-22", "endDate": "2024-01-28"},
]

TASKS = {
    "s1": [
        {"id": "t1", "status": "done", "storyPoints": 3, "updatedAt": "2024-01-03T10:00:00Z"},
        {"id": "t2", "status": "todo", "storyPoints": 5},
    ],
    "s2": [
        {"id": "t2", "status": "todo", "storyPoints": 5},
        {"id": "t3", "status": "In Progress", "storyPoints": 2},
        {"status": "done"},
    ],
}


@pytest.fixture
def client():
    client = MagicMock()
    client.list_sprints = AsyncMock(return_value=SPRINTS)
    client.list_tasks = AsyncMock(side_effect=lambda sprint_id: TASKS.get(sprint_id, []))
    return client


class TestDataStoreBurndownAdapter:
    """Tests for snapshot retrieval."""
    
    @pytest.mark.asyncio
    async def test_snapshot(self, client):
        adapter = DataStoreBurndownAdapter(client)
        
        sprints, tasks = await adapter.get_burndown_snapshot("p1")
        
        client.list_sprints.assert_awaited_once_with("p1")
        assert [s.id for s in sprints] == ["s1", "s2"]
        assert sprints[1].start_date == date(2024, 1, 8)
        assert sprints[1].project_id == "p1"
        
        assert [t.id for t in tasks] == ["t1", "t2", "t3"]
        assert tasks[0].status is TaskStatus.DONE
        assert tasks[0].sprint_id == "s1"
        assert tasks[2].status is TaskStatus.IN_PROGRESS
    
    @pytest.mark.asyncio
    async def test_tasks_fetched_only_for_valid_sprints(self, client):
        adapter = DataStoreBurndownAdapter(client)
        
        await adapter.get_burndown_snapshot("p1")
        
        fetched = sorted(call.args[0] for call in client.list_tasks.await_args_list)
        assert fetched == ["s1", "s2"]
    
    @pytest.mark.asyncio
    async def test_empty_project(self, client):
        client.list_sprints.return_value = []
        adapter = DataStoreBurndownAdapter(client)
        
        sprints, tasks = await adapter.get_burndown_snapshot("p1")
        
        assert sprints == []
        assert tasks == []
        client.list_tasks.assert_not_awaited()
    
    @pytest.mark.asyncio
    async def test_retrieval_errors_propagate(self, client):
        client.list_tasks.side_effect = httpx.ConnectError("connection refused")
        adapter = DataStoreBurndownAdapter(client)
        
        with pytest.raises(httpx.ConnectError):
            await adapter.get_burndown_snapshot("p1")
