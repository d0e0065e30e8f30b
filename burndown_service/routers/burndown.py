# Burndown Service - Burndown Router
"""
API endpoints for burndown series and charts.
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from burndown_service.analytics.models import ChartResponse
from burndown_service.analytics.service import BurndownService
from burndown_service.dependencies import get_burndown_service
from burndown_service.models.requests import BurndownRequest
from burndown_service.models.responses import BurndownResponse

router = APIRouter(tags=["burndown"])


@router.get("/projects/{project_id}/burndown", response_model=BurndownResponse)
async def get_project_burndown(
    project_id: str,
    now: Optional[datetime] = Query(None, description="Reference time; server clock if omitted"),
    service: BurndownService = Depends(get_burndown_service)
):
    """
    Get the day-by-day burndown series of a project.
    
    Covers every day from the earliest sprint start to the latest sprint
    end (at least a week), or a default window when the project has no
    sprints or no story points.
    """
    now = now or service.now()
    points = await service.get_burndown(project_id, now=now)
    return BurndownResponse(project_id=project_id, generated_at=now, points=points)


@router.get("/projects/{project_id}/burndown/chart", response_model=ChartResponse)
async def get_project_burndown_chart(
    project_id: str,
    now: Optional[datetime] = Query(None, description="Reference time; server clock if omitted"),
    service: BurndownService = Depends(get_burndown_service)
):
    """Get the burndown as Ideal/Actual chart series with summary metadata."""
    return await service.get_burndown_chart(project_id, now=now)


@router.post("/burndown", response_model=BurndownResponse)
async def compute_burndown(
    request: BurndownRequest,
    service: BurndownService = Depends(get_burndown_service)
):
    """Compute a burndown series from a snapshot supplied in the request body."""
    now = request.now or service.now()
    points = service.calculate(request.sprints, request.tasks, now=now)
    return BurndownResponse(generated_at=now, points=points)
