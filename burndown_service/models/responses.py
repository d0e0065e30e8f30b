# Burndown Service Response Models
"""
Pydantic models for API responses.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from burndown_service.analytics.models import BurndownDataPoint


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    data_store_url: str


class BurndownResponse(BaseModel):
    """Burndown series response."""
    project_id: Optional[str] = None
    generated_at: datetime
    points: list[BurndownDataPoint]
