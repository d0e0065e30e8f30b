# Burndown Service Request Models
"""
Pydantic models for API requests.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from burndown_service.analytics.models import Sprint, Task


class BurndownRequest(BaseModel):
    """Project snapshot to compute a burndown for."""
    sprints: list[Sprint] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    now: Optional[datetime] = Field(None, description="Caller's current time; server clock if omitted")
