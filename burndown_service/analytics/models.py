"""
Data models for burndown projection and chart generation.

Sprints and tasks are read-only snapshots handed over by the data store;
the engine only ever produces BurndownDataPoint sequences and the chart
envelope built from them. All models serialize cleanly to JSON for the
dashboard frontend.
"""

import math
from datetime import datetime, timedelta
from datetime import date as date_type
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator, model_validator
from enum import Enum


class TaskStatus(str, Enum):
    """Task status states"""
    BACKLOG = "backlog"
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    IN_REVIEW = "in-review"
    BLOCKED = "blocked"
    DONE = "done"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        # "In Progress", "in_progress", "To Do" and "TODO" match on letters only
        if isinstance(value, str):
            compact = "".join(char for char in value.lower() if char.isalnum())
            for member in cls:
                if member.value.replace("-", "") == compact:
                    return member
        return cls.UNKNOWN

    @property
    def is_done(self) -> bool:
        """Whether work in this status counts as completed for burndown"""
        return self is TaskStatus.DONE


class Sprint(BaseModel):
    """A sprint interval belonging to a project"""
    id: str = Field(..., description="Sprint identifier")
    project_id: str = Field(..., alias="projectId", description="Parent project ID")
    start_date: date_type = Field(..., alias="startDate", description="Sprint start date")
    end_date: date_type = Field(..., alias="endDate", description="Sprint end date")
    name: Optional[str] = Field(None, description="Sprint name")

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def _order_dates(self) -> "Sprint":
        if self.end_date < self.start_date:
            self.start_date, self.end_date = self.end_date, self.start_date
        return self


class Task(BaseModel):
    """A backlog item with an optional story point estimate"""
    id: str = Field(..., description="Task identifier")
    project_id: Optional[str] = Field(None, alias="projectId", description="Project ID (via sprint)")
    sprint_id: Optional[str] = Field(None, alias="sprintId", description="Sprint the task belongs to")
    status: TaskStatus = Field(default=TaskStatus.TODO, description="Current status")
    story_points: Optional[float] = Field(None, alias="storyPoints", description="Story points estimate")
    updated_at: Optional[datetime] = Field(
        None, alias="updatedAt", description="Last mutation; completion timestamp once the task is done"
    )

    class Config:
        populate_by_name = True

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value):
        if value is None:
            return TaskStatus.UNKNOWN
        if isinstance(value, str):
            return TaskStatus(value)
        return value

    @field_validator("story_points", mode="before")
    @classmethod
    def _coerce_story_points(cls, value):
        if value is None:
            return None
        try:
            points = float(value)
        except (TypeError, ValueError):
            return None
        if not math.isfinite(points):
            return None
        return max(0.0, points)

    @field_validator("updated_at", mode="before")
    @classmethod
    def _coerce_updated_at(cls, value):
        if value is None or isinstance(value, datetime):
            return value
        if isinstance(value, date_type):
            return datetime.combine(value, datetime.min.time())
        if isinstance(value, str):
            text = value.strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text)
            except ValueError:
                return None
        return None


class Timeframe(BaseModel):
    """The resolved calendar interval and scope a projection covers"""
    start_date: date_type
    days: int = Field(..., ge=1)
    total_scope: float = Field(..., ge=0)
    is_default: bool = False

    @property
    def end_date(self) -> date_type:
        return self.start_date + timedelta(days=self.days - 1)

    def dates(self) -> List[date_type]:
        """Every calendar day in the timeframe, oldest first"""
        return [self.start_date + timedelta(days=i) for i in range(self.days)]


class BurndownDataPoint(BaseModel):
    """One day of the burndown series"""
    date: date_type = Field(..., description="Calendar day")
    ideal: int = Field(..., ge=0, description="Remaining points on the ideal line")
    actual: int = Field(..., ge=0, description="Observed remaining points")
    formatted_date: str = Field(..., alias="formattedDate", description="Display label")

    class Config:
        populate_by_name = True


# Chart envelope shared with other analytics consumers

class ChartType(str, Enum):
    """Supported chart types"""
    BURNDOWN = "burndown"


class ChartDataPoint(BaseModel):
    """A single data point in a chart series"""
    date: Optional[datetime] = Field(None, description="Timestamp for time-series data")
    value: float = Field(..., description="Numeric value")
    label: Optional[str] = Field(None, description="Text label for categorical data")
    metadata: Optional[Dict[str, Any]] = Field(default_factory=dict, description="Additional metadata")


class ChartSeries(BaseModel):
    """A data series in a chart (e.g., 'Actual' line in burndown)"""
    name: str = Field(..., description="Series name")
    data: List[ChartDataPoint] = Field(default_factory=list, description="Data points")
    color: Optional[str] = Field(None, description="Hex color code")
    type: Optional[str] = Field(None, description="Chart type for this series (line, bar, area)")


class ChartResponse(BaseModel):
    """Standard response format for chart endpoints"""
    chart_type: ChartType = Field(..., description="Type of chart")
    title: str = Field(..., description="Chart title")
    series: List[ChartSeries] = Field(default_factory=list, description="Data series")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Chart metadata and summary statistics")
    generated_at: datetime = Field(..., description="When this chart was generated")
