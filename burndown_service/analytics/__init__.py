"""
Analytics module for burndown projection.

This module turns project snapshots (sprints and tasks) into chart-ready
burndown series that can be consumed by the dashboard frontend via REST API.
"""

from burndown_service.analytics.models import (
    BurndownDataPoint,
    ChartDataPoint,
    ChartResponse,
    ChartSeries,
    ChartType,
    Sprint,
    Task,
    TaskStatus,
    Timeframe,
)
from burndown_service.analytics.calculators import BurndownCalculator
from burndown_service.analytics.service import BurndownService

__all__ = [
    'BurndownDataPoint',
    'ChartDataPoint',
    'ChartResponse',
    'ChartSeries',
    'ChartType',
    'Sprint',
    'Task',
    'TaskStatus',
    'Timeframe',
    'BurndownCalculator',
    'BurndownService',
]
