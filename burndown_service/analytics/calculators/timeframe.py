"""
Timeframe resolver.

Determines the calendar interval and total scope (story points) a burndown
projection covers. Degenerate input never fails: without sprints or scope
the projection falls back to a default window starting today so the chart
always has something to render.
"""

import logging
from datetime import date
from typing import Iterable, Sequence

from burndown_service.analytics.models import Sprint, Task, Timeframe

logger = logging.getLogger(__name__)

MIN_TIMEFRAME_DAYS = 7
DEFAULT_TIMEFRAME_DAYS = 21
DEFAULT_TOTAL_SCOPE = 100.0


def total_scope(tasks: Iterable[Task]) -> float:
    """Sum of story points over all tasks, missing estimates counting as 0"""
    return sum(task.story_points or 0 for task in tasks)


def default_timeframe(
    today: date,
    days: int = DEFAULT_TIMEFRAME_DAYS,
    scope: float = DEFAULT_TOTAL_SCOPE,
) -> Timeframe:
    """Synthetic window used when there is nothing real to project."""
    return Timeframe(
        start_date=today,
        days=max(1, days),
        total_scope=scope,
        is_default=True,
    )


def resolve_timeframe(
    sprints: Sequence[Sprint],
    tasks: Sequence[Task],
    today: date,
    min_days: int = MIN_TIMEFRAME_DAYS,
    default_days: int = DEFAULT_TIMEFRAME_DAYS,
    default_scope: float = DEFAULT_TOTAL_SCOPE,
) -> Timeframe:
    """
    Resolve the projection timeframe for a set of sprints and their tasks.
    
    Args:
        sprints: Sprints of the project (any order, may overlap or leave gaps)
        tasks: Tasks belonging to those sprints
        today: Caller's current calendar date, used by the fallback window
        min_days: Lower bound on the timeframe length
        default_days: Length of the fallback window
        default_scope: Synthetic scope of the fallback window
    
    Returns:
        Timeframe spanning earliest sprint start to latest sprint end, at
        least ``min_days`` long, or the default window when there are no
        sprints or no story points.
    """
    if not sprints:
        logger.info("No sprints to project, using %d-day default timeframe", default_days)
        return default_timeframe(today, default_days, default_scope)
    
    scope = total_scope(tasks)
    if scope <= 0:
        logger.info("Sprints carry no story points, using %d-day default timeframe", default_days)
        return default_timeframe(today, default_days, default_scope)
    
    start_date = min(sprint.start_date for sprint in sprints)
    end_date = max(sprint.end_date for sprint in sprints)
    days_in_project = (end_date - start_date).days + 1
    
    return Timeframe(
        start_date=start_date,
        days=max(1, days_in_project, min_days),
        total_scope=scope,
    )
