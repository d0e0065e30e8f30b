"""
Completion aggregator.

Groups completed story points by the calendar date the work was finished.
"""

from collections import defaultdict
from datetime import tzinfo
from typing import Dict, Iterable, Optional

from burndown_service.analytics.models import Task
from burndown_service.analytics.calculators.dates import date_key, to_calendar_date


def aggregate_completions(
    tasks: Iterable[Task],
    tz: Optional[tzinfo] = None,
) -> Dict[str, float]:
    """
    Map ``YYYY-MM-DD`` to the story points completed on that day.
    
    A done task's ``updated_at`` is its completion timestamp. Done tasks
    without story points or without a timestamp are left out. The mapping
    is sparse: days without completions have no key.
    """
    completed: Dict[str, float] = defaultdict(float)
    for task in tasks:
        if not task.status.is_done or not task.story_points or task.updated_at is None:
            continue
        completed[date_key(to_calendar_date(task.updated_at, tz))] += task.story_points
    return dict(completed)
