"""
Unit tests for completion aggregation
"""

from datetime import datetime, timedelta, timezone

from burndown_service.analytics.calculators.completions import aggregate_completions
from burndown_service.analytics.calculators.dates import resolve_timezone
from burndown_service.analytics.models import Task, TaskStatus


class TestAggregateCompletions:
    """Tests for aggregate_completions."""
    
    def test_groups_done_points_by_day(self):
        tasks = [
            Task(id="1", status=TaskStatus.DONE, story_points=3, updated_at=datetime(2024, 1, 3, 9)),
            Task(id="2", status=TaskStatus.DONE, story_points=2, updated_at=datetime(2024, 1, 3, 17)),
            Task(id="3", status=TaskStatus.DONE, story_points=5, updated_at=datetime(2024, 1, 5, 12)),
        ]
        
        assert aggregate_completions(tasks) == {"2024-01-03": 5.0, "2024-01-05": 5.0}
    
    def test_ignores_unfinished_and_incomplete_records(self):
        tasks = [
            Task(id="1", status=TaskStatus.IN_PROGRESS, story_points=3, updated_at=datetime(2024, 1, 3)),
            Task(id="2", status=TaskStatus.DONE, updated_at=datetime(2024, 1, 3)),
            Task(id="3", status=TaskStatus.DONE, story_points=4),
            Task(id="4", status=TaskStatus.UNKNOWN, story_points=1, updated_at=datetime(2024, 1, 4)),
        ]
        
        assert aggregate_completions(tasks) == {}
    
    def test_aware_timestamps_use_calendar_date_in_timezone(self):
        eastern = timezone(timedelta(hours=-5))
        tasks = [
            Task(
                id="1",
                status=TaskStatus.DONE,
                story_points=3,
                updated_at=datetime(2024, 1, 3, 23, 30, tzinfo=eastern),
            ),
        ]
        
        assert aggregate_completions(tasks, resolve_timezone("UTC")) == {"2024-01-04": 3.0}
        assert aggregate_completions(tasks) == {"2024-01-03": 3.0}
