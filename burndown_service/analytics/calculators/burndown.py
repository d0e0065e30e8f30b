"""
Burndown chart calculator.

Generates the day-by-day burndown series showing ideal vs actual remaining
work over a project's sprints.
"""

import logging
from datetime import datetime, date, time, tzinfo
from functools import partial
from itertools import accumulate
from typing import Dict, List, Sequence, Union

from burndown_service.analytics.models import (
    BurndownDataPoint, ChartDataPoint, ChartResponse, ChartSeries, ChartType,
    Sprint, Task, Timeframe,
)
from burndown_service.analytics.calculators.completions import aggregate_completions
from burndown_service.analytics.calculators.dates import (
    date_key, resolve_timezone, round_half_up, to_calendar_date,
)
from burndown_service.analytics.calculators.timeframe import (
    DEFAULT_TIMEFRAME_DAYS, DEFAULT_TOTAL_SCOPE, MIN_TIMEFRAME_DAYS, resolve_timeframe,
)

logger = logging.getLogger(__name__)


def ideal_curve(timeframe: Timeframe) -> List[int]:
    """Straight line from total scope on day 0 down to 0 on the final day"""
    scope = timeframe.total_scope
    # days - 1 steps, so the final day lands exactly on 0
    steps = timeframe.days - 1
    if steps <= 0:
        return [round_half_up(scope)]

    daily_burndown = scope / steps
    return [
        round_half_up(max(0.0, scope - i * daily_burndown))
        for i in range(timeframe.days)
    ]


def _burn(completions: Dict[str, float], today: date, remaining: float, day: date) -> float:
    # Days that have not happened yet carry the last value forward
    if day > today:
        return remaining
    return max(0.0, remaining - completions.get(date_key(day), 0.0))


def actual_curve(
    timeframe: Timeframe,
    completions: Dict[str, float],
    today: date,
) -> List[int]:
    """
    Observed remaining work per day.

    Folds over the ordered days with the remaining scope as accumulator,
    starting from the total scope. The accumulator is never reset, so each
    value reflects everything completed up to and including that day.
    """
    remaining_by_day = accumulate(
        timeframe.dates(),
        partial(_burn, completions, today),
        initial=timeframe.total_scope,
    )
    next(remaining_by_day)  # drop the initial scope
    return [round_half_up(remaining) for remaining in remaining_by_day]


class BurndownCalculator:
    """Calculates burndown series for a project snapshot"""

    def __init__(
        self,
        timezone: Union[str, tzinfo, None] = "UTC",
        min_timeframe_days: int = MIN_TIMEFRAME_DAYS,
        default_timeframe_days: int = DEFAULT_TIMEFRAME_DAYS,
        default_total_scope: float = DEFAULT_TOTAL_SCOPE,
        date_label_format: str = "%b %d",
    ):
        if timezone is None or isinstance(timezone, str):
            timezone = resolve_timezone(timezone)
        self.tz = timezone
        self.min_timeframe_days = min_timeframe_days
        self.default_timeframe_days = default_timeframe_days
        self.default_total_scope = default_total_scope
        self.date_label_format = date_label_format

    @classmethod
    def from_settings(cls, settings) -> "BurndownCalculator":
        """Build a calculator from service settings"""
        return cls(
            timezone=settings.timezone,
            min_timeframe_days=settings.min_timeframe_days,
            default_timeframe_days=settings.default_timeframe_days,
            default_total_scope=settings.default_total_scope,
            date_label_format=settings.date_label_format,
        )

    def today(self, now: Union[datetime, date]) -> date:
        """The caller's calendar date in the configured timezone"""
        return to_calendar_date(now, self.tz)

    def resolve_timeframe(
        self,
        sprints: Sequence[Sprint],
        tasks: Sequence[Task],
        now: Union[datetime, date],
    ) -> Timeframe:
        return resolve_timeframe(
            sprints,
            tasks,
            self.today(now),
            min_days=self.min_timeframe_days,
            default_days=self.default_timeframe_days,
            default_scope=self.default_total_scope,
        )

    def calculate(
        self,
        sprints: Sequence[Sprint],
        tasks: Sequence[Task],
        now: Union[datetime, date],
    ) -> List[BurndownDataPoint]:
        """
        Calculate the burndown series for a project.

        Args:
            sprints: The project's sprints (may be empty)
            tasks: Tasks of those sprints; the calculator does not filter them
            now: Caller's current time; splits past days from future days

        Returns:
            One BurndownDataPoint per day of the resolved timeframe, oldest first
        """
        timeframe = self.resolve_timeframe(sprints, tasks, now)
        return self.build_points(timeframe, tasks, now)

    def build_points(
        self,
        timeframe: Timeframe,
        tasks: Sequence[Task],
        now: Union[datetime, date],
    ) -> List[BurndownDataPoint]:
        """Lay the ideal and actual curves over every day of a timeframe"""
        ideal = ideal_curve(timeframe)

        if timeframe.is_default:
            # Nothing observed to diverge from the ideal line
            actual = list(ideal)
        else:
            completions = aggregate_completions(tasks, self.tz)
            actual = actual_curve(timeframe, completions, self.today(now))

        logger.debug(
            "Burndown from %s over %d days: scope=%s, default=%s",
            timeframe.start_date, timeframe.days, timeframe.total_scope, timeframe.is_default,
        )

        return [
            BurndownDataPoint(
                date=day,
                ideal=ideal_value,
                actual=actual_value,
                formatted_date=day.strftime(self.date_label_format),
            )
            for day, ideal_value, actual_value in zip(timeframe.dates(), ideal, actual)
        ]

    def to_chart(
        self,
        points: Sequence[BurndownDataPoint],
        timeframe: Timeframe,
        now: datetime,
        title: str = "Project Burndown Chart",
    ) -> ChartResponse:
        """
        Wrap a burndown series into the chart envelope with summary metadata.

        ``remaining`` and ``on_track`` are read at today's point, or at the
        nearest end of the series when today falls outside the timeframe.
        """
        today = self.today(now)
        current = points[0]
        for point in points:
            if point.date > today:
                break
            current = point

        total_scope = round(timeframe.total_scope, 2)
        remaining = current.actual
        completed = max(0.0, total_scope - remaining)
        completion_percentage = (completed / total_scope * 100) if total_scope > 0 else 0

        ideal_series = ChartSeries(
            name="Ideal",
            data=[self._chart_point(point.date, point.ideal) for point in points],
            color="#8884d8",
            type="line",
        )
        actual_series = ChartSeries(
            name="Actual",
            data=[self._chart_point(point.date, point.actual) for point in points],
            color="#82ca9d",
            type="line",
        )

        return ChartResponse(
            chart_type=ChartType.BURNDOWN,
            title=title,
            series=[ideal_series, actual_series],
            metadata={
                "total_scope": total_scope,
                "remaining": remaining,
                "completed": round(completed, 2),
                "completion_percentage": round(completion_percentage, 2),
                "on_track": current.actual <= current.ideal,
                "timeframe_days": timeframe.days,
                "start_date": timeframe.start_date.isoformat(),
                "end_date": timeframe.end_date.isoformat(),
                "is_default": timeframe.is_default,
            },
            generated_at=now,
        )

    @staticmethod
    def _chart_point(day: date, value: int) -> ChartDataPoint:
        return ChartDataPoint(
            date=datetime.combine(day, time.min),
            value=value,
            label=date_key(day),
        )
