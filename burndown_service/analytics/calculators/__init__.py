"""
Burndown calculators.

The projection is split into the steps it is computed in: timeframe
resolution, completion aggregation, then the ideal and actual curves
laid over every day of the timeframe.
"""

from burndown_service.analytics.calculators.burndown import (
    BurndownCalculator,
    actual_curve,
    ideal_curve,
)
from burndown_service.analytics.calculators.completions import aggregate_completions
from burndown_service.analytics.calculators.timeframe import (
    default_timeframe,
    resolve_timeframe,
    total_scope,
)

__all__ = [
    'BurndownCalculator',
    'actual_curve',
    'ideal_curve',
    'aggregate_completions',
    'default_timeframe',
    'resolve_timeframe',
    'total_scope',
]
