"""
Calendar helpers shared by the burndown calculators.

Every "is this the same day" decision in the engine goes through
``to_calendar_date`` so that timestamps are compared as calendar-date keys
in one fixed timezone, never as exact instants.
"""

import logging
import math
from datetime import datetime, date, tzinfo
from functools import lru_cache
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DATE_KEY_FORMAT = "%Y-%m-%d"


@lru_cache(maxsize=32)
def resolve_timezone(name: Optional[str]) -> tzinfo:
    """Look up a timezone by IANA name, falling back to UTC."""
    if not name:
        return ZoneInfo("UTC")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", name)
        return ZoneInfo("UTC")


def to_calendar_date(value: Union[datetime, date], tz: Optional[tzinfo] = None) -> date:
    """
    Reduce a timestamp to its calendar date.

    Aware datetimes are converted to ``tz`` first; naive datetimes are taken
    as already expressed in that timezone.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and tz is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def date_key(day: date) -> str:
    """ISO ``YYYY-MM-DD`` key for a calendar date"""
    return day.strftime(DATE_KEY_FORMAT)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (values here are >= 0)."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))
