# File: billable_hours/core/report_window.py
"""
Date range helpers for the report request.
"""

import datetime
from typing import Optional, Tuple

import pytz

BUSINESS_DAYS = 5

Window = Tuple[datetime.datetime, datetime.datetime]


def _local_midnight(day: datetime.date, tz_name: str) -> datetime.datetime:
    """Localize midnight of ``day`` in the named timezone."""
    local_tz = pytz.timezone(tz_name)
    return local_tz.localize(datetime.datetime.combine(day, datetime.time.min))


def explicit_window(start_date: datetime.date, days: int, tz_name: str = "UTC") -> Window:
    """
    Return [start, end) covering ``days`` calendar days from ``start_date``.

    Raises:
        ValueError: if days is not positive
    """
    if days <= 0:
        raise ValueError(f"Report window must span at least one day, got {days}")
    start = _local_midnight(start_date, tz_name)
    end = _local_midnight(start_date + datetime.timedelta(days=days), tz_name)
    return start, end


def business_week(reference: Optional[datetime.date] = None, tz_name: str = "UTC") -> Window:
    """
    Return [Monday 00:00, Saturday 00:00) of the week containing ``reference``.

    Defaults to today in the target timezone.
    """
    if reference is None:
        reference = datetime.datetime.now(pytz.timezone(tz_name)).date()
    monday = reference - datetime.timedelta(days=reference.weekday())
    return explicit_window(monday, BUSINESS_DAYS, tz_name)


def resolve_window(
    start_date: Optional[datetime.date],
    days: int,
    tz_name: str = "UTC",
) -> Window:
    """Use an explicit start date when configured, otherwise this business week."""
    if start_date is None:
        return business_week(tz_name=tz_name)
    return explicit_window(start_date, days, tz_name)
