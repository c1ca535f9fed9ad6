"""Date coercion and calendar helpers."""

from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Union

from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[date, datetime, Timestamp, str]


def to_date(date_like: DateLike) -> date:
    """
    Normalise a date-like value to a plain ``date`` (time of day dropped).
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(date_like, fmt).date()
            except ValueError:
                continue
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def actual_days(date1: DateLike, date2: DateLike) -> int:
    """Number of calendar days between two dates, irrespective of order."""
    return abs((to_date(date2) - to_date(date1)).days)


def is_leap_year(year: int) -> bool:
    return calendar.isleap(year)


def has_leap_year(year_from: int, year_to: int) -> bool:
    """True if any year in the inclusive range is a leap year."""
    return any(is_leap_year(year) for year in range(year_from, year_to + 1))
