"""
Date rolling functions for schedule generation.
"""

from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from curo.conventions.types import Frequency
from curo.utils.date import DateLike, to_date

# Days in each month starting January (non leap year)
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def get_month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)

    return next_month - timedelta(days=1)


def has_month_end_day(dt: DateLike) -> bool:
    """Check if date is end of month (Feb 29 in leap years)."""
    dt = to_date(dt)
    return dt == get_month_end(dt.year, dt.month)


def months_between_dates(date1: DateLike, date2: DateLike) -> int:
    """Whole months between two dates, irrespective of order.

    A month only counts once the later day of month reaches the earlier one,
    unless both dates are month ends (Jan 31 -> Feb 28 is one month).
    """
    d1, d2 = to_date(date1), to_date(date2)
    if d1 > d2:
        d1, d2 = d2, d1

    month_adj = 0
    if d1.day > d2.day and not (has_month_end_day(d1) and has_month_end_day(d2)):
        month_adj = -1

    return (d2.year - d1.year) * 12 + (d2.month - d1.month) + month_adj


def roll_day(dt: DateLike, num_days: int) -> date:
    """Roll a date by the number of days specified."""
    return to_date(dt) + timedelta(days=num_days)


def roll_month(dt: DateLike, num_months: int, day_pref: Optional[int] = None) -> date:
    """Roll a date by the number of months specified.

    The result lands on ``day_pref`` (default: the day of ``dt``), or on the
    month end when the target month is shorter.
    """
    dt = to_date(dt)
    preferred = day_pref if day_pref is not None and day_pref > 0 else dt.day

    target = dt + relativedelta(months=num_months)
    month_end = get_month_end(target.year, target.month)
    return target.replace(day=min(preferred, month_end.day))


def roll_date(dt: DateLike, frequency: Frequency, day_pref: Optional[int] = None) -> date:
    """Roll a date forward by one period of the given frequency."""
    if frequency.months():
        return roll_month(dt, frequency.months(), day_pref)
    return roll_day(dt, frequency.days())


def roll_periods(
    anchor: DateLike, frequency: Frequency, periods: int
) -> date:
    """Date ``periods`` whole periods after ``anchor``.

    Month-based rolls are measured from the anchor rather than chained, so
    the anchor's day of month is kept after passing through short months
    (Jan 31 -> Feb 28 -> Mar 31).
    """
    anchor = to_date(anchor)
    if frequency.months():
        return roll_month(anchor, frequency.months() * periods, anchor.day)
    return anchor + frequency.offset(periods)
