# Re-export schedule components
from curo.conventions.types import Frequency, Mode

from .adjustments import (
    DAYS_IN_MONTH,
    get_month_end,
    has_month_end_day,
    months_between_dates,
    roll_date,
    roll_day,
    roll_month,
    roll_periods,
)
from .core import Series, SeriesError
from .generator import ProfileBuilder
