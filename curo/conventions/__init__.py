"""Market conventions: enums and day count conventions."""

from .daycount import (
    Actual360,
    Actual365Fixed,
    DayCountConvention,
    DayCountFactor,
    QuantLibConvention,
    Thirty360European,
    US30360,
    get_day_count_convention,
    register_day_count_convention,
)
from .types import CashFlowRole, DayCountOrigin, Frequency, Mode

__all__ = [
    "CashFlowRole",
    "DayCountOrigin",
    "Frequency",
    "Mode",
    "DayCountConvention",
    "DayCountFactor",
    "US30360",
    "QuantLibConvention",
    "Actual360",
    "Actual365Fixed",
    "Thirty360European",
    "get_day_count_convention",
    "register_day_count_convention",
]
