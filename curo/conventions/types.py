"""
Basic types and enums used across the profile and scheduling system.
"""

from enum import Enum

from dateutil.relativedelta import relativedelta


class Frequency(Enum):
    """Compounding period between two cash flows in a series."""

    WEEKLY = "weekly"
    FORTNIGHTLY = "fortnightly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    HALF_YEARLY = "halfYearly"
    YEARLY = "yearly"

    def months(self) -> int:
        """Months per period; 0 for day-based frequencies."""
        return _MONTHS[self]

    def days(self) -> int:
        """Days per period; 0 for month-based frequencies."""
        return _DAYS[self]

    def offset(self, periods: int = 1) -> relativedelta:
        """Calendar offset spanning the given number of periods."""
        if self.months():
            return relativedelta(months=self.months() * periods)
        return relativedelta(days=self.days() * periods)


_MONTHS = {
    Frequency.WEEKLY: 0,
    Frequency.FORTNIGHTLY: 0,
    Frequency.MONTHLY: 1,
    Frequency.QUARTERLY: 3,
    Frequency.HALF_YEARLY: 6,
    Frequency.YEARLY: 12,
}

_DAYS = {
    Frequency.WEEKLY: 7,
    Frequency.FORTNIGHTLY: 14,
    Frequency.MONTHLY: 0,
    Frequency.QUARTERLY: 0,
    Frequency.HALF_YEARLY: 0,
    Frequency.YEARLY: 0,
}


class Mode(Enum):
    """Whether a cash flow falls at the start or the end of its period."""

    ADVANCE = "advance"
    ARREAR = "arrear"


class CashFlowRole(Enum):
    """Semantic role of a cash flow or series."""

    ADVANCE = "advance"  # money disbursed
    PAYMENT = "payment"  # money repaid
    CHARGE = "charge"  # fee or charge

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def default_mode(self) -> Mode:
        return Mode.ADVANCE if self is CashFlowRole.ADVANCE else Mode.ARREAR


class DayCountOrigin(Enum):
    """How period factors are measured."""

    NEIGHBOUR = "neighbour"  # between adjacent cash flow dates
    DRAWDOWN = "drawdown"  # from the first cash flow date
