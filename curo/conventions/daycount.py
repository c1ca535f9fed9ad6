"""
Day count conventions for cash flow profiles.

A convention turns a pair of dates into a ``DayCountFactor``: the fraction of
a compounding year between them. ``US30360`` is implemented directly; other
conventions are backed by QuantLib day counters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Dict, Tuple

import logging

import QuantLib as ql

from curo.utils.date import DateLike, to_date

from .types import DayCountOrigin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DayCountFactor:
    """Fraction of a compounding period between two dates."""

    numerator: float
    denominator: float
    value: float = field(init=False)

    def __post_init__(self) -> None:
        if self.denominator == 0:
            raise ValueError("DayCountFactor denominator must be non-zero")
        object.__setattr__(self, "value", self.numerator / self.denominator)


def _ordered(d1: DateLike, d2: DateLike) -> Tuple[date, date]:
    start, end = to_date(d1), to_date(d2)
    if end < start:
        logger.debug("Swapping start/end for day count: %s, %s", start, end)
        start, end = end, start
    return start, end


class DayCountConvention(ABC):
    """Base class for day count conventions.

    Attributes:
        use_post_dates: Measure periods between post dates (True) or value
            dates (False)
        include_non_financing_flows: Whether charges take part in period
            measurement; carried for callers building disclosure profiles
        use_xirr_method: Measure every period from the first drawdown rather
            than from the neighbouring cash flow
    """

    name: str = ""

    def __init__(
        self,
        use_post_dates: bool = True,
        include_non_financing_flows: bool = False,
        use_xirr_method: bool = False,
    ):
        self.use_post_dates = use_post_dates
        self.include_non_financing_flows = include_non_financing_flows
        self.use_xirr_method = use_xirr_method

    @property
    def day_count_origin(self) -> DayCountOrigin:
        if self.use_xirr_method:
            return DayCountOrigin.DRAWDOWN
        return DayCountOrigin.NEIGHBOUR

    @abstractmethod
    def compute_factor(self, d1: DateLike, d2: DateLike) -> DayCountFactor:
        """Return the period factor between two dates, in either order."""

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(use_post_dates={self.use_post_dates}, "
            f"include_non_financing_flows={self.include_non_financing_flows}, "
            f"use_xirr_method={self.use_xirr_method})"
        )


class US30360(DayCountConvention):
    """30/360 US day count convention.

    Every month counts 30 days and every year 360, as on the HP12C and
    similar financial calculators. Day 31 of the earlier date becomes 30;
    day 31 of the later date becomes 30 only when the (adjusted) earlier day
    is 30 or more.
    """

    name = "30/360 US"

    def compute_factor(self, d1: DateLike, d2: DateLike) -> DayCountFactor:
        start, end = _ordered(d1, d2)

        day1 = start.day
        day2 = end.day
        if day1 == 31:
            day1 = 30
        if day2 == 31 and day1 >= 30:
            day2 = 30

        numerator = (
            (end.year - start.year) * 360
            + (end.month - start.month) * 30
            + (day2 - day1)
        )
        return DayCountFactor(numerator, 360)


def _to_ql_date(dt: date) -> ql.Date:
    """Convert Python date to QuantLib Date."""
    return ql.Date(dt.day, dt.month, dt.year)


class QuantLibConvention(DayCountConvention):
    """Convention backed by a QuantLib day counter with a fixed year basis."""

    def __init__(
        self,
        name: str,
        ql_daycount: ql.DayCounter,
        denominator: int,
        **options,
    ):
        super().__init__(**options)
        self.name = name
        self._ql_daycount = ql_daycount
        self._denominator = denominator

    def compute_factor(self, d1: DateLike, d2: DateLike) -> DayCountFactor:
        start, end = _ordered(d1, d2)
        days = self._ql_daycount.dayCount(_to_ql_date(start), _to_ql_date(end))
        return DayCountFactor(days, self._denominator)


class Actual360(QuantLibConvention):
    """ACT/360: actual days over a 360 day year."""

    def __init__(self, **options):
        super().__init__("ACT/360", ql.Actual360(), 360, **options)


class Actual365Fixed(QuantLibConvention):
    """ACT/365F: actual days over a 365 day year."""

    def __init__(self, **options):
        super().__init__("ACT/365F", ql.Actual365Fixed(), 365, **options)


class Thirty360European(QuantLibConvention):
    """30E/360: both day 31s become 30 unconditionally."""

    def __init__(self, **options):
        super().__init__(
            "30E/360", ql.Thirty360(ql.Thirty360.European), 360, **options
        )


ConventionFactory = Callable[..., DayCountConvention]

_REGISTRY: Dict[str, ConventionFactory] = {
    "30/360": US30360,
    "30/360 US": US30360,
    "30U/360": US30360,
    "ACT/360": Actual360,
    "ACTUAL/360": Actual360,
    "ACT/365F": Actual365Fixed,
    "ACT/365": Actual365Fixed,
    "ACTUAL/365F": Actual365Fixed,
    "30E/360": Thirty360European,
    "30/360E": Thirty360European,
}


def get_day_count_convention(name: str, **options) -> DayCountConvention:
    """Create a day count convention by name.

    Keyword options (``use_post_dates``, ``include_non_financing_flows``,
    ``use_xirr_method``) are passed through to the convention.
    """
    key = name.upper()
    try:
        factory = _REGISTRY[key]
    except KeyError as exc:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(_REGISTRY.keys())}"
        ) from exc
    return factory(**options)


def register_day_count_convention(name: str, factory: ConventionFactory) -> None:
    """Register a custom day count convention."""
    key = name.upper()
    if key in _REGISTRY:
        raise ValueError(f"Day count '{name}' already registered")
    _REGISTRY[key] = factory
