"""Data structures for cash flow profiles.

This module defines the dated cash flow value type and the profile that
collects cash flows together with the day count convention and rounding
precision used to evaluate them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Iterable, Optional, Tuple

import pandas as pd

from curo.conventions.daycount import DayCountConvention, DayCountFactor
from curo.conventions.types import CashFlowRole
from curo.utils.date import DateLike, to_date

MIN_PRECISION = 0
MAX_PRECISION = 4
DEFAULT_PRECISION = 2


class CashFlowError(ValueError):
    """Raised when a cash flow violates its construction invariants."""


class PrecisionError(ValueError):
    """Raised when a rounding precision falls outside [0, 4]."""


class ProfileError(ValueError):
    """Raised when a profile is not in a state the operation requires."""


def validate_precision(precision: int) -> int:
    if not isinstance(precision, int) or not (
        MIN_PRECISION <= precision <= MAX_PRECISION
    ):
        raise PrecisionError(
            f"The precision of {precision!r} is unsupported. "
            f"Valid options are between {MIN_PRECISION} and {MAX_PRECISION} inclusive"
        )
    return precision


@dataclass(frozen=True)
class CashFlow:
    """A dated cash flow.

    Attributes:
        role: Advance, payment or charge; affects the default label only
        post_date: Contractual due date
        value_date: Settlement date, on or after the post date
        value: Signed amount; a 0.0 placeholder while unknown
        is_known: False when the value is to be solved
        weighting: Share of the solved value taken by an unknown flow
        label: Description
        period_factor: Day count factor relative to the origin, once assigned
    """

    role: CashFlowRole
    post_date: date
    value_date: Optional[date] = None
    value: float = 0.0
    is_known: bool = True
    weighting: float = 1.0
    label: str = ""
    period_factor: Optional[DayCountFactor] = None

    def __post_init__(self) -> None:
        try:
            post_date = to_date(self.post_date)
            value_date = (
                post_date if self.value_date is None else to_date(self.value_date)
            )
        except (TypeError, ValueError) as exc:
            raise CashFlowError(f"The cash flow dates must be valid dates: {exc}") from exc

        if value_date < post_date:
            raise CashFlowError(
                f"The cash flow value date {value_date} must fall on or after "
                f"the post date {post_date}"
            )
        if not self.weighting > 0:
            raise CashFlowError(
                f"The cash flow weighting must be greater than 0.0, got {self.weighting!r}"
            )

        object.__setattr__(self, "post_date", post_date)
        object.__setattr__(self, "value_date", value_date)
        object.__setattr__(self, "value", float(self.value))
        if not self.label:
            object.__setattr__(self, "label", self.role.label)

    @classmethod
    def create(
        cls,
        role: CashFlowRole,
        post_date: DateLike,
        value: Optional[float] = None,
        **kwargs,
    ) -> CashFlow:
        """Build a cash flow; ``value=None`` marks it as the unknown."""
        return cls(
            role=role,
            post_date=post_date,
            value=0.0 if value is None else value,
            is_known=value is not None,
            **kwargs,
        )

    @classmethod
    def advance(cls, post_date: DateLike, value: Optional[float] = None, **kwargs) -> CashFlow:
        return cls.create(CashFlowRole.ADVANCE, post_date, value, **kwargs)

    @classmethod
    def payment(cls, post_date: DateLike, value: Optional[float] = None, **kwargs) -> CashFlow:
        return cls.create(CashFlowRole.PAYMENT, post_date, value, **kwargs)

    @classmethod
    def charge(cls, post_date: DateLike, value: Optional[float] = None, **kwargs) -> CashFlow:
        return cls.create(CashFlowRole.CHARGE, post_date, value, **kwargs)

    def with_changes(self, **changes) -> CashFlow:
        """Return a copy with the given fields replaced (re-validated)."""
        return replace(self, **changes)

    def date_for(self, use_post_dates: bool) -> date:
        return self.post_date if use_post_dates else self.value_date


@dataclass(frozen=True)
class Profile:
    """An ordered collection of cash flows plus evaluation settings.

    Attributes:
        cash_flows: Cash flows; sorted by date once factors are assigned
        day_count: Convention used for period factors (required to solve)
        precision: Decimal places used when rounding solved values
    """

    cash_flows: Tuple[CashFlow, ...] = ()
    day_count: Optional[DayCountConvention] = None
    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        validate_precision(self.precision)
        object.__setattr__(self, "cash_flows", tuple(self.cash_flows))

    def copy_with(
        self,
        cash_flows: Optional[Iterable[CashFlow]] = None,
        day_count: Optional[DayCountConvention] = None,
        precision: Optional[int] = None,
    ) -> Profile:
        return Profile(
            cash_flows=self.cash_flows if cash_flows is None else tuple(cash_flows),
            day_count=self.day_count if day_count is None else day_count,
            precision=self.precision if precision is None else precision,
        )

    def __len__(self) -> int:
        return len(self.cash_flows)

    @property
    def unknowns(self) -> Tuple[CashFlow, ...]:
        return tuple(cf for cf in self.cash_flows if not cf.is_known)

    @property
    def has_unknowns(self) -> bool:
        return any(not cf.is_known for cf in self.cash_flows)

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of the cash flows, one row per flow in profile order."""
        rows = []
        for cf in self.cash_flows:
            factor = cf.period_factor
            rows.append(
                {
                    "role": cf.role.value,
                    "label": cf.label,
                    "post_date": cf.post_date,
                    "value_date": cf.value_date,
                    "value": cf.value,
                    "is_known": cf.is_known,
                    "weighting": cf.weighting,
                    "factor_numerator": None if factor is None else factor.numerator,
                    "factor_denominator": None if factor is None else factor.denominator,
                    "factor": None if factor is None else factor.value,
                }
            )
        columns = [
            "role",
            "label",
            "post_date",
            "value_date",
            "value",
            "is_known",
            "weighting",
            "factor_numerator",
            "factor_denominator",
            "factor",
        ]
        return pd.DataFrame(rows, columns=columns)
