"""
Core data structures for schedule generation.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from curo.conventions.types import CashFlowRole, Frequency, Mode
from curo.utils.date import to_date


class SeriesError(ValueError):
    """Raised when a series is constructed with invalid attributes."""


@dataclass(frozen=True)
class Series:
    """Undated template for a run of cash flows.

    Attributes:
        role: Advance, payment or charge
        number_of: Number of cash flows in the series (>= 1)
        label: Description copied onto each cash flow
        value: Cash flow value, or None when it is the unknown to solve
        post_date_from: Date of the first cash flow; inferred when omitted
        frequency: Period between consecutive cash flows
        mode: Whether cash flows fall at the start or end of each period
    """

    role: CashFlowRole
    number_of: int = 1
    label: str = ""
    value: Optional[float] = None
    post_date_from: Optional[date] = None
    frequency: Frequency = Frequency.MONTHLY
    mode: Optional[Mode] = None

    def __post_init__(self) -> None:
        if not isinstance(self.number_of, int) or self.number_of < 1:
            raise SeriesError(
                f"Series number_of must be a positive integer, got {self.number_of!r}"
            )
        if not self.label:
            object.__setattr__(self, "label", self.role.label)
        if self.mode is None:
            object.__setattr__(self, "mode", self.role.default_mode)
        if self.post_date_from is not None:
            try:
                object.__setattr__(self, "post_date_from", to_date(self.post_date_from))
            except (TypeError, ValueError) as exc:
                raise SeriesError(f"Invalid series post_date_from: {exc}") from exc

    @property
    def is_known(self) -> bool:
        return self.value is not None

    @property
    def is_dated(self) -> bool:
        return self.post_date_from is not None

    def with_value(self, value: Optional[float]) -> Series:
        return replace(self, value=value)

    @classmethod
    def advance(cls, **kwargs) -> Series:
        """Series of advances (money lent); due at period start by default."""
        return cls(CashFlowRole.ADVANCE, **kwargs)

    @classmethod
    def payment(cls, **kwargs) -> Series:
        """Series of repayments; due at period end by default."""
        return cls(CashFlowRole.PAYMENT, **kwargs)

    @classmethod
    def charge(cls, **kwargs) -> Series:
        """Series of fees or charges; due at period end by default."""
        return cls(CashFlowRole.CHARGE, **kwargs)
