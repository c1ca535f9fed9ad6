"""Shared numeric and date helpers."""

from .date import DateLike, actual_days, has_leap_year, is_leap_year, to_date
from .mathutils import gauss_round
from .rootfinding import RootResult, UnsolvableError, newton_raphson

__all__ = [
    "DateLike",
    "to_date",
    "actual_days",
    "is_leap_year",
    "has_leap_year",
    "gauss_round",
    "newton_raphson",
    "RootResult",
    "UnsolvableError",
]
