"""Cash flow profiles and the period factor pipeline."""

from .factors import Amortiser, amortise_interest, assign_factors, update_unknowns
from .types import (
    DEFAULT_PRECISION,
    CashFlow,
    CashFlowError,
    PrecisionError,
    Profile,
    ProfileError,
    validate_precision,
)

__all__ = [
    "CashFlow",
    "Profile",
    "CashFlowError",
    "PrecisionError",
    "ProfileError",
    "DEFAULT_PRECISION",
    "validate_precision",
    "assign_factors",
    "update_unknowns",
    "amortise_interest",
    "Amortiser",
]
