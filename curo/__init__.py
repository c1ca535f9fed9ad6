"""Cash flow profile solver.

Solves either the unknown value of one or more cash flows at a known
annual effective interest rate, or the interest rate implicit in fully
known cash flows, under a chosen day count convention.

Key modules:
- conventions: day count conventions and enums
- schedule: series templates and profile generation
- profile: cash flows, profiles and period factor assignment
- valuation: objectives and the Calculator
- utils: dates, rounding and root finding
"""

__version__ = "1.0.0"

from .conventions import (
    Actual360,
    Actual365Fixed,
    CashFlowRole,
    DayCountConvention,
    DayCountFactor,
    DayCountOrigin,
    Frequency,
    Mode,
    Thirty360European,
    US30360,
    get_day_count_convention,
    register_day_count_convention,
)
from .profile import (
    CashFlow,
    CashFlowError,
    PrecisionError,
    Profile,
    ProfileError,
    amortise_interest,
    assign_factors,
    update_unknowns,
)
from .schedule import ProfileBuilder, Series, SeriesError
from .utils import UnsolvableError, gauss_round, newton_raphson
from .valuation import (
    Calculator,
    CalculatorState,
    CalculatorStateError,
    FutureValueObjective,
    PresentValueObjective,
)

__all__ = [
    "__version__",
    # Conventions
    "CashFlowRole",
    "DayCountOrigin",
    "Frequency",
    "Mode",
    "DayCountConvention",
    "DayCountFactor",
    "US30360",
    "Actual360",
    "Actual365Fixed",
    "Thirty360European",
    "get_day_count_convention",
    "register_day_count_convention",
    # Profiles
    "CashFlow",
    "Profile",
    "Series",
    "ProfileBuilder",
    "assign_factors",
    "update_unknowns",
    "amortise_interest",
    # Solving
    "Calculator",
    "CalculatorState",
    "PresentValueObjective",
    "FutureValueObjective",
    "newton_raphson",
    "gauss_round",
    # Exceptions
    "CashFlowError",
    "PrecisionError",
    "ProfileError",
    "SeriesError",
    "CalculatorStateError",
    "UnsolvableError",
]
