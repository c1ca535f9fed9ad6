"""Cash flow valuation engine.

This package provides:
- Present and future value objectives over a factored profile
- The Calculator that solves unknown cash flow values and implicit rates
"""

from .calculator import Calculator, CalculatorState, CalculatorStateError
from .objectives import FutureValueObjective, PresentValueObjective

__all__ = [
    "Calculator",
    "CalculatorState",
    "CalculatorStateError",
    "PresentValueObjective",
    "FutureValueObjective",
]
