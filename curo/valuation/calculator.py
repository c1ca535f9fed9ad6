"""Calculator: the entry point for solving unknown values and rates.

The calculator sources cash flows in one of two ways for its lifetime:
series templates accumulated through ``add`` and expanded on the first
solve, or a bespoke profile injected at construction. Each solve runs the
same pipeline, replacing the held profile at every stage:

    series -> ProfileBuilder -> assign_factors -> objective -> newton_raphson
           -> rounding -> unknown cash flows materialised -> amortiser
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

import logging

from curo.conventions.daycount import DayCountConvention
from curo.profile.factors import (
    Amortiser,
    amortise_interest,
    assign_factors,
    update_unknowns,
)
from curo.profile.types import DEFAULT_PRECISION, Profile, validate_precision
from curo.schedule.core import Series
from curo.schedule.generator import ProfileBuilder
from curo.utils.date import DateLike
from curo.utils.mathutils import gauss_round
from curo.utils.rootfinding import DEFAULT_GUESS, newton_raphson

from .objectives import FutureValueObjective, PresentValueObjective

logger = logging.getLogger(__name__)


class CalculatorStateError(RuntimeError):
    """Raised when the calculator is used out of sequence or misconfigured."""


class CalculatorState(Enum):
    UNINITIALIZED = "uninitialized"
    PROFILE_BUILT = "profile_built"
    FACTORS_ASSIGNED = "factors_assigned"
    SOLVED = "solved"


class Calculator:
    """Solves unknown cash flow values or the implicit interest rate.

    Args:
        precision: Decimal places (0-4) used to round solved values; taken
            from ``profile`` when one is supplied
        profile: Optional bespoke profile; disables ``add``
        amortiser: Post-solve transform applied unless the day count uses
            the XIRR method

    Raises:
        PrecisionError: If the precision is outside [0, 4]

    Examples:
        >>> calc = Calculator()
        >>> calc.add(Series.advance(label="Loan", value=10000.0))
        >>> calc.add(Series.payment(number_of=6, label="Instalment"))
        >>> instalment = calc.solve_value(US30360(), 0.0825, start_date=date(2022, 1, 15))
        >>> rate = calc.solve_rate(US30360())  # recovers ~0.0825
    """

    def __init__(
        self,
        precision: int = DEFAULT_PRECISION,
        profile: Optional[Profile] = None,
        amortiser: Amortiser = amortise_interest,
    ):
        if profile is not None:
            precision = profile.precision
        self._precision = validate_precision(precision)
        self._profile = profile
        self._is_bespoke_profile = profile is not None
        self._series: List[Series] = []
        self._amortiser = amortiser
        self._state = (
            CalculatorState.PROFILE_BUILT
            if profile is not None
            else CalculatorState.UNINITIALIZED
        )

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def state(self) -> CalculatorState:
        return self._state

    @property
    def profile(self) -> Profile:
        if self._profile is None:
            raise CalculatorStateError("The profile has not been initialised yet.")
        return self._profile

    @property
    def series(self) -> List[Series]:
        return list(self._series)

    def add(self, series: Series) -> None:
        """Append a series template.

        Order matters for undated series: each follows on from the previous
        undated series of the same role.
        """
        if self._is_bespoke_profile:
            raise CalculatorStateError(
                "The add(series) option cannot be used with a user-defined profile."
            )
        if series.value is not None:
            series = series.with_value(gauss_round(series.value, self._precision))
        self._series.append(series)

    def solve_value(
        self,
        day_count: DayCountConvention,
        interest_rate: float,
        start_date: Optional[DateLike] = None,
        root_guess: float = DEFAULT_GUESS,
    ) -> float:
        """Solve for the unknown cash flow value(s).

        Args:
            day_count: Convention for measuring periods between cash flows
            interest_rate: Annual effective interest rate as a decimal
            start_date: Start of undated series (default: today)
            root_guess: Initial guess for the root finder

        Returns:
            The solved value rounded to the calculator precision; each
            unknown cash flow receives this value times its weighting.

        Raises:
            CalculatorStateError: If there are no cash flows to solve
            UnsolvableError: If the root finder fails to converge
        """
        self._prepare(day_count, start_date)

        result = newton_raphson(
            PresentValueObjective(self._profile, interest_rate), root_guess
        )
        value = gauss_round(result.root, self._precision)
        logger.debug(
            "Solved value %s in %s iterations (raw %s)", value, result.iterations, result.root
        )

        self._profile = self._profile.copy_with(
            cash_flows=update_unknowns(self._profile.cash_flows, value, self._precision)
        )
        self._amortise(day_count, interest_rate)
        self._state = CalculatorState.SOLVED
        return value

    def solve_rate(
        self,
        day_count: DayCountConvention,
        start_date: Optional[DateLike] = None,
        root_guess: float = DEFAULT_GUESS,
    ) -> float:
        """Solve for the implicit annual effective interest rate.

        Args:
            day_count: Convention for measuring periods between cash flows
            start_date: Start of undated series (default: today)
            root_guess: Initial guess for the root finder

        Returns:
            The rate as a decimal (0.0825 == 8.25%), not rounded.

        Raises:
            CalculatorStateError: If there are no cash flows to solve
            ProfileError: If any cash flow value is still unknown
            UnsolvableError: If the root finder fails to converge
        """
        self._prepare(day_count, start_date)

        result = newton_raphson(FutureValueObjective(self._profile), root_guess)
        rate = result.root
        logger.debug("Solved rate %s in %s iterations", rate, result.iterations)

        self._amortise(day_count, rate)
        self._state = CalculatorState.SOLVED
        return rate

    def _prepare(
        self, day_count: DayCountConvention, start_date: Optional[DateLike]
    ) -> None:
        if self._profile is None:
            self._build_profile(start_date)
        if not self._profile.cash_flows:
            raise CalculatorStateError("The profile has no cash flows to solve.")

        self._profile = assign_factors(self._profile.copy_with(day_count=day_count))
        self._state = CalculatorState.FACTORS_ASSIGNED

    def _amortise(self, day_count: DayCountConvention, interest_rate: float) -> None:
        if day_count.use_xirr_method:
            return
        self._profile = self._profile.copy_with(
            cash_flows=self._amortiser(
                self._profile.cash_flows, interest_rate, self._precision
            )
        )

    def _build_profile(self, start_date: Optional[DateLike]) -> None:
        builder = ProfileBuilder(start_date if start_date is not None else date.today())
        self._profile = builder.build(self._series, self._precision)
        self._state = CalculatorState.PROFILE_BUILT
