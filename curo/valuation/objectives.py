"""Objective functions solved by the root finder.

Both objectives work on a factored profile and place every cash flow at its
time from the origin (first) flow, in compounding periods:

- drawdown origin: the flow's own period factor, already measured from the
  first flow;
- neighbour origin: the running sum of period factors, compounding from
  one cash flow to the next.
"""

from __future__ import annotations

import numpy as np

from curo.conventions.types import DayCountOrigin
from curo.profile.types import Profile, ProfileError


def _time_from_origin(profile: Profile) -> np.ndarray:
    if profile.day_count is None:
        raise ProfileError("A day count convention is required to evaluate a profile")

    factors = np.array(
        [
            0.0 if cf.period_factor is None else cf.period_factor.value
            for cf in profile.cash_flows
        ],
        dtype=float,
    )
    if profile.day_count.day_count_origin == DayCountOrigin.DRAWDOWN:
        return factors
    return np.cumsum(factors)


class PresentValueObjective:
    """Net present value as a function of the unknown cash flow value.

    Unknown flows contribute ``x * weighting``, known flows their value; each
    is discounted to the origin at the effective annual rate. The origin
    flow is not discounted.
    """

    def __init__(self, profile: Profile, effective_rate: float):
        self.profile = profile
        self.effective_rate = float(effective_rate)
        self._times = _time_from_origin(profile)
        self._known = np.array([cf.is_known for cf in profile.cash_flows], dtype=bool)
        self._values = np.array([cf.value for cf in profile.cash_flows], dtype=float)
        self._weights = np.array([cf.weighting for cf in profile.cash_flows], dtype=float)
        self._discount = np.power(1.0 + self.effective_rate, -self._times)

    def __call__(self, x: float) -> float:
        amounts = np.where(self._known, self._values, x * self._weights)
        return float(np.sum(amounts * self._discount))


class FutureValueObjective:
    """Net future value as a function of the effective annual rate.

    Every flow is compounded forward to the date of the last cash flow, so
    the root coincides with the rate at which the present value balances.
    All cash flow values must be known.
    """

    def __init__(self, profile: Profile):
        if profile.has_unknowns:
            raise ProfileError(
                "Every cash flow value must be known to solve for the interest rate"
            )
        self.profile = profile
        times = _time_from_origin(profile)
        horizon = times[-1] if len(times) else 0.0
        self._periods = horizon - times
        self._values = np.array([cf.value for cf in profile.cash_flows], dtype=float)

    def __call__(self, rate: float) -> float:
        return float(np.sum(self._values * np.power(1.0 + rate, self._periods)))
