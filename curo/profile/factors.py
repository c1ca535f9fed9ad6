"""Period factor assignment and post-solve cash flow transforms."""

from __future__ import annotations

from typing import Callable, Iterable, List, Sequence, Tuple

import logging

from curo.conventions.types import DayCountOrigin
from curo.utils.mathutils import gauss_round

from .types import CashFlow, Profile, ProfileError

logger = logging.getLogger(__name__)

Amortiser = Callable[[Sequence[CashFlow], float, int], Tuple[CashFlow, ...]]


def assign_factors(profile: Profile) -> Profile:
    """Sort cash flows by date and stamp each with its day count factor.

    The first (origin) flow receives no factor. Under the neighbour origin
    each later flow is measured from its predecessor; under the drawdown
    origin every flow is measured from the first flow.

    Args:
        profile: Profile with a day count convention attached

    Returns:
        A new profile whose cash flows are in ascending date order

    Raises:
        ProfileError: If the profile has no day count convention
    """
    convention = profile.day_count
    if convention is None:
        raise ProfileError("A day count convention is required to assign period factors")

    use_post_dates = convention.use_post_dates
    ordered = sorted(profile.cash_flows, key=lambda cf: cf.date_for(use_post_dates))
    if not ordered:
        return profile.copy_with(cash_flows=())

    origin = convention.day_count_origin
    first_date = ordered[0].date_for(use_post_dates)
    factored: List[CashFlow] = [ordered[0].with_changes(period_factor=None)]

    for prev, curr in zip(ordered, ordered[1:]):
        if origin == DayCountOrigin.DRAWDOWN:
            start = first_date
        else:
            start = prev.date_for(use_post_dates)
        factor = convention.compute_factor(start, curr.date_for(use_post_dates))
        factored.append(curr.with_changes(period_factor=factor))

    logger.debug(
        "Assigned %s factors (%s origin, %s dates) using %s",
        len(factored) - 1,
        origin.value,
        "post" if use_post_dates else "value",
        convention,
    )
    return profile.copy_with(cash_flows=factored)


def update_unknowns(
    cash_flows: Iterable[CashFlow], value: float, precision: int
) -> Tuple[CashFlow, ...]:
    """Materialise unknown cash flows with their weighted share of ``value``."""
    updated = []
    for cf in cash_flows:
        if cf.is_known:
            updated.append(cf)
        else:
            updated.append(
                cf.with_changes(
                    value=gauss_round(value * cf.weighting, precision),
                    is_known=True,
                )
            )
    return tuple(updated)


def amortise_interest(
    cash_flows: Sequence[CashFlow], interest_rate: float, precision: int
) -> Tuple[CashFlow, ...]:
    """Post-solve amortisation step for neighbour-origin conventions.

    Cash flows carry no interest/capital split yet, so the flows are
    returned unchanged.
    """
    return tuple(cash_flows)
