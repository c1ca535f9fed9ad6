"""
Profile generation from series templates.
"""

from datetime import date
from typing import Dict, List, Sequence

import logging

from curo.conventions.types import CashFlowRole, Mode
from curo.profile.types import DEFAULT_PRECISION, CashFlow, Profile
from curo.utils.date import DateLike, to_date

from .adjustments import roll_periods
from .core import Series

logger = logging.getLogger(__name__)


class ProfileBuilder:
    """Expands series templates into dated cash flows."""

    def __init__(self, start_date: DateLike):
        self.start_date = to_date(start_date)

    def build(
        self, series: Sequence[Series], precision: int = DEFAULT_PRECISION
    ) -> Profile:
        """
        Build a raw profile (no day count, no factors) from series.

        Args:
            series: Series in the order they were added
            precision: Rounding precision carried by the profile

        Returns:
            Profile holding the generated cash flows in series order
        """
        cursors: Dict[CashFlowRole, date] = {}
        cash_flows: List[CashFlow] = []

        for item in series:
            if item.is_dated:
                cash_flows.extend(self._dated_flows(item))
            else:
                start = cursors.get(item.role, self.start_date)
                cash_flows.extend(self._undated_flows(item, start))
                cursors[item.role] = roll_periods(start, item.frequency, item.number_of)

        logger.debug(
            "Built %s cash flows from %s series (start %s)",
            len(cash_flows),
            len(series),
            self.start_date,
        )
        return Profile(cash_flows=cash_flows, precision=precision)

    def _dated_flows(self, item: Series) -> List[CashFlow]:
        """Flows anchored on the series' explicit first post date."""
        anchor = item.post_date_from
        return [
            self._cash_flow(item, roll_periods(anchor, item.frequency, i))
            for i in range(item.number_of)
        ]

    def _undated_flows(self, item: Series, start: date) -> List[CashFlow]:
        """Flows covering consecutive periods from ``start``.

        In advance mode each flow falls at the start of its period, in
        arrear mode at the end.
        """
        shift = 1 if item.mode == Mode.ARREAR else 0
        return [
            self._cash_flow(item, roll_periods(start, item.frequency, i + shift))
            for i in range(item.number_of)
        ]

    def _cash_flow(self, item: Series, post_date: date) -> CashFlow:
        return CashFlow.create(
            item.role,
            post_date,
            item.value,
            label=item.label,
        )
