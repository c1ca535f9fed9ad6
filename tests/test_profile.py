"""
Tests for cash flows, profiles and period factor assignment.
"""

from datetime import date

import pytest

from curo.conventions import CashFlowRole, DayCountFactor, US30360
from curo.profile import (
    CashFlow,
    CashFlowError,
    PrecisionError,
    Profile,
    ProfileError,
    amortise_interest,
    assign_factors,
    update_unknowns,
)


@pytest.fixture
def shuffled_profile():
    return Profile(
        cash_flows=[
            CashFlow.payment(date(2022, 3, 15), -500.0),
            CashFlow.advance(date(2022, 1, 15), 1000.0),
            CashFlow.payment(date(2022, 4, 15)),
            CashFlow.charge(date(2022, 2, 15), 10.0),
        ],
        day_count=US30360(),
    )


class TestCashFlow:
    """Test cash flow construction and invariants."""

    def test_defaults(self):
        cf = CashFlow.advance(date(2022, 1, 15), 1000.0)
        assert cf.role is CashFlowRole.ADVANCE
        assert cf.value_date == cf.post_date
        assert cf.is_known
        assert cf.weighting == 1.0
        assert cf.label == "Advance"
        assert cf.period_factor is None

    def test_unknown_value(self):
        cf = CashFlow.payment(date(2022, 2, 15))
        assert not cf.is_known
        assert cf.value == 0.0
        assert cf.label == "Payment"

    def test_role_only_changes_label(self):
        assert CashFlow.charge(date(2022, 2, 15), 5.0).label == "Charge"
        assert CashFlow.charge(date(2022, 2, 15), 5.0, label="Fee").label == "Fee"

    def test_dates_are_normalised(self):
        cf = CashFlow.payment("2022-02-15", 1.0, value_date="20220216")
        assert cf.post_date == date(2022, 2, 15)
        assert cf.value_date == date(2022, 2, 16)

    def test_value_date_before_post_date(self):
        with pytest.raises(CashFlowError, match="on or after"):
            CashFlow.payment(date(2022, 2, 15), 1.0, value_date=date(2022, 2, 14))

    @pytest.mark.parametrize("weighting", [0.0, -1.0])
    def test_non_positive_weighting(self, weighting):
        with pytest.raises(CashFlowError, match="weighting"):
            CashFlow.payment(date(2022, 2, 15), weighting=weighting)

    def test_malformed_date(self):
        with pytest.raises(CashFlowError, match="valid dates"):
            CashFlow.payment("2022-13-45", 1.0)

    def test_is_immutable(self):
        cf = CashFlow.payment(date(2022, 2, 15), 1.0)
        with pytest.raises(AttributeError):
            cf.value = 2.0

    def test_with_changes_revalidates(self):
        cf = CashFlow.payment(date(2022, 2, 15), 1.0)
        updated = cf.with_changes(value=2.0)
        assert updated.value == 2.0
        assert cf.value == 1.0
        with pytest.raises(CashFlowError):
            cf.with_changes(weighting=0.0)


class TestProfile:
    """Test profile construction."""

    @pytest.mark.parametrize("precision", [0, 1, 2, 3, 4])
    def test_valid_precision(self, precision):
        assert Profile(precision=precision).precision == precision

    @pytest.mark.parametrize("precision", [-1, 5])
    def test_invalid_precision(self, precision):
        with pytest.raises(PrecisionError):
            Profile(precision=precision)

    def test_copy_with_leaves_original(self, shuffled_profile):
        copy = shuffled_profile.copy_with(precision=4)
        assert copy.precision == 4
        assert shuffled_profile.precision == 2
        assert copy.cash_flows == shuffled_profile.cash_flows

    def test_unknowns(self, shuffled_profile):
        assert shuffled_profile.has_unknowns
        assert len(shuffled_profile.unknowns) == 1
        assert len(shuffled_profile) == 4

    def test_to_frame(self, shuffled_profile):
        frame = assign_factors(shuffled_profile).to_frame()
        assert len(frame) == 4
        assert list(frame["role"]) == ["advance", "charge", "payment", "payment"]
        assert frame["factor"].isna().iloc[0]
        assert frame["factor_numerator"].iloc[1] == 30


class TestAssignFactors:
    """Test sorting and period factor stamping."""

    def test_sorted_with_origin_unfactored(self, shuffled_profile):
        profile = assign_factors(shuffled_profile)
        dates = [cf.post_date for cf in profile.cash_flows]
        assert dates == sorted(dates)
        assert profile.cash_flows[0].period_factor is None
        assert all(cf.period_factor is not None for cf in profile.cash_flows[1:])

    def test_neighbour_origin(self, shuffled_profile):
        profile = assign_factors(shuffled_profile)
        assert [cf.period_factor for cf in profile.cash_flows[1:]] == [
            DayCountFactor(30, 360)
        ] * 3

    def test_drawdown_origin(self, shuffled_profile):
        profile = assign_factors(
            shuffled_profile.copy_with(day_count=US30360(use_xirr_method=True))
        )
        numerators = [cf.period_factor.numerator for cf in profile.cash_flows[1:]]
        assert numerators == [30, 60, 90]

    def test_value_dates(self):
        profile = Profile(
            cash_flows=[
                CashFlow.advance(date(2022, 1, 15), 1000.0),
                CashFlow.payment(date(2022, 2, 15), -1010.0, value_date=date(2022, 3, 15)),
            ],
            day_count=US30360(use_post_dates=False),
        )
        assert assign_factors(profile).cash_flows[1].period_factor.numerator == 60

    def test_input_profile_untouched(self, shuffled_profile):
        assign_factors(shuffled_profile)
        assert shuffled_profile.cash_flows[0].post_date == date(2022, 3, 15)
        assert all(cf.period_factor is None for cf in shuffled_profile.cash_flows)

    def test_requires_day_count(self):
        with pytest.raises(ProfileError):
            assign_factors(Profile(cash_flows=[CashFlow.advance(date(2022, 1, 1), 1.0)]))

    def test_single_flow(self):
        profile = assign_factors(
            Profile(cash_flows=[CashFlow.advance(date(2022, 1, 1), 1.0)], day_count=US30360())
        )
        assert profile.cash_flows[0].period_factor is None


class TestUpdateUnknowns:
    def test_weighted_values_rounded(self):
        flows = [
            CashFlow.advance(date(2022, 1, 15), 1000.0),
            CashFlow.payment(date(2022, 2, 15)),
            CashFlow.payment(date(2022, 3, 15), weighting=0.5),
        ]
        updated = update_unknowns(flows, -333.335, 2)
        assert updated[0] is flows[0]
        assert [cf.value for cf in updated[1:]] == [-333.34, -166.67]
        assert all(cf.is_known for cf in updated)

    def test_amortise_interest_is_identity(self):
        flows = (CashFlow.advance(date(2022, 1, 15), 1000.0),)
        assert amortise_interest(flows, 0.05, 2) == flows
