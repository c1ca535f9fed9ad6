"""
Pytest configuration and shared fixtures.
"""

from datetime import date

import pytest

from curo import Calculator, Series, US30360


@pytest.fixture
def start_date():
    """Drawdown date used for undated series."""
    return date(2022, 1, 15)


@pytest.fixture
def us_30_360():
    return US30360()


@pytest.fixture
def loan_calculator():
    """10,000 loan repaid by 6 unknown monthly instalments in arrears."""
    calc = Calculator(precision=2)
    calc.add(Series.advance(label="Loan", value=10000.0))
    calc.add(Series.payment(number_of=6, label="Instalment", value=None))
    return calc
