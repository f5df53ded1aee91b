"""Canonical test fixtures used across all tests.

Fixture: $300K balance, 6.5% rate, 30yr fixed, first payment Jan 2025.
P&I is $1,896.20/mo.
"""

import pytest
from dataclasses import replace
from decimal import Decimal

from amortizer.models.loan import Frequency, LoanInputs, YearMonth


@pytest.fixture
def standard_inputs() -> LoanInputs:
    """$300K at 6.5% for 30 years, no tax, no extra payments."""
    return LoanInputs(
        principal=Decimal("300000"),
        annual_rate=Decimal("0.065"),
        term_years=Decimal("30"),
        start_date=YearMonth(2025, 1),
    )


@pytest.fixture
def extra_inputs(standard_inputs) -> LoanInputs:
    """Same loan with $200/mo extra principal from the first payment."""
    return replace(
        standard_inputs,
        extra_amount=Decimal("200"),
        extra_frequency=Frequency.MONTHLY,
    )


@pytest.fixture
def refinanced_inputs() -> LoanInputs:
    """A loan part-way through: $275K left of an original $300K, with taxes and extra."""
    return LoanInputs(
        principal=Decimal("275000"),
        original_amount=Decimal("300000"),
        annual_rate=Decimal("0.065"),
        term_years=Decimal("30"),
        start_date=YearMonth(2025, 1),
        tax_amount=Decimal("3600"),
        tax_frequency=Frequency.ANNUAL,
        extra_amount=Decimal("200"),
        extra_frequency=Frequency.MONTHLY,
        extra_start_date=YearMonth(2026, 6),
    )
