from datetime import date
from decimal import Decimal

import pytest

from amortizer.engine.inputs import (
    build_inputs,
    parse_frequency,
    parse_number,
    parse_rate_percent,
    parse_year_month,
)
from amortizer.models.loan import Frequency, YearMonth


class TestParseNumber:
    @pytest.mark.parametrize("raw, expected", [
        ("300000", Decimal("300000")),
        ("300,000", Decimal("300000")),
        ("$1,200.50", Decimal("1200.50")),
        ("  42 ", Decimal("42")),
        (6.5, Decimal("6.5")),
        (30, Decimal("30")),
        (Decimal("12.34"), Decimal("12.34")),
    ])
    def test_valid(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "12abc", float("nan"), "inf", True])
    def test_unparsable_is_zero(self, raw):
        assert parse_number(raw) == Decimal("0")

    def test_negative_kept(self):
        assert parse_number("-5") == Decimal("-5")


class TestParseRatePercent:
    def test_percent_to_fraction(self):
        assert parse_rate_percent("6.5") == Decimal("0.065")

    def test_blank(self):
        assert parse_rate_percent("") == Decimal("0")


class TestParseFrequency:
    def test_values(self):
        assert parse_frequency("annual") is Frequency.ANNUAL
        assert parse_frequency(" Monthly ") is Frequency.MONTHLY
        assert parse_frequency(Frequency.ANNUAL) is Frequency.ANNUAL

    def test_fallback(self):
        assert parse_frequency("weekly") is Frequency.MONTHLY
        assert parse_frequency(None, Frequency.ANNUAL) is Frequency.ANNUAL


class TestParseYearMonth:
    def test_valid(self):
        assert parse_year_month("2025-03") == YearMonth(2025, 3)

    def test_bad_input_uses_default(self):
        default = YearMonth(2024, 6)
        assert parse_year_month("2025-13", default) == default
        assert parse_year_month("soon", default) == default
        assert parse_year_month(None, default) == default

    def test_defaults_to_current_month(self):
        today = date.today()
        assert parse_year_month("") == YearMonth(today.year, today.month)


class TestBuildInputs:
    def test_form_values(self):
        inputs = build_inputs(
            principal="275,000",
            interest_rate_pct="6.5",
            term_years="30",
            start_date="2025-01",
            original_amount="300000",
            tax_amount="3600",
            tax_frequency="annual",
            extra_amount="200",
            extra_frequency="monthly",
            extra_start_date="2026-06",
        )
        assert inputs.principal == Decimal("275000")
        assert inputs.annual_rate == Decimal("0.065")
        assert inputs.term_years == Decimal("30")
        assert inputs.start_date == YearMonth(2025, 1)
        assert inputs.original_amount == Decimal("300000")
        assert inputs.monthly_tax == Decimal("300")
        assert inputs.monthly_extra == Decimal("200")
        assert inputs.extra_start_date == YearMonth(2026, 6)

    def test_blank_extra_start_follows_loan_start(self):
        inputs = build_inputs("275000", "6.5", "30", start_date="2025-01", extra_start_date="")
        assert inputs.extra_start_date == YearMonth(2025, 1)

    def test_missing_fields_are_zero(self):
        inputs = build_inputs(None, None, None, start_date="2025-01")
        assert inputs.principal == 0
        assert inputs.annual_rate == 0
        assert inputs.term_years == 0
        assert not inputs.is_complete
