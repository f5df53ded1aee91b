from decimal import Decimal

import pytest

from amortizer.models.loan import Frequency, LoanInputs, YearMonth
from amortizer.models.results import PayoffDuration


class TestYearMonth:
    def test_parse(self):
        assert YearMonth.parse("2025-01") == YearMonth(2025, 1)

    @pytest.mark.parametrize("raw", ["2025", "2025-13", "2025-00", "abcd-ef"])
    def test_parse_invalid(self, raw):
        with pytest.raises(ValueError):
            YearMonth.parse(raw)

    def test_add_months_across_year(self):
        assert YearMonth(2025, 12).add_months(1) == YearMonth(2026, 1)
        assert YearMonth(2025, 1).add_months(359) == YearMonth(2054, 12)
        assert YearMonth(2025, 1).add_months(-1) == YearMonth(2024, 12)

    def test_ordering(self):
        assert YearMonth(2025, 12) < YearMonth(2026, 1)
        assert YearMonth(2026, 1) >= YearMonth(2026, 1)

    def test_labels(self):
        ym = YearMonth(2025, 3)
        assert ym.short_label == "Mar 2025"
        assert ym.long_label == "March 2025"
        assert str(ym) == "2025-03"


class TestFrequency:
    def test_annual_divides_by_twelve(self):
        assert Frequency.ANNUAL.to_monthly(Decimal("3600")) == Decimal("300")

    def test_monthly_passes_through(self):
        assert Frequency.MONTHLY.to_monthly(Decimal("250")) == Decimal("250")


class TestLoanInputs:
    def test_derived_values(self, standard_inputs):
        assert standard_inputs.total_periods == 360
        assert standard_inputs.effective_extra_start == YearMonth(2025, 1)
        assert standard_inputs.monthly_extra == 0
        assert standard_inputs.is_complete

    def test_hashable(self, standard_inputs):
        copy = LoanInputs(
            principal=Decimal("300000.00"),
            annual_rate=Decimal("0.065"),
            term_years=Decimal("30"),
            start_date=YearMonth(2025, 1),
        )
        assert {standard_inputs: 1}[copy] == 1


class TestPayoffDuration:
    def test_from_months(self):
        assert PayoffDuration.from_months(351) == PayoffDuration(29, 3)
        assert PayoffDuration.from_months(351).total_months == 351
