from dataclasses import replace
from decimal import Decimal

from amortizer.engine.amortization import compute_schedule
from amortizer.engine.comparison import baseline_inputs, compare_to_baseline, paid_down_summary
from amortizer.models.loan import Frequency


class TestBaselineInputs:
    def test_extra_removed(self, extra_inputs):
        baseline = baseline_inputs(extra_inputs)
        assert baseline.extra_amount == 0
        assert baseline.monthly_extra == 0
        assert baseline.principal == extra_inputs.principal
        assert baseline.start_date == extra_inputs.start_date

    def test_annual_extra_removed(self, standard_inputs):
        inputs = replace(standard_inputs, extra_amount=Decimal("2400"), extra_frequency=Frequency.ANNUAL)
        assert baseline_inputs(inputs).monthly_extra == 0


class TestCompareToBaseline:
    def test_no_extra_returns_none(self, standard_inputs):
        assert compare_to_baseline(standard_inputs) is None

    def test_invalid_loan_returns_none(self, extra_inputs):
        assert compare_to_baseline(replace(extra_inputs, annual_rate=Decimal("0"))) is None

    def test_savings(self, standard_inputs, extra_inputs):
        comparison = compare_to_baseline(extra_inputs)
        plain = compute_schedule(standard_inputs)
        extra = compute_schedule(extra_inputs)

        assert comparison.baseline == plain
        assert comparison.with_extra == extra
        assert comparison.interest_saved == plain.total_interest - extra.total_interest
        assert comparison.interest_saved > 0
        assert comparison.months_saved == 360 - extra.payment_count
        assert comparison.months_saved > 0
        assert comparison.total_paid_saved > 0

    def test_time_saved_split(self, extra_inputs):
        comparison = compare_to_baseline(extra_inputs)
        saved = comparison.time_saved
        assert saved.years * 12 + saved.months == comparison.months_saved
        assert 0 <= saved.months < 12

    def test_uses_given_result(self, extra_inputs):
        result = compute_schedule(extra_inputs)
        assert compare_to_baseline(extra_inputs, result).with_extra is result

    def test_taxes_do_not_change_savings(self, extra_inputs):
        taxed = replace(extra_inputs, tax_amount=Decimal("3600"))
        assert compare_to_baseline(taxed).interest_saved == compare_to_baseline(extra_inputs).interest_saved


class TestPaidDownSummary:
    def test_partially_repaid(self, refinanced_inputs):
        summary = paid_down_summary(refinanced_inputs)
        assert summary.original_amount == Decimal("300000")
        assert summary.remaining_balance == Decimal("275000")
        assert summary.paid_down == Decimal("25000")
        assert summary.paid_down_pct.quantize(Decimal("0.1")) == Decimal("8.3")

    def test_no_original_amount(self, standard_inputs):
        assert paid_down_summary(standard_inputs) is None

    def test_original_equals_balance(self, standard_inputs):
        assert paid_down_summary(replace(standard_inputs, original_amount=Decimal("300000"))) is None
