"""Extra-payment savings against a no-extra baseline, and paid-down-so-far figures."""

from dataclasses import replace
from decimal import Decimal

from amortizer.engine.amortization import cached_schedule
from amortizer.models.loan import LoanInputs
from amortizer.models.results import ExtraPaymentComparison, PaidDownSummary, ScheduleResult


def baseline_inputs(inputs: LoanInputs) -> LoanInputs:
    """Same loan with extra payments switched off."""
    return replace(inputs, extra_amount=Decimal("0"))


def compare_to_baseline(
    inputs: LoanInputs,
    result: ScheduleResult | None = None,
) -> ExtraPaymentComparison | None:
    """Interest and time saved by the configured extra payments.

    Pass ``result`` when the with-extra schedule is already computed.
    Returns None when there is no extra payment or no valid schedule.
    """
    if inputs.monthly_extra <= 0:
        return None

    with_extra = result if result is not None else cached_schedule(inputs)
    baseline = cached_schedule(baseline_inputs(inputs))
    if with_extra is None or baseline is None:
        return None

    return ExtraPaymentComparison(
        baseline=baseline,
        with_extra=with_extra,
        interest_saved=baseline.total_interest - with_extra.total_interest,
        total_paid_saved=baseline.total_paid - with_extra.total_paid,
        months_saved=baseline.payment_count - with_extra.payment_count,
    )


def paid_down_summary(inputs: LoanInputs) -> PaidDownSummary | None:
    """How much of the original loan has already been repaid.

    Only meaningful when an original amount was given and differs from the
    balance being amortized.
    """
    original = inputs.original_amount
    if original <= 0 or original == inputs.principal:
        return None

    return PaidDownSummary(
        original_amount=original,
        remaining_balance=inputs.principal,
        paid_down=original - inputs.principal,
        paid_down_pct=(1 - inputs.principal / original) * 100,
    )
