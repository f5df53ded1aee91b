"""Amortization schedule computation.

Pure functions: LoanInputs in, frozen dataclasses out. No I/O.

Amounts are carried at full Decimal precision; rounding to cents is a
presentation concern (see engine.formatting).
"""

import logging
from decimal import Context, Decimal, localcontext
from functools import lru_cache

from amortizer.config import settings
from amortizer.models.loan import LoanInputs
from amortizer.models.results import (
    AmortizationRow,
    PayoffDuration,
    ScheduleResult,
    YearlySummary,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Fixed context so identical inputs give identical results regardless of
# the caller's decimal context.
ENGINE_CONTEXT = Context(prec=28)


def monthly_payment(principal: Decimal, annual_rate: Decimal, total_periods: int) -> Decimal:
    """Level principal-and-interest payment that retires the loan in total_periods months."""
    if principal <= 0 or total_periods <= 0:
        return ZERO
    if annual_rate <= 0:
        return principal / total_periods

    r = annual_rate / 12
    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** total_periods
    if factor == 1:
        # Rate below the engine precision; amortizes like a zero-rate loan
        return principal / total_periods
    return principal * (r * factor) / (factor - 1)


def compute_schedule(inputs: LoanInputs) -> ScheduleResult | None:
    """Walk the loan forward month by month until it is paid off.

    Returns None when principal, rate or term is not positive; callers treat
    that as "not enough input yet" rather than an error.

    Extra principal applies from ``inputs.effective_extra_start`` onward. In
    the payoff month the scheduled principal alone retires the balance and
    that month's extra payment is dropped, not carried anywhere. That last
    row's scheduled_payment is the interest plus the principal actually
    retired, not the level monthly_payment, so total_paid is exactly
    principal + total_interest + total_tax.

    The loop is capped at ``max_term_multiplier`` times the scheduled term.
    A schedule cut off by the cap (e.g. a payment below the interest due)
    comes back with ``converged=False``.
    """
    if not inputs.is_complete:
        return None

    with localcontext(ENGINE_CONTEXT):
        return _amortize(inputs)


def _amortize(inputs: LoanInputs) -> ScheduleResult:
    epsilon = settings.payoff_epsilon
    total_periods = inputs.total_periods
    max_periods = total_periods * settings.max_term_multiplier

    r = inputs.monthly_rate
    pmt = monthly_payment(inputs.principal, inputs.annual_rate, total_periods)
    monthly_tax = inputs.monthly_tax
    monthly_extra = inputs.monthly_extra
    extra_start = inputs.effective_extra_start

    rows: list[AmortizationRow] = []
    balance = inputs.principal
    cumulative_interest = ZERO

    for number in range(1, max_periods + 1):
        payment_date = inputs.start_date.add_months(number - 1)
        interest = balance * r
        scheduled_principal = pmt - interest

        extra = ZERO
        if monthly_extra > 0 and payment_date >= extra_start:
            extra = monthly_extra

        # Final payment
        if scheduled_principal + extra >= balance:
            scheduled_principal = balance
            extra = ZERO

        ending_balance = max(ZERO, balance - scheduled_principal - extra)
        actual_payment = pmt
        if ending_balance <= epsilon:
            # Final payment adjustment: sweep the rounding residue into this
            # payment and charge only what is owed
            scheduled_principal += ending_balance
            ending_balance = ZERO
            actual_payment = interest + scheduled_principal

        cumulative_interest += interest
        rows.append(AmortizationRow(
            payment_number=number,
            payment_date=payment_date,
            beginning_balance=balance,
            scheduled_payment=actual_payment,
            extra_payment=extra,
            total_payment=actual_payment + extra,
            principal=scheduled_principal + extra,
            interest=interest,
            ending_balance=ending_balance,
            cumulative_interest=cumulative_interest,
        ))

        balance = ending_balance
        if balance <= epsilon:
            break

    converged = balance <= epsilon
    if not converged:
        logger.warning(
            "Schedule did not pay off within %d payments (balance %.2f); "
            "payment %.2f may not cover interest",
            max_periods, balance, pmt,
        )

    total_interest = sum((row.interest for row in rows), ZERO)
    total_tax = monthly_tax * len(rows)
    total_paid = sum((row.total_payment for row in rows), ZERO) + total_tax

    logger.debug(
        "Amortized %s over %d payments (scheduled %d)",
        inputs.principal, len(rows), total_periods,
    )

    return ScheduleResult(
        rows=tuple(rows),
        principal=inputs.principal,
        original_amount=inputs.original_amount,
        extra_start_date=extra_start,
        monthly_payment=pmt,
        monthly_tax=monthly_tax,
        monthly_extra=monthly_extra,
        total_monthly_payment=pmt + monthly_tax + monthly_extra,
        total_interest=total_interest,
        total_tax=total_tax,
        total_paid=total_paid,
        payoff_date=rows[-1].payment_date,
        payoff_duration=PayoffDuration.from_months(len(rows)),
        converged=converged,
    )


@lru_cache(maxsize=settings.schedule_cache_size)
def cached_schedule(inputs: LoanInputs) -> ScheduleResult | None:
    """compute_schedule memoized on the exact inputs.

    Renderers call this on every input change; unchanged inputs skip the
    recomputation. Results are immutable so sharing them is safe.
    """
    return compute_schedule(inputs)


def yearly_summary(result: ScheduleResult) -> list[YearlySummary]:
    """Aggregate a schedule into 12-payment loan years.

    A trailing partial year is included as its own entry.
    """
    yearly: list[YearlySummary] = []
    year_principal = ZERO
    year_interest = ZERO
    year_extra = ZERO
    year_payment = ZERO

    for row in result.rows:
        year_principal += row.principal
        year_interest += row.interest
        year_extra += row.extra_payment
        year_payment += row.total_payment

        if row.payment_number % 12 == 0 or row.payment_number == len(result.rows):
            yearly.append(YearlySummary(
                year=(row.payment_number - 1) // 12 + 1,
                principal=year_principal,
                interest=year_interest,
                extra=year_extra,
                total_payment=year_payment,
                ending_balance=row.ending_balance,
            ))
            year_principal = ZERO
            year_interest = ZERO
            year_extra = ZERO
            year_payment = ZERO

    return yearly
