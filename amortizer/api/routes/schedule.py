"""Amortization schedule routes."""

import logging

from fastapi import APIRouter, HTTPException

from amortizer.api.schemas import (
    AmortizationRowResponse,
    ComparisonResponse,
    PaidDownResponse,
    ScheduleRequest,
    ScheduleResponse,
    ScheduleSummaryResponse,
    YearlySummaryResponse,
)
from amortizer.engine.amortization import cached_schedule, yearly_summary
from amortizer.engine.comparison import compare_to_baseline, paid_down_summary
from amortizer.models.loan import LoanInputs, YearMonth
from amortizer.models.results import ScheduleResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/schedule", tags=["schedule"])

INSUFFICIENT_INPUT = "Principal, interest rate and loan term must all be greater than zero"


def _build_inputs(req: ScheduleRequest) -> LoanInputs:
    """Build engine inputs from request data."""
    start = YearMonth.parse(req.start_date) if req.start_date else YearMonth.today()
    return LoanInputs(
        principal=req.principal,
        annual_rate=req.annual_rate,
        term_years=req.term_years,
        start_date=start,
        original_amount=req.original_amount,
        tax_amount=req.tax_amount,
        tax_frequency=req.tax_frequency,
        extra_amount=req.extra_amount,
        extra_frequency=req.extra_frequency,
        extra_start_date=YearMonth.parse(req.extra_start_date) if req.extra_start_date else None,
    )


def _summary_to_response(result: ScheduleResult) -> ScheduleSummaryResponse:
    return ScheduleSummaryResponse(
        monthly_payment=result.monthly_payment,
        monthly_tax=result.monthly_tax,
        monthly_extra=result.monthly_extra,
        total_monthly_payment=result.total_monthly_payment,
        total_interest=result.total_interest,
        total_tax=result.total_tax,
        total_paid=result.total_paid,
        payment_count=result.payment_count,
        payoff_date=str(result.payoff_date),
        payoff_years=result.payoff_duration.years,
        payoff_months=result.payoff_duration.months,
        extra_start_date=str(result.extra_start_date),
        converged=result.converged,
    )


def _compute(req: ScheduleRequest) -> tuple[LoanInputs, ScheduleResult]:
    inputs = _build_inputs(req)
    result = cached_schedule(inputs)
    if result is None:
        raise HTTPException(status_code=422, detail=INSUFFICIENT_INPUT)
    if not result.converged:
        logger.info("Returning truncated schedule (%d payments)", result.payment_count)
    return inputs, result


@router.post("", response_model=ScheduleResponse)
def create_schedule(req: ScheduleRequest):
    """Full amortization schedule with summary, yearly totals and paid-down figures."""
    inputs, result = _compute(req)

    rows = []
    if req.include_rows:
        rows = [
            AmortizationRowResponse(
                payment_number=r.payment_number,
                payment_date=str(r.payment_date),
                beginning_balance=r.beginning_balance,
                scheduled_payment=r.scheduled_payment,
                extra_payment=r.extra_payment,
                total_payment=r.total_payment,
                principal=r.principal,
                interest=r.interest,
                ending_balance=r.ending_balance,
                cumulative_interest=r.cumulative_interest,
            )
            for r in result.rows
        ]

    yearly = [
        YearlySummaryResponse(
            year=y.year,
            principal=y.principal,
            interest=y.interest,
            extra=y.extra,
            total_payment=y.total_payment,
            ending_balance=y.ending_balance,
        )
        for y in yearly_summary(result)
    ]

    paid_down = None
    pd = paid_down_summary(inputs)
    if pd is not None:
        paid_down = PaidDownResponse(
            original_amount=pd.original_amount,
            remaining_balance=pd.remaining_balance,
            paid_down=pd.paid_down,
            paid_down_pct=pd.paid_down_pct,
        )

    return ScheduleResponse(
        summary=_summary_to_response(result),
        paid_down=paid_down,
        yearly=yearly,
        rows=rows,
    )


@router.post("/compare", response_model=ComparisonResponse)
def compare_schedule(req: ScheduleRequest):
    """Savings from extra payments against the same loan without them."""
    inputs, result = _compute(req)
    comparison = compare_to_baseline(inputs, result)
    if comparison is None:
        raise HTTPException(status_code=400, detail="No extra payment configured")

    return ComparisonResponse(
        baseline=_summary_to_response(comparison.baseline),
        with_extra=_summary_to_response(comparison.with_extra),
        interest_saved=comparison.interest_saved,
        total_paid_saved=comparison.total_paid_saved,
        months_saved=comparison.months_saved,
        time_saved_years=comparison.time_saved.years,
        time_saved_months=comparison.time_saved.months,
    )
