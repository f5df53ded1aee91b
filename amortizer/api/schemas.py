"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from amortizer.models.loan import Frequency

YEAR_MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"

# Upper limits keep the month loop and (1 + r)^n bounded. Values at or below
# zero pass through so the route can answer with its own 422 message.
MAX_AMOUNT = Decimal("1000000000000")
MAX_ANNUAL_RATE = Decimal("1")
MAX_TERM_YEARS = Decimal("100")


# ---- Request schemas ----

class ScheduleRequest(BaseModel):
    principal: Decimal = Field(..., le=MAX_AMOUNT, description="Balance to amortize")
    annual_rate: Decimal = Field(..., le=MAX_ANNUAL_RATE, description="Annual rate as a fraction, e.g. 0.065")
    term_years: Decimal = Field(..., le=MAX_TERM_YEARS, description="Loan term in years (fractional years round up to whole months)")
    start_date: str | None = Field(None, pattern=YEAR_MONTH_PATTERN, description="First payment month, YYYY-MM")
    original_amount: Decimal = Field(Decimal("0"), le=MAX_AMOUNT)

    # Property tax escrow
    tax_amount: Decimal = Field(Decimal("0"), le=MAX_AMOUNT)
    tax_frequency: Frequency = Frequency.ANNUAL

    # Extra principal
    extra_amount: Decimal = Field(Decimal("0"), le=MAX_AMOUNT)
    extra_frequency: Frequency = Frequency.MONTHLY
    extra_start_date: str | None = Field(None, pattern=YEAR_MONTH_PATTERN)

    include_rows: bool = True


# ---- Response schemas ----

class AmortizationRowResponse(BaseModel):
    payment_number: int
    payment_date: str
    beginning_balance: Decimal
    scheduled_payment: Decimal
    extra_payment: Decimal
    total_payment: Decimal
    principal: Decimal
    interest: Decimal
    ending_balance: Decimal
    cumulative_interest: Decimal


class YearlySummaryResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    extra: Decimal
    total_payment: Decimal
    ending_balance: Decimal


class ScheduleSummaryResponse(BaseModel):
    monthly_payment: Decimal
    monthly_tax: Decimal
    monthly_extra: Decimal
    total_monthly_payment: Decimal
    total_interest: Decimal
    total_tax: Decimal
    total_paid: Decimal
    payment_count: int
    payoff_date: str
    payoff_years: int
    payoff_months: int
    extra_start_date: str
    converged: bool


class PaidDownResponse(BaseModel):
    original_amount: Decimal
    remaining_balance: Decimal
    paid_down: Decimal
    paid_down_pct: Decimal


class ScheduleResponse(BaseModel):
    summary: ScheduleSummaryResponse
    paid_down: PaidDownResponse | None = None
    yearly: list[YearlySummaryResponse] = []
    rows: list[AmortizationRowResponse] = []


class ComparisonResponse(BaseModel):
    baseline: ScheduleSummaryResponse
    with_extra: ScheduleSummaryResponse
    interest_saved: Decimal
    total_paid_saved: Decimal
    months_saved: int
    time_saved_years: int
    time_saved_months: int
