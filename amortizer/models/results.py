from dataclasses import dataclass
from decimal import Decimal

from amortizer.models.loan import MONTHS_PER_YEAR, YearMonth


@dataclass(frozen=True)
class PayoffDuration:
    years: int
    months: int

    @classmethod
    def from_months(cls, total_months: int) -> "PayoffDuration":
        return cls(total_months // MONTHS_PER_YEAR, total_months % MONTHS_PER_YEAR)

    @property
    def total_months(self) -> int:
        return self.years * MONTHS_PER_YEAR + self.months


@dataclass(frozen=True)
class AmortizationRow:
    payment_number: int  # 1-based
    payment_date: YearMonth
    beginning_balance: Decimal
    scheduled_payment: Decimal  # Level P&I payment
    extra_payment: Decimal
    total_payment: Decimal  # scheduled + extra
    principal: Decimal  # Scheduled principal + extra
    interest: Decimal
    ending_balance: Decimal
    cumulative_interest: Decimal


@dataclass(frozen=True)
class ScheduleResult:
    rows: tuple[AmortizationRow, ...]

    # Inputs echoed for display
    principal: Decimal
    original_amount: Decimal
    extra_start_date: YearMonth

    # Monthly figures
    monthly_payment: Decimal  # P&I
    monthly_tax: Decimal
    monthly_extra: Decimal
    total_monthly_payment: Decimal  # P&I + tax + extra

    # Lifetime totals
    total_interest: Decimal
    total_tax: Decimal
    total_paid: Decimal  # Every row's payment plus escrow tax

    payoff_date: YearMonth
    payoff_duration: PayoffDuration

    # False when the schedule was cut off at the iteration cap before payoff
    converged: bool = True

    @property
    def payment_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class YearlySummary:
    year: int  # Loan year, 1-based
    principal: Decimal
    interest: Decimal
    extra: Decimal
    total_payment: Decimal
    ending_balance: Decimal


@dataclass(frozen=True)
class ExtraPaymentComparison:
    """Savings from extra payments relative to the no-extra baseline."""
    baseline: ScheduleResult
    with_extra: ScheduleResult
    interest_saved: Decimal
    total_paid_saved: Decimal
    months_saved: int

    @property
    def time_saved(self) -> PayoffDuration:
        return PayoffDuration.from_months(self.months_saved)


@dataclass(frozen=True)
class PaidDownSummary:
    original_amount: Decimal
    remaining_balance: Decimal
    paid_down: Decimal
    paid_down_pct: Decimal  # 0-100
