import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

MONTHS_PER_YEAR = 12

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


class Frequency(Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"

    def to_monthly(self, amount: Decimal) -> Decimal:
        """Normalize an amount quoted at this frequency to a monthly figure."""
        if self is Frequency.ANNUAL:
            return amount / MONTHS_PER_YEAR
        return amount


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month. Ordering is chronological."""
    year: int
    month: int  # 1-12

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def parse(cls, value: str) -> "YearMonth":
        """Parse "YYYY-MM" (an HTML month input value)."""
        year_str, sep, month_str = value.strip().partition("-")
        if not sep:
            raise ValueError(f"expected YYYY-MM, got {value!r}")
        return cls(int(year_str), int(month_str[:2]))

    @classmethod
    def today(cls) -> "YearMonth":
        now = date.today()
        return cls(now.year, now.month)

    def add_months(self, months: int) -> "YearMonth":
        index = self.year * MONTHS_PER_YEAR + (self.month - 1) + months
        return YearMonth(index // MONTHS_PER_YEAR, index % MONTHS_PER_YEAR + 1)

    @property
    def short_label(self) -> str:
        return f"{_MONTH_ABBR[self.month - 1]} {self.year}"

    @property
    def long_label(self) -> str:
        return f"{_MONTH_NAMES[self.month - 1]} {self.year}"

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class LoanInputs:
    """Everything one schedule calculation depends on.

    Amounts are Decimal dollars, rates are fractions (0.065 for 6.5%).
    Instances are hashable so a calculation can be memoized on them.
    """
    # Loan
    principal: Decimal  # Balance to amortize (remaining balance)
    annual_rate: Decimal
    term_years: Decimal
    start_date: YearMonth  # First scheduled payment
    original_amount: Decimal = Decimal("0")  # Display only, never used in payment math

    # Escrow passthrough, not amortized
    tax_amount: Decimal = Decimal("0")
    tax_frequency: Frequency = Frequency.ANNUAL

    # Extra principal
    extra_amount: Decimal = Decimal("0")
    extra_frequency: Frequency = Frequency.MONTHLY
    extra_start_date: YearMonth | None = None  # Defaults to start_date

    @property
    def monthly_rate(self) -> Decimal:
        return self.annual_rate / MONTHS_PER_YEAR

    @property
    def total_periods(self) -> int:
        return math.ceil(self.term_years * MONTHS_PER_YEAR)

    @property
    def monthly_tax(self) -> Decimal:
        return self.tax_frequency.to_monthly(self.tax_amount)

    @property
    def monthly_extra(self) -> Decimal:
        return self.extra_frequency.to_monthly(self.extra_amount)

    @property
    def effective_extra_start(self) -> YearMonth:
        return self.extra_start_date or self.start_date

    @property
    def is_complete(self) -> bool:
        """True when there is enough input to amortize."""
        return self.principal > 0 and self.annual_rate > 0 and self.term_years > 0
