"""Raw form values -> LoanInputs.

Form fields arrive as text (or None). Anything that does not parse as a
number is taken as 0 so the engine can report "not enough input" instead of
the form raising.
"""

import logging
from decimal import Decimal, InvalidOperation

from amortizer.models.loan import Frequency, LoanInputs, YearMonth

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def parse_number(value) -> Decimal:
    """Parse a user-entered amount like "300,000" or "$1,200.50"."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, bool):
        return ZERO
    if isinstance(value, int):
        return Decimal(value)

    text = str(value).strip().replace(",", "").replace("$", "")
    if not text:
        return ZERO
    try:
        number = Decimal(text)
    except InvalidOperation:
        logger.debug("Unparsable number %r, using 0", value)
        return ZERO
    return number if number.is_finite() else ZERO


def parse_rate_percent(value) -> Decimal:
    """Percent to fraction: "6.5" -> Decimal("0.065")."""
    return parse_number(value) / 100


def parse_frequency(value, default: Frequency = Frequency.MONTHLY) -> Frequency:
    if isinstance(value, Frequency):
        return value
    if value is None:
        return default
    try:
        return Frequency(str(value).strip().lower())
    except ValueError:
        logger.debug("Unknown frequency %r, using %s", value, default.value)
        return default


def parse_year_month(value, default: YearMonth | None = None) -> YearMonth:
    """ "2025-01" -> YearMonth(2025, 1); bad or empty input gives ``default``
    (the current month when no default is given)."""
    if isinstance(value, YearMonth):
        return value
    if value:
        try:
            return YearMonth.parse(str(value))
        except ValueError:
            logger.debug("Unparsable month %r", value)
    return default or YearMonth.today()


def build_inputs(
    principal,
    interest_rate_pct,
    term_years,
    start_date=None,
    original_amount=None,
    tax_amount=None,
    tax_frequency=Frequency.ANNUAL,
    extra_amount=None,
    extra_frequency=Frequency.MONTHLY,
    extra_start_date=None,
) -> LoanInputs:
    """Assemble LoanInputs from raw form values.

    ``interest_rate_pct`` is a percentage (6.5 for 6.5%). An empty extra
    start month means extra payments start with the loan.
    """
    start = parse_year_month(start_date)
    return LoanInputs(
        principal=parse_number(principal),
        annual_rate=parse_rate_percent(interest_rate_pct),
        term_years=parse_number(term_years),
        start_date=start,
        original_amount=parse_number(original_amount),
        tax_amount=parse_number(tax_amount),
        tax_frequency=parse_frequency(tax_frequency, Frequency.ANNUAL),
        extra_amount=parse_number(extra_amount),
        extra_frequency=parse_frequency(extra_frequency, Frequency.MONTHLY),
        extra_start_date=parse_year_month(extra_start_date, default=start),
    )
