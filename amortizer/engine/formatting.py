"""Display formatting for engine output. The only place amounts are rounded."""

from decimal import Decimal, ROUND_HALF_UP

from amortizer.models.results import PayoffDuration

TWO_PLACES = Decimal("0.01")
ONE_PLACE = Decimal("0.1")


def format_currency(value: Decimal | float | int) -> str:
    """US dollars with cents, e.g. "$1,896.20" or "-$12.50"."""
    amount = Decimal(str(value)).quantize(TWO_PLACES, ROUND_HALF_UP)
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${abs(amount):,.2f}"


def format_percent(value: Decimal | float) -> str:
    """A 0-100 percentage with one decimal, e.g. "8.3%"."""
    return f"{Decimal(str(value)).quantize(ONE_PLACE, ROUND_HALF_UP)}%"


def format_duration(duration: PayoffDuration, long: bool = False) -> str:
    """ "29y 3m" or, with long=True, "29 years and 3 months".

    The years part is left out when it is zero.
    """
    if long:
        if duration.years > 0:
            return f"{duration.years} years and {duration.months} months"
        return f"{duration.months} months"
    if duration.years > 0:
        return f"{duration.years}y {duration.months}m"
    return f"{duration.months}m"
