from decimal import Decimal

import pytest

from amortizer.engine.formatting import format_currency, format_duration, format_percent
from amortizer.models.results import PayoffDuration


class TestFormatCurrency:
    @pytest.mark.parametrize("value, expected", [
        (Decimal("1896.2040"), "$1,896.20"),
        (Decimal("1234567.895"), "$1,234,567.90"),
        (Decimal("0"), "$0.00"),
        (Decimal("-12.5"), "-$12.50"),
        (Decimal("-0.001"), "$0.00"),
        (300000, "$300,000.00"),
        (99.999, "$100.00"),
    ])
    def test_format(self, value, expected):
        assert format_currency(value) == expected


class TestFormatPercent:
    def test_one_decimal(self):
        assert format_percent(Decimal("8.3333")) == "8.3%"
        assert format_percent(Decimal("100")) == "100.0%"


class TestFormatDuration:
    def test_short(self):
        assert format_duration(PayoffDuration(29, 3)) == "29y 3m"
        assert format_duration(PayoffDuration(0, 7)) == "7m"

    def test_long(self):
        assert format_duration(PayoffDuration(5, 0), long=True) == "5 years and 0 months"
        assert format_duration(PayoffDuration(0, 11), long=True) == "11 months"
