"""Tests for amount parsing and currency formatting."""

from decimal import Decimal

import pytest

from cashbook.utils.amount_parser import format_currency, parse_amount


@pytest.mark.parametrize(
    "text, expected",
    [
        ("150", Decimal("150.00")),
        ("150.5", Decimal("150.50")),
        ("R$ 150,50", Decimal("150.50")),
        ("1.234,56", Decimal("1234.56")),
        ("1,234.56", Decimal("1234.56")),
        ("1,234", Decimal("1234.00")),
        ("12,5", Decimal("12.50")),
        ("-10", Decimal("-10.00")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "Infinity", "1e30"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "R$ 1.234,50"
    assert format_currency(Decimal("0")) == "R$ 0,00"
    assert format_currency(Decimal("-150")) == "-R$ 150,00"
    assert format_currency(Decimal("1234567.891")) == "R$ 1.234.567,89"
