"""Tests for amount parser."""

from decimal import Decimal

import pytest

from bizanalytics.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "value,expected",
    [
        ("123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("(123.45)", Decimal("-123.45")),
        ("Rs 500", Decimal("500")),
        ("Rs. 1,500", Decimal("1500")),
        ("PKR 320,000", Decimal("320000")),
        ("₨750", Decimal("750")),
        ("  42  ", Decimal("42")),
        (0, Decimal("0")),
        (250000, Decimal("250000")),
        (0.1, Decimal("0.1")),
        (Decimal("7.5"), Decimal("7.5")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "abc", "NaN", "inf", float("inf"), True])
def test_parse_amount_invalid(value):
    with pytest.raises(ValueError):
        parse_amount(value)
