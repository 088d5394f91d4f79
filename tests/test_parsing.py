from decimal import Decimal

import pytest

from tp_ranker.domain.models import PoolSide
from tp_ranker.infrastructure.parsing.holdings import row_to_record, rows_to_records
from tp_ranker.infrastructure.parsing.utils import decimal_or_default, try_parse_decimal


@pytest.mark.parametrize(
    "value, expected",
    [
        (5, Decimal("5")),
        (1.25, Decimal("1.25")),
        (Decimal("0.001"), Decimal("0.001")),
        (" 12.5 ", Decimal("12.5")),
        ("1e3", Decimal("1000")),
    ],
)
def test_try_parse_decimal_accepts_numbers(value, expected):
    assert try_parse_decimal(value) == expected


@pytest.mark.parametrize("value", [None, True, "", "  ", "abc", "NaN", "inf", float("nan"), [1], {}])
def test_try_parse_decimal_rejects_non_numbers(value):
    assert try_parse_decimal(value) is None


def test_decimal_or_default():
    assert decimal_or_default("oops") == Decimal("0")
    assert decimal_or_default(None, Decimal("1")) == Decimal("1")
    assert decimal_or_default("3") == Decimal("3")


def test_row_to_record_reads_nested_token():
    row = {"token_address": "0xA", "token": {"name": "Bob", "price_usd": "2.5"}, "balance": "10"}

    record = row_to_record(row)

    assert record.address == "0xA"
    assert record.name == "Bob"
    assert record.price_usd == Decimal("2.5")
    assert record.balance == Decimal("10")


def test_row_to_record_defaults():
    record = row_to_record({"token_address": "0xA", "balance": "n/a"})

    assert record.name == "Unknown"
    assert record.price_usd == Decimal("0")
    assert record.balance == Decimal("0")

    record = row_to_record({"token_address": "0xB", "token": {"name": "", "price_usd": None}})
    assert record.name == "Unknown"
    assert record.price_usd == Decimal("0")


def test_rows_without_address_are_skipped():
    rows = [
        {"token": {"name": "No Address"}, "balance": 1},
        "not a row",
        {"token_address": "0xA", "balance": 3},
    ]

    records = rows_to_records(rows, PoolSide.MAIN)

    assert [record.address for record in records] == ["0xA"]


@pytest.mark.parametrize("value", ["1e999999", "1e-999999", Decimal("1e300000"), "-2.5E+400000"])
def test_try_parse_decimal_rejects_out_of_range_magnitudes(value):
    assert try_parse_decimal(value) is None
    assert decimal_or_default(value) == Decimal("0")


def test_out_of_range_price_coerces_to_zero():
    record = row_to_record({"token_address": "0xA", "token": {"name": "Bob", "price_usd": "1e999999"}, "balance": "1"})

    assert record.price_usd == Decimal("0")
    assert record.balance == Decimal("1")
