from decimal import Decimal

from tp_ranker.domain.models import HoldingRecord
from tp_ranker.domain.services import merge_holdings


def make_holding(address: str, name: str, price: str, balance: str) -> HoldingRecord:
    return HoldingRecord(
        address=address,
        name=name,
        price_usd=Decimal(price),
        balance=Decimal(balance),
    )


def test_every_address_gets_one_entity_with_zero_defaults():
    main = [make_holding("0xA", "Alice", "1", "10"), make_holding("0xB", "Bob", "2", "20")]
    market = [
        make_holding("0xB", "Bob", "2", "5"),
        make_holding("0xC", "Carl", "3", "7"),
    ]

    entities = merge_holdings(main, market)

    assert list(entities) == ["0xA", "0xB", "0xC"]
    assert entities["0xA"].main_balance == Decimal("10")
    assert entities["0xA"].market_balance == Decimal("0")
    assert entities["0xB"].main_balance == Decimal("20")
    assert entities["0xB"].market_balance == Decimal("5")
    assert entities["0xC"].main_balance == Decimal("0")
    assert entities["0xC"].market_balance == Decimal("7")
    assert entities["0xC"].name == "Carl"
    assert entities["0xC"].price_usd == Decimal("3")


def test_main_pool_name_and_price_win():
    main = [make_holding("0xA", "Alice", "1.5", "10")]
    market = [make_holding("0xA", "ALICIA", "9", "4")]

    entity = merge_holdings(main, market)["0xA"]

    assert entity.name == "Alice"
    assert entity.price_usd == Decimal("1.5")
    assert entity.market_balance == Decimal("4")


def test_repeated_market_row_overwrites_market_balance():
    main = [make_holding("0xA", "Alice", "1", "10")]
    market = [
        make_holding("0xA", "Alice", "1", "4"),
        make_holding("0xA", "Alice", "1", "6"),
    ]

    entity = merge_holdings(main, market)["0xA"]

    assert entity.market_balance == Decimal("6")
    assert entity.pooled_balance == Decimal("16")


def test_empty_snapshots():
    assert merge_holdings([], []) == {}
