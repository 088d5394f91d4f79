from decimal import Decimal

from tp_ranker.domain.models import ComputedRow, MergedEntity
from tp_ranker.domain.services import MetricCalculator, select_ranked
from tp_ranker.presentation.price_table import format_row, render_csv, render_html, rows_to_dataframe


def make_row(name: str = "Bob", tp: str | None = "20", price_per_tp: str | None = "8.5") -> ComputedRow:
    return ComputedRow(
        address="0xA",
        name=name,
        price_usd=Decimal("2"),
        circulating_balance=Decimal("85"),
        market_cap=Decimal("170"),
        tp_off_season=None if tp is None else Decimal(tp),
        price_per_tp=None if price_per_tp is None else Decimal(price_per_tp),
    )


def test_format_row_uses_fixed_precision():
    formatted = format_row(make_row())

    assert formatted == {
        "name": "Bob",
        "price_usd": "2.00000000",
        "circulating_balance": "85.00",
        "tp_off_season": "20.0000",
        "market_cap": "170.00",
        "price_per_tp": "8.500000",
    }


def test_absent_values_are_not_zero():
    formatted = format_row(make_row(tp=None, price_per_tp=None))

    assert formatted["tp_off_season"] == ""
    assert formatted["price_per_tp"] == ""


def test_render_csv():
    text = render_csv([make_row()]).decode("utf-8").splitlines()

    assert text[0] == "name,price_usd,circulating_balance,tp_off_season,market_cap,price_per_tp"
    assert text[1] == "Bob,2.00000000,85.00,20.0000,170.00,8.500000"


def test_render_html_escapes_names_and_formats_cells():
    page = render_html([make_row(name="<Bob & Co>")])

    assert "&lt;Bob &amp; Co&gt;" in page
    assert "<td>$2.00000</td>" in page
    assert "<td>$170</td>" in page
    assert '<td class="price-per-tp">$8.5000</td>' in page
    assert "order: [[5, 'asc']]" in page


def test_render_html_marks_missing_tp():
    page = render_html([make_row(tp=None, price_per_tp=None)])

    assert page.count("N/A") == 2


def test_rows_to_dataframe_keeps_missing_values():
    frame = rows_to_dataframe([make_row(), make_row(tp=None, price_per_tp=None)])

    assert list(frame.columns) == [
        "name",
        "price_usd",
        "circulating_balance",
        "tp_off_season",
        "market_cap",
        "price_per_tp",
    ]
    assert frame.loc[0, "price_per_tp"] == 8.5
    assert frame["price_per_tp"].isna().tolist() == [False, True]


def test_very_large_price_per_tp_renders():
    calculator = MetricCalculator(Decimal("25000000"))
    entity = MergedEntity(address="0xA", name="Bob", price_usd=Decimal("2"))
    ranked = select_ranked(calculator.compute([entity], {"bob": Decimal("0.000000000000000001")}))

    assert ranked[0].price_per_tp == Decimal("5E+25")
    assert format_row(ranked[0])["price_per_tp"] == "50000000000000000000000000.000000"
    assert "$50,000,000,000,000,000,000,000,000.0000" in render_html(ranked)
    assert render_csv(ranked).decode("utf-8").splitlines()[1].endswith(",50000000000000000000000000.000000")
    assert rows_to_dataframe(ranked).loc[0, "price_per_tp"] == 5e25
