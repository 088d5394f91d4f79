"""Table renderers for ranked TP valuations."""
from __future__ import annotations

import csv
import html
import io
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence

import pandas as pd

from tp_ranker.domain.models import ComputedRow

PRICE_PLACES = 8
BALANCE_PLACES = 2
TP_PLACES = 4
MARKET_CAP_PLACES = 2
PRICE_PER_TP_PLACES = 6

COLUMNS = ["name", "price_usd", "circulating_balance", "tp_off_season", "market_cap", "price_per_tp"]


def quantize(value: Decimal, places: int) -> Decimal:
    with localcontext() as ctx:
        # enough digits for every integer place plus the requested fraction
        ctx.prec = max(ctx.prec, value.adjusted() + places + 2)
        return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _fixed(value: Decimal | None, places: int) -> str:
    if value is None:
        return ""
    return f"{quantize(value, places):.{places}f}"


def format_row(row: ComputedRow) -> dict[str, str]:
    """Fixed-precision text form of a row; absent values stay empty."""
    return {
        "name": row.name,
        "price_usd": _fixed(row.price_usd, PRICE_PLACES),
        "circulating_balance": _fixed(row.circulating_balance, BALANCE_PLACES),
        "tp_off_season": _fixed(row.tp_off_season, TP_PLACES),
        "market_cap": _fixed(row.market_cap, MARKET_CAP_PLACES),
        "price_per_tp": _fixed(row.price_per_tp, PRICE_PER_TP_PLACES),
    }


def rows_to_dataframe(rows: Sequence[ComputedRow]) -> pd.DataFrame:
    def as_float(value: Decimal | None) -> float | None:
        return None if value is None else float(value)

    return pd.DataFrame(
        [
            {
                "name": r.name,
                "price_usd": float(quantize(r.price_usd, PRICE_PLACES)),
                "circulating_balance": float(quantize(r.circulating_balance, BALANCE_PLACES)),
                "tp_off_season": as_float(r.tp_off_season),
                "market_cap": float(quantize(r.market_cap, MARKET_CAP_PLACES)),
                "price_per_tp": as_float(r.price_per_tp),
            }
            for r in rows
        ],
        columns=COLUMNS,
    )


def render_csv(rows: Sequence[ComputedRow]) -> bytes:
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=COLUMNS)
    writer.writeheader()
    writer.writerows(format_row(row) for row in rows)
    return buffer.getvalue().encode("utf-8")


def _money(value: Decimal, places: int) -> str:
    return f"${quantize(value, places):,.{places}f}"


def _whole(value: Decimal) -> str:
    return f"{quantize(value, 0):,.0f}"


def _price_per_tp(value: Decimal | None) -> str:
    if value is None:
        return "N/A"
    text = f"{quantize(value, PRICE_PER_TP_PLACES):,.{PRICE_PER_TP_PLACES}f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0").ljust(4, "0")
    return f"${whole}.{fraction}"


_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Player Cost per TP</title>
  <link rel="stylesheet" href="https://cdn.datatables.net/1.13.7/css/jquery.dataTables.min.css">
  <script src="https://code.jquery.com/jquery-3.7.1.min.js"></script>
  <script src="https://cdn.datatables.net/1.13.7/js/jquery.dataTables.min.js"></script>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 20px; }}
    table {{ width: 100%; border-collapse: collapse; }}
    th, td {{ padding: 8px; text-align: right; border: 1px solid #ddd; }}
    th {{ background: #f2f2f2; cursor: pointer; }}
    td.name {{ text-align: left; }}
    td.price-per-tp {{ font-weight: bold; }}
    h1 {{ text-align: center; }}
  </style>
</head>
<body>
  <h1>Player Cost per TP (Sorted by Lowest $/TP)</h1>
  <p>Refresh page to update data.</p>
  <table id="tpTable" class="display">
    <thead><tr>{header}</tr></thead>
    <tbody>{body}</tbody>
  </table>
  <script>
    $(document).ready(function() {{
      $('#tpTable').DataTable({{
        paging: true,
        searching: true,
        ordering: true,
        order: [[5, 'asc']],
        pageLength: 25
      }});
    }});
  </script>
</body>
</html>
"""

_HEADERS = ["Name", "Price (USD)", "Circulating Balance", "TP Off-Season", "Market Cap", "Price per TP"]


def render_table_row(row: ComputedRow) -> str:
    tp_text = "N/A" if row.tp_off_season is None else _whole(row.tp_off_season)
    cells = [
        f'<td class="name">{html.escape(row.name)}</td>',
        f"<td>{_money(row.price_usd, 5)}</td>",
        f"<td>{_whole(row.circulating_balance)}</td>",
        f"<td>{tp_text}</td>",
        f"<td>{_money(row.market_cap, 0)}</td>",
        f'<td class="price-per-tp">{_price_per_tp(row.price_per_tp)}</td>',
    ]
    return "<tr>" + "".join(cells) + "</tr>"


def render_html(rows: Sequence[ComputedRow]) -> str:
    header = "".join(f"<th>{col}</th>" for col in _HEADERS)
    body = "".join(render_table_row(row) for row in rows)
    return _PAGE_TEMPLATE.format(header=header, body=body)
