"""Tenero holdings rows -> canonical holding records."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from tp_ranker.domain.models import HoldingRecord, PoolSide
from tp_ranker.infrastructure.parsing.utils import decimal_or_default

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"


def row_to_record(row: Any) -> HoldingRecord | None:
    if not isinstance(row, dict):
        return None
    address = row.get("token_address")
    if address is None or not str(address).strip():
        return None
    token = row.get("token")
    if not isinstance(token, dict):
        token = {}
    name = token.get("name")
    return HoldingRecord(
        address=str(address),
        name=str(name) if name else UNKNOWN_NAME,
        price_usd=decimal_or_default(token.get("price_usd")),
        balance=decimal_or_default(row.get("balance")),
    )


def rows_to_records(rows: Iterable[Any], side: PoolSide) -> Sequence[HoldingRecord]:
    records: list[HoldingRecord] = []
    for idx, row in enumerate(rows):
        record = row_to_record(row)
        if record is None:
            logger.warning(f"Skipping {side.value} pool row {idx}: no token address")
            continue
        records.append(record)
    return records
