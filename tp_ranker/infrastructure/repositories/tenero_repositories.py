"""Tenero API backed repositories for wallet holdings."""
from __future__ import annotations

import logging
from typing import Any, Sequence

from tp_ranker.domain.errors import SnapshotUnavailableError
from tp_ranker.domain.models import HoldingRecord, PoolSide
from tp_ranker.domain.repositories import HoldingsRepository
from tp_ranker.infrastructure.http.client import HttpClient
from tp_ranker.infrastructure.parsing.holdings import rows_to_records

logger = logging.getLogger(__name__)


def extract_rows(document: Any, url: str) -> list[Any]:
    """Unwrap ``data.rows``; a missing key reads as an empty snapshot."""
    if not isinstance(document, dict):
        raise SnapshotUnavailableError(url, f"Unexpected response type from {url}: {type(document).__name__}")
    data = document.get("data")
    if data is None:
        return []
    if not isinstance(data, dict):
        raise SnapshotUnavailableError(url, f"Malformed 'data' section from {url}")
    rows = data.get("rows")
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise SnapshotUnavailableError(url, f"Malformed 'rows' section from {url}")
    return rows


class WalletHoldingsRepository(HoldingsRepository):
    def __init__(self, client: HttpClient, url: str, side: PoolSide, limit: int = 80) -> None:
        self._client = client
        self._url = url
        self._side = side
        self._limit = limit

    def list_holdings(self) -> Sequence[HoldingRecord]:
        document = self._client.get_json(self._url, params={"limit": self._limit})
        rows = extract_rows(document, self._url)
        logger.info(f"Fetched {len(rows)} {self._side.value} pool rows")
        return rows_to_records(rows, self._side)
