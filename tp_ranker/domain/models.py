"""Domain models for the TP valuation pipeline.

These dataclasses capture the canonical shape of wallet holdings, the merged
per-token view across both pools, and the computed valuation rows.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

ZERO = Decimal("0")


class PoolSide(str, Enum):
    """Which tracked wallet a holdings snapshot came from."""

    MAIN = "main"
    MARKET = "market"


@dataclass(frozen=True)
class HoldingRecord:
    """One normalized row of a wallet holdings snapshot."""

    address: str
    name: str
    price_usd: Decimal
    balance: Decimal


@dataclass(frozen=True)
class MergedEntity:
    """Per-token view combining the main pool and market pool balances."""

    address: str
    name: str
    price_usd: Decimal
    main_balance: Decimal = ZERO
    market_balance: Decimal = ZERO

    @property
    def pooled_balance(self) -> Decimal:
        return self.main_balance + self.market_balance


@dataclass(frozen=True)
class ComputedRow:
    """Valuation metrics for a single merged token."""

    address: str
    name: str
    price_usd: Decimal
    circulating_balance: Decimal
    market_cap: Decimal
    tp_off_season: Decimal | None = None
    price_per_tp: Decimal | None = None

    @property
    def is_matched(self) -> bool:
        return self.tp_off_season is not None

    @property
    def is_ranked(self) -> bool:
        return self.price_per_tp is not None
