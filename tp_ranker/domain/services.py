"""Domain services: holdings merge, valuation metrics and ranking."""
from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Iterable, Mapping, Sequence

from .models import ZERO, ComputedRow, HoldingRecord, MergedEntity
from .normalization import normalize_name
from .numbers import is_usable_decimal


def merge_holdings(
    main_rows: Iterable[HoldingRecord],
    market_rows: Iterable[HoldingRecord],
) -> dict[str, MergedEntity]:
    """Combine both pool snapshots into one entity per token address.

    Main pool rows are applied first and fix each entity's name and price.
    Market pool rows only set the market balance of a known address, or create
    the entity when the main pool never held it.
    """
    entities: dict[str, MergedEntity] = {}
    for row in main_rows:
        entities[row.address] = MergedEntity(
            address=row.address,
            name=row.name,
            price_usd=row.price_usd,
            main_balance=row.balance,
            market_balance=ZERO,
        )
    for row in market_rows:
        existing = entities.get(row.address)
        if existing is None:
            entities[row.address] = MergedEntity(
                address=row.address,
                name=row.name,
                price_usd=row.price_usd,
                main_balance=ZERO,
                market_balance=row.balance,
            )
        else:
            entities[row.address] = replace(existing, market_balance=row.balance)
    return entities


class MetricCalculator:
    """Derives circulating supply, market cap and price per TP."""

    def __init__(self, total_supply: Decimal) -> None:
        self._total_supply = Decimal(total_supply)

    @property
    def total_supply(self) -> Decimal:
        return self._total_supply

    def compute(
        self,
        entities: Mapping[str, MergedEntity] | Iterable[MergedEntity],
        reference: Mapping[str, Decimal],
    ) -> list[ComputedRow]:
        if isinstance(entities, Mapping):
            entities = entities.values()
        return [self.compute_one(entity, reference) for entity in entities]

    def compute_one(self, entity: MergedEntity, reference: Mapping[str, Decimal]) -> ComputedRow:
        # circulating supply is allowed to go negative
        circulating = self._total_supply - entity.pooled_balance
        market_cap = entity.price_usd * circulating
        tp_value = reference.get(normalize_name(entity.name))
        price_per_tp = None
        if tp_value is not None and tp_value > 0 and is_usable_decimal(tp_value):
            price_per_tp = market_cap / tp_value
        return ComputedRow(
            address=entity.address,
            name=entity.name,
            price_usd=entity.price_usd,
            circulating_balance=circulating,
            market_cap=market_cap,
            tp_off_season=tp_value,
            price_per_tp=price_per_tp,
        )


def select_ranked(rows: Iterable[ComputedRow]) -> list[ComputedRow]:
    """Keep rows with a price per TP, cheapest first.

    Equal prices keep their input order (``sorted`` is stable), which puts
    main pool tokens ahead of market-only tokens.
    """
    ranked = [row for row in rows if row.price_per_tp is not None]
    return sorted(ranked, key=lambda row: row.price_per_tp)


def count_unusable_tp(rows: Sequence[ComputedRow]) -> int:
    return sum(1 for row in rows if row.is_matched and not row.is_ranked)
