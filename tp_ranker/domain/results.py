"""Domain-level results for a ranking run."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Sequence

from .models import ComputedRow


@dataclass(frozen=True)
class RankingSummary:
    main_rows: int
    market_rows: int
    reference_entries: int
    total_entities: int
    matched: int
    unusable_tp: int
    unmatched: int
    ranked: int
    generated_at: datetime


@dataclass(frozen=True)
class RankingReport:
    summary: RankingSummary
    computed: Sequence[ComputedRow] = field(default_factory=tuple)
    ranked: Sequence[ComputedRow] = field(default_factory=tuple)

    def has_rankings(self) -> bool:
        return bool(self.ranked)

    def iter_unmatched(self) -> Iterable[ComputedRow]:
        for row in self.computed:
            if not row.is_matched:
                yield row
