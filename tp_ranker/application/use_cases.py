"""Application services orchestrating the TP ranking workflow."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from tp_ranker.config import Settings
from tp_ranker.domain.models import PoolSide
from tp_ranker.domain.reference import load_tp_reference
from tp_ranker.domain.repositories import HoldingsRepository, ReferenceRepository
from tp_ranker.domain.results import RankingReport, RankingSummary
from tp_ranker.domain.services import MetricCalculator, count_unusable_tp, merge_holdings, select_ranked
from tp_ranker.infrastructure.http.client import HttpClient
from tp_ranker.infrastructure.repositories.csv_reference import CsvReferenceRepository
from tp_ranker.infrastructure.repositories.tenero_repositories import WalletHoldingsRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RankingContext:
    main_repository: HoldingsRepository
    market_repository: HoldingsRepository
    reference_repository: ReferenceRepository
    calculator: MetricCalculator

    @classmethod
    def from_settings(cls, settings: Settings, client: HttpClient | None = None) -> "RankingContext":
        if client is None:
            client = HttpClient(timeout=settings.http_timeout, max_retries=settings.max_retries)
        return cls(
            main_repository=WalletHoldingsRepository(
                client, settings.main_pool_url, PoolSide.MAIN, limit=settings.holdings_limit
            ),
            market_repository=WalletHoldingsRepository(
                client, settings.market_pool_url, PoolSide.MARKET, limit=settings.holdings_limit
            ),
            reference_repository=CsvReferenceRepository(settings.reference_path),
            calculator=MetricCalculator(settings.total_supply),
        )


class RankPlayersUseCase:
    def __init__(self, context: RankingContext) -> None:
        self._context = context

    def execute(self) -> RankingReport:
        # every input must be in hand before any computation starts
        main_rows = self._context.main_repository.list_holdings()
        market_rows = self._context.market_repository.list_holdings()
        reference = load_tp_reference(self._context.reference_repository.read_text())

        entities = merge_holdings(main_rows, market_rows)
        computed = self._context.calculator.compute(entities, reference)
        ranked = select_ranked(computed)

        matched = sum(1 for row in computed if row.is_matched)
        summary = RankingSummary(
            main_rows=len(main_rows),
            market_rows=len(market_rows),
            reference_entries=len(reference),
            total_entities=len(computed),
            matched=matched,
            unusable_tp=count_unusable_tp(computed),
            unmatched=len(computed) - matched,
            ranked=len(ranked),
            generated_at=datetime.now(timezone.utc),
        )
        logger.info(
            f"Ranked {summary.ranked} of {summary.total_entities} tokens "
            f"({summary.unmatched} without a TP match)"
        )
        return RankingReport(summary=summary, computed=tuple(computed), ranked=tuple(ranked))
