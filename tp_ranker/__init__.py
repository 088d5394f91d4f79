"""Player price-per-TP ranking from wallet holdings snapshots."""
from tp_ranker.application.use_cases import RankingContext, RankPlayersUseCase
from tp_ranker.domain.services import MetricCalculator, merge_holdings, select_ranked
from tp_ranker.domain.normalization import normalize_name
from tp_ranker.domain.reference import load_tp_reference

__all__ = [
    "RankingContext",
    "RankPlayersUseCase",
    "MetricCalculator",
    "merge_holdings",
    "select_ranked",
    "normalize_name",
    "load_tp_reference",
]
