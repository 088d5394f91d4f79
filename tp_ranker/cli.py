"""Command-line entrypoint for the TP ranking."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from tp_ranker.application.use_cases import RankingContext, RankPlayersUseCase
from tp_ranker.config import Settings, load_settings
from tp_ranker.domain.errors import PipelineError
from tp_ranker.infrastructure.parsing.utils import try_parse_decimal
from tp_ranker.presentation.price_table import render_csv, render_html, rows_to_dataframe


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank players by market cap per off-season TP")
    parser.add_argument("--total-supply", type=str, help="Override the fixed total token supply")
    parser.add_argument(
        "--reference",
        type=str,
        help="Path to the TP reference CSV (header line, then name,tp rows). Not shipped with the package; "
        "defaults to TP_RANKER_REFERENCE_PATH or OffSeasonTP.csv in the project root",
    )
    parser.add_argument("--html", type=str, help="Write the sortable HTML table to this path")
    parser.add_argument("--csv", type=str, help="Write the ranked rows as CSV to this path")
    parser.add_argument("--top", type=int, help="Only print the N cheapest players")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging and list tokens without a TP match")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    settings = load_settings()
    if args.total_supply:
        total_supply = try_parse_decimal(args.total_supply)
        if total_supply is None:
            raise SystemExit(f"--total-supply must be a number, got {args.total_supply!r}")
        settings = replace(settings, total_supply=total_supply)
    if args.reference:
        settings = replace(settings, reference_path=Path(args.reference))
    return settings


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = build_settings(args)
        use_case = RankPlayersUseCase(RankingContext.from_settings(settings))
        report = use_case.execute()
    except PipelineError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Ranking Summary")
    print("===============")
    summary = report.summary
    print(f"Main pool rows: {summary.main_rows}")
    print(f"Market pool rows: {summary.market_rows}")
    print(f"Reference entries: {summary.reference_entries}")
    print(f"Tokens: {summary.total_entities}")
    print(f"Without TP match: {summary.unmatched}")
    print(f"Unusable TP: {summary.unusable_tp}")
    print(f"Ranked: {summary.ranked}")

    if report.has_rankings():
        ranked = list(report.ranked)
        if args.top is not None:
            ranked = ranked[: args.top]
        print()
        print(rows_to_dataframe(ranked).to_string(index=False))
    else:
        print("\nNo players could be ranked.")

    if args.verbose:
        unmatched = [row.name for row in report.iter_unmatched()]
        if unmatched:
            print("\nWithout TP match:")
            for name in unmatched:
                print(f"- {name}")

    if args.html:
        Path(args.html).write_text(render_html(report.ranked), encoding="utf-8")
        print(f"\nHTML written to {args.html}")
    if args.csv:
        Path(args.csv).write_bytes(render_csv(report.ranked))
        print(f"CSV written to {args.csv}")

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
