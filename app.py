"""Streamlit front-end for the TP ranking pipeline."""
from __future__ import annotations

import logging

import streamlit as st

from tp_ranker import RankingContext, RankPlayersUseCase
from tp_ranker.config import load_settings
from tp_ranker.domain.errors import PipelineError
from tp_ranker.domain.results import RankingReport
from tp_ranker.presentation.price_table import render_csv, render_html, rows_to_dataframe

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Player Cost per TP", layout="wide")
st.title("Player Cost per TP")
st.caption("Sorted by lowest $/TP. Refresh to fetch live holdings again.")


def run_ranking() -> RankingReport:
    settings = load_settings()
    use_case = RankPlayersUseCase(RankingContext.from_settings(settings))
    return use_case.execute()


refresh_clicked = st.button("Refresh")
if refresh_clicked or "report" not in st.session_state:
    st.session_state["report"] = None
    st.session_state["error"] = None
    with st.spinner("Fetching holdings..."):
        try:
            st.session_state["report"] = run_ranking()
        except PipelineError as e:
            st.session_state["error"] = str(e)

error = st.session_state.get("error")
report: RankingReport | None = st.session_state.get("report")
if error:
    st.error(f"Error: {error}")
elif report is None:
    st.info("No results available yet.")
else:
    summary = report.summary
    cols = st.columns(4)
    cols[0].metric("Tokens", summary.total_entities)
    cols[1].metric("Ranked", summary.ranked)
    cols[2].metric("Without TP match", summary.unmatched)
    cols[3].metric("Unusable TP", summary.unusable_tp)

    st.dataframe(
        rows_to_dataframe(report.ranked),
        hide_index=True,
        use_container_width=True,
        column_config={
            "price_usd": st.column_config.NumberColumn("Price (USD)", format="$%.5f"),
            "circulating_balance": st.column_config.NumberColumn("Circulating Balance", format="%.0f"),
            "tp_off_season": st.column_config.NumberColumn("TP Off-Season", format="%.0f"),
            "market_cap": st.column_config.NumberColumn("Market Cap", format="$%.0f"),
            "price_per_tp": st.column_config.NumberColumn("Price per TP", format="$%.6f"),
        },
    )
    st.download_button(
        "Download CSV",
        data=render_csv(report.ranked),
        file_name="price_per_tp.csv",
        mime="text/csv",
    )
    st.download_button(
        "Download HTML",
        data=render_html(report.ranked).encode("utf-8"),
        file_name="price_per_tp.html",
        mime="text/html",
    )
