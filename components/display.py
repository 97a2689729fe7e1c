"""Reusable display components for the fee comparison."""

from html import escape

import pandas as pd
import streamlit as st

from core.formatting import (
    PLACEHOLDER,
    format_currency,
    format_days,
    format_fee_per_10k,
    format_phases,
    format_savings,
    format_text,
)

TABLE_COLUMNS = [
    "Firm",
    "Badge",
    "Upfront Fee",
    "Savings",
    "Fee / $10k",
    "Payout Split",
    "Drawdown Rules",
    "Profit Target",
    "Min Days",
    "Phases",
    "Site",
]


def pricing_frame(ranking) -> pd.DataFrame:
    """Ranked rows as a display-ready DataFrame (all cells are strings)."""
    records = []
    for row in ranking.rows:
        cheapest = ranking.is_cheapest(row)
        records.append({
            "Firm": row.firm.name,
            "Badge": "Cheapest" if cheapest else "",
            "Upfront Fee": format_currency(row.fee),
            "Savings": format_savings(ranking.savings(row)) or "",
            "Fee / $10k": format_fee_per_10k(row.fee_per_10k),
            "Payout Split": format_text(row.payout_split),
            "Drawdown Rules": format_text(row.drawdown),
            "Profit Target": format_text(row.profit_target),
            "Min Days": format_days(row.min_trading_days),
            "Phases": format_phases(row.evaluation_phases),
            "Site": row.firm.website,
        })
    return pd.DataFrame.from_records(records, columns=TABLE_COLUMNS)


def show_summary(ranking, size_label: str):
    """Render headline metrics for the current selection."""
    c1, c2, c3 = st.columns(3)
    c1.metric("Cheapest fee", format_currency(ranking.cheapest_fee))
    c2.metric("Next best fee", format_currency(ranking.next_best_fee))
    c3.metric(f"Firms offering {size_label}", f"{ranking.offered_count} / {len(ranking.rows)}")


def pricing_table(ranking):
    st.dataframe(
        pricing_frame(ranking),
        hide_index=True,
        column_config={
            "Firm": st.column_config.TextColumn("Firm", width="medium"),
            "Badge": st.column_config.TextColumn(" ", width="small"),
            "Savings": st.column_config.TextColumn(" ", width="medium"),
            "Site": st.column_config.LinkColumn("Site", display_text="Visit site →"),
        },
    )


def firm_scorecard(firm):
    """Card with a firm's metadata, strengths and watch-outs."""
    strengths = "".join(f'<li class="strength">{escape(s)}</li>' for s in firm.strengths)
    cautions = "".join(f'<li class="caution">{escape(c)}</li>' for c in firm.cautions)
    meta = f"Est. {escape(firm.founded or PLACEHOLDER)} • {escape(firm.headquartered or PLACEHOLDER)}"
    st.markdown(
        '<div class="card scorecard">'
        '<div class="scorecard-head">'
        f"<strong>{escape(firm.name)}</strong>"
        f'<span class="small">{meta}</span>'
        "</div>"
        f'<p class="muted">{escape(firm.tagline)}</p>'
        '<strong class="small">Strengths</strong>'
        f'<ul class="note-list">{strengths}</ul>'
        '<strong class="small">Watch-outs</strong>'
        f'<ul class="note-list">{cautions}</ul>'
        "</div>",
        unsafe_allow_html=True,
    )


def scorecard_legend():
    st.markdown(
        '<div class="legend">'
        '<span><span class="legend-dot" style="background: var(--success);"></span>Strength</span>'
        '<span><span class="legend-dot" style="background: var(--danger);"></span>Caution</span>'
        "</div>",
        unsafe_allow_html=True,
    )
