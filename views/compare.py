"""Compare section: account size selector, summary metrics and pricing table."""

import streamlit as st

import config
from components.display import pricing_table, show_summary
from components.filters import size_selector
from core.formatting import format_size
from core.selection import SelectionState
from views.home import render_how_to_use


def render(catalog) -> SelectionState:
    # ── Inputs ────────────────────────────────────────────────────────────────
    col_size, col_notes = st.columns(2)
    with col_size:
        st.subheader("Account Size")
        st.caption(
            "Choose the funded account size you are targeting. "
            "Fees and rankings update instantly."
        )
        size = size_selector(
            catalog.account_sizes,
            catalog.default_size,
            key=config.SIZE_STATE_KEY,
        )
    with col_notes:
        render_how_to_use()

    state = SelectionState(catalog, size)
    ranking = state.ranking
    size_label = format_size(state.size)

    st.divider()

    # ── Pricing table ─────────────────────────────────────────────────────────
    st.subheader("Challenge Pricing Comparison")
    st.caption(f"Sorted by upfront evaluation fee for a {size_label} account.")

    show_summary(ranking, size_label)

    pricing_table(ranking)
    return state
