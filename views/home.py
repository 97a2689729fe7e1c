"""Hero / introduction section."""

from html import escape

import streamlit as st

HOW_TO_USE = [
    (
        "Cheapest",
        "firms toggle automatically per account size. Only firms with recent "
        "reputation checks are included.",
    ),
    (
        "Fee per 10k",
        "normalizes evaluation cost so you can compare small vs. large "
        "challenges fairly.",
    ),
    (
        "Risk rules",
        "summarize key limits that often matter more than the sticker price. "
        "Open a firm's site to learn more.",
    ),
]


def render_hero(as_of: str):
    badge = f'<div class="badge">{escape(as_of)}</div>' if as_of else ""
    st.markdown(
        '<div class="hero">'
        f"{badge}"
        "<h1>Find the Cheapest Forex Prop Firm for Your Account Size</h1>"
        "<p>Compare evaluation fees, payout splits, and risk rules from vetted "
        "proprietary trading firms. Select an account size to highlight the "
        "cheapest funding option and understand the trade-offs behind low-cost "
        "challenges.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_how_to_use():
    st.subheader("How to use this table")
    st.markdown("\n".join(f"- **{term}** {text}" for term, text in HOW_TO_USE))
