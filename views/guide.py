"""Scorecards and static due-diligence guidance."""

import streamlit as st

from components.display import firm_scorecard, scorecard_legend

CHECKLIST = [
    "Confirm funding terms within the last week. Prop firm policies change "
    "rapidly; verify on the official site before purchasing.",
    "Read customer payout reviews on communities such as "
    "[Trustpilot](https://www.trustpilot.com) and "
    "[Forex Factory](https://www.forexfactory.com/) for the latest experiences.",
    "Match risk rules to your strategy. Low fees with trailing drawdown or "
    "strict daily loss limits may be harder to manage.",
    "Use demo accounts to stress-test your strategy under the exact rules "
    "before attempting a paid evaluation.",
]

EVALUATION_TYPES = [
    ("One-step challenge", "Pay higher fee for faster access; typically higher "
     "targets and tighter drawdown."),
    ("Two-step challenge", "Lower target per phase but requires consistency "
     "over two evaluation accounts."),
    ("Instant funding", "Pay a high upfront fee for a live account, usually "
     "with smaller profit splits and trailing drawdown."),
]

DISCLAIMER = (
    "Disclaimer: Prop firm availability, pricing, and rules change frequently. "
    "The above data reflects the cheapest publicly advertised pricing as of Q1 "
    "2024 and remains for informational purposes only. We do not endorse any "
    "firm nor guarantee funding outcomes. Always confirm all terms directly "
    "with the provider and consult with a financial professional before "
    "risking capital."
)


def render(catalog):
    col_cards, col_guide = st.columns(2)

    with col_cards:
        st.subheader("Quick scorecard")
        scorecard_legend()
        for firm in catalog.firms:
            firm_scorecard(firm)

    with col_guide:
        st.subheader("Due diligence checklist")
        st.markdown("\n".join(f"- {item}" for item in CHECKLIST))

        st.markdown("##### Key evaluation types")
        st.markdown("\n".join(f"- **{name}:** {text}" for name, text in EVALUATION_TYPES))

    st.divider()
    st.caption(DISCLAIMER)
