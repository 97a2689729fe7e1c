"""Reusable selector widgets for the comparison page."""

import logging

import streamlit as st

from core.formatting import format_size

logger = logging.getLogger(__name__)


def _log_size_change(key):
    logger.info("Account size changed to %s", format_size(st.session_state[key]))


def size_selector(sizes, default, key="selected_size"):
    """Horizontal account-size picker; returns the selected size."""
    sizes = list(sizes)
    return st.radio(
        "Account size",
        sizes,
        index=sizes.index(default),
        format_func=format_size,
        horizontal=True,
        key=key,
        on_change=_log_size_change,
        args=(key,),
        label_visibility="collapsed",
    )
