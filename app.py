# app.py
# Streamlit page comparing forex prop firm evaluation fees
# - Pick an account size from the catalog's fixed size set
# - Every firm is projected onto that size (missing tiers stay empty, not $0)
# - Rows are ranked by upfront fee, cheapest firm(s) flagged with savings vs. next option
# - Scorecards, due diligence checklist and disclaimer below the table

import logging

import streamlit as st

import config
from storage.store import load_catalog
from views import compare, guide, home

config.configure_logging()
logger = logging.getLogger(__name__)


# ----------------------------
# UI THEME
# ----------------------------
st.set_page_config(page_title=config.PAGE_TITLE, page_icon=config.PAGE_ICON, layout=config.LAYOUT)

CSS = """
<style>
:root {
  --border: rgba(148,163,184,0.35);
  --accent: #2563eb;
  --success: #059669;
  --danger: #dc2626;
  --text-secondary: #64748b;
}
.block-container { padding-top: 1.2rem; padding-bottom: 2rem; }
.hero {
  border: 1px solid var(--border);
  background: linear-gradient(135deg, rgba(37,99,235,0.14), rgba(5,150,105,0.10));
  border-radius: 18px;
  padding: 20px 22px 16px 22px;
  margin-bottom: 1.5rem;
}
.hero h1 { font-size: 30px; font-weight: 800; margin: 8px 0; }
.badge {
  display:inline-block; padding: 4px 10px; border-radius: 999px;
  border: 1px solid var(--border); background: rgba(255,255,255,0.06);
  font-size: 12px; font-weight: 600;
}
.card {
  border: 1px dashed var(--border);
  border-radius: 14px;
  padding: 14px 16px;
  margin-bottom: 12px;
}
.scorecard-head { display:flex; justify-content:space-between; gap: 10px; }
.small { font-size: 12px; opacity: 0.85; }
.muted { color: var(--text-secondary); }
.note-list { margin: 4px 0 10px 0; padding-left: 18px; }
.strength { color: var(--success); font-weight: 500; }
.caution { color: var(--danger); font-weight: 500; }
.legend { display:flex; gap: 16px; font-size: 13px; margin-bottom: 10px; }
.legend-dot { display:inline-block; width: 10px; height: 10px; border-radius: 50%; margin-right: 6px; }
</style>
"""
st.markdown(CSS, unsafe_allow_html=True)


@st.cache_data(show_spinner=False)
def get_catalog(path: str):
    return load_catalog(path or None)


try:
    catalog = get_catalog(config.CATALOG_PATH)
except (OSError, ValueError) as e:
    logger.exception("Failed to load firm catalog")
    st.error(f"Could not load the firm catalog: {e}")
    st.stop()


# ----------------------------
# Page
# ----------------------------
home.render_hero(catalog.as_of)
compare.render(catalog)
st.divider()
guide.render(catalog)
