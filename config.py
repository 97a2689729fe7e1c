"""
Configuration for the Prop Firm Fee Compare page
=================================================
Page settings, catalog location and logging. Environment variables override
the defaults so a deployment can point at a different catalog snapshot.
"""

import logging
import os

# ============ PAGE ============
PAGE_TITLE = "Cheapest Forex Prop Firms"
PAGE_ICON = "💱"
LAYOUT = "wide"

# ============ DATA ============
# Empty means the catalog bundled with the storage package
CATALOG_PATH = os.environ.get("PROPFIRM_CATALOG", "")

# session_state key holding the selected account size
SIZE_STATE_KEY = "selected_size"

# ============ LOGGING ============
LOG_LEVEL = os.environ.get("PROPFIRM_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once; later calls are no-ops (basicConfig)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
