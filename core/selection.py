"""
Selected account size plus the rows and ranking derived from it.
"""

from __future__ import annotations

from typing import List

from core.models import Catalog, DisplayRow, Ranking
from core.projector import project_rows
from core.ranking import rank_rows


class SelectionState:
    """
    Holds the currently selected size for one catalog.

    Every change recomputes ``rows`` and ``ranking`` synchronously; nothing
    is carried over from the previous selection.
    """

    def __init__(self, catalog: Catalog, size: int | None = None):
        self.catalog = catalog
        self.size = catalog.default_size
        self.rows: List[DisplayRow] = []
        self.ranking = Ranking()
        self.select(catalog.default_size if size is None else size)

    def select(self, size: int) -> Ranking:
        if size not in self.catalog.account_sizes:
            raise ValueError(
                f"Unsupported account size {size!r}; "
                f"expected one of {list(self.catalog.account_sizes)}"
            )
        self.size = size
        self.rows = project_rows(self.catalog.firms, size)
        self.ranking = rank_rows(self.rows)
        return self.ranking
