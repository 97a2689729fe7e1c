"""
Data structures for the firm catalog and the per-selection comparison rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class AccountTier:
    size: int
    fee: float
    payout_split: str
    max_drawdown: str
    profit_target: str
    evaluation_phases: int
    min_trading_days: int


@dataclass(frozen=True)
class Firm:
    name: str
    tagline: str
    website: str
    founded: str
    headquartered: str
    strengths: Tuple[str, ...] = ()
    cautions: Tuple[str, ...] = ()
    accounts: Tuple[AccountTier, ...] = ()

    def tier_for(self, size: int) -> Optional[AccountTier]:
        return next((a for a in self.accounts if a.size == size), None)


@dataclass(frozen=True)
class Catalog:
    firms: Tuple[Firm, ...]
    account_sizes: Tuple[int, ...]
    default_size: int
    as_of: str = ""


@dataclass(frozen=True)
class DisplayRow:
    """One firm at the selected size. ``None`` means the firm has no tier there."""

    firm: Firm
    account_size: int
    fee: Optional[float] = None
    fee_per_10k: Optional[float] = None
    payout_split: Optional[str] = None
    drawdown: Optional[str] = None
    profit_target: Optional[str] = None
    evaluation_phases: Optional[int] = None
    min_trading_days: Optional[int] = None

    @property
    def has_fee(self) -> bool:
        return self.fee is not None


@dataclass(frozen=True)
class Ranking:
    rows: Tuple[DisplayRow, ...] = field(default_factory=tuple)
    cheapest_fee: Optional[float] = None
    next_best_fee: Optional[float] = None

    def is_cheapest(self, row: DisplayRow) -> bool:
        return self.cheapest_fee is not None and row.fee == self.cheapest_fee

    def savings(self, row: DisplayRow) -> Optional[float]:
        """Amount saved vs. the next option; only for cheapest rows."""
        if not self.is_cheapest(row) or self.next_best_fee is None:
            return None
        return max(0.0, self.next_best_fee - row.fee)

    @property
    def offered_count(self) -> int:
        return sum(1 for r in self.rows if r.has_fee)
