from __future__ import annotations

import pytest

from core.models import AccountTier, Catalog, Firm

SIZES = (5000, 10000, 25000, 50000, 100000)


def make_tier(size: int, fee: float, **overrides) -> AccountTier:
    fields = dict(
        size=size,
        fee=fee,
        payout_split="80%",
        max_drawdown="10% max / 5% daily",
        profit_target="8% / 5%",
        evaluation_phases=2,
        min_trading_days=3,
    )
    fields.update(overrides)
    return AccountTier(**fields)


def make_firm(name: str, *tiers: AccountTier) -> Firm:
    return Firm(
        name=name,
        tagline=f"{name} tagline",
        website=f"https://{name.lower()}.example",
        founded="2020",
        headquartered="London, UK",
        strengths=("cheap",),
        cautions=("new",),
        accounts=tuple(tiers),
    )


def make_catalog(*firms: Firm, default_size: int = 10000) -> Catalog:
    return Catalog(firms=tuple(firms), account_sizes=SIZES, default_size=default_size)


@pytest.fixture
def abc_catalog() -> Catalog:
    """A(100) and B(150) at 10k, C has no 10k tier."""
    return make_catalog(
        make_firm("A", make_tier(10000, 100), make_tier(25000, 200)),
        make_firm("B", make_tier(10000, 150)),
        make_firm("C", make_tier(50000, 300)),
    )
