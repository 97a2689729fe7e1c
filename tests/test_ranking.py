"""Tests for fee ranking, cheapest flags and savings."""

from __future__ import annotations

import pytest

from core.projector import project_rows
from core.ranking import rank_rows
from tests.conftest import make_catalog, make_firm, make_tier


def _rank(catalog, size=10000):
    return rank_rows(project_rows(catalog.firms, size))


def test_abc_scenario(abc_catalog) -> None:
    ranking = _rank(abc_catalog)
    names = [r.firm.name for r in ranking.rows]
    assert names == ["A", "B", "C"]

    a, b, c = ranking.rows
    assert ranking.cheapest_fee == 100
    assert ranking.next_best_fee == 150
    assert ranking.is_cheapest(a)
    assert not ranking.is_cheapest(b)
    assert not ranking.is_cheapest(c)
    assert ranking.savings(a) == pytest.approx(50)
    assert ranking.savings(b) is None
    assert c.fee is None and c.fee_per_10k is None


def test_absent_fees_sort_last_and_keep_catalog_order() -> None:
    catalog = make_catalog(
        make_firm("NoTier1"),
        make_firm("Pricey", make_tier(10000, 300)),
        make_firm("NoTier2", make_tier(5000, 40)),
        make_firm("Cheap", make_tier(10000, 90)),
    )
    names = [r.firm.name for r in _rank(catalog).rows]
    assert names == ["Cheap", "Pricey", "NoTier1", "NoTier2"]


def test_equal_fees_keep_catalog_order() -> None:
    catalog = make_catalog(
        make_firm("Z", make_tier(10000, 97)),
        make_firm("M", make_tier(10000, 50)),
        make_firm("A", make_tier(10000, 97)),
    )
    names = [r.firm.name for r in _rank(catalog).rows]
    assert names == ["M", "Z", "A"]


def test_tied_minimum_flags_every_tied_row() -> None:
    catalog = make_catalog(
        make_firm("A", make_tier(10000, 100)),
        make_firm("B", make_tier(10000, 100)),
        make_firm("C", make_tier(10000, 150)),
    )
    ranking = _rank(catalog)
    flagged = [r.firm.name for r in ranking.rows if ranking.is_cheapest(r)]
    assert flagged == ["A", "B"]
    # second element of the ascending fee list, which is the tied minimum
    assert ranking.next_best_fee == 100
    assert all(ranking.savings(r) == 0 for r in ranking.rows[:2])


def test_two_way_tie_with_no_other_fees() -> None:
    catalog = make_catalog(
        make_firm("A", make_tier(10000, 100)),
        make_firm("B", make_tier(10000, 100)),
    )
    ranking = _rank(catalog)
    assert ranking.cheapest_fee == 100
    assert ranking.next_best_fee == 100
    assert all(ranking.is_cheapest(r) for r in ranking.rows)


def test_single_offer_has_no_next_best_or_savings() -> None:
    catalog = make_catalog(
        make_firm("Only", make_tier(10000, 120)),
        make_firm("Other", make_tier(25000, 200)),
    )
    ranking = _rank(catalog)
    only = ranking.rows[0]
    assert ranking.is_cheapest(only)
    assert ranking.next_best_fee is None
    assert ranking.savings(only) is None


def test_size_nobody_offers(abc_catalog) -> None:
    ranking = _rank(abc_catalog, 100000)
    assert [r.firm.name for r in ranking.rows] == ["A", "B", "C"]
    assert all(r.fee is None for r in ranking.rows)
    assert ranking.cheapest_fee is None
    assert ranking.next_best_fee is None
    assert not any(ranking.is_cheapest(r) for r in ranking.rows)
    assert ranking.offered_count == 0


def test_zero_fee_is_cheapest() -> None:
    catalog = make_catalog(
        make_firm("Paid", make_tier(10000, 50)),
        make_firm("Free", make_tier(10000, 0)),
    )
    ranking = _rank(catalog)
    assert ranking.cheapest_fee == 0
    assert ranking.is_cheapest(ranking.rows[0])
    assert ranking.rows[0].firm.name == "Free"
    assert ranking.savings(ranking.rows[0]) == 50


def test_cheapest_flag_matches_minimum_fee(abc_catalog) -> None:
    for size in abc_catalog.account_sizes:
        ranking = _rank(abc_catalog, size)
        fees = [r.fee for r in ranking.rows if r.fee is not None]
        for row in ranking.rows:
            expected = bool(fees) and row.fee == min(fees)
            assert ranking.is_cheapest(row) == expected


def test_ranking_is_idempotent(abc_catalog) -> None:
    assert _rank(abc_catalog) == _rank(abc_catalog)


def test_offered_count(abc_catalog) -> None:
    assert _rank(abc_catalog).offered_count == 2
