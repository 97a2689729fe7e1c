"""
Rank projected rows by upfront fee and find the cheapest / next-best fees.
"""

from typing import List, Sequence

from core.models import DisplayRow, Ranking


def _sort_key(row: DisplayRow):
    # absent fees last; sorted() is stable so ties keep catalog order
    return (row.fee is None, row.fee if row.fee is not None else 0.0)


def rank_rows(rows: Sequence[DisplayRow]) -> Ranking:
    ordered = sorted(rows, key=_sort_key)

    fees: List[float] = sorted(r.fee for r in rows if r.fee is not None)
    cheapest = fees[0] if fees else None
    # index 1, not the next distinct value: tied minimums give zero savings
    next_best = fees[1] if len(fees) > 1 else None

    return Ranking(
        rows=tuple(ordered),
        cheapest_fee=cheapest,
        next_best_fee=next_best,
    )
