"""
Project the firm catalog onto one selected account size.
"""

from typing import Iterable, List

from core.models import DisplayRow, Firm


def fee_per_10k(fee: float, size: int) -> float:
    return fee / size * 10000


def project_rows(firms: Iterable[Firm], size: int) -> List[DisplayRow]:
    """
    Return exactly one DisplayRow per firm, in catalog order.

    Firms without a tier of ``size`` get a row carrying only the firm and the
    size; every fee and rule field stays ``None``.
    """
    rows: List[DisplayRow] = []
    for firm in firms:
        tier = firm.tier_for(size)
        if tier is None:
            rows.append(DisplayRow(firm=firm, account_size=size))
            continue

        rows.append(
            DisplayRow(
                firm=firm,
                account_size=size,
                fee=tier.fee,
                fee_per_10k=fee_per_10k(tier.fee, tier.size),
                payout_split=tier.payout_split,
                drawdown=tier.max_drawdown,
                profit_target=tier.profit_target,
                evaluation_phases=tier.evaluation_phases,
                min_trading_days=tier.min_trading_days,
            )
        )
    return rows
