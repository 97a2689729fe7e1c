"""Display formatters. Absent values render as a placeholder, never as $0."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

PLACEHOLDER = "—"


def _round_half_up(value: float, places: int) -> Decimal:
    # halves round away from zero, as the browser's toFixed does
    return Decimal(str(value)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def format_currency(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    text = f"{_round_half_up(value, 3):,.3f}".rstrip("0").rstrip(".")
    return f"${text}"


def format_fee_per_10k(value: Optional[float]) -> str:
    if value is None:
        return PLACEHOLDER
    return f"${_round_half_up(value, 2):.2f}"


def format_size(size: int) -> str:
    return f"${size:,}"


def format_text(value: Optional[str]) -> str:
    return PLACEHOLDER if value is None else value


def format_days(days: Optional[int]) -> str:
    return PLACEHOLDER if days is None else f"{days} days"


def format_phases(phases: Optional[int]) -> str:
    return PLACEHOLDER if phases is None else f"{phases}-step"


def format_savings(amount: Optional[float]) -> Optional[str]:
    if amount is None:
        return None
    return f"Save ${_round_half_up(amount, 0):.0f} vs. next option"
