"""
Read-only firm catalog loaded from a bundled JSON document.

JSON layout:
  as_of            snapshot label shown in the hero badge
  account_sizes    selectable sizes, in display order
  default_size     initial selection (must be one of account_sizes)
  firms[]          name, tagline, website, founded, headquartered,
                   strengths[], cautions[], accounts[]
  firms[].accounts size, fee, payout_split, max_drawdown, profit_target,
                   evaluation_phases, min_trading_days
"""

import json
import logging
from pathlib import Path

from core.models import AccountTier, Catalog, Firm

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("firms.json")


class CatalogError(ValueError):
    """The catalog document is malformed or breaks a catalog invariant."""


def _require(obj, key, where):
    if key not in obj:
        raise CatalogError(f"{where}: missing required key '{key}'")
    return obj[key]


def _as_int(value, what):
    """Whole numbers only: rejects bools, strings and floats with a fraction."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(f"{what} must be an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise CatalogError(f"{what} must be an integer, got {value!r}")
    return int(value)


def _text_list(raw, key, where):
    items = raw.get(key, [])
    if not isinstance(items, list):
        raise CatalogError(f"{where}: {key} must be a list, got {type(items).__name__}")
    return tuple(str(i) for i in items)


# ── Parsing ───────────────────────────────────────────────────────────────────

def _parse_tier(raw, firm_name):
    where = f"{firm_name} tier"
    size = _as_int(_require(raw, "size", where), f"{where}: size")
    where = f"{firm_name} {size} tier"

    fee = _require(raw, "fee", where)
    if isinstance(fee, bool) or not isinstance(fee, (int, float)):
        raise CatalogError(f"{where}: fee must be a number, got {fee!r}")
    fee = float(fee)
    if fee < 0:
        raise CatalogError(f"{where}: fee must be non-negative, got {fee}")

    phases = _as_int(_require(raw, "evaluation_phases", where), f"{where}: evaluation_phases")
    if phases < 1:
        raise CatalogError(f"{where}: evaluation_phases must be positive, got {phases}")

    min_days = _as_int(_require(raw, "min_trading_days", where), f"{where}: min_trading_days")
    if min_days < 0:
        raise CatalogError(f"{where}: min_trading_days must be non-negative, got {min_days}")

    return AccountTier(
        size=size,
        fee=fee,
        payout_split=str(_require(raw, "payout_split", where)),
        max_drawdown=str(_require(raw, "max_drawdown", where)),
        profit_target=str(_require(raw, "profit_target", where)),
        evaluation_phases=phases,
        min_trading_days=min_days,
    )


def _parse_firm(raw):
    name = str(_require(raw, "name", "firm"))
    tiers = tuple(_parse_tier(t, name) for t in _require(raw, "accounts", name))

    seen = set()
    for t in tiers:
        if t.size in seen:
            raise CatalogError(f"{name}: duplicate account size {t.size}")
        seen.add(t.size)

    return Firm(
        name=name,
        tagline=str(raw.get("tagline", "")),
        website=str(raw.get("website", "")),
        founded=str(raw.get("founded", "")),
        headquartered=str(raw.get("headquartered", "")),
        strengths=_text_list(raw, "strengths", name),
        cautions=_text_list(raw, "cautions", name),
        accounts=tiers,
    )


def parse_catalog(data: dict) -> Catalog:
    """Build a Catalog from an already-decoded JSON document."""
    firms = tuple(_parse_firm(f) for f in _require(data, "firms", "catalog"))

    names = [f.name for f in firms]
    dupes = sorted(set(n for n in names if names.count(n) > 1))
    if dupes:
        raise CatalogError(f"catalog: duplicate firm name(s) {dupes}")

    sizes = tuple(
        _as_int(s, "catalog: account_sizes entry")
        for s in _require(data, "account_sizes", "catalog")
    )
    if not sizes:
        raise CatalogError("catalog: account_sizes is empty")

    default_size = _as_int(data.get("default_size", sizes[0]), "catalog: default_size")
    if default_size not in sizes:
        raise CatalogError(
            f"catalog: default_size {default_size} is not one of {list(sizes)}"
        )

    return Catalog(
        firms=firms,
        account_sizes=sizes,
        default_size=default_size,
        as_of=str(data.get("as_of", "")),
    )


# ── Loading ───────────────────────────────────────────────────────────────────

def load_catalog(path=None) -> Catalog:
    path = Path(path) if path else DEFAULT_CATALOG_PATH
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogError(f"{path}: invalid JSON ({e})") from e

    catalog = parse_catalog(data)
    logger.info(
        "Loaded %d firms (%d sizes) from %s",
        len(catalog.firms), len(catalog.account_sizes), path,
    )
    return catalog
