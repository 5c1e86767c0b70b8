"""
Default revenue and bonus policies for analyze_sales_data.

Both are plain functions so callers can swap either one without touching the
aggregator. Bonus multipliers live in BONUS_TIER_DEFINITIONS and are read from
there by the bonus function; tier conditions are checked in table order.
"""

from collections.abc import Mapping
from typing import Any


# -----------------------------------------------------------------------------
# BONUS TIERS — evaluated top to bottom, first match wins
# -----------------------------------------------------------------------------
# With a single seller, rank 0 is both "top" and "last"; "top" is checked first.
# -----------------------------------------------------------------------------

BONUS_TIER_DEFINITIONS = {
    "top": {
        "id": "top",
        "condition": "rank == 0",
        "multiplier": 0.15,
        "why": "Highest-profit seller of the period.",
    },
    "runner_up": {
        "id": "runner_up",
        "condition": "rank in (1, 2)",
        "multiplier": 0.10,
        "why": "Second and third places by profit.",
    },
    "last": {
        "id": "last",
        "condition": "rank == total - 1",
        "multiplier": 0.0,
        "why": "Lowest-profit seller receives no bonus.",
    },
    "standard": {
        "id": "standard",
        "condition": "any other rank",
        "multiplier": 0.05,
        "why": "Everyone between the podium and last place.",
    },
}


def calculate_simple_revenue(item: Mapping[str, Any], _product: Mapping[str, Any] | None = None) -> float:
    """Gross revenue of one line item after its percentage discount. Cost is not subtracted here."""
    return item["sale_price"] * item["quantity"] * (1 - item["discount"] / 100)


def get_bonus_tier(rank: int, total: int) -> str:
    if rank == 0:
        return "top"
    if rank in (1, 2):
        return "runner_up"
    if rank == total - 1:
        return "last"
    return "standard"


def _profit_of(seller: Any) -> float:
    if isinstance(seller, Mapping):
        return seller["profit"]
    return seller.profit


def calculate_bonus_by_profit(rank: int, total: int, seller: Any) -> float:
    """
    Bonus for the seller at zero-based `rank` out of `total`, as a share of its profit.
    `seller` is a SellerStat or any mapping with a "profit" key.
    """
    tier = get_bonus_tier(rank, total)
    multiplier = BONUS_TIER_DEFINITIONS[tier]["multiplier"]
    if multiplier == 0:
        return 0
    return _profit_of(seller) * multiplier


def get_bonus_tier_definitions() -> dict[str, dict[str, Any]]:
    return BONUS_TIER_DEFINITIONS


DEFAULT_STRATEGIES = (calculate_simple_revenue, calculate_bonus_by_profit)
