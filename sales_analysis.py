"""
Seller performance aggregation: revenue, profit, bonus and top products per seller.

Pipeline: validate -> index -> accumulate -> rank -> score -> project.
Revenue and bonus formulas are injected by the caller (see strategies.py).
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10
DATASET_COLLECTIONS = ("sellers", "products", "purchase_records", "customers")

RevenueFn = Callable[[Mapping[str, Any]], float]
BonusFn = Callable[[int, int, Any], float]


class SalesAnalysisError(Exception):
    """Base class for errors raised by analyze_sales_data."""


class InvalidInput(SalesAnalysisError, ValueError):
    """Dataset missing, a collection is not a sequence, or there are no sellers."""


class UnknownReference(InvalidInput):
    """A purchase record or line item points at a seller or sku that does not exist."""

    def __init__(self, kind: str, key: Any):
        self.kind = kind
        self.key = key
        super().__init__(f"Unknown {kind} referenced by purchase records: {key!r}")


class MissingStrategy(SalesAnalysisError, ValueError):
    """Revenue or bonus strategy not supplied."""


class InvalidStrategyType(SalesAnalysisError, TypeError):
    """A supplied strategy is not callable."""


def round_money(value: float) -> float:
    # Exact binary value of the float, ties away from zero: 180.005 -> 180.0, 0.125 -> 0.13
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass
class SellerStat:
    """Mutable per-seller accumulator; lives for one analyze_sales_data call."""
    id: Any
    name: str
    revenue: float = 0.0
    profit: float = 0.0
    sales_count: int = 0
    # sku -> cumulative quantity, in order of first sale
    products_sold: dict[str, int] = field(default_factory=dict)
    bonus: float = 0.0
    top_products: list[dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class SellerReport:
    seller_id: Any
    name: str
    revenue: float
    profit: float
    sales_count: int
    top_products: tuple[dict[str, Any], ...]
    bonus: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "seller_id": self.seller_id,
            "name": self.name,
            "revenue": self.revenue,
            "profit": self.profit,
            "sales_count": self.sales_count,
            "top_products": [dict(p) for p in self.top_products],
            "bonus": self.bonus,
        }


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _get_collection(data: Any, name: str) -> Any:
    if isinstance(data, Mapping):
        return data.get(name)
    return getattr(data, name, None)


def _validate_dataset(data: Any) -> dict[str, Any]:
    if data is None:
        raise InvalidInput("Dataset is missing")
    collections = {name: _get_collection(data, name) for name in DATASET_COLLECTIONS}
    for name, value in collections.items():
        if not _is_sequence(value):
            raise InvalidInput(f"Dataset field '{name}' must be a list, got {type(value).__name__}")
    if len(collections["sellers"]) == 0:
        raise InvalidInput("Dataset contains no sellers")
    return collections


def _validate_strategies(calculate_revenue: Any, calculate_bonus: Any) -> None:
    if calculate_revenue is None or calculate_bonus is None:
        raise MissingStrategy("Both calculate_revenue and calculate_bonus must be supplied")
    for name, fn in (("calculate_revenue", calculate_revenue), ("calculate_bonus", calculate_bonus)):
        if not callable(fn):
            raise InvalidStrategyType(f"{name} must be callable, got {type(fn).__name__}")


def _build_seller_stats(sellers: list[Mapping[str, Any]]) -> list[SellerStat]:
    return [
        SellerStat(id=s["id"], name=f"{s['first_name']} {s['last_name']}")
        for s in sellers
    ]


def _accumulate(
    records: list[Mapping[str, Any]],
    seller_index: dict[Any, SellerStat],
    product_index: dict[str, Mapping[str, Any]],
    calculate_revenue: RevenueFn,
) -> None:
    for record in records:
        seller = seller_index.get(record["seller_id"])
        if seller is None:
            raise UnknownReference("seller", record["seller_id"])
        seller.sales_count += 1

        items = record.get("items")
        if not items:
            continue

        for item in items:
            sku = item["sku"]
            product = product_index.get(sku)
            if product is None:
                raise UnknownReference("sku", sku)
            cost_price = product["purchase_price"] * item["quantity"]
            revenue = calculate_revenue(item)
            seller.revenue += revenue
            seller.profit += revenue - cost_price
            seller.products_sold[sku] = seller.products_sold.get(sku, 0) + item["quantity"]


def _top_products(products_sold: dict[str, int]) -> list[dict[str, Any]]:
    ranked = sorted(products_sold.items(), key=lambda kv: kv[1], reverse=True)
    return [{"sku": sku, "quantity": qty} for sku, qty in ranked[:TOP_PRODUCTS_LIMIT]]


def analyze_sales_data(
    data: Any,
    calculate_revenue: RevenueFn | None = None,
    calculate_bonus: BonusFn | None = None,
) -> list[SellerReport]:
    """
    Compute per-seller revenue, profit, sales count, bonus and top products.

    Returns one SellerReport per input seller, ordered by profit descending.
    Equal-profit sellers keep their input order; equal-quantity products keep
    the order in which the seller first sold them.

    Raises InvalidInput, MissingStrategy or InvalidStrategyType before any
    accumulation, and UnknownReference (an InvalidInput) for dangling ids.
    Exceptions raised by the strategies propagate unchanged.
    """
    collections = _validate_dataset(data)
    _validate_strategies(calculate_revenue, calculate_bonus)

    stats = _build_seller_stats(collections["sellers"])
    seller_index = {stat.id: stat for stat in stats}
    product_index = {p["sku"]: p for p in collections["products"]}
    logger.debug(f"Indexed {len(seller_index)} sellers and {len(product_index)} products")

    _accumulate(collections["purchase_records"], seller_index, product_index, calculate_revenue)
    logger.debug(f"Folded {len(collections['purchase_records'])} purchase records")

    stats.sort(key=lambda s: s.profit, reverse=True)

    total = len(stats)
    for rank, stat in enumerate(stats):
        stat.bonus = calculate_bonus(rank, total, stat)
        stat.top_products = _top_products(stat.products_sold)

    logger.info(f"Ranked {total} sellers by profit")
    return [
        SellerReport(
            seller_id=stat.id,
            name=stat.name,
            revenue=round_money(stat.revenue),
            profit=round_money(stat.profit),
            sales_count=stat.sales_count,
            top_products=tuple(stat.top_products),
            bonus=round_money(stat.bonus),
        )
        for stat in stats
    ]
