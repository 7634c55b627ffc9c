# shop_assist/services/planner.py

"""Cheapest-first affordability planning against a budget."""

import logging
import math
from dataclasses import dataclass, field

from shop_assist.models.product import Product

logger = logging.getLogger("shop_assist.planner")


@dataclass
class AffordabilityPlan:
    """Greedy cheapest-first selection that fits inside ``budget``.

    Advisory only: whether the whole list is affordable is decided by
    :func:`catalog_total`, not by this subset.
    """

    budget: float
    affordable_items: list[Product] = field(default_factory=list)
    total_affordable: float = 0.0
    remaining_budget: float = 0.0


def to_cents(amount: float) -> float:
    """Round a money amount to whole cents (``-0.0`` becomes ``0.0``)."""
    return round(amount, 2) + 0.0


def _reject_nan(catalog: list[Product], budget: float) -> None:
    if math.isnan(budget):
        raise ValueError("Budget must be a number, got NaN")
    for product in catalog:
        if math.isnan(product.price):
            raise ValueError(f"Price of {product.name!r} is NaN")


def plan_purchases(catalog: list[Product], budget: float) -> AffordabilityPlan:
    """Pick items cheapest first while the running total stays within budget.

    The sort is stable, so equally priced items keep their entry order.
    Totals are compared at cent precision. The input list is not modified.
    """
    _reject_nan(catalog, budget)

    plan = AffordabilityPlan(budget=budget, remaining_budget=to_cents(budget))
    for product in sorted(catalog, key=lambda p: p.price):
        candidate = to_cents(plan.total_affordable + product.price)
        if to_cents(candidate - budget) <= 0:
            plan.affordable_items.append(product)
            plan.total_affordable = candidate
            plan.remaining_budget = to_cents(budget - candidate)

    logger.info(
        "Planned %d of %d items: total=%.2f remaining=%.2f budget=%.2f",
        len(plan.affordable_items),
        len(catalog),
        plan.total_affordable,
        plan.remaining_budget,
        budget,
    )
    return plan


def catalog_total(catalog: list[Product]) -> float:
    """Cost of every product on the list, in cents precision."""
    return to_cents(math.fsum(p.price for p in catalog))


def shortfall(catalog: list[Product], budget: float) -> float:
    """Amount by which the full list exceeds *budget* (0 when it fits)."""
    return max(0.0, to_cents(catalog_total(catalog) - budget))
