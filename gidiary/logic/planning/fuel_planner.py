"""Greedy fuel planner.

Products are taken in order of carbs per serving (highest first) and each is
used as many times as needed to cover what is left of the target, capped at
a per-product maximum. Plans between 90% and 110% of the target are a good
match. While smaller products are still available a product is not allowed
to push the plan past 110%; the last product may, since overshooting is
preferred to undershooting.
"""
import logging
import math
from typing import Iterable, List, Optional

from gidiary.domain.FuelProduct import FuelProduct
from gidiary.domain.GeneratedPlan import GeneratedPlan, PlannedProduct
from gidiary.utilities.calculations import round_half_up
from gidiary.utilities.constants import (
    ACCEPTABLE_MATCH_LOWER,
    ACCEPTABLE_MATCH_UPPER,
    MAX_QUANTITY_PER_PRODUCT,
)
from gidiary.utilities.formatting import number_text

logger = logging.getLogger(__name__)

TARGET_ERROR = "Target carbs must be greater than 0"


def _percentage(total: float, target: float) -> int:
    if target <= 0:
        return 0
    return round_half_up(total / target * 100)


def generate_timing(duration: float, quantity: int) -> List[int]:
    """Spread ``quantity`` intakes evenly over ``duration`` minutes.

    75 min, 3 items -> [19, 38, 56] (interval 18.75, rounded half up).
    """
    if quantity <= 0:
        return []
    interval = duration / (quantity + 1)
    return [round_half_up((i + 1) * interval) for i in range(quantity)]


def generate_fuel_plan(target_carbs: float, duration_minutes: float,
                       available_products: Iterable[FuelProduct],
                       max_quantity: Optional[int] = None) -> GeneratedPlan:
    """Build a plan covering ``target_carbs`` grams over ``duration_minutes``."""
    if target_carbs <= 0:
        logger.warning("Fuel plan requested with non-positive target: %s", target_carbs)
        return GeneratedPlan(target_carbs=target_carbs, error=TARGET_ERROR)

    limit = max_quantity or MAX_QUANTITY_PER_PRODUCT
    products = [p for p in available_products if p.carbs_per_serving > 0]
    # sorted() is stable: equal carb products keep catalog order
    products = sorted(products, key=lambda p: p.carbs_per_serving, reverse=True)

    items: List[PlannedProduct] = []
    remaining = target_carbs
    ceiling = target_carbs * ACCEPTABLE_MATCH_UPPER
    capped = False
    for index, product in enumerate(products):
        if remaining <= 0:
            break
        needed = math.ceil(remaining / product.carbs_per_serving)
        quantity = min(needed, limit)
        if quantity < needed:
            capped = True
        has_more = index < len(products) - 1
        planned = target_carbs - remaining
        if has_more and planned + quantity * product.carbs_per_serving > ceiling:
            # leave the rest to smaller products instead of overshooting
            quantity = min(int(remaining // product.carbs_per_serving), limit)
            if quantity == 0:
                continue
        carbs_total = product.carbs_per_serving * quantity
        items.append(PlannedProduct(
            fuel_product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            carbs_per_serving=product.carbs_per_serving,
            timing_minutes=generate_timing(duration_minutes, quantity),
            carbs_total=carbs_total,
        ))
        remaining -= carbs_total

    total = sum(item.carbs_total for item in items)
    plan = GeneratedPlan(
        items=items,
        total_carbs=total,
        target_carbs=target_carbs,
        percentage=_percentage(total, target_carbs),
    )
    if total < target_carbs * ACCEPTABLE_MATCH_LOWER:
        warning = (f"Insufficient products ({number_text(total)}/{number_text(target_carbs)}g). "
                   "Add more products to your pantry.")
        if capped:
            warning = f"Max quantity reached ({limit} per product). " + warning
        plan.warning = warning
        logger.info("Fuel plan below target: %s", warning)
    logger.debug("Generated %s", plan)
    return plan


def recalculate_plan(items: List[PlannedProduct], target_carbs: float) -> GeneratedPlan:
    """Recompute totals after the athlete edited quantities by hand."""
    total = sum(item.carbs_total for item in items)
    return GeneratedPlan(
        items=items,
        total_carbs=total,
        target_carbs=target_carbs,
        percentage=_percentage(total, target_carbs),
    )


__all__ = ["generate_fuel_plan", "generate_timing", "recalculate_plan", "TARGET_ERROR"]
