"""Carbohydrate arithmetic over fuel plans.

The three functions are rate/time conversions of each other:
calculate_carb_rate(calculate_required_carbs(d, r), d) == r for any d > 0.
Inputs are not validated; degenerate durations give degenerate numbers.
"""
import math
from typing import Any, Iterable


def _carbs_of(item: Any):
    if isinstance(item, dict):
        return item.get('carbs_total', 0)
    return item.carbs_total


def round_half_up(value: float) -> int:
    """Round halves upwards: 22.5 -> 23, where round() gives 22."""
    return int(math.floor(value + 0.5))


def calculate_total_carbs(plan: Iterable[Any]):
    """Sum ``carbs_total`` over plan items (objects or dicts). Empty plan -> 0."""
    return sum((_carbs_of(item) for item in plan), 0)


def calculate_carb_rate(total_carbs: float, duration_minutes: float) -> float:
    """Grams per hour for ``total_carbs`` eaten over ``duration_minutes``."""
    if duration_minutes == 0:
        # same non-finite result a float division would produce
        if total_carbs == 0 or math.isnan(total_carbs):
            return math.nan
        return math.copysign(math.inf, total_carbs)
    return (total_carbs / duration_minutes) * 60


def calculate_required_carbs(duration_minutes: float, target_g_per_hour: float) -> float:
    """Total grams needed for ``duration_minutes`` at ``target_g_per_hour``."""
    return (duration_minutes / 60) * target_g_per_hour


__all__ = ["round_half_up", "calculate_total_carbs", "calculate_carb_rate", "calculate_required_carbs"]
