"""Pick the intake the athlete should take next during a live session."""
from typing import Iterable, Optional

from gidiary.domain.FuelPlanItem import FuelPlan
from gidiary.domain.NextIntake import NextIntake
from gidiary.utilities.constants import READY_WINDOW_MINUTES


def find_next_intake(plan: FuelPlan, elapsed_minutes: int,
                     logged_timings: Iterable[int] = ()) -> Optional[NextIntake]:
    """First unlogged intake that is still ahead, or at most the ready window behind.

    An intake counts as logged when an intake event carries its planned minute.
    Returns None once nothing is left to take.
    """
    logged = set(logged_timings)
    earliest = elapsed_minutes - READY_WINDOW_MINUTES
    for item in sorted(plan, key=lambda i: i.timing_minutes):
        if item.timing_minutes in logged or item.timing_minutes < earliest:
            continue
        return NextIntake(
            product_name=item.product_name,
            timing_minute=item.timing_minutes,
            carbs_per_serving=item.carbs_per_serving,
            fuel_product_id=item.fuel_product_id,
        )
    return None


__all__ = ["find_next_intake"]
