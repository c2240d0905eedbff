"""FuelPlanItem domain entity: one planned intake (product, servings, minute offset, carbs)."""
from typing import List


class FuelPlanItem:
    def __init__(self, fuel_product_id: int = 0, product_name: str = "", quantity: float = 1,
                 timing_minutes: int = 0, carbs_total: float = 0):
        self.fuel_product_id = fuel_product_id
        self.product_name = product_name
        self.quantity = quantity
        # offset from session start, not a duration
        self.timing_minutes = timing_minutes
        self.carbs_total = carbs_total

    @property
    def carbs_per_serving(self):
        if not self.quantity:
            return self.carbs_total
        per_serving = self.carbs_total / self.quantity
        return int(per_serving) if float(per_serving).is_integer() else per_serving

    def __str__(self) -> str:
        return f"{self.product_name} x{self.quantity} @ {self.timing_minutes} min - {self.carbs_total}g"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, FuelPlanItem):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    @staticmethod
    def from_dict(data):
        '''Creates a FuelPlanItem from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"fuel_product_id", "product_name", "quantity", "timing_minutes", "carbs_total"}
        filtered = {k: v for k, v in d.items() if k in allowed}
        return FuelPlanItem(**filtered)

    def to_dict(self):
        return {
            "fuel_product_id": self.fuel_product_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "timing_minutes": self.timing_minutes,
            "carbs_total": self.carbs_total,
        }


# Ordered in planning order; timings are neither unique nor sorted.
FuelPlan = List[FuelPlanItem]
