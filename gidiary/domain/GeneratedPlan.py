"""GeneratedPlan domain entity: planner output, product lines plus totals against a carb target."""
from typing import List, Optional

from gidiary.domain.FuelPlanItem import FuelPlan, FuelPlanItem


class PlannedProduct:
    """One product in a generated plan, with one timing per serving."""

    def __init__(self, fuel_product_id: int = 0, product_name: str = "", quantity: int = 0,
                 carbs_per_serving: float = 0, timing_minutes: Optional[List[int]] = None,
                 carbs_total: Optional[float] = None):
        self.fuel_product_id = fuel_product_id
        self.product_name = product_name
        self.quantity = quantity
        self.carbs_per_serving = carbs_per_serving
        self.timing_minutes = timing_minutes[:] if timing_minutes else []
        self.carbs_total = carbs_per_serving * quantity if carbs_total is None else carbs_total

    def __str__(self) -> str:
        timings = ", ".join(str(t) for t in self.timing_minutes)
        return f"{self.product_name} x{self.quantity} ({self.carbs_total}g) at [{timings}] min"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"fuel_product_id", "product_name", "quantity", "carbs_per_serving",
                   "timing_minutes", "carbs_total"}
        return PlannedProduct(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "fuel_product_id": self.fuel_product_id,
            "product_name": self.product_name,
            "quantity": self.quantity,
            "carbs_per_serving": self.carbs_per_serving,
            "timing_minutes": list(self.timing_minutes),
            "carbs_total": self.carbs_total,
        }


class GeneratedPlan:
    def __init__(self, items: Optional[List[PlannedProduct]] = None, total_carbs: float = 0,
                 target_carbs: float = 0, percentage: int = 0,
                 warning: Optional[str] = None, error: Optional[str] = None):
        self.items = items[:] if items else []
        self.total_carbs = total_carbs
        self.target_carbs = target_carbs
        self.percentage = percentage
        self.warning = warning
        self.error = error

    @property
    def match_percentage(self) -> int:
        return self.percentage

    @property
    def ok(self) -> bool:
        return self.error is None

    def timeline(self) -> FuelPlan:
        """Expand product lines into single-serving intakes ordered by minute."""
        intakes: FuelPlan = []
        for item in self.items:
            for minute in item.timing_minutes:
                intakes.append(FuelPlanItem(
                    fuel_product_id=item.fuel_product_id,
                    product_name=item.product_name,
                    quantity=1,
                    timing_minutes=minute,
                    carbs_total=item.carbs_per_serving,
                ))
        # sorted() is stable, so ties keep product order
        return sorted(intakes, key=lambda i: i.timing_minutes)

    def __str__(self) -> str:
        return f"Plan: {self.total_carbs}g of {self.target_carbs}g ({self.percentage}%) - {len(self.items)} products"

    __repr__ = __str__

    def to_dict(self):
        return {
            "items": [item.to_dict() for item in self.items],
            "total_carbs": self.total_carbs,
            "target_carbs": self.target_carbs,
            "percentage": self.percentage,
            "warning": self.warning,
            "error": self.error,
        }
