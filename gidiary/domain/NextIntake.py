"""NextIntake: read-only view of the upcoming planned intake during a live session."""
from typing import NamedTuple


class NextIntake(NamedTuple):
    product_name: str
    timing_minute: int
    carbs_per_serving: float
    fuel_product_id: int

    def to_dict(self):
        return self._asdict()
