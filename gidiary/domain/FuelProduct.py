"""FuelProduct domain entity: a gel, drink, bar or food from the user's catalog."""
from typing import Optional


class FuelProduct:
    def __init__(self, id: int = 0, name: str = "", product_type: str = "gel",
                 carbs_per_serving: float = 0, serving_size: Optional[str] = None,
                 notes: Optional[str] = None, user_id: Optional[int] = None,
                 created_at: Optional[str] = None, deleted_at: Optional[str] = None):
        self.id = id
        self.name = name
        self.product_type = product_type
        self.carbs_per_serving = carbs_per_serving
        self.serving_size = serving_size
        self.notes = notes
        self.user_id = user_id
        self.created_at = created_at
        self.deleted_at = deleted_at

    @property
    def is_deleted(self) -> bool:
        return bool(self.deleted_at)

    def __str__(self) -> str:
        parts = [f"{self.name} ({self.product_type}) - {self.carbs_per_serving}g/serving"]
        if self.serving_size:
            parts.append(f"Serving: {self.serving_size}")
        return " - ".join(parts)

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "name", "product_type", "carbs_per_serving", "serving_size",
                   "notes", "user_id", "created_at", "deleted_at"}
        return FuelProduct(**{k: v for k, v in d.items() if k in allowed})

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "product_type": self.product_type,
            "carbs_per_serving": self.carbs_per_serving,
            "serving_size": self.serving_size,
            "notes": self.notes,
            "user_id": self.user_id,
            "created_at": self.created_at,
            "deleted_at": self.deleted_at,
        }
