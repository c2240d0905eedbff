"""Recommendation domain entity: one insight derived from logged sessions."""
from typing import Optional

INFO = "info"
PRODUCT_SUCCESS = "product_success"
PRODUCT_WARNING = "product_warning"
OPTIMAL_RATE = "optimal_rate"
TIMING_PATTERN = "timing_pattern"


class Recommendation:
    def __init__(self, type: str, title: str, message: str, icon: str, color: str,
                 details: Optional[str] = None):
        self.type = type
        self.title = title
        self.message = message
        self.details = details
        self.icon = icon
        self.color = color

    def __str__(self) -> str:
        return f"[{self.type}] {self.title}: {self.message}"

    __repr__ = __str__

    def to_dict(self):
        return {
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "details": self.details,
            "icon": self.icon,
            "color": self.color,
        }
