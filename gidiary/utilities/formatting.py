"""Display strings for durations, grams and carb rates."""
from typing import Union

Number = Union[int, float]


def number_text(value: Number) -> str:
    """Render 30.0 as '30' and keep real fractions ('30.5')."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_duration(seconds: int) -> str:
    """3661 -> '1:01:01'. Hours are not padded."""
    seconds = int(seconds)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60
    return f"{hours}:{minutes:02d}:{secs:02d}"


def format_carbs(grams: Number) -> str:
    return f"{number_text(grams)}g"


def format_carb_rate(g_per_hour: Number) -> str:
    return f"{number_text(g_per_hour)}g/h"


def format_duration_minutes(minutes: int) -> str:
    """90 -> '1h 30min', 120 -> '2h', 45 -> '45min', 0 -> '0min'."""
    hours, mins = divmod(int(minutes), 60)
    if hours == 0:
        return f"{mins}min"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}min"


__all__ = ["number_text", "format_duration", "format_carbs", "format_carb_rate", "format_duration_minutes"]
