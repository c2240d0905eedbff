"""Timing badge for the next planned intake."""
from typing import Any, Dict, Optional

from gidiary.domain.NextIntake import NextIntake
from gidiary.utilities.constants import COLOR_NEUTRAL, COLOR_SUCCESS, COLOR_WARNING, READY_WINDOW_MINUTES

STATE_NONE = "none"
STATE_READY = "ready"
STATE_UPCOMING = "upcoming"
STATE_OVERDUE = "overdue"


def describe_next_intake(next_intake: Optional[NextIntake], elapsed_minutes: int) -> Dict[str, Any]:
    if next_intake is None:
        return {
            'state': STATE_NONE,
            'label': "No more planned intakes",
            'color': COLOR_SUCCESS,
            'minutes_until': None,
            'intake': None,
        }

    minutes_until = next_intake.timing_minute - elapsed_minutes
    if abs(minutes_until) <= READY_WINDOW_MINUTES:
        state, label, color = STATE_READY, "READY NOW", COLOR_SUCCESS
    elif minutes_until > 0:
        state, label, color = STATE_UPCOMING, f"in {minutes_until} min", COLOR_NEUTRAL
    else:
        state, label, color = STATE_OVERDUE, f"{abs(minutes_until)} min ago", COLOR_WARNING
    return {
        'state': state,
        'label': label,
        'color': color,
        'minutes_until': minutes_until,
        'intake': next_intake.to_dict(),
    }


__all__ = ["describe_next_intake", "STATE_NONE", "STATE_READY", "STATE_UPCOMING", "STATE_OVERDUE"]
