"""Program progression shown above the session list."""
from typing import Any, Dict, Optional

from gidiary.utilities.calculations import round_half_up
from gidiary.utilities.constants import COLOR_PRIMARY, COLOR_SUCCESS


def describe_progress(completed: int, total: int, current_week: Optional[int] = None,
                      total_weeks: Optional[int] = None) -> Dict[str, Any]:
    """Fraction, percentage and labels for ``completed`` of ``total`` sessions.

    The week label is only produced when both week values are known.
    """
    fraction = completed / total if total > 0 else 0
    is_completed = fraction == 1
    week_label = None
    if current_week is not None and total_weeks is not None:
        week_label = f"Week {current_week} of {total_weeks}"
    return {
        'fraction': fraction,
        'percent': round_half_up(fraction * 100),
        'is_completed': is_completed,
        'sessions_label': f"{completed} of {total}",
        'week_label': week_label,
        'color': COLOR_SUCCESS if is_completed else COLOR_PRIMARY,
    }


__all__ = ["describe_progress"]
