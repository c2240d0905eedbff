"""Post-session summary over logged events."""
from typing import Dict, Iterable

from gidiary.domain.SessionEvent import SessionEvent


def _intake_carbs(event: SessionEvent):
    data = event.data
    consumed = data.get('carbs_consumed')
    if consumed is None:
        consumed = data.get('carbs_amount')
    return consumed or 0


def summarize_session(events: Iterable[SessionEvent]) -> Dict[str, float]:
    """Return {'intake_count', 'discomfort_count', 'total_carbs'} for one session."""
    intake_count = discomfort_count = 0
    total_carbs = 0
    for event in events:
        if event.is_intake():
            intake_count += 1
            total_carbs += _intake_carbs(event)
        elif event.is_discomfort():
            discomfort_count += 1
    return {
        'intake_count': intake_count,
        'discomfort_count': discomfort_count,
        'total_carbs': total_carbs,
    }


__all__ = ["summarize_session"]
