"""Program suggestion helpers used during onboarding."""
from typing import Sequence

from gidiary.utilities.constants import DEFAULT_GI_REASONING, DEFAULT_START_CARB_RATE, GI_ISSUE_REASONING


def reasoning_for_issue(gi_issue: str) -> str:
    """Explain why the base program suits the athlete's main GI issue."""
    key = (gi_issue or "").strip().lower()
    return GI_ISSUE_REASONING.get(key, DEFAULT_GI_REASONING)


def program_start_intensity(session_rates: Sequence[float]) -> float:
    """Carb rate (g/h) of the program's first session."""
    if not session_rates:
        return DEFAULT_START_CARB_RATE
    return session_rates[0]


__all__ = ["reasoning_for_issue", "program_start_intensity"]
