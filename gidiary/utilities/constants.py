from typing import Final

from gidiary.utilities.config import (
    MAX_QUANTITY_PER_PRODUCT as _MAX_QUANTITY,
    READY_WINDOW_MINUTES as _READY_WINDOW,
    MIN_SESSIONS_FOR_RECOMMENDATIONS as _MIN_SESSIONS,
)

MAX_QUANTITY_PER_PRODUCT: Final[int] = _MAX_QUANTITY
READY_WINDOW_MINUTES: Final[int] = _READY_WINDOW
MIN_SESSIONS_FOR_RECOMMENDATIONS: Final[int] = _MIN_SESSIONS

# A good plan lands between 90% and 110% of the target
ACCEPTABLE_MATCH_LOWER: Final[float] = 0.9
ACCEPTABLE_MATCH_UPPER: Final[float] = 1.1

DEFAULT_START_CARB_RATE: Final[int] = 30  # g/h

COLOR_SUCCESS: Final[str] = "#4CAF50"
COLOR_WARNING: Final[str] = "#FF9800"
COLOR_NEUTRAL: Final[str] = "#666"
COLOR_PRIMARY: Final[str] = "#1E88E5"
COLOR_INFO: Final[str] = "#2196F3"
COLOR_HIGHLIGHT: Final[str] = "#9C27B0"

# g/h buckets used when looking for the best tolerated carb rate
RATE_BUCKETS: Final[list[tuple[int, int]]] = [
    (0, 60),
    (60, 80),
    (80, 100),
    (100, 120),
    (120, 999),
]

GI_ISSUE_REASONING: Final[dict[str, str]] = {
    "nausea": (
        "This program starts at a low intensity (30 g/h), which lowers the chance of nausea. "
        "The gradual increase lets your body adapt step by step."
    ),
    "cramping": (
        "The program builds tolerance slowly, which helps against cramping. "
        "Start low and build up over 4 weeks."
    ),
    "bloating": (
        "Starting with small amounts of carbohydrate and increasing gradually gives your gut "
        "time to adapt without bloating."
    ),
    "diarrhea": (
        "This program starts carefully at 30 g/h and lets your digestive system get used to "
        "carbohydrate intake during activity."
    ),
}
DEFAULT_GI_REASONING: Final[str] = (
    "This base program is a safe starting point for anyone who wants to improve "
    "their carbohydrate tolerance."
)
