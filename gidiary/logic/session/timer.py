"""Elapsed-time tracking for an active session.

The clock is passed in, so callers (and tests) decide what "now" means.
"""
import logging
import time
from typing import Callable, Optional

from gidiary.utilities.formatting import format_duration

logger = logging.getLogger(__name__)


class SessionTimerError(RuntimeError):
    """Raised when the timer is used out of order."""


class SessionTimer:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.session_log_id: Optional[int] = None
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None and self._stopped_at is None

    def start(self, session_log_id: int) -> None:
        if self.is_running:
            raise SessionTimerError(f"Timer already running for session {self.session_log_id}")
        self.session_log_id = session_log_id
        self._started_at = self._clock()
        self._stopped_at = None
        logger.info("Session timer started for session %s", session_log_id)

    def stop(self) -> int:
        """Freeze the timer and return the final elapsed seconds."""
        if not self.is_running:
            raise SessionTimerError("Timer is not running")
        self._stopped_at = self._clock()
        elapsed = self.elapsed_seconds()
        logger.info("Session timer stopped for session %s after %ss", self.session_log_id, elapsed)
        return elapsed

    def elapsed_seconds(self) -> int:
        if self._started_at is None:
            raise SessionTimerError("Timer has not been started")
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return int(end - self._started_at)

    def elapsed_minutes(self) -> int:
        return self.elapsed_seconds() // 60

    def display(self) -> str:
        return format_duration(self.elapsed_seconds())


__all__ = ["SessionTimer", "SessionTimerError"]
