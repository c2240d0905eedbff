"""Session domain entities: logged events (intake, discomfort, note) and per-session stats."""
import json
from typing import Any, Dict, Optional


class SessionEvent:
    def __init__(self, id: Optional[int] = None, session_log_id: int = 0, event_type: str = "note",
                 timestamp_offset_seconds: int = 0, actual_timestamp: Optional[str] = None,
                 data: Optional[Dict[str, Any]] = None):
        self.id = id
        self.session_log_id = session_log_id
        self.event_type = event_type
        self.timestamp_offset_seconds = timestamp_offset_seconds
        self.actual_timestamp = actual_timestamp
        self.data = dict(data) if data else {}

    @property
    def offset_minutes(self) -> float:
        return self.timestamp_offset_seconds / 60

    def is_intake(self) -> bool:
        return self.event_type == "intake"

    def is_discomfort(self) -> bool:
        return self.event_type == "discomfort"

    def __str__(self) -> str:
        return f"{self.event_type} @ {self.timestamp_offset_seconds}s (session {self.session_log_id})"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        '''Builds an event from a row or payload. ``data_json`` (stored form) wins over ``data``.'''
        d = dict(data) if isinstance(data, dict) else {}
        payload = d.get("data") or {}
        raw = d.get("data_json")
        if isinstance(raw, str) and raw:
            payload = json.loads(raw)
        return SessionEvent(
            id=d.get("id"),
            session_log_id=d.get("session_log_id", 0),
            event_type=d.get("event_type", "note"),
            timestamp_offset_seconds=d.get("timestamp_offset_seconds", 0) or 0,
            actual_timestamp=d.get("actual_timestamp"),
            data=payload if isinstance(payload, dict) else {},
        )

    def to_dict(self):
        return {
            "id": self.id,
            "session_log_id": self.session_log_id,
            "event_type": self.event_type,
            "timestamp_offset_seconds": self.timestamp_offset_seconds,
            "actual_timestamp": self.actual_timestamp,
            "data_json": json.dumps(self.data, ensure_ascii=False),
        }


class SessionStats:
    """Aggregates of one completed session, as the analysis screens see it."""

    def __init__(self, id: int = 0, carb_rate_per_hour: float = 0, discomfort_count: int = 0,
                 avg_discomfort: Optional[float] = None):
        self.id = id
        self.carb_rate_per_hour = carb_rate_per_hour
        self.discomfort_count = discomfort_count
        self.avg_discomfort = avg_discomfort

    @property
    def had_discomfort(self) -> bool:
        return self.discomfort_count > 0

    def __str__(self) -> str:
        return f"Session {self.id} - {self.carb_rate_per_hour}g/h - discomfort: {self.discomfort_count}"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        allowed = {"id", "carb_rate_per_hour", "discomfort_count", "avg_discomfort"}
        return SessionStats(**{k: v for k, v in d.items() if k in allowed})
