"""ISO-8601 timestamps exchanged with the client.

Timestamps are instants: they are always written in UTC with millisecond
precision and a trailing 'Z'. Naive datetimes are read as UTC.
"""
import re
from datetime import datetime, timezone

# fromisoformat before 3.11 only takes 3 or 6 fraction digits
_FRACTION_PATTERN = re.compile(r'\.([0-9]+)(?=[+-][0-9]{2}:?[0-9]{2}$|$)', re.ASCII)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _six_digit_fraction(match) -> str:
    return '.' + (match.group(1) + '000000')[:6]


def to_iso_string(value: datetime) -> str:
    """datetime -> '2025-10-24T10:00:00.123Z'. Years are always four digits."""
    utc = _as_utc(value)
    return (f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
            f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
            f".{utc.microsecond // 1000:03d}Z")


def from_iso_string(text: str) -> datetime:
    """Parse ISO-8601 text into an aware UTC datetime."""
    raw = text.strip()
    if raw.endswith('Z') or raw.endswith('z'):
        raw = raw[:-1] + '+00:00'
    raw = _FRACTION_PATTERN.sub(_six_digit_fraction, raw, count=1)
    return _as_utc(datetime.fromisoformat(raw))


def now_iso() -> str:
    return to_iso_string(datetime.now(timezone.utc))


__all__ = ["to_iso_string", "from_iso_string", "now_iso"]
