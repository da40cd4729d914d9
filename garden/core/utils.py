"""
Clock and timestamp helpers shared across domain/services/repositories.
"""

from __future__ import annotations

from datetime import datetime


def local_now() -> datetime:
    """Current wall-clock time as an aware datetime in the local zone."""
    return datetime.now().astimezone()


def format_timestamp(value: datetime) -> str:
    return value.isoformat()


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO-8601 timestamp.

    Accepts the trailing "Z" written by browser clients (toISOString) as well
    as naive values, which are read as local time.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid timestamp: {value!r}")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed
