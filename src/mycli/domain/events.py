"""Domain event describing a structured log message.

Purpose
-------
Provide an immutable, serialisable representation of log events travelling
from the logger proxies to the console and Loki sinks.

Contents
--------
* :class:`LogEvent` dataclass with serialisation helpers.
* Utility function ``_ensure_aware`` for timestamp validation.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .levels import LogLevel


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


@dataclass(slots=True, frozen=True)
class LogEvent:
    """Immutable log event transported through the logging pipeline.

    Attributes
    ----------
    event_id:
        Identifier used to correlate console and Loki output.
    timestamp:
        Time of the event in timezone-aware UTC.
    logger_name:
        Logical logger emitting the event.
    level:
        :class:`LogLevel` severity associated with the event.
    message:
        Rendered message passed by the caller.
    extra:
        Shallow copy of caller-supplied key/value pairs.
    """

    event_id: str
    timestamp: datetime
    logger_name: str
    level: LogLevel
    message: str
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        if not self.message.strip():
            raise ValueError("message must not be empty")
        if not self.event_id:
            raise ValueError("event_id must not be empty")
        object.__setattr__(self, "extra", dict(self.extra))

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event to a dictionary with ISO8601 timestamps."""

        return {
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "logger_name": self.logger_name,
            "level": self.level.severity,
            "message": self.message,
            "extra": dict(self.extra),
        }

    def to_json(self) -> str:
        """Serialize the event to JSON with sorted keys for deterministic output.

        Values that JSON cannot represent natively are rendered with ``str``.
        """

        return json.dumps(self.to_dict(), sort_keys=True, default=str)


__all__ = ["LogEvent"]
