"""Value objects describing the Loki push wire format.

A :class:`PushPayload` carries one labelled stream. The CLI ships a single
:class:`LogLine` per request, so payloads are built fresh for every write and
never retained.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class LogLine:
    """Opaque text line stamped with a Unix timestamp in nanoseconds."""

    text: str
    timestamp_ns: int

    def to_value(self) -> list[str]:
        """Return the ``[timestamp, line]`` pair expected by Loki.

        Examples
        --------
        >>> LogLine(text="hello", timestamp_ns=1).to_value()
        ['1', 'hello']
        """
        return [str(self.timestamp_ns), self.text]


@dataclass(slots=True, frozen=True)
class PushPayload:
    """Single stream labelled ``job=<app name>`` with ordered log lines."""

    job: str
    lines: tuple[LogLine, ...]

    def __post_init__(self) -> None:
        if not self.job:
            raise ValueError("job label must not be empty")
        object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def for_line(cls, line: LogLine, *, job: str) -> "PushPayload":
        return cls(job=job, lines=(line,))

    def to_dict(self) -> dict[str, Any]:
        """Render the payload in the shape of Loki's ``/loki/api/v1/push`` body.

        Examples
        --------
        >>> payload = PushPayload.for_line(LogLine("hello", 5), job="mycli")
        >>> payload.to_dict()
        {'streams': [{'stream': {'job': 'mycli'}, 'values': [['5', 'hello']]}]}
        """
        return {
            "streams": [
                {
                    "stream": {"job": self.job},
                    "values": [line.to_value() for line in self.lines],
                }
            ]
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


__all__ = ["LogLine", "PushPayload"]
