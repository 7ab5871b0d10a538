"""Port for byte-oriented log sinks."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogSinkPort(Protocol):
    """Accept one rendered log line and report how many bytes were consumed.

    Implementations decide whether delivery failures surface to the caller.
    """

    def write(self, data: bytes) -> int:
        """Deliver ``data`` and return its length."""


__all__ = ["LogSinkPort"]
