"""Ports for structured backend adapters (Loki, etc.)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mycli.domain.events import LogEvent


@runtime_checkable
class StructuredBackendPort(Protocol):
    """Forward structured log events to a machine-readable destination."""

    def emit(self, event: LogEvent) -> None:
        """Forward ``event`` to the structured backend."""

    def close(self) -> None:
        """Release transport resources held by the backend."""


__all__ = ["StructuredBackendPort"]
