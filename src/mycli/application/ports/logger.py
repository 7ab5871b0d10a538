"""Port describing the logger surface handed to use cases."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class LoggerPort(Protocol):
    """Level-specific logging calls returning pipeline diagnostics."""

    def info(self, message: str, *, extra: Mapping[str, Any] | None = None) -> dict[str, Any]: ...

    def warning(self, message: str, *, extra: Mapping[str, Any] | None = None) -> dict[str, Any]: ...

    def error(self, message: str, *, extra: Mapping[str, Any] | None = None) -> dict[str, Any]: ...


__all__ = ["LoggerPort"]
