"""Use case turning a single log call into console and backend emissions.

Purpose
-------
Craft a :class:`LogEvent` from a logger call and fan it out to the console
adapter and every configured structured backend according to their severity
thresholds.

Contents
--------
* :func:`create_process_log_event` factory returning the runtime callable.

System Role
-----------
Application-layer orchestrator invoked by :func:`mycli.runtime.build_runtime`
to freeze the configured dependencies into a callable logging pipeline.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

from mycli.application.ports import ClockPort, ConsolePort, IdProvider, StructuredBackendPort
from mycli.domain import LogEvent, LogLevel, TransportError

logger = logging.getLogger(__name__)


class ProcessCallable(Protocol):
    def __call__(
        self,
        *,
        logger_name: str,
        level: LogLevel,
        message: str,
        extra: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]: ...


def create_process_log_event(
    *,
    console: ConsolePort,
    console_level: LogLevel,
    structured_backends: Sequence[StructuredBackendPort],
    backend_level: LogLevel,
    clock: ClockPort,
    id_provider: IdProvider,
    colorize_console: bool = True,
    diagnostic: Callable[[str, dict[str, Any]], None] | None = None,
) -> ProcessCallable:
    """Build the orchestrator capturing the current dependency wiring.

    Parameters
    ----------
    console:
        Console adapter implementing :class:`ConsolePort`.
    console_level:
        Minimum level required for console emission.
    structured_backends:
        Adapters receiving every event at or above ``backend_level``.
    backend_level:
        Minimum level required for structured backends.
    clock:
        Provider of timezone-aware timestamps.
    id_provider:
        Callable returning unique event identifiers.
    colorize_console:
        When ``False`` the console adapter renders without colour.
    diagnostic:
        Optional hook receiving ``("backend_failed", payload)`` when a backend
        raises :class:`TransportError`. The failure never propagates to the
        caller; the remaining backends still receive the event.

    Returns
    -------
    ProcessCallable
        Function accepting ``logger_name``, ``level``, ``message``, and optional
        ``extra`` metadata, returning a diagnostic dictionary.

    Examples
    --------
    >>> class DummyConsole(ConsolePort):
    ...     def __init__(self):
    ...         self.events = []
    ...     def emit(self, event: LogEvent, *, colorize: bool) -> None:
    ...         self.events.append((event.logger_name, colorize))
    >>> class DummyBackend(StructuredBackendPort):
    ...     def __init__(self):
    ...         self.events = []
    ...     def emit(self, event: LogEvent) -> None:
    ...         self.events.append(event.logger_name)
    ...     def close(self) -> None:
    ...         pass
    >>> class DummyClock(ClockPort):
    ...     def now(self):
    ...         from datetime import datetime, timezone
    ...         return datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)
    >>> class DummyId(IdProvider):
    ...     def __call__(self) -> str:
    ...         return 'event-1'
    >>> console_adapter = DummyConsole()
    >>> backend_adapter = DummyBackend()
    >>> process = create_process_log_event(
    ...     console=console_adapter,
    ...     console_level=LogLevel.DEBUG,
    ...     structured_backends=[backend_adapter],
    ...     backend_level=LogLevel.WARNING,
    ...     clock=DummyClock(),
    ...     id_provider=DummyId(),
    ... )
    >>> result = process(logger_name='mycli.greet', level=LogLevel.INFO, message='hello', extra=None)
    >>> result['ok'] and result['event_id'] == 'event-1'
    True
    >>> console_adapter.events[0][0]
    'mycli.greet'
    >>> backend_adapter.events
    []
    """

    backends = tuple(structured_backends)

    def _emit_diagnostic(name: str, payload: dict[str, Any]) -> None:
        logger.debug("diagnostic %s: %s", name, payload)
        if diagnostic is not None:
            diagnostic(name, payload)

    def process(
        *,
        logger_name: str,
        level: LogLevel,
        message: str,
        extra: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        event = LogEvent(
            event_id=id_provider(),
            timestamp=clock.now(),
            logger_name=logger_name,
            level=level,
            message=message,
            extra=dict(extra or {}),
        )
        emitted: list[str] = []
        failed: list[str] = []
        if _meets_threshold(event.level, console_level):
            console.emit(event, colorize=colorize_console)
            emitted.append("console")
        if _meets_threshold(event.level, backend_level):
            for backend in backends:
                try:
                    backend.emit(event)
                except TransportError as exc:
                    failed.append(type(backend).__name__)
                    _emit_diagnostic(
                        "backend_failed",
                        {"event_id": event.event_id, "backend": type(backend).__name__, "error": str(exc)},
                    )
                    continue
                emitted.append(type(backend).__name__)
        logger.debug("event %s delivered to %s", event.event_id, emitted)
        return {"ok": not failed, "event_id": event.event_id, "emitted": emitted, "failed": failed}

    return process


def _meets_threshold(level: LogLevel, threshold: LogLevel) -> bool:
    return level.value >= threshold.value


__all__ = ["ProcessCallable", "create_process_log_event"]
