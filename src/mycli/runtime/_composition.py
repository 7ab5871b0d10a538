"""Runtime composition helpers wiring domain, application, and adapters.

Purpose
-------
Translate :class:`RuntimeSettings` into a live :class:`LoggingRuntime`. The
runtime is returned to the caller instead of being stored globally, so every
CLI invocation (and every test) owns its own logging wiring.

Contents
--------
* :class:`LoggerProxy` - level-specific facade over the process callable.
* :class:`LoggingRuntime` - aggregate of live collaborators.
* :func:`build_runtime` - composition root.
* :func:`create_console_diagnostic` - reports backend delivery failures on
  the console.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional, Sequence

from mycli.adapters import LokiBackendAdapter, LokiWriter, RichConsoleAdapter
from mycli.application.ports import ClockPort, ConsolePort, IdProvider, StructuredBackendPort
from mycli.application.use_cases.process_event import ProcessCallable, create_process_log_event
from mycli.domain import LogEvent, LogLevel

from ._settings import RuntimeSettings


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidProvider(IdProvider):
    """Generate hexadecimal identifiers for log events."""

    def __call__(self) -> str:
        from uuid import uuid4

        return uuid4().hex


class LoggerProxy:
    """Lightweight facade for structured logging calls.

    The proxy keeps use cases decoupled from the process callable while
    providing level-specific helpers that return diagnostic dictionaries.
    """

    def __init__(self, name: str, process: ProcessCallable) -> None:
        self._name = name
        self._process = process

    @property
    def name(self) -> str:
        return self._name

    def debug(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.DEBUG, message, extra)

    def info(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.INFO, message, extra)

    def warning(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.WARNING, message, extra)

    def error(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.ERROR, message, extra)

    def critical(self, message: str, *, extra: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        return self._log(LogLevel.CRITICAL, message, extra)

    def _log(self, level: LogLevel, message: str, extra: Optional[Mapping[str, Any]]) -> dict[str, Any]:
        """Delegate to the process use case with a normalised ``extra`` mapping."""
        payload = dict(extra) if extra is not None else {}
        return self._process(logger_name=self._name, level=level, message=message, extra=payload)


@dataclass(slots=True)
class LoggingRuntime:
    """Aggregate of live collaborators created by :func:`build_runtime`.

    Parameters
    ----------
    settings:
        Settings the runtime was composed from.
    process:
        Callable returned by :func:`create_process_log_event`.
    console:
        Console adapter receiving every event above ``console_level``.
    structured_backends:
        Remote backends (Loki) receiving events above ``backend_level``.
    """

    settings: RuntimeSettings
    process: ProcessCallable
    console: ConsolePort
    structured_backends: tuple[StructuredBackendPort, ...] = field(default_factory=tuple)
    closed: bool = False

    @property
    def loki_enabled(self) -> bool:
        return any(isinstance(backend, LokiBackendAdapter) for backend in self.structured_backends)

    def get(self, name: str | None = None) -> LoggerProxy:
        """Return a logger proxy; names are prefixed with the app name.

        Examples
        --------
        >>> from io import StringIO
        >>> from rich.console import Console
        >>> runtime = build_runtime(RuntimeSettings(), console=RichConsoleAdapter(console=Console(file=StringIO())))
        >>> runtime.get("greet").name
        'mycli.greet'
        >>> runtime.get().name
        'mycli'
        """
        root = self.settings.app_name
        if not name:
            return LoggerProxy(root, self.process)
        if name == root or name.startswith(f"{root}."):
            return LoggerProxy(name, self.process)
        return LoggerProxy(f"{root}.{name}", self.process)

    def announce(self) -> dict[str, Any]:
        """Log which sinks are active."""
        logger = self.get("telemetry")
        if self.loki_enabled:
            return logger.info("Loki logging enabled", extra={"endpoint": self.settings.loki_endpoint})
        return logger.info("Logging to console only")

    def shutdown(self) -> None:
        """Close remote backends; safe to call more than once."""
        if self.closed:
            return
        self.closed = True
        for backend in self.structured_backends:
            backend.close()


def build_runtime(
    settings: RuntimeSettings,
    *,
    console: ConsolePort | None = None,
    structured_backends: Sequence[StructuredBackendPort] | None = None,
    clock: ClockPort | None = None,
    id_provider: IdProvider | None = None,
) -> LoggingRuntime:
    """Assemble the logging runtime from resolved settings.

    ``console`` and ``structured_backends`` replace the adapters derived from
    ``settings`` when supplied; the Loki backend is only created when the
    settings carry an endpoint and no explicit backends were passed.
    """

    console_adapter = console if console is not None else create_console(settings)
    if structured_backends is None:
        backends = tuple(create_structured_backends(settings))
    else:
        backends = tuple(structured_backends)

    clock_port = clock if clock is not None else SystemClock()
    ids = id_provider if id_provider is not None else UuidProvider()
    process = create_process_log_event(
        console=console_adapter,
        console_level=settings.console_level,
        structured_backends=backends,
        backend_level=settings.backend_level,
        clock=clock_port,
        id_provider=ids,
        colorize_console=not settings.no_color,
        diagnostic=create_console_diagnostic(settings, console_adapter, clock_port, ids),
    )
    return LoggingRuntime(
        settings=settings,
        process=process,
        console=console_adapter,
        structured_backends=backends,
    )


def create_console_diagnostic(
    settings: RuntimeSettings,
    console: ConsolePort,
    clock: ClockPort,
    id_provider: IdProvider,
) -> Callable[[str, dict[str, Any]], None]:
    """Return a hook rendering backend failures as ERROR lines on the console.

    The event bypasses the structured backends so a failing Loki push cannot
    recurse into another push.
    """

    logger_name = f"{settings.app_name}.telemetry"

    def diagnostic(name: str, payload: dict[str, Any]) -> None:
        if name != "backend_failed" or LogLevel.ERROR.value < settings.console_level.value:
            return
        event = LogEvent(
            event_id=id_provider(),
            timestamp=clock.now(),
            logger_name=logger_name,
            level=LogLevel.ERROR,
            message="Log shipping failed",
            extra=payload,
        )
        console.emit(event, colorize=not settings.no_color)

    return diagnostic


def create_console(settings: RuntimeSettings) -> ConsolePort:
    return RichConsoleAdapter(force_color=settings.force_color, no_color=settings.no_color)


def create_structured_backends(settings: RuntimeSettings) -> list[StructuredBackendPort]:
    endpoint = settings.loki_endpoint
    if not endpoint:
        return []
    writer = LokiWriter(
        endpoint,
        job=settings.app_name,
        suppress_errors=settings.suppress_sink_errors,
        timeout=settings.loki_timeout,
    )
    return [LokiBackendAdapter(writer)]


__all__ = ["LoggerProxy", "LoggingRuntime", "SystemClock", "UuidProvider", "build_runtime"]
