"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Render log events as single human-readable lines while keeping standard output
free for command results: the default console writes to standard error.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping.
* :class:`RichConsoleAdapter` - adapter constructed by the runtime composition.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from rich.console import Console

from mycli.application.ports.console import ConsolePort
from mycli.domain.events import LogEvent
from mycli.domain.levels import LogLevel


_STYLE_MAP: Mapping[LogLevel, str] = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
}

#: Default Rich styles keyed by :class:`LogLevel` severity.


class RichConsoleAdapter(ConsolePort):
    """Render log events using Rich formatting with style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[LogLevel | str, str] | None = None,
    ) -> None:
        """Configure the console adapter with colour and style overrides."""
        if console is not None:
            self._console = console
        else:
            self._console = Console(stderr=True, force_terminal=force_color or None, no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = LogLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        self._style_map = merged

    def emit(self, event: LogEvent, *, colorize: bool) -> None:
        """Print ``event`` using Rich with optional colour.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from io import StringIO
        >>> event = LogEvent('id', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), 'mycli', LogLevel.INFO, 'msg')
        >>> console = Console(file=StringIO(), record=True)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit(event, colorize=False)
        >>> 'msg' in console.export_text()
        True
        """
        style = self._style_map.get(event.level, "") if colorize and not self._no_color else ""
        line = self._format_line(event)
        self._console.print(line, style=style, highlight=False, markup=False, soft_wrap=True)

    @staticmethod
    def _format_line(event: LogEvent) -> str:
        """Return a human-friendly console line for ``event``.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> event = LogEvent('id', datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc), 'mycli', LogLevel.INFO, 'msg', {'b': 2, 'a': 1})
        >>> RichConsoleAdapter._format_line(event).endswith('mycli - msg a=1 b=2')
        True
        """
        fields = {key: value for key, value in event.extra.items() if value is not None}
        extra_str = "" if not fields else " " + " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
        return f"{event.timestamp.isoformat()} {event.level.icon} {event.level.severity.upper():>8} {event.logger_name} - {event.message}{extra_str}"


__all__ = ["RichConsoleAdapter"]
