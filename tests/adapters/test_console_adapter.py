from __future__ import annotations

from datetime import datetime, timezone

import pytest
from rich.console import Console

from mycli.adapters.console.rich_console import RichConsoleAdapter
from mycli.domain.events import LogEvent
from mycli.domain.levels import LogLevel


def _event(level: LogLevel = LogLevel.INFO, **extra: object) -> LogEvent:
    return LogEvent(
        event_id="evt-1",
        timestamp=datetime(2025, 9, 23, 12, 0, tzinfo=timezone.utc),
        logger_name="mycli.greet",
        level=level,
        message="hello",
        extra=extra or {"foo": "bar"},
    )


def test_rich_console_adapter_renders_expected_line(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(_event(), colorize=True)
    output = record_console.export_text()
    assert "INFO" in output
    assert "foo=bar" in output
    assert "mycli.greet - hello" in output


def test_rich_console_adapter_respects_no_color(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console, no_color=True)
    adapter.emit(_event(), colorize=True)
    output = record_console.export_text(styles=True)
    assert "hello" in output
    assert "\x1b[" not in output


@pytest.mark.parametrize("colorize", [True, False])
def test_rich_console_adapter_allows_color_flag(record_console: Console, colorize: bool) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(_event(), colorize=colorize)
    output = record_console.export_text()
    assert "hello" in output
    assert "foo=bar" in output


def test_rich_console_adapter_prints_brackets_literally(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.emit(_event(LogLevel.ERROR, arguments=["x"], output="HE--<BLERGH>"), colorize=True)
    output = record_console.export_text()
    assert "arguments=['x']" in output
    assert "output=HE--<BLERGH>" in output
    assert "ERROR" in output


def test_rich_console_adapter_accepts_style_overrides_by_name(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console, styles={"info": "bold green"})
    adapter.emit(_event(), colorize=True)
    assert "hello" in record_console.export_text()


def test_rich_console_adapter_rejects_unknown_style_level(record_console: Console) -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        RichConsoleAdapter(console=record_console, styles={"verbose": "red"})
