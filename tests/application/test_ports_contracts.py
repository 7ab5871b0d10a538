from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from mycli.adapters import LokiBackendAdapter, LokiWriter, RichConsoleAdapter, ScriptedRandomSource, SystemRandomSource
from mycli.application.ports import (
    ClockPort,
    ConsolePort,
    IdProvider,
    LoggerPort,
    LogSinkPort,
    RandomSourcePort,
    StructuredBackendPort,
)
from mycli.runtime import RuntimeSettings, SystemClock, UuidProvider, build_runtime


@pytest.fixture
def writer() -> LokiWriter:
    instance = LokiWriter("http://loki.invalid/loki/api/v1/push")
    yield instance
    instance.close()


def test_console_adapter_satisfies_console_port() -> None:
    assert isinstance(RichConsoleAdapter(console=Console(file=StringIO())), ConsolePort)


def test_loki_writer_satisfies_sink_port(writer: LokiWriter) -> None:
    assert isinstance(writer, LogSinkPort)


def test_loki_backend_satisfies_structured_port(writer: LokiWriter) -> None:
    assert isinstance(LokiBackendAdapter(writer), StructuredBackendPort)


@pytest.mark.parametrize("source", [SystemRandomSource(seed=3), ScriptedRandomSource([0.2])])
def test_random_sources_satisfy_random_port(source: object) -> None:
    assert isinstance(source, RandomSourcePort)


def test_clock_and_id_provider_satisfy_ports() -> None:
    clock = SystemClock()
    ids = UuidProvider()
    assert isinstance(clock, ClockPort)
    assert isinstance(ids, IdProvider)
    assert clock.now().tzinfo is not None
    assert ids() != ids()


def test_logger_proxy_satisfies_logger_port() -> None:
    runtime = build_runtime(RuntimeSettings(), console=RichConsoleAdapter(console=Console(file=StringIO())))
    assert isinstance(runtime.get("greet"), LoggerPort)
