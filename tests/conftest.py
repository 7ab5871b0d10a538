from __future__ import annotations

import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from io import StringIO
from typing import Any, Callable, Iterator

import pytest
from rich.console import Console

from mycli import config as dotenv_config
from mycli.adapters import RichConsoleAdapter
from mycli.domain import LogEvent
from mycli.runtime import LoggingRuntime, RuntimeSettings, build_runtime


class RecordingBackend:
    """Structured backend keeping every event in memory."""

    def __init__(self) -> None:
        self.events: list[LogEvent] = []
        self.closed = 0

    def emit(self, event: LogEvent) -> None:
        self.events.append(event)

    def close(self) -> None:
        self.closed += 1

    def execution_records(self) -> list[LogEvent]:
        return [event for event in self.events if "command" in event.extra]


class _PushHandler(BaseHTTPRequestHandler):
    server: "_LokiServer"

    def do_POST(self) -> None:  # noqa: N802 - http.server naming
        length = int(self.headers.get("Content-Length", "0"))
        body = self.rfile.read(length)
        self.server.requests.append(
            {
                "path": self.path,
                "content_type": self.headers.get("Content-Type"),
                "body": body,
            }
        )
        self.send_response(self.server.status)
        self.send_header("Content-Length", "0")
        self.end_headers()

    def log_message(self, *_args: Any) -> None:
        return None


class _LokiServer(ThreadingHTTPServer):
    def __init__(self) -> None:
        super().__init__(("127.0.0.1", 0), _PushHandler)
        self.requests: list[dict[str, Any]] = []
        self.status = 204

    @property
    def push_url(self) -> str:
        host, port = self.server_address[:2]
        return f"http://{host}:{port}/loki/api/v1/push"


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200)


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def make_runtime(record_console: Console) -> Callable[..., LoggingRuntime]:
    """Build runtimes rendering into ``record_console`` with injected backends."""

    def factory(*, backends: list[Any] | None = None, **overrides: Any) -> LoggingRuntime:
        settings = RuntimeSettings(**overrides)
        return build_runtime(
            settings,
            console=RichConsoleAdapter(console=record_console),
            structured_backends=backends if backends is not None else [],
        )

    return factory


@pytest.fixture
def loki_server() -> Iterator[_LokiServer]:
    server = _LokiServer()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=1)


@pytest.fixture
def closed_port() -> int:
    """Return a local port nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep host configuration out of the tests."""
    for name in (
        "LOKI_ENDPOINT",
        "MYCLI_APP_NAME",
        "MYCLI_LOKI_SUPPRESS_ERRORS",
        "MYCLI_USE_DOTENV",
        "LOG_CONSOLE_LEVEL",
        "LOG_BACKEND_LEVEL",
        "LOG_FORCE_COLOR",
        "LOG_NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    dotenv_config._reset_dotenv_state_for_testing()
    yield
    dotenv_config._reset_dotenv_state_for_testing()
