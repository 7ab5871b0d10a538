from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

import pytest
import requests

from mycli.adapters.loki import DEFAULT_TIMEOUT, LokiBackendAdapter, LokiWriter
from mycli.domain.errors import TransportError
from mycli.domain.events import LogEvent
from mycli.domain.levels import LogLevel


class _FakeResponse:
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        self.closed = False

    def close(self) -> None:
        self.closed = True


class _FakeSession:
    def __init__(self, *, status_code: int = 204, error: Exception | None = None) -> None:
        self.status_code = status_code
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.responses: list[_FakeResponse] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        response = _FakeResponse(self.status_code)
        self.responses.append(response)
        return response

    def close(self) -> None:
        self.closed = True


def _event() -> LogEvent:
    return LogEvent(
        event_id="evt-1",
        timestamp=datetime(2025, 9, 23, tzinfo=timezone.utc),
        logger_name="mycli.greet",
        level=LogLevel.INFO,
        message="Command executed successfully",
        extra={"command": "greet", "output": "Hello and welcome Ada!"},
    )


def test_writer_posts_one_line_per_request(loki_server) -> None:
    with LokiWriter(loki_server.push_url, job="mycli", clock_ns=lambda: 123) as writer:
        written = writer.write(b"  hello \n")

    assert written == len(b"  hello \n")
    assert len(loki_server.requests) == 1
    request = loki_server.requests[0]
    assert request["path"] == "/loki/api/v1/push"
    assert request["content_type"] == "application/json"
    assert json.loads(request["body"]) == {
        "streams": [{"stream": {"job": "mycli"}, "values": [["123", "hello"]]}]
    }


def test_writer_does_not_batch_consecutive_writes(loki_server) -> None:
    with LokiWriter(loki_server.push_url) as writer:
        writer.write(b"first")
        writer.write(b"second")

    lines = [json.loads(request["body"])["streams"][0]["values"] for request in loki_server.requests]
    assert [values[0][1] for values in lines] == ["first", "second"]
    assert all(len(values) == 1 for values in lines)


def test_writer_swallows_unreachable_endpoint(closed_port: int) -> None:
    data = b"hello"
    with LokiWriter(f"http://127.0.0.1:{closed_port}/loki/api/v1/push", timeout=1.0) as writer:
        written = writer.write(data)

    assert written == len(data)


def test_writer_swallows_non_2xx_status(loki_server) -> None:
    loki_server.status = 500
    with LokiWriter(loki_server.push_url) as writer:
        assert writer.write(b"hello") == 5
    assert len(loki_server.requests) == 1


def test_writer_raises_transport_error_when_not_suppressing(closed_port: int) -> None:
    writer = LokiWriter(
        f"http://127.0.0.1:{closed_port}/loki/api/v1/push",
        suppress_errors=False,
        timeout=1.0,
    )
    with writer, pytest.raises(TransportError, match="failed"):
        writer.write(b"hello")


def test_writer_reports_http_status_when_not_suppressing(loki_server) -> None:
    loki_server.status = 400
    with LokiWriter(loki_server.push_url, suppress_errors=False) as writer:
        with pytest.raises(TransportError, match="HTTP 400"):
            writer.write(b"hello")


def test_writer_uses_fixed_timeout_and_json_header() -> None:
    session = _FakeSession()
    writer = LokiWriter("http://loki.invalid/push", session=session, clock_ns=lambda: 7)  # type: ignore[arg-type]

    writer.write(b"hello")

    call = session.calls[0]
    assert DEFAULT_TIMEOUT == 5.0
    assert call["timeout"] == DEFAULT_TIMEOUT
    assert call["headers"] == {"Content-Type": "application/json"}
    assert json.loads(call["data"])["streams"][0]["values"] == [["7", "hello"]]
    assert session.responses[0].closed is True


def test_writer_swallows_timeouts_from_session() -> None:
    session = _FakeSession(error=requests.Timeout("slow"))
    writer = LokiWriter("http://loki.invalid/push", session=session)  # type: ignore[arg-type]

    assert writer.write(b"abc") == 3
    assert len(session.calls) == 1


def test_writer_replaces_undecodable_bytes() -> None:
    session = _FakeSession()
    writer = LokiWriter("http://loki.invalid/push", session=session, clock_ns=lambda: 1)  # type: ignore[arg-type]

    assert writer.write(b"caf\xff") == 4
    assert json.loads(session.calls[0]["data"])["streams"][0]["values"][0][1] == "caf\ufffd"


def test_writer_only_closes_its_own_session() -> None:
    shared = _FakeSession()
    LokiWriter("http://loki.invalid/push", session=shared).close()  # type: ignore[arg-type]
    assert shared.closed is False


def test_writer_rejects_empty_endpoint() -> None:
    with pytest.raises(ValueError, match="endpoint"):
        LokiWriter("")


def test_backend_adapter_ships_event_as_json_line(loki_server) -> None:
    adapter = LokiBackendAdapter(LokiWriter(loki_server.push_url, job="greeter"))
    try:
        adapter.emit(_event())
    finally:
        adapter.close()

    body = json.loads(loki_server.requests[0]["body"])
    stream = body["streams"][0]
    assert stream["stream"] == {"job": "greeter"}
    line = json.loads(stream["values"][0][1])
    assert line["message"] == "Command executed successfully"
    assert line["extra"]["command"] == "greet"
    assert line["level"] == "info"


def test_backend_adapter_exposes_writer() -> None:
    writer = LokiWriter("http://loki.invalid/push", session=_FakeSession())  # type: ignore[arg-type]
    assert LokiBackendAdapter(writer).writer is writer
