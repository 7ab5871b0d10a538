"""Best-effort Grafana Loki adapters.

Purpose
-------
Ship log lines to a Loki push endpoint without ever blocking or crashing the
command that produced them.

Contents
--------
* :data:`DEFAULT_TIMEOUT` - fixed request timeout in seconds.
* :class:`LokiWriter` - byte-oriented sink posting one line per request.
* :class:`LokiBackendAdapter` - structured backend rendering events as JSON
  and handing them to a :class:`LokiWriter`.

System Role
-----------
Outermost adapter on the logging path. Delivery is at-most-once with no retry,
batching, or backoff. Transport failures are absorbed here unless the writer
was built with ``suppress_errors=False``, in which case they surface as
:class:`~mycli.domain.errors.TransportError`; the event pipeline then reports
them on the console instead of failing the command.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

import requests

from mycli.application.ports.sink import LogSinkPort
from mycli.application.ports.structures import StructuredBackendPort
from mycli.domain.errors import TransportError
from mycli.domain.events import LogEvent
from mycli.domain.push import LogLine, PushPayload

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0
DEFAULT_JOB = "mycli"


class LokiWriter(LogSinkPort):
    """Post single log lines to a Loki push endpoint.

    Parameters
    ----------
    endpoint:
        Full push URL, for example ``http://localhost:3100/loki/api/v1/push``.
    job:
        Value of the ``job`` stream label.
    suppress_errors:
        When ``True`` (default) network errors and non-2xx responses are
        swallowed and :meth:`write` always reports the full length.
    timeout:
        Request timeout in seconds.
    session:
        Optional pre-configured :class:`requests.Session`; a private session is
        created otherwise and closed by :meth:`close`.
    clock_ns:
        Source of Unix timestamps in nanoseconds.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        job: str = DEFAULT_JOB,
        suppress_errors: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
        clock_ns: Callable[[], int] = time.time_ns,
    ) -> None:
        if not endpoint:
            raise ValueError("endpoint must not be empty")
        self.endpoint = endpoint
        self.job = job
        self.suppress_errors = suppress_errors
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._clock_ns = clock_ns

    def build_payload(self, text: str) -> PushPayload:
        """Return the push payload for ``text`` stamped with the current time."""
        return PushPayload.for_line(LogLine(text=text, timestamp_ns=self._clock_ns()), job=self.job)

    def write(self, data: bytes) -> int:
        """Send ``data`` as one log line and return ``len(data)``.

        Raises
        ------
        TransportError
            Only when ``suppress_errors`` is ``False`` and the request failed
            or Loki answered with a non-2xx status.
        """
        line = data.decode("utf-8", errors="replace").strip()
        payload = self.build_payload(line)
        try:
            response = self._session.post(
                self.endpoint,
                data=payload.to_json(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            self._handle_failure(f"Loki push to {self.endpoint} failed: {exc}", exc)
            return len(data)
        try:
            if not 200 <= response.status_code < 300:
                self._handle_failure(f"Loki push to {self.endpoint} returned HTTP {response.status_code}", None)
        finally:
            response.close()
        return len(data)

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "LokiWriter":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()

    def _handle_failure(self, message: str, cause: BaseException | None) -> None:
        if not self.suppress_errors:
            raise TransportError(message) from cause
        logger.debug(message)


class LokiBackendAdapter(StructuredBackendPort):
    """Forward each :class:`LogEvent` to Loki as a JSON line."""

    def __init__(self, writer: LokiWriter) -> None:
        self._writer = writer

    @property
    def writer(self) -> LokiWriter:
        return self._writer

    def emit(self, event: LogEvent) -> None:
        self._writer.write(event.to_json().encode("utf-8"))

    def close(self) -> None:
        self._writer.close()


__all__ = ["DEFAULT_JOB", "DEFAULT_TIMEOUT", "LokiBackendAdapter", "LokiWriter"]
