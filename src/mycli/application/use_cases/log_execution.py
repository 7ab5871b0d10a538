"""Use case emitting one structured event per command invocation."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from mycli.application.ports import LoggerPort
from mycli.domain import CommandExecution

SUCCESS_MESSAGE = "Command executed successfully"
FAILURE_MESSAGE = "Command execution failed"

LogExecutionCallable = Callable[..., dict[str, Any]]


def create_log_execution(logger: LoggerPort) -> LogExecutionCallable:
    """Return a callable recording command executions through ``logger``.

    Severity follows the error field: ``info`` when the command succeeded and
    ``error`` when an exception is attached.

    Examples
    --------
    >>> class _Logger:
    ...     def __init__(self):
    ...         self.calls = []
    ...     def info(self, message, *, extra=None):
    ...         self.calls.append(('info', message, extra))
    ...         return {'ok': True}
    ...     def warning(self, message, *, extra=None):
    ...         return {'ok': True}
    ...     def error(self, message, *, extra=None):
    ...         self.calls.append(('error', message, extra))
    ...         return {'ok': True}
    >>> recorder = _Logger()
    >>> log_execution = create_log_execution(recorder)
    >>> _ = log_execution('greet', [], {'name': 'Ada'}, 'Hello and welcome Ada!')
    >>> recorder.calls[0][:2]
    ('info', 'Command executed successfully')
    >>> _ = log_execution('greet', [], {'name': ''}, '', ValueError('missing'))
    >>> recorder.calls[1][0], recorder.calls[1][2]['error']
    ('error', 'missing')
    """

    def log_execution(
        command: str,
        arguments: Sequence[str],
        flags: Mapping[str, str],
        output: str,
        error: BaseException | None = None,
    ) -> dict[str, Any]:
        record = CommandExecution(
            command=command,
            arguments=tuple(arguments),
            flags=flags,
            output=output,
            error=error,
        )
        if record.failed:
            return logger.error(FAILURE_MESSAGE, extra=record.to_extra())
        return logger.info(SUCCESS_MESSAGE, extra=record.to_extra())

    return log_execution


__all__ = ["FAILURE_MESSAGE", "LogExecutionCallable", "SUCCESS_MESSAGE", "create_log_execution"]
