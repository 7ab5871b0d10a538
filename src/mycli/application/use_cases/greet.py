"""Greeting use case with optional shout-mode fault injection.

Purpose
-------
Implement the ``greet`` command independently from the CLI framework so the
validation, greeting, and simulated-fault branches can be driven by tests with
scripted random draws.

Contents
--------
* :class:`GreetRequest` / :class:`GreetResult` value objects.
* :func:`create_greet` factory returning the use case callable.

System Role
-----------
Sits between the click command (which parses flags and maps errors to exit
codes) and the execution logger. Failures are raised as
:class:`~mycli.domain.errors.GreetingError` subclasses after the execution
record has been logged; nothing here terminates the process.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass

from mycli.application.ports import LoggerPort, RandomSourcePort
from mycli.domain import SimulatedFaultError, ValidationError
from mycli.domain.execution import as_arguments, render_flags

from .log_execution import LogExecutionCallable

COMMAND_NAME = "greet"
GREETING_TEMPLATE = "Hello and welcome {name}!"
GARBLED_OUTPUT = "HE--<BLERGH>"
BAD_REQUEST_MESSAGE = "400 Bad Request"
MISSING_NAME_MESSAGE = "--name flag is required"

#: Chance that a shouted greeting hits the simulated fault branch at all.
FAULT_PROBABILITY = 0.1
#: Within the fault branch, chance of a bad request rather than garbled output.
BAD_REQUEST_PROBABILITY = 0.5


@dataclass(slots=True, frozen=True)
class GreetRequest:
    """Parsed inputs of a ``greet`` invocation."""

    name: str
    shout: bool = False
    arguments: tuple[str, ...] = ()

    def flags(self) -> dict[str, str]:
        return render_flags({"name": self.name, "shout": self.shout})


@dataclass(slots=True, frozen=True)
class GreetResult:
    """Text to print and whether the fault simulation garbled it."""

    message: str
    garbled: bool = False


GreetCallable = Callable[[GreetRequest], GreetResult]


def create_greet(
    *,
    random_source: RandomSourcePort,
    log_execution: LogExecutionCallable,
    logger: LoggerPort,
    timer: Callable[[], float] = time.perf_counter,
) -> GreetCallable:
    """Build the greeting use case around injected randomness and logging.

    Parameters
    ----------
    random_source:
        Supplies the draws deciding whether a shouted greeting fails.
    log_execution:
        Callable produced by :func:`create_log_execution`; invoked exactly once
        per call, on every path.
    logger:
        Logger receiving the auxiliary warning/error/duration lines.
    timer:
        Monotonic clock used for the completion duration.

    Raises
    ------
    ValidationError
        When the name is empty or whitespace.
    SimulatedFaultError
        When the shout simulation produces a bad request.

    Examples
    --------
    >>> class _Random:
    ...     def __init__(self, *values):
    ...         self._values = list(values)
    ...     def next_float(self):
    ...         return self._values.pop(0)
    >>> class _Logger:
    ...     def info(self, message, *, extra=None):
    ...         return {}
    ...     warning = error = info
    >>> records = []
    >>> greet = create_greet(
    ...     random_source=_Random(0.5),
    ...     log_execution=lambda *args: records.append(args) or {},
    ...     logger=_Logger(),
    ... )
    >>> greet(GreetRequest(name="Ada")).message
    'Hello and welcome Ada!'
    >>> greet(GreetRequest(name="Ada", shout=True)).message
    'HELLO AND WELCOME ADA!'
    >>> len(records)
    2
    """

    def greet(request: GreetRequest) -> GreetResult:
        started = timer()
        flags = request.flags()
        arguments = as_arguments(request.arguments)

        if not request.name.strip():
            error = ValidationError(MISSING_NAME_MESSAGE)
            logger.error(MISSING_NAME_MESSAGE)
            log_execution(COMMAND_NAME, arguments, flags, "", error)
            raise error

        message = GREETING_TEMPLATE.format(name=request.name)

        if request.shout:
            message = message.upper()
            if random_source.next_float() < FAULT_PROBABILITY:
                if random_source.next_float() < BAD_REQUEST_PROBABILITY:
                    fault = SimulatedFaultError(BAD_REQUEST_MESSAGE)
                    logger.error(BAD_REQUEST_MESSAGE, extra={"name": request.name})
                    log_execution(COMMAND_NAME, arguments, flags, "", fault)
                    raise fault
                logger.warning("Simulated cough output", extra={"name": request.name})
                log_execution(COMMAND_NAME, arguments, flags, GARBLED_OUTPUT, None)
                return GreetResult(message=GARBLED_OUTPUT, garbled=True)

        log_execution(COMMAND_NAME, arguments, flags, message, None)
        duration_ms = (timer() - started) * 1000.0
        logger.info("Command completed", extra={"duration_ms": round(duration_ms, 3)})
        return GreetResult(message=message)

    return greet


__all__ = [
    "BAD_REQUEST_MESSAGE",
    "GARBLED_OUTPUT",
    "GREETING_TEMPLATE",
    "GreetCallable",
    "GreetRequest",
    "GreetResult",
    "create_greet",
]
