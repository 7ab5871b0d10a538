"""Error taxonomy shared by the greeting use case and the log sinks."""

from __future__ import annotations


class GreetingError(Exception):
    """Base class for failures that end a command invocation."""


class ValidationError(GreetingError, ValueError):
    """Required input was missing or empty."""


class SimulatedFaultError(GreetingError):
    """Failure injected on purpose by the shout fault simulation."""


class TransportError(RuntimeError):
    """Delivery of a log line to a remote collector failed.

    Only raised when the sink is configured not to suppress errors.
    """


__all__ = ["GreetingError", "SimulatedFaultError", "TransportError", "ValidationError"]
