"""Domain entities and value objects used by the greeting CLI."""

from __future__ import annotations

from .errors import GreetingError, SimulatedFaultError, TransportError, ValidationError
from .events import LogEvent
from .execution import CommandExecution
from .levels import LogLevel
from .push import LogLine, PushPayload

__all__ = [
    "CommandExecution",
    "GreetingError",
    "LogEvent",
    "LogLevel",
    "LogLine",
    "PushPayload",
    "SimulatedFaultError",
    "TransportError",
    "ValidationError",
]
