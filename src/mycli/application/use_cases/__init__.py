"""Use cases orchestrating logging and the greeting command."""

from __future__ import annotations

from .greet import GreetRequest, GreetResult, create_greet
from .log_execution import create_log_execution
from .process_event import create_process_log_event

__all__ = [
    "GreetRequest",
    "GreetResult",
    "create_greet",
    "create_log_execution",
    "create_process_log_event",
]
