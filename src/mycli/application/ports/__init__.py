"""Protocols the application layer depends on; adapters implement them."""

from __future__ import annotations

from .console import ConsolePort
from .logger import LoggerPort
from .random import RandomSourcePort
from .sink import LogSinkPort
from .structures import StructuredBackendPort
from .time import ClockPort, IdProvider

__all__ = [
    "ClockPort",
    "ConsolePort",
    "IdProvider",
    "LogSinkPort",
    "LoggerPort",
    "RandomSourcePort",
    "StructuredBackendPort",
]
