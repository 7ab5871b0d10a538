"""Greeting CLI with dual console and Grafana Loki logging.

Importing :mod:`mycli` exposes the composition helpers so host code can reuse
the logging runtime without going through the command line.
"""

from __future__ import annotations

from .domain import CommandExecution, LogEvent, LogLevel, LogLine, PushPayload
from .runtime import LoggingRuntime, RuntimeSettings, build_runtime, build_runtime_settings

__all__ = [
    "CommandExecution",
    "LogEvent",
    "LogLevel",
    "LogLine",
    "LoggingRuntime",
    "PushPayload",
    "RuntimeSettings",
    "build_runtime",
    "build_runtime_settings",
]
