"""Adapters implementing the application ports."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter
from .loki import LokiBackendAdapter, LokiWriter
from .random_source import ScriptedRandomSource, SystemRandomSource

__all__ = [
    "LokiBackendAdapter",
    "LokiWriter",
    "RichConsoleAdapter",
    "ScriptedRandomSource",
    "SystemRandomSource",
]
