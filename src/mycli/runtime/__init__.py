"""Runtime façade that wires the clean-architecture logging backbone.

Purpose
-------
Expose a stable entry point for composing the logging pipeline
(:func:`build_runtime`) and reading its configuration
(:func:`build_runtime_settings`) without importing the inner layers directly.

Contents
--------
* ``build_runtime_settings`` – environment-driven configuration.
* ``build_runtime`` – composition root returning a :class:`LoggingRuntime`.
* ``LoggerProxy`` – logger handed to the use cases.

System Role
-----------
Forms the outer shell of the design: the CLI builds one runtime per
invocation and passes its loggers explicitly into the use cases, so no
process-wide logger state exists.
"""

from __future__ import annotations

from ._composition import LoggerProxy, LoggingRuntime, SystemClock, UuidProvider, build_runtime
from ._settings import (
    APP_NAME_ENV,
    LOKI_ENDPOINT_ENV,
    SUPPRESS_ERRORS_ENV,
    RuntimeSettings,
    build_runtime_settings,
)

__all__ = [
    "APP_NAME_ENV",
    "LOKI_ENDPOINT_ENV",
    "LoggerProxy",
    "LoggingRuntime",
    "RuntimeSettings",
    "SUPPRESS_ERRORS_ENV",
    "SystemClock",
    "UuidProvider",
    "build_runtime",
    "build_runtime_settings",
]
