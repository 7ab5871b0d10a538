"""Runtime settings resolved from the process environment.

Purpose
-------
Collect every environment-driven knob of the logging runtime into one frozen
value so composition stays declarative and tests can build settings without
touching ``os.environ``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from mycli.adapters.loki import DEFAULT_JOB, DEFAULT_TIMEOUT
from mycli.domain import LogLevel

LOKI_ENDPOINT_ENV = "LOKI_ENDPOINT"
APP_NAME_ENV = "MYCLI_APP_NAME"
SUPPRESS_ERRORS_ENV = "MYCLI_LOKI_SUPPRESS_ERRORS"
CONSOLE_LEVEL_ENV = "LOG_CONSOLE_LEVEL"
BACKEND_LEVEL_ENV = "LOG_BACKEND_LEVEL"
FORCE_COLOR_ENV = "LOG_FORCE_COLOR"
NO_COLOR_ENV = "LOG_NO_COLOR"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(slots=True, frozen=True)
class RuntimeSettings:
    """Resolved configuration for :func:`mycli.runtime.build_runtime`.

    Attributes
    ----------
    app_name:
        Value of the Loki ``job`` label and root logger name.
    loki_endpoint:
        Push URL; ``None`` keeps logging on the console only.
    suppress_sink_errors:
        Whether Loki transport failures are swallowed.
    loki_timeout:
        Request timeout for each push, in seconds.
    console_level / backend_level:
        Severity thresholds for the console and the Loki backend.
    force_color / no_color:
        Console colour overrides.
    """

    app_name: str = DEFAULT_JOB
    loki_endpoint: str | None = None
    suppress_sink_errors: bool = True
    loki_timeout: float = DEFAULT_TIMEOUT
    console_level: LogLevel = LogLevel.INFO
    backend_level: LogLevel = LogLevel.INFO
    force_color: bool = False
    no_color: bool = False


def build_runtime_settings(environ: Mapping[str, str] | None = None, **overrides: Any) -> RuntimeSettings:
    """Resolve :class:`RuntimeSettings` from ``environ`` (defaults to ``os.environ``).

    Keyword ``overrides`` win over environment values.

    Raises
    ------
    ValueError
        When a level name or boolean toggle cannot be parsed.

    Examples
    --------
    >>> build_runtime_settings({}).loki_endpoint is None
    True
    >>> settings = build_runtime_settings({"LOKI_ENDPOINT": "http://loki:3100/loki/api/v1/push"})
    >>> settings.loki_endpoint, settings.app_name
    ('http://loki:3100/loki/api/v1/push', 'mycli')
    >>> build_runtime_settings({"LOKI_ENDPOINT": "  "}).loki_endpoint is None
    True
    """
    env = os.environ if environ is None else environ

    endpoint = env.get(LOKI_ENDPOINT_ENV, "").strip() or None
    values: dict[str, Any] = {
        "app_name": env.get(APP_NAME_ENV, "").strip() or DEFAULT_JOB,
        "loki_endpoint": endpoint,
        "suppress_sink_errors": _env_bool(env, SUPPRESS_ERRORS_ENV, True),
        "console_level": _env_level(env, CONSOLE_LEVEL_ENV, LogLevel.INFO),
        "backend_level": _env_level(env, BACKEND_LEVEL_ENV, LogLevel.INFO),
        "force_color": _env_bool(env, FORCE_COLOR_ENV, False),
        "no_color": _env_bool(env, NO_COLOR_ENV, False),
    }
    values.update(overrides)
    return RuntimeSettings(**values)


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _env_bool({}, 'X', True)
    True
    >>> _env_bool({'X': 'off'}, 'X', True)
    False
    """
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean (got {raw!r})")


def _env_level(env: Mapping[str, str], name: str, default: LogLevel) -> LogLevel:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    return LogLevel.from_name(raw)


__all__ = [
    "APP_NAME_ENV",
    "LOKI_ENDPOINT_ENV",
    "RuntimeSettings",
    "SUPPRESS_ERRORS_ENV",
    "build_runtime_settings",
]
