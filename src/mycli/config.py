"""Optional ``.env`` loading for the CLI.

Purpose
-------
Let operators keep ``LOKI_ENDPOINT`` and the ``LOG_*`` toggles in a ``.env``
file next to their project instead of exporting them by hand. Loading is
opt-in: the ``--use-dotenv`` flag or the ``MYCLI_USE_DOTENV`` variable enables
it, and existing environment variables always win over file entries.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle name.
* :func:`should_use_dotenv` - flag/environment precedence.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` once.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "MYCLI_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_loaded_path: Path | None = None
_attempted = False


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether ``.env`` loading is enabled.

    An explicit CLI flag wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="1")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    The search walks upwards from ``search_from`` (defaults to the current
    working directory). Subsequent calls return the first result.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, ``None`` when nothing was found.
    """
    global _loaded_path, _attempted
    if _attempted:
        return _loaded_path
    _attempted = True

    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    else:
        candidate = _search_upwards(search_from)
    if candidate is None:
        return None
    load_dotenv(candidate, override=False)
    _loaded_path = candidate.resolve()
    return _loaded_path


def _search_upwards(start: Path) -> Path | None:
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _loaded_path, _attempted
    _loaded_path = None
    _attempted = False


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
