"""Optional ``.env`` loading for the environment configuration source.

Purpose
-------
Hosts and the CLI read ``LOG_PROTECT_*`` variables through
:class:`~lib_log_protect.adapters.EnvironmentConfiguration`. This module lets
them source those variables from the nearest ``.env`` file without overriding
values already present in the process environment.

Contents
--------
* :data:`DOTENV_ENV_VAR` - environment toggle consulted when no flag is given.
* :func:`should_use_dotenv` - resolve flag/environment precedence.
* :func:`enable_dotenv` - locate and load the nearest ``.env`` once.
"""

from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_PROTECT_USE_DOTENV"
_TRUTHY = {"1", "true", "yes", "on"}

_dotenv_lock = Lock()
_dotenv_loaded: Path | None = None


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI flag wins over the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking up from ``search_from`` (default: cwd).

    Existing environment variables keep precedence. Subsequent calls return
    the path loaded first without reading the file again.
    """

    global _dotenv_loaded
    with _dotenv_lock:
        if _dotenv_loaded is not None:
            return _dotenv_loaded
        path = _find_dotenv(search_from)
        if path is None:
            logger.debug("no .env file found")
            return None
        load_dotenv(path, override=False)
        _dotenv_loaded = path
        logger.debug("loaded environment from %s", path)
        return path


def _find_dotenv(search_from: Path | None) -> Path | None:
    if search_from is None:
        found = find_dotenv(usecwd=True)
        return Path(found).resolve() if found else None
    for directory in (search_from.resolve(), *search_from.resolve().parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded
    with _dotenv_lock:
        _dotenv_loaded = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
