"""Configuration sources implementing :class:`ConfigurationPort`."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from lib_log_protect.application.ports.configuration import ConfigurationPort

ENV_PREFIX = "LOG_PROTECT_"


class MappingConfiguration(ConfigurationPort):
    """Serve configuration values from an in-memory mapping.

    Non-string values are converted with :func:`str` so sequences of field
    numbers can be passed as ``"2 35"`` or ``[2, 35]``.

    Examples
    --------
    >>> cfg = MappingConfiguration({"protect": [2, 35], "wipe": "48"})
    >>> cfg.get("protect"), cfg.get("wipe"), cfg.get("mask", "fixed")
    ('2 35', '48', 'fixed')
    """

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = {key: _to_text(value) for key, value in (values or {}).items()}

    def get(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def __repr__(self) -> str:
        return f"MappingConfiguration({self._values!r})"


class EnvironmentConfiguration(ConfigurationPort):
    """Read ``<prefix><KEY>`` environment variables (``LOG_PROTECT_PROTECT`` ...).

    The environment is consulted on every lookup so values loaded later from
    a ``.env`` file are visible.
    """

    def __init__(self, *, prefix: str = ENV_PREFIX, environ: Mapping[str, str] | None = None) -> None:
        self._prefix = prefix
        self._environ = environ

    def get(self, key: str, default: str = "") -> str:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(f"{self._prefix}{key.upper()}", default)


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (set, frozenset)):
        value = sorted(value)
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


__all__ = ["ENV_PREFIX", "EnvironmentConfiguration", "MappingConfiguration"]
