"""Port for configuration sources consulted by configurable listeners."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigurationPort(Protocol):
    """String-keyed lookup with caller-supplied defaults."""

    def get(self, key: str, default: str = "") -> str:
        """Return the value stored under ``key`` or ``default``."""


__all__ = ["ConfigurationPort"]
