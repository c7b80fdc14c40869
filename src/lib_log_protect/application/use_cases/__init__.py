"""Application use cases."""

from __future__ import annotations

from .dispatch import LogDispatcher

__all__ = ["LogDispatcher"]
