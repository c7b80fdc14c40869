"""Port describing the financial message operations the listener relies on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FinancialMessagePort(Protocol):
    """Field map addressed by integer field number.

    Any operation may raise :class:`~lib_log_protect.domain.errors.MessageFormatError`.
    """

    def has_field(self, number: int) -> bool:
        """Return ``True`` when ``number`` is present."""

    def get_field(self, number: int) -> str:
        """Return the value of ``number``."""

    def set_field(self, number: int, value: str) -> None:
        """Store ``value`` under ``number``."""

    def clone(self) -> "FinancialMessagePort":
        """Return a deep copy sharing no mutable state with the original."""


__all__ = ["FinancialMessagePort"]
