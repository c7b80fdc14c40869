"""Port for value masking policies."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MaskPolicyPort(Protocol):
    """Deterministic, irreversible transform applied to protected field values.

    Implementations document how the output length relates to the input and
    must be stable when applied to their own output.
    """

    def mask(self, value: str) -> str:
        """Return the masked representation of ``value``."""


__all__ = ["MaskPolicyPort"]
