"""Field selection parsed from whitespace-separated configuration text."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import ConfigurationError

_FIELD_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_field_numbers(text: str, *, key: str) -> tuple[int, ...]:
    """Parse ``text`` into an ordered tuple of unique field numbers.

    Duplicates keep their first position. ``key`` names the configuration
    entry in error messages.

    Examples
    --------
    >>> parse_field_numbers("2 35  45\\t2", key="protect")
    (2, 35, 45)
    >>> parse_field_numbers("", key="wipe")
    ()
    """

    numbers: dict[int, None] = {}
    for token in text.split():
        if not _FIELD_TOKEN.fullmatch(token):
            raise ConfigurationError(f"{key}: {token!r} is not a field number", key=key, token=token)
        number = int(token)
        if number < 0:
            raise ConfigurationError(f"{key}: field number {number} must not be negative", key=key, token=token)
        numbers.setdefault(number, None)
    return tuple(numbers)


@dataclass(slots=True, frozen=True)
class FieldSelector:
    """Field numbers to mask (``protect``) and to wipe (``wipe``).

    Both sets may overlap; the listener applies ``wipe`` last so it wins.
    """

    protect: tuple[int, ...] = ()
    wipe: tuple[int, ...] = ()

    @classmethod
    def from_text(cls, *, protect: str = "", wipe: str = "") -> "FieldSelector":
        return cls(
            protect=parse_field_numbers(protect, key="protect"),
            wipe=parse_field_numbers(wipe, key="wipe"),
        )

    @property
    def is_empty(self) -> bool:
        return not self.protect and not self.wipe


__all__ = ["FieldSelector", "parse_field_numbers"]
