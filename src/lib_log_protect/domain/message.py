"""ISO 8583-style financial message keyed by field number.

Purpose
-------
Provide a concrete message type for producers, tests, and the CLI. The
redaction listener only depends on the structural port in
:mod:`lib_log_protect.application.ports.message`; this class is one
implementation of it.

Contents
--------
* :class:`IsoMessage` - field-number to string mapping with deep clone.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .errors import MessageFormatError

MTI_FIELD = 0


def _check_field(number: int) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise MessageFormatError(f"field number must be an integer, got {number!r}")
    if number < 0:
        raise MessageFormatError(f"field number must not be negative, got {number}", field=number)
    return number


class IsoMessage:
    """Mutable field map with value semantics for clone and equality.

    Field ``0`` conventionally holds the message type indicator (MTI).

    Examples
    --------
    >>> msg = IsoMessage({0: "0200", 2: "4111111111111111"})
    >>> copy = msg.clone()
    >>> copy.set_field(2, "____")
    >>> msg.get_field(2), copy.get_field(2)
    ('4111111111111111', '____')
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[int, str] | None = None) -> None:
        self._fields: dict[int, str] = {}
        for number, value in (fields or {}).items():
            self.set_field(number, value)

    @property
    def mti(self) -> str | None:
        return self._fields.get(MTI_FIELD)

    @property
    def fields(self) -> Mapping[int, str]:
        """Read-only view of the current fields."""

        return MappingProxyType(self._fields)

    def has_field(self, number: int) -> bool:
        return _check_field(number) in self._fields

    def get_field(self, number: int) -> str:
        """Return the value of ``number``.

        Raises
        ------
        MessageFormatError
            When the field is absent.
        """

        try:
            return self._fields[_check_field(number)]
        except KeyError as exc:
            raise MessageFormatError(f"field {number} is not present", field=number) from exc

    def set_field(self, number: int, value: str) -> None:
        number = _check_field(number)
        if not isinstance(value, str):
            raise MessageFormatError(
                f"field {number} expects a string value, got {type(value).__name__}",
                field=number,
            )
        self._fields[number] = value

    def unset_field(self, number: int) -> None:
        self._fields.pop(_check_field(number), None)

    def clone(self) -> "IsoMessage":
        """Return an independent copy; string values are immutable so a new dict suffices."""

        copy = IsoMessage.__new__(IsoMessage)
        copy._fields = dict(self._fields)
        return copy

    def to_dict(self) -> dict[str, str]:
        """Serialise to a JSON-friendly mapping with string keys sorted numerically."""

        return {str(number): self._fields[number] for number in sorted(self._fields)}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "IsoMessage":
        """Build a message from :meth:`to_dict` output.

        Raises
        ------
        MessageFormatError
            When a key is not a field number or a value is not a string.
        """

        fields: dict[int, str] = {}
        for key, value in payload.items():
            try:
                number = int(key)
            except (TypeError, ValueError) as exc:
                raise MessageFormatError(f"invalid field number {key!r}") from exc
            fields[number] = value
        return cls(fields)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IsoMessage):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"IsoMessage(mti={self.mti!r}, fields={sorted(self._fields)!r})"


__all__ = ["IsoMessage", "MTI_FIELD"]
