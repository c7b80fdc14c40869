"""Mask policies for protected field values.

Purpose
-------
Provide the irreversible transforms applied by the redaction listener to
fields listed under ``protect``.

Contents
--------
* :class:`FixedCharacterMask` - replace every character, length preserved.
* :class:`PanTruncationMask` - PCI-style truncation keeping the BIN and the
  last four digits of a card number.
* :func:`create_mask_policy` - resolve a policy from its configuration name.

System Role
-----------
Concrete implementations of :class:`MaskPolicyPort`. Both policies preserve
the input length and are stable when applied to their own output, so
re-processing an already redacted message changes nothing.
"""

from __future__ import annotations

from typing import Callable

from lib_log_protect.application.ports.masking import MaskPolicyPort
from lib_log_protect.domain.errors import ConfigurationError

DEFAULT_MASK_CHAR = "_"


def _validate_mask_char(char: str) -> str:
    if len(char) != 1:
        raise ConfigurationError(f"mask character must be a single character, got {char!r}", key="mask")
    return char


class FixedCharacterMask(MaskPolicyPort):
    """Replace every character of the value with ``char``.

    Examples
    --------
    >>> FixedCharacterMask().mask("4111111111111111")
    '________________'
    >>> FixedCharacterMask(char="*").mask("")
    ''
    """

    name = "fixed"

    def __init__(self, *, char: str = DEFAULT_MASK_CHAR) -> None:
        self._char = _validate_mask_char(char)

    def mask(self, value: str) -> str:
        return self._char * len(value)

    def __repr__(self) -> str:
        return f"FixedCharacterMask(char={self._char!r})"


class PanTruncationMask(MaskPolicyPort):
    """Keep the first six and last four characters of a card number.

    Why
    ---
    Matches the truncation commonly allowed in transaction logs: the BIN and
    the last four digits stay readable for support staff, the rest is masked.

    What
    ----
    The primary part of the value ends at the first track separator: ``=``,
    or ``D`` when the value holds no ``^``. The separator is kept, everything
    after it is masked. A primary part shorter than thirteen characters (the
    shortest card number) is masked entirely, since truncation would reveal
    most or all of it. A primary part holding anything other than digits and
    the mask character is not a card number: the whole value, separator
    included, is masked. The policy is meant for PAN and track fields; free
    text such as field 48 gets no clear characters. Output length always
    equals input length.

    Examples
    --------
    >>> PanTruncationMask().mask("4111111111111111")
    '411111______1111'
    >>> PanTruncationMask().mask("4111111111111111=2512101")
    '411111______1111=_______'
    >>> PanTruncationMask().mask("12345")
    '_____'
    >>> PanTruncationMask().mask("additional data")
    '_______________'
    """

    name = "pan"
    _SHORTEST_PAN = 13
    _LEADING = 6
    _TRAILING = 4

    def __init__(self, *, char: str = DEFAULT_MASK_CHAR) -> None:
        char = _validate_mask_char(char)
        if char in "=D^":
            raise ConfigurationError(f"mask character {char!r} collides with a track separator", key="mask")
        self._char = char
        self._card_chars = frozenset("0123456789" + char)

    def mask(self, value: str) -> str:
        separator = self._separator_index(value)
        primary_end = len(value) if separator < 0 else separator
        if not self._card_chars.issuperset(value[:primary_end]):
            return self._char * len(value)
        clear: set[int] = set()
        if primary_end >= self._SHORTEST_PAN:
            clear.update(range(self._LEADING))
            clear.update(range(primary_end - self._TRAILING, primary_end))
        if separator >= 0:
            clear.add(separator)
        return "".join(ch if index in clear else self._char for index, ch in enumerate(value))

    @staticmethod
    def _separator_index(value: str) -> int:
        index = value.find("=")
        if index < 0 and "^" not in value:
            index = value.find("D")
        return index

    def __repr__(self) -> str:
        return f"PanTruncationMask(char={self._char!r})"


MASK_POLICIES: dict[str, Callable[..., MaskPolicyPort]] = {
    FixedCharacterMask.name: FixedCharacterMask,
    PanTruncationMask.name: PanTruncationMask,
}


def create_mask_policy(name: str, *, char: str = DEFAULT_MASK_CHAR) -> MaskPolicyPort:
    """Instantiate the policy registered under ``name`` (case-insensitive)."""

    normalized = name.strip().lower() or FixedCharacterMask.name
    try:
        factory = MASK_POLICIES[normalized]
    except KeyError as exc:
        known = ", ".join(sorted(MASK_POLICIES))
        raise ConfigurationError(f"unknown mask policy {name!r} (expected one of: {known})", key="mask", token=name) from exc
    return factory(char=char)


__all__ = [
    "DEFAULT_MASK_CHAR",
    "FixedCharacterMask",
    "MASK_POLICIES",
    "PanTruncationMask",
    "create_mask_policy",
]
