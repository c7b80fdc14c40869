"""Error taxonomy shared by the redaction pipeline.

Purpose
-------
Separate failures that must block activation (bad field lists) from failures
that are recovered per message and recorded on the event.

Contents
--------
* :class:`ConfigurationError` - malformed configuration, fatal at setup time.
* :class:`MessageFormatError` - raised by message field operations.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when the listener configuration cannot be applied.

    Attributes
    ----------
    key:
        Configuration key being parsed (``"protect"``, ``"wipe"``, ``"mask"``)
        or ``None`` when the failure is not tied to a single key.
    token:
        Offending token when available.
    """

    def __init__(self, message: str, *, key: str | None = None, token: str | None = None) -> None:
        super().__init__(message)
        self.key = key
        self.token = token


class MessageFormatError(Exception):
    """Raised by a financial message when a field cannot be read or written."""

    def __init__(self, message: str, *, field: int | None = None) -> None:
        super().__init__(message)
        self.field = field


__all__ = ["ConfigurationError", "MessageFormatError"]
