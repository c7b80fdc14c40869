"""Domain entities and value objects used by the redaction pipeline."""

from __future__ import annotations

from .errors import ConfigurationError, MessageFormatError
from .events import LogEvent
from .fields import FieldSelector, parse_field_numbers
from .message import MTI_FIELD, IsoMessage

__all__ = [
    "ConfigurationError",
    "FieldSelector",
    "IsoMessage",
    "LogEvent",
    "MTI_FIELD",
    "MessageFormatError",
    "parse_field_numbers",
]
