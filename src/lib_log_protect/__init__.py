"""Field-level redaction of financial messages carried by log events.

The public surface bundles the redaction listener, the listener chain, the
message and event types it operates on, and the façade helpers. Register
:class:`ProtectedLogListener` before any listener that persists events.
"""

from __future__ import annotations

from .adapters import (
    WIPED,
    EnvironmentConfiguration,
    FixedCharacterMask,
    MappingConfiguration,
    PanTruncationMask,
    ProtectedLogListener,
    RecordingListener,
    create_mask_policy,
)
from .application.use_cases import LogDispatcher
from .domain import ConfigurationError, FieldSelector, IsoMessage, LogEvent, MessageFormatError
from .lib_log_protect import RedactionResult, build_dispatcher, redact_message, summary_info

RedactionFilter = ProtectedLogListener

__all__ = [
    "ConfigurationError",
    "EnvironmentConfiguration",
    "FieldSelector",
    "FixedCharacterMask",
    "IsoMessage",
    "LogDispatcher",
    "LogEvent",
    "MappingConfiguration",
    "MessageFormatError",
    "PanTruncationMask",
    "ProtectedLogListener",
    "RecordingListener",
    "RedactionFilter",
    "RedactionResult",
    "WIPED",
    "build_dispatcher",
    "create_mask_policy",
    "redact_message",
    "summary_info",
]
