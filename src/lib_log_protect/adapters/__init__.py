"""Adapters implementing the application ports."""

from __future__ import annotations

from .configuration import ENV_PREFIX, EnvironmentConfiguration, MappingConfiguration
from .masking import MASK_POLICIES, FixedCharacterMask, PanTruncationMask, create_mask_policy
from .protected_listener import WIPED, ProtectedLogListener
from .recording import RecordingListener

__all__ = [
    "ENV_PREFIX",
    "EnvironmentConfiguration",
    "FixedCharacterMask",
    "MASK_POLICIES",
    "MappingConfiguration",
    "PanTruncationMask",
    "ProtectedLogListener",
    "RecordingListener",
    "WIPED",
    "create_mask_policy",
]
