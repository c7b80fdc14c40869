"""Application-layer ports (Protocols) for the redaction pipeline."""

from __future__ import annotations

from .configuration import ConfigurationPort
from .listener import LogListenerPort
from .masking import MaskPolicyPort
from .message import FinancialMessagePort

__all__ = [
    "ConfigurationPort",
    "FinancialMessagePort",
    "LogListenerPort",
    "MaskPolicyPort",
]
