"""Façade wiring the redaction listener into a ready-to-use listener chain.

Purpose
-------
Give host applications one call that turns configuration into a dispatcher
with the redaction listener registered first, plus helpers used by the CLI.

Contents
--------
* :func:`build_dispatcher` - composition root for the listener chain.
* :func:`redact_message` - redact a single message through a throwaway chain.
* :func:`summary_info` - metadata banner shown by ``lib_log_protect info``.

System Role
-----------
Outer layer: depends on domain, application and adapters; nothing inside the
package imports from here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .adapters import EnvironmentConfiguration, ProtectedLogListener, RecordingListener
from .application.ports import ConfigurationPort, LogListenerPort, MaskPolicyPort
from .application.use_cases import LogDispatcher
from .domain import IsoMessage, LogEvent


@dataclass(slots=True)
class RedactionResult:
    """Outcome of :func:`redact_message`."""

    message: IsoMessage | None
    errors: list[Exception] = field(default_factory=list)


def build_dispatcher(
    configuration: ConfigurationPort | None = None,
    *,
    sinks: Iterable[LogListenerPort] = (),
    mask_policy: MaskPolicyPort | None = None,
) -> LogDispatcher:
    """Return a dispatcher running the redaction listener before ``sinks``.

    ``configuration`` defaults to :class:`EnvironmentConfiguration`.

    Raises
    ------
    ConfigurationError
        When the field lists cannot be parsed; no dispatcher is built.

    Examples
    --------
    >>> from lib_log_protect.adapters import MappingConfiguration
    >>> recorder = RecordingListener()
    >>> dispatcher = build_dispatcher(MappingConfiguration({"wipe": "52"}), sinks=[recorder])
    >>> _ = dispatcher.dispatch(LogEvent(payload=[IsoMessage({52: "A1B2C3D4E5F60718"})]))
    >>> recorder.snapshot()[0].payload[0].get_field(52)
    '[WIPED]'
    """

    listener = ProtectedLogListener.from_configuration(
        configuration if configuration is not None else EnvironmentConfiguration(),
        mask_policy=mask_policy,
    )
    return LogDispatcher([listener, *sinks])


def redact_message(
    message: IsoMessage,
    configuration: ConfigurationPort | None = None,
    *,
    mask_policy: MaskPolicyPort | None = None,
    tag: str = "redact",
) -> RedactionResult:
    """Run ``message`` through a fresh chain and return the redacted clone."""

    recorder = RecordingListener(max_events=1)
    dispatcher = build_dispatcher(configuration, sinks=[recorder], mask_policy=mask_policy)
    dispatcher.dispatch(LogEvent(tag=tag, payload=[message]))
    captured = recorder.snapshot()
    if not captured:
        return RedactionResult(message=None)
    event = captured[0]
    redacted = event.payload[0]
    return RedactionResult(
        message=redacted if isinstance(redacted, IsoMessage) else None,
        errors=list(event.errors),
    )


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


__all__ = ["RedactionResult", "build_dispatcher", "redact_message", "summary_info"]
