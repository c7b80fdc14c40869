"""Port for members of the log listener chain."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_protect.domain.events import LogEvent


@runtime_checkable
class LogListenerPort(Protocol):
    """Receive an event and hand it (possibly rewritten) to the next listener."""

    def log(self, event: LogEvent) -> LogEvent | None:
        """Return the event for the next listener, or ``None`` to stop the chain."""


__all__ = ["LogListenerPort"]
