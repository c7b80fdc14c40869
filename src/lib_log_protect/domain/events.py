"""Domain event carrying the payload handed to log listeners.

Purpose
-------
Represent a captured transaction log entry as it travels through the listener
chain. Unlike a rendered log record the payload is a heterogeneous list that
listeners may rewrite in place.

Contents
--------
* :class:`LogEvent` dataclass with payload/error helpers and a per-event lock.

System Role
-----------
Created by producers, mutated by :class:`~lib_log_protect.adapters.ProtectedLogListener`
and read by the listeners registered after it.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class LogEvent:
    """Mutable log event transported through the listener chain.

    Attributes
    ----------
    tag:
        Short label describing the event (``"send"``, ``"receive"`` ...).
    realm:
        Logical origin of the event, typically the channel or component name.
    payload:
        Ordered list of items; financial messages are the interesting ones.
    errors:
        Auxiliary records appended by listeners that recovered from failures.

    Examples
    --------
    >>> event = LogEvent(tag="send", realm="channel.acquirer")
    >>> event.add_message("hello")
    >>> event.add_error(RuntimeError("boom"))
    >>> event.payload, len(event.errors)
    (['hello'], 1)
    """

    tag: str = ""
    realm: str = ""
    payload: list[Any] = field(default_factory=list)
    errors: list[Any] = field(default_factory=list)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.payload = list(self.payload)
        self.errors = list(self.errors)

    def add_message(self, item: Any) -> None:
        """Append ``item`` to the payload."""

        self.payload.append(item)

    def add_error(self, error: Any) -> None:
        """Record an auxiliary error observed while handling this event."""

        self.errors.append(error)

    def has_errors(self) -> bool:
        return bool(self.errors)


__all__ = ["LogEvent"]
