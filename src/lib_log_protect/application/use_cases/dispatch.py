"""Use case passing a log event through an ordered chain of listeners.

Purpose
-------
Model the logger that owns the listener chain. Redacting listeners rewrite the
event in place, so only listeners registered after them observe the redacted
version; the dispatcher preserves registration order and warns when a
redacting listener is added behind one that would see cleartext.

Contents
--------
* :class:`LogDispatcher` - thread-safe listener registry and chain runner.

System Role
-----------
Application-layer orchestrator between event producers and the adapters
(redaction listener, recording listener, host-provided sinks).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import RLock

from lib_log_protect.application.ports import LogListenerPort
from lib_log_protect.domain.events import LogEvent

logger = logging.getLogger(__name__)


def _redacts(listener: LogListenerPort) -> bool:
    return bool(getattr(listener, "redacts_payload", False))


class LogDispatcher:
    """Run events through listeners in registration order.

    A listener returning ``None`` stops the chain. An exception raised by one
    listener is logged and the event continues with the next listener, unless
    the failing listener redacts payloads: the event is then withheld so later
    listeners never receive it in cleartext.

    Examples
    --------
    >>> seen = []
    >>> class Tap:
    ...     def log(self, event):
    ...         seen.append(event.tag)
    ...         return event
    >>> dispatcher = LogDispatcher([Tap()])
    >>> _ = dispatcher.dispatch(LogEvent(tag="send"))
    >>> seen
    ['send']
    """

    def __init__(self, listeners: Iterable[LogListenerPort] = ()) -> None:
        self._lock = RLock()
        self._listeners: tuple[LogListenerPort, ...] = ()
        for listener in listeners:
            self.add_listener(listener)

    @property
    def listeners(self) -> tuple[LogListenerPort, ...]:
        """Snapshot of the registered listeners."""

        return self._listeners

    def add_listener(self, listener: LogListenerPort) -> None:
        """Append ``listener`` to the end of the chain."""

        if not isinstance(listener, LogListenerPort):
            raise TypeError(f"{type(listener).__name__} does not implement log(event)")
        with self._lock:
            if _redacts(listener):
                exposed = [type(item).__name__ for item in self._listeners if not _redacts(item)]
                if exposed:
                    logger.warning(
                        "redacting listener %s registered after %s; those listeners receive unredacted events",
                        type(listener).__name__,
                        ", ".join(exposed),
                    )
            self._listeners = (*self._listeners, listener)

    def remove_listener(self, listener: LogListenerPort) -> bool:
        """Remove ``listener``; return ``False`` when it was not registered."""

        with self._lock:
            if listener not in self._listeners:
                return False
            self._listeners = tuple(item for item in self._listeners if item is not listener)
            return True

    def dispatch(self, event: LogEvent) -> LogEvent | None:
        """Pass ``event`` through the chain and return what the last listener produced."""

        current: LogEvent | None = event
        for listener in self._listeners:
            try:
                current = listener.log(current)
            except Exception:
                if _redacts(listener):
                    logger.exception("redacting listener %s failed; event withheld from later listeners", type(listener).__name__)
                    return None
                logger.exception("listener %s failed; continuing with the next listener", type(listener).__name__)
                continue
            if current is None:
                break
        return current


__all__ = ["LogDispatcher"]
