"""Bounded in-memory listener retaining the most recent events.

Purpose
-------
Let tests and the CLI observe the event exactly as later listeners in the
chain would, without writing anything to disk.

Contents
--------
* :class:`RecordingListener` with snapshot and reset helpers.
"""

from __future__ import annotations

from collections import deque
from threading import Lock
from typing import Deque

from lib_log_protect.domain.events import LogEvent


class RecordingListener:
    """Keep the last ``max_events`` events passed to :meth:`log`.

    Examples
    --------
    >>> recorder = RecordingListener(max_events=2)
    >>> for tag in ("a", "b", "c"):
    ...     _ = recorder.log(LogEvent(tag=tag))
    >>> [event.tag for event in recorder.snapshot()]
    ['b', 'c']
    """

    def __init__(self, *, max_events: int = 1000) -> None:
        if max_events <= 0:
            raise ValueError("max_events must be positive")
        self._events: Deque[LogEvent] = deque(maxlen=max_events)
        self._lock = Lock()

    @property
    def max_events(self) -> int:
        return self._events.maxlen or 0

    def log(self, event: LogEvent) -> LogEvent:
        with self._lock:
            self._events.append(event)
        return event

    def snapshot(self) -> list[LogEvent]:
        """Return a copy of the retained events, oldest first."""

        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


__all__ = ["RecordingListener"]
