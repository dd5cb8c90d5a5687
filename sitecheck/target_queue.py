from __future__ import annotations

import queue
import threading


class _Closed:
    def __repr__(self) -> str:
        return "CLOSED"


# Returned by dequeue() once the queue is closed and drained.
CLOSED = _Closed()


class TargetQueueClosed(RuntimeError):
    pass


class TargetQueue:
    """
    Single-producer, multi-consumer handoff of target URLs.

    Each target goes to exactly one consumer. ``close()`` appends a sentinel
    behind the pending targets; a consumer that takes the sentinel puts it
    back so every other consumer sees it too.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    def enqueue(self, target: str) -> None:
        with self._lock:
            if self._closed:
                raise TargetQueueClosed(f"queue closed, cannot enqueue {target!r}")
            self._queue.put(target)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(CLOSED)

    def dequeue(self) -> str | _Closed:
        item = self._queue.get()
        if item is CLOSED:
            self._queue.put(CLOSED)
        return item
