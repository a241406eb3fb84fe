"""
channel.py — Broadcast of GameState snapshots to any number of observers.

A new subscription first receives the latest snapshot, then every later
one in publish order. Publishing and subscribing share one lock, so a
subscriber can neither miss a snapshot nor see one twice.
"""

import logging
import queue
import threading

from .model import GameState

logger = logging.getLogger(__name__)

_CLOSED = object()


class SubscriptionClosed(Exception):
    """Raised by Subscription.get() once the subscription is closed and drained."""


class Subscription:
    """
    One observer's ordered view of the snapshot stream.

    The queue is unbounded and grows by one snapshot per publish, so a
    subscriber must keep draining it or close() it when done.
    """

    def __init__(self, channel: "SnapshotChannel"):
        self._channel = channel
        self._queue: queue.Queue = queue.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, timeout: float | None = None) -> GameState:
        """
        Block for the next snapshot.
        Raises queue.Empty on timeout, SubscriptionClosed after close().
        """
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            # Leave the marker for later callers.
            self._queue.put(_CLOSED)
            raise SubscriptionClosed()
        return item

    def drain(self) -> list[GameState]:
        """Every snapshot queued so far, oldest first, without blocking."""
        items = []
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                return items
            if item is _CLOSED:
                self._queue.put(_CLOSED)
                return items
            items.append(item)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._channel._unregister(self)
        self._queue.put(_CLOSED)

    def _deliver(self, state: GameState) -> None:
        self._queue.put(state)

    def __iter__(self):
        while True:
            try:
                yield self.get()
            except SubscriptionClosed:
                return

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class SnapshotChannel:
    """Holds the current snapshot and fans every new one out to subscribers."""

    def __init__(self, initial: GameState):
        self._lock = threading.Lock()
        self._current = initial
        self._subscribers: list[Subscription] = []

    @property
    def current(self) -> GameState:
        return self._current

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def publish(self, state: GameState) -> None:
        with self._lock:
            self._current = state
            for sub in self._subscribers:
                sub._deliver(state)

    def subscribe(self) -> Subscription:
        sub = Subscription(self)
        with self._lock:
            sub._deliver(self._current)
            self._subscribers.append(sub)
            count = len(self._subscribers)
        logger.debug("Subscriber added (%d active)", count)
        return sub

    def _unregister(self, sub: Subscription) -> None:
        with self._lock:
            if sub in self._subscribers:
                self._subscribers.remove(sub)
