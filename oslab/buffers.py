"""Bounded buffers shared by producer and consumer threads."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable, Iterable
from typing import Any, Union

BUFFER_SIZE = 5
NUM_ITEMS = 10

Listener = Callable[[str, Any], None]


class _Buffer:
    """Common parts: a capacity and an optional listener told of each put and get."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("buffer must hold at least one item")
        self.capacity = capacity
        self.listener: Listener | None = None

    def _announce(self, event: str, item: Any) -> None:
        if self.listener is not None:
            self.listener(event, item)


class BoundedBuffer(_Buffer):
    """Buffer guarded by one mutex and two condition variables, with an item count."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        super().__init__(capacity)
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def put(self, item: Any) -> None:
        """Add an item, waiting while the buffer is full."""
        with self._lock:
            while len(self._items) == self.capacity:
                self._not_full.wait()
            self._items.append(item)
            self._announce("Produced", item)
            self._not_empty.notify()

    def get(self) -> Any:
        """Take the oldest item, waiting while the buffer is empty."""
        with self._lock:
            while not self._items:
                self._not_empty.wait()
            item = self._items.popleft()
            self._announce("Consumed", item)
            self._not_full.notify()
            return item


class RingBuffer(_Buffer):
    """Circular buffer of ``size`` slots that keeps one slot free to tell full from empty."""

    def __init__(self, size: int = BUFFER_SIZE) -> None:
        if size < 2:
            raise ValueError("ring buffer needs at least two slots")
        super().__init__(size - 1)
        self.size = size
        self._slots: list[Any] = [None] * size
        self._in = 0
        self._out = 0
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)

    def __len__(self) -> int:
        with self._lock:
            return (self._in - self._out) % self.size

    def put(self, item: Any) -> None:
        """Write an item at the input index, waiting while the ring is full."""
        with self._lock:
            while (self._in + 1) % self.size == self._out:
                self._not_full.wait()
            self._slots[self._in] = item
            self._announce("Produced", item)
            self._in = (self._in + 1) % self.size
            self._not_empty.notify()

    def get(self) -> Any:
        """Read the item at the output index, waiting while the ring is empty."""
        with self._lock:
            while self._in == self._out:
                self._not_empty.wait()
            item = self._slots[self._out]
            self._slots[self._out] = None
            self._announce("Consumed", item)
            self._out = (self._out + 1) % self.size
            self._not_full.notify()
            return item


class SlotBuffer(_Buffer):
    """Buffer whose empty and filled slots are counted by two semaphores."""

    def __init__(self, capacity: int = BUFFER_SIZE) -> None:
        super().__init__(capacity)
        self._items: deque[Any] = deque()
        self._empty = threading.Semaphore(capacity)
        self._full = threading.Semaphore(0)
        self._mutex = threading.Lock()

    def __len__(self) -> int:
        with self._mutex:
            return len(self._items)

    def put(self, item: Any) -> None:
        """Wait for an empty slot, then fill it."""
        self._empty.acquire()
        with self._mutex:
            self._items.append(item)
            self._announce("Produced", item)
        self._full.release()

    def get(self) -> Any:
        """Wait for a filled slot, then empty it."""
        self._full.acquire()
        with self._mutex:
            item = self._items.popleft()
            self._announce("Consumed", item)
        self._empty.release()
        return item


AnyBuffer = Union[BoundedBuffer, RingBuffer, SlotBuffer]


def produce_consume(
    buffer: AnyBuffer,
    producers: int = 1,
    consumers: int = 1,
    items: int | Iterable[Any] = NUM_ITEMS,
    produce_delay: float = 0.0,
    consume_delay: float = 0.0,
) -> list[str]:
    """Run producer and consumer threads over a buffer and return the event log.

    ``items`` is either a count (items 0, 1, ...) or the items themselves.
    Every producer puts all the items and every consumer takes as many.
    """
    values = list(range(items)) if isinstance(items, int) else list(items)
    if producers < 1 or consumers < 1:
        raise ValueError("need at least one producer and one consumer")
    if producers != consumers:
        raise ValueError("producers and consumers must be equal in number")

    log: list[str] = []

    def record(event: str, item: Any) -> None:
        log.append(f"{event} item {item}")

    def produce() -> None:
        for value in values:
            buffer.put(value)
            time.sleep(produce_delay)

    def consume() -> None:
        for _ in values:
            buffer.get()
            time.sleep(consume_delay)

    previous = buffer.listener
    buffer.listener = record
    try:
        threads = [threading.Thread(target=produce) for _ in range(producers)]
        threads += [threading.Thread(target=consume) for _ in range(consumers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
    finally:
        buffer.listener = previous
    return log