"""Peterson's algorithm for mutual exclusion between two threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager


class PetersonLock:
    """Two-party lock built from interest flags and a favoured party."""

    def __init__(self) -> None:
        self._interested = [False, False]
        self._favored = 0

    @staticmethod
    def _other(pid: int) -> int:
        if pid not in (0, 1):
            raise ValueError(f"party must be 0 or 1, not {pid}")
        return 1 - pid

    def acquire(self, pid: int) -> None:
        """Spin until party ``pid`` may enter its critical section."""
        other = self._other(pid)
        self._interested[pid] = True
        self._favored = pid
        while self._interested[other] and self._favored == pid:
            time.sleep(0)

    def release(self, pid: int) -> None:
        """Leave the critical section for party ``pid``."""
        self._other(pid)
        self._interested[pid] = False

    @contextmanager
    def holding(self, pid: int) -> Iterator[None]:
        """Hold the lock for party ``pid`` for the duration of a with block."""
        self.acquire(pid)
        try:
            yield
        finally:
            self.release(pid)


def run_peterson(iterations: int = 5, delay: float = 1.0) -> list[str]:
    """Run two threads that alternate between non-critical and critical work.

    Returns the log of events in the order they happened.
    """
    lock = PetersonLock()
    log: list[str] = []

    def process(pid: int) -> None:
        for _ in range(iterations):
            log.append(f"Process {pid} is in non-critical section")
            time.sleep(delay)
            with lock.holding(pid):
                log.append(f"Process {pid} entered critical section")
            log.append(f"Process {pid} exited from critical section")

    threads = [threading.Thread(target=process, args=(pid,)) for pid in (0, 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return log