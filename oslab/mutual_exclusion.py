"""Mutual exclusion between threads: a mutex, strict alternation and a turn-and-flag lock."""

from __future__ import annotations

import threading
import time
from typing import Union

NUM_THREADS = 2


def locked_counter(num_threads: int = NUM_THREADS, iterations: int = 10) -> tuple[int, list[str]]:
    """Increment a shared counter from several threads under a mutex.

    Returns the final value and the log written inside the critical section.
    """
    lock = threading.Lock()
    log: list[str] = []
    counter = 0

    def work() -> None:
        nonlocal counter
        ident = threading.get_ident()
        for _ in range(iterations):
            with lock:
                log.append(f"Thread ID {ident} is in the critical section.")
                counter += 1
                log.append(f"Shared variable incremented by Thread ID {ident}: {counter}")

    threads = [threading.Thread(target=work) for _ in range(num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return counter, log


class StrictAlternation:
    """Threads take turns in a fixed cycle; each may enter only on its own turn."""

    def __init__(self, num_threads: int = NUM_THREADS) -> None:
        if num_threads < 1:
            raise ValueError("need at least one thread")
        self.num_threads = num_threads
        self.turn = 0
        self._cond = threading.Condition()

    def _check(self, tid: int) -> None:
        if not 0 <= tid < self.num_threads:
            raise ValueError(f"thread id must be in 0..{self.num_threads - 1}, not {tid}")

    def enter(self, tid: int) -> None:
        """Wait until it is thread ``tid``'s turn."""
        self._check(tid)
        with self._cond:
            self._cond.wait_for(lambda: self.turn == tid)

    def leave(self, tid: int) -> None:
        """Pass the turn on to the next thread."""
        self._check(tid)
        with self._cond:
            if self.turn != tid:
                raise RuntimeError(f"thread {tid} does not hold the turn")
            self.turn = (self.turn + 1) % self.num_threads
            self._cond.notify_all()


class TurnFlagLock:
    """Two-thread lock using interest flags and a turn, waiting by spinning."""

    num_threads = NUM_THREADS

    def __init__(self) -> None:
        self.turn = 0
        self._flag = [False, False]

    @staticmethod
    def _other(tid: int) -> int:
        if tid not in (0, 1):
            raise ValueError(f"thread id must be 0 or 1, not {tid}")
        return 1 - tid

    def enter(self, tid: int) -> None:
        """Spin until thread ``tid`` may enter its critical section."""
        other = self._other(tid)
        self._flag[tid] = True
        while self._flag[other]:
            if self.turn != tid:
                self._flag[tid] = False
                while self.turn != tid:
                    time.sleep(0)
                self._flag[tid] = True
            else:
                time.sleep(0)

    def leave(self, tid: int) -> None:
        """Give the turn to the other thread and withdraw interest."""
        self.turn = self._other(tid)
        self._flag[tid] = False


AlternatingLock = Union[StrictAlternation, TurnFlagLock]


def run_alternation(lock: AlternatingLock, iterations: int = 5, delay: float = 1.0) -> list[str]:
    """Run one thread per party of ``lock``, each entering its critical section repeatedly."""
    log: list[str] = []
    log_lock = threading.Lock()

    def record(line: str) -> None:
        with log_lock:
            log.append(line)

    def work(tid: int) -> None:
        for _ in range(iterations):
            lock.enter(tid)
            try:
                record(f"Thread {tid} is in its critical section.")
            finally:
                lock.leave(tid)
            record(f"Thread {tid} executing...")
            time.sleep(delay)

    threads = [threading.Thread(target=work, args=(tid,)) for tid in range(lock.num_threads)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return log