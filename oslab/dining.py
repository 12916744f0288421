"""Dining philosophers, kept free of deadlock by always taking the lower fork first."""

from __future__ import annotations

import random
import threading
import time

NUM_PHILOSOPHERS = 5
MAX_EAT_COUNT = 3


class DiningTable:
    """A round table of philosophers with one fork between each pair of neighbours."""

    def __init__(
        self,
        size: int = NUM_PHILOSOPHERS,
        eat_time: float = 1.0,
        rng: random.Random | None = None,
    ) -> None:
        if size < 2:
            raise ValueError("a table needs at least two philosophers")
        self.size = size
        self.eat_time = eat_time
        self.forks = tuple(threading.Lock() for _ in range(size))
        self._rng = rng if rng is not None else random.Random()
        self._rng_lock = threading.Lock()
        self._log: list[str] = []
        self._log_lock = threading.Lock()

    @property
    def log(self) -> list[str]:
        """The events recorded so far."""
        with self._log_lock:
            return list(self._log)

    def _record(self, line: str) -> None:
        with self._log_lock:
            self._log.append(line)

    def _check(self, pid: int) -> None:
        if not 0 <= pid < self.size:
            raise ValueError(f"philosopher must be in 0..{self.size - 1}, not {pid}")

    def left_fork(self, pid: int) -> int:
        """Index of the fork on a philosopher's left."""
        self._check(pid)
        return pid

    def right_fork(self, pid: int) -> int:
        """Index of the fork on a philosopher's right."""
        self._check(pid)
        return (pid + 1) % self.size

    def grab_forks(self, pid: int) -> None:
        """Pick up both forks, the lower-numbered one first."""
        for fork in sorted((self.left_fork(pid), self.right_fork(pid))):
            self.forks[fork].acquire()
            self._record(f"Philosopher {pid} picked up fork {fork}")

    def release_forks(self, pid: int) -> None:
        """Put down the left fork, then the right one."""
        for fork in (self.left_fork(pid), self.right_fork(pid)):
            self._record(f"Philosopher {pid} released fork {fork}")
            self.forks[fork].release()

    def _think_time(self, think: float) -> float:
        with self._rng_lock:
            return self._rng.randrange(2) * think

    def _philosopher(self, pid: int, meals: int, think: float) -> None:
        for meal in range(1, meals + 1):
            self._record(f"Philosopher {pid} is thinking")
            time.sleep(self._think_time(think))
            self.grab_forks(pid)
            try:
                self._record(f"Philosopher {pid} is eating (meal {meal}/{meals})")
                time.sleep(self.eat_time)
            finally:
                self.release_forks(pid)
        self._record(f"Philosopher {pid} is full and leaving")

    def dine(self, meals: int = MAX_EAT_COUNT, think: float = 1.0) -> list[str]:
        """Let every philosopher eat ``meals`` times and return the log of the dinner.

        Each thinking pause lasts either nothing or ``think`` seconds, at random.
        """
        if meals < 0:
            raise ValueError("meals must not be negative")
        with self._log_lock:
            self._log.clear()
        threads = [
            threading.Thread(target=self._philosopher, args=(pid, meals, think))
            for pid in range(self.size)
        ]
        for thread in threads:
            thread.start()
        for pid, thread in enumerate(threads):
            thread.join()
            self._record(f"Philosopher {pid} has finished dining")
        self._record("Dinner is over!")
        return self.log