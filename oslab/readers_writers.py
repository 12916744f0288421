"""Readers-writers problem with readers given preference."""

from __future__ import annotations

import random
import threading
from collections.abc import Iterator
from contextlib import contextmanager

NUM_READERS = 3
NUM_WRITERS = 2
MAX_VALUE = 100


class ReadersWriterLock:
    """Many readers may hold the lock together; a writer holds it alone.

    The first reader in shuts writers out and the last reader out lets them in.
    """

    def __init__(self) -> None:
        self._mutex = threading.Lock()
        self._rw = threading.Lock()
        self.reader_count = 0

    def acquire_read(self) -> None:
        """Enter as a reader, waiting while a writer holds the lock."""
        with self._mutex:
            self.reader_count += 1
            if self.reader_count == 1:
                self._rw.acquire()

    def release_read(self) -> None:
        """Leave as a reader."""
        with self._mutex:
            if self.reader_count == 0:
                raise RuntimeError("no reader holds the lock")
            self.reader_count -= 1
            if self.reader_count == 0:
                self._rw.release()

    def acquire_write(self) -> None:
        """Enter as a writer, waiting until no reader or writer holds the lock."""
        self._rw.acquire()

    def release_write(self) -> None:
        """Leave as a writer; raises RuntimeError if the lock is not held."""
        self._rw.release()

    @contextmanager
    def reading(self) -> Iterator[None]:
        """Hold the lock as a reader for a with block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def writing(self) -> Iterator[None]:
        """Hold the lock as a writer for a with block."""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


def run_readers_writers(
    readers: int = NUM_READERS,
    writers: int = NUM_WRITERS,
    duration: float = 10.0,
    rng: random.Random | None = None,
) -> list[str]:
    """Let readers and writers share one value for ``duration`` seconds and return the log.

    Writers store random values below 100 and pause 0-1 seconds; readers pause 0-2 seconds.
    """
    rng = rng if rng is not None else random.Random()
    lock = ReadersWriterLock()
    stop = threading.Event()
    log: list[str] = []
    shared = 0

    def reader(reader_id: int) -> None:
        while not stop.is_set():
            with lock.reading():
                log.append(f"Reader {reader_id} reads value: {shared}")
            stop.wait(rng.randrange(3))

    def writer(writer_id: int) -> None:
        nonlocal shared
        while not stop.is_set():
            with lock.writing():
                shared = rng.randrange(MAX_VALUE)
                log.append(f"Writer {writer_id} wrote value: {shared}")
            stop.wait(rng.randrange(2))

    threads = [
        threading.Thread(target=reader, args=(i,), daemon=True) for i in range(1, readers + 1)
    ]
    threads += [
        threading.Thread(target=writer, args=(i,), daemon=True) for i in range(1, writers + 1)
    ]
    for thread in threads:
        thread.start()
    stop.wait(duration)
    stop.set()
    for thread in threads:
        thread.join()
    log.append("Main thread: Simulation complete")
    return log