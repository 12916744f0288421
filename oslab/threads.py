"""Threads: concurrent greetings and pop-up notifications handled off the main thread."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass

NUM_THREADS = 3
HELLO_REPEATS = 100
MESSAGE_BUFFER_SIZE = 128

SAMPLE_MESSAGES = (
    "System Update Available",
    "Low Battery Warning",
    "New Message Received",
)


class _Log:
    """Thread-safe list of log lines."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._lock = threading.Lock()

    def __call__(self, line: str) -> None:
        with self._lock:
            self._lines.append(line)

    @property
    def lines(self) -> list[str]:
        with self._lock:
            return list(self._lines)


@dataclass
class Popup:
    """A pop-up notification shown for ``duration`` ticks."""

    id: int
    message: str
    duration: int

    def __post_init__(self) -> None:
        limit = MESSAGE_BUFFER_SIZE - 1
        self.message = self.message.encode()[:limit].decode(errors="ignore")
        if self.duration < 0:
            raise ValueError("duration must not be negative")


def _default_popups() -> list[Popup]:
    return [
        Popup(index + 1, message, 2 + index)
        for index, message in enumerate(SAMPLE_MESSAGES)
    ]


def hello_threads(num_threads: int = NUM_THREADS, repeats: int = HELLO_REPEATS) -> list[str]:
    """Run threads that each greet ``repeats`` times and return the combined log."""
    log = _Log()

    def greet(thread_id: int) -> None:
        for _ in range(repeats):
            log(f"Thread {thread_id}: Hello, world!")

    threads = [
        threading.Thread(target=greet, args=(thread_id,))
        for thread_id in range(1, num_threads + 1)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    log("Main thread: All threads have finished execution.")
    return log.lines


def popup_event(popup_seconds: float = 3.0, main_seconds: float = 5.0) -> list[str]:
    """Handle one pop-up in its own thread while the main thread keeps working."""
    log = _Log()

    def popup() -> None:
        log("Pop-up thread: Pop-up event detected!")
        time.sleep(popup_seconds)
        log("Pop-up thread: Pop-up dismissed.")

    log("Main thread: Pop-up event detected. Creating pop-up thread...")
    thread = threading.Thread(target=popup, name="popup")
    thread.start()
    log("Main thread: Continuing other tasks while pop-up is displayed...")
    time.sleep(main_seconds)
    thread.join()
    log("Main thread: All tasks completed.")
    return log.lines


def run_popups(
    popups: Iterable[Popup] | None = None,
    stagger: float = 1.0,
    tick: float = 1.0,
) -> list[str]:
    """Show several pop-ups, each counting down in its own thread, and return the log."""
    items = _default_popups() if popups is None else list(popups)
    log = _Log()

    def show(popup: Popup) -> None:
        log(f"[{time.ctime()}] Popup {popup.id}: {popup.message}")
        for remaining in range(popup.duration, 0, -1):
            log(f"Popup {popup.id}: {remaining} seconds remaining")
            time.sleep(tick)
        log(f"[{time.ctime()}] Popup {popup.id}: Dismissed")

    started: list[tuple[Popup, threading.Thread]] = []
    for popup in items:
        log(f"Main thread: Creating popup {popup.id} for '{popup.message}'")
        thread = threading.Thread(target=show, args=(popup,), name=f"popup-{popup.id}")
        thread.start()
        started.append((popup, thread))
        time.sleep(stagger)

    log("Main thread: Performing background tasks...")
    for popup, thread in started:
        thread.join()
        log(f"Main thread: Popup {popup.id} has completed")
    log(f"[{time.ctime()}] Main thread: All popups and tasks completed")
    return log.lines