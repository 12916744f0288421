"""Two threads started with different scheduling requests, run side by side."""

from __future__ import annotations

import threading
import time

FIFO_PRIORITY = 50
RR_PRIORITY = 30


def run_policy_threads(duration: float = 3.0) -> list[str]:
    """Run a FIFO thread and a round-robin thread, each working for ``duration`` seconds.

    The requested policies are advisory and, as with inherited scheduling,
    both threads run under the policy of the caller. Returns the event log.
    """
    log: list[str] = []
    lock = threading.Lock()

    def record(line: str) -> None:
        with lock:
            log.append(line)

    def worker(label: str) -> None:
        record(f"{label} Thread running...")
        time.sleep(duration)
        record(f"{label} Thread finished.")

    threads = [
        threading.Thread(target=worker, args=("FIFO",), name=f"fifo-{FIFO_PRIORITY}"),
        threading.Thread(target=worker, args=("Round Robin",), name=f"rr-{RR_PRIORITY}"),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return log