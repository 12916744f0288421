import threading
import time

import pytest

from oslab.peterson import PetersonLock, run_peterson


def test_lock_gives_mutual_exclusion():
    lock = PetersonLock()
    counter = [0]
    iterations = 200

    def work(pid):
        for _ in range(iterations):
            with lock.holding(pid):
                value = counter[0]
                time.sleep(0)
                counter[0] = value + 1

    threads = [threading.Thread(target=work, args=(pid,)) for pid in (0, 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert counter[0] == 2 * iterations

    log = run_peterson(2, 0)
    assert log.count("Process 0 entered critical section") == 2
    assert log.count("Process 1 entered critical section") == 2


def test_lock_rejects_unknown_party():
    lock = PetersonLock()
    with pytest.raises(ValueError):
        lock.acquire(2)
    with pytest.raises(ValueError):
        lock.release(-1)


def test_single_party_enters_without_waiting():
    lock = PetersonLock()
    lock.acquire(0)
    lock.release(0)
    lock.acquire(1)
    lock.release(1)
    lock.acquire(0)
    lock.release(0)
    assert run_peterson(1, 0).count("Process 0 entered critical section") == 1


def test_run_peterson_log():
    iterations = 3
    log = run_peterson(iterations, 0)
    assert len(log) == 2 * 3 * iterations
    for pid in (0, 1):
        own = [line for line in log if line.startswith(f"Process {pid} ")]
        expected = [
            f"Process {pid} is in non-critical section",
            f"Process {pid} entered critical section",
            f"Process {pid} exited from critical section",
        ] * iterations
        assert own == expected