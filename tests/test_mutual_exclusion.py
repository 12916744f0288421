import threading
import time

import pytest

from oslab.mutual_exclusion import (
    StrictAlternation,
    TurnFlagLock,
    locked_counter,
    run_alternation,
)


def test_locked_counter_total_and_sequence():
    total, log = locked_counter(3, 20)
    assert total == 60
    values = [int(line.rsplit(": ", 1)[1]) for line in log if line.startswith("Shared")]
    assert values == list(range(1, 61))
    assert sum(1 for line in log if line.endswith("is in the critical section.")) == 60


def test_locked_counter_defaults():
    total, log = locked_counter()
    assert total == 20
    assert len(log) == 40


def test_strict_alternation_order():
    log = run_alternation(StrictAlternation(), iterations=5, delay=0.0)
    entries = [line for line in log if line.endswith("critical section.")]
    assert entries == [
        f"Thread {i % 2} is in its critical section." for i in range(10)
    ]
    assert log.count("Thread 0 executing...") == 5
    assert log.count("Thread 1 executing...") == 5


def test_strict_alternation_three_threads():
    log = run_alternation(StrictAlternation(3), iterations=2, delay=0.0)
    entries = [int(line.split()[1]) for line in log if line.endswith("critical section.")]
    assert entries == [0, 1, 2, 0, 1, 2]


def test_strict_alternation_leave_out_of_turn():
    lock = StrictAlternation()
    with pytest.raises(RuntimeError):
        lock.leave(1)


def test_strict_alternation_bad_id():
    with pytest.raises(ValueError):
        StrictAlternation().enter(5)


def test_turn_flag_lock_counts():
    log = run_alternation(TurnFlagLock(), iterations=5, delay=0.0)
    assert log.count("Thread 0 is in its critical section.") == 5
    assert log.count("Thread 1 is in its critical section.") == 5


def test_turn_flag_lock_passes_turn():
    lock = TurnFlagLock()
    lock.enter(0)
    lock.leave(0)
    assert lock.turn == 1


def test_turn_flag_lock_bad_id():
    with pytest.raises(ValueError):
        TurnFlagLock().enter(2)


@pytest.mark.parametrize("factory", [StrictAlternation, TurnFlagLock])
def test_mutual_exclusion_holds(factory):
    lock = factory()
    inside = []
    overlaps = []

    def work(tid):
        for _ in range(20):
            lock.enter(tid)
            try:
                inside.append(tid)
                if len(inside) > 1:
                    overlaps.append(tuple(inside))
                time.sleep(0)
                inside.remove(tid)
            finally:
                lock.leave(tid)

    threads = [threading.Thread(target=work, args=(tid,)) for tid in (0, 1)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert overlaps == []
    assert inside == []

    log = run_alternation(factory(), iterations=20, delay=0.0)
    assert log.count("Thread 0 is in its critical section.") == 20
    assert log.count("Thread 1 is in its critical section.") == 20