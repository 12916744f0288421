import random
import re

import pytest

from oslab.dining import DiningTable


def test_fork_indices_wrap_around():
    table = DiningTable(5)
    assert table.left_fork(2) == 2
    assert table.right_fork(2) == 3
    assert table.right_fork(4) == 0


def test_bad_philosopher_rejected():
    table = DiningTable(5)
    with pytest.raises(ValueError):
        table.left_fork(5)


def test_table_needs_two_philosophers():
    with pytest.raises(ValueError):
        DiningTable(1)


def test_last_philosopher_takes_lower_fork_first():
    table = DiningTable(5)
    table.grab_forks(4)
    assert table.log == [
        "Philosopher 4 picked up fork 0",
        "Philosopher 4 picked up fork 4",
    ]
    assert table.forks[0].locked() and table.forks[4].locked()
    table.release_forks(4)
    assert table.log[2:] == [
        "Philosopher 4 released fork 4",
        "Philosopher 4 released fork 0",
    ]
    assert not table.forks[0].locked() and not table.forks[4].locked()


def test_dine_never_shares_a_fork():
    table = DiningTable(5, eat_time=0.0, rng=random.Random(2))
    log = table.dine(meals=4, think=0.0)
    holder = {}
    pattern = re.compile(r"Philosopher (\d+) (picked up|released) fork (\d+)")
    pickups = 0
    for line in log:
        match = pattern.fullmatch(line)
        if not match:
            continue
        pid, action, fork = int(match[1]), match[2], int(match[3])
        if action == "picked up":
            assert fork not in holder
            holder[fork] = pid
            pickups += 1
        else:
            assert holder.pop(fork) == pid
    assert holder == {}
    assert pickups == 2 * 5 * 4


def test_forks_free_after_dinner():
    table = DiningTable(3, eat_time=0.0)
    table.dine(meals=2, think=0.0)
    assert not any(fork.locked() for fork in table.forks)


def test_negative_meals_rejected():
    with pytest.raises(ValueError):
        DiningTable().dine(meals=-1)