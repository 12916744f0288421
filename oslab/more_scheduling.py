"""More CPU scheduling algorithms: multiple queues, SPN, guaranteed, lottery and fair share."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .scheduling import Process, Slice


@dataclass(frozen=True)
class QueueSlice:
    """A stretch of time during which a process from one of several queues runs."""

    pid: int
    queue: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return (
            f"Process {self.pid} from Queue {self.queue} "
            f"is running from time {self.start} to {self.end}"
        )


@dataclass(frozen=True)
class FairShareTurn:
    """One time unit given to a process under fair-share scheduling."""

    pid: int
    ratio: float
    time: int

    def __str__(self) -> str:
        return f"Process {self.pid} ({self.ratio:f}) is running time {self.time}"


def multi_queue(queues: Iterable[Iterable[Process]], quantum: int = 2) -> list[QueueSlice]:
    """Visit the queues in turn, running the head of each for at most ``quantum``.

    An unfinished process goes back to the tail of its own queue; empty queues
    are skipped. Queue numbers in the result count from 1.
    """
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    lanes = [deque((p.id, p.burst) for p in queue) for queue in queues]
    total = sum(len(lane) for lane in lanes)
    slices: list[QueueSlice] = []
    completed = 0
    current = 0
    time = 0
    while completed < total:
        lane = lanes[current]
        if not lane:
            current = (current + 1) % len(lanes)
            continue
        pid, left = lane.popleft()
        if left <= quantum:
            time += left
            slices.append(QueueSlice(pid, current + 1, time - left, time))
            completed += 1
        else:
            time += quantum
            slices.append(QueueSlice(pid, current + 1, time - quantum, time))
            lane.append((pid, left - quantum))
        current = (current + 1) % len(lanes)
    return slices


def spn(processes: Iterable[Process]) -> list[Slice]:
    """Shortest process next: run the shortest arrived process to completion.

    Ties go to the process listed first; the CPU idles until the next arrival.
    """
    pending = list(processes)
    time = 0
    slices: list[Slice] = []
    while pending:
        ready = [p for p in pending if p.arrival <= time]
        if not ready:
            time = min(p.arrival for p in pending)
            continue
        chosen = min(ready, key=lambda p: p.burst)
        slices.append(Slice(chosen.id, time, time + chosen.burst))
        time += chosen.burst
        pending = [p for p in pending if p is not chosen]
    return slices


def guaranteed(processes: Iterable[tuple[int, int, int]]) -> list[tuple[Slice, bool]]:
    """Cycle through ``(id, burst, guaranteed)`` processes, giving each its guaranteed time.

    Each entry of the result is a slice and whether the process finished with it.
    """
    items = list(processes)
    for pid, burst, share in items:
        if burst <= 0:
            raise ValueError(f"process {pid} needs a positive burst time")
        if share <= 0:
            raise ValueError(f"process {pid} needs a positive guaranteed time")
    executed = [0] * len(items)
    completed = 0
    time = 0
    result: list[tuple[Slice, bool]] = []
    while completed < len(items):
        for index, (pid, burst, share) in enumerate(items):
            if executed[index] >= burst:
                continue
            run = min(share, burst - executed[index])
            executed[index] += run
            finished = executed[index] == burst
            result.append((Slice(pid, time, time + run), finished))
            time += run
            if finished:
                completed += 1
    return result


def lottery(
    processes: Iterable[tuple[int, int]], rng: random.Random | None = None
) -> list[int]:
    """Draw tickets until every ``(id, tickets)`` process has run once; return the run order.

    A draw picks the first unfinished process whose running ticket total
    reaches the drawn number.
    """
    items = list(processes)
    for pid, tickets in items:
        if tickets < 0:
            raise ValueError(f"process {pid} has a negative ticket count")
    total = sum(tickets for _, tickets in items)
    if items and total <= 0:
        raise ValueError("there must be at least one ticket")
    rng = rng if rng is not None else random.Random()
    done = [False] * len(items)
    order: list[int] = []
    while len(order) < len(items):
        winner = rng.randrange(total)
        running = 0
        for index, (pid, tickets) in enumerate(items):
            running += tickets
            if winner <= running and not done[index]:
                done[index] = True
                order.append(pid)
                break
    return order


def fair_share(
    weights: Mapping[int, int] | Iterable[tuple[int, int]], total_time: int = 30
) -> list[FairShareTurn]:
    """Give each time unit to the process with the largest share of its weight left.

    ``weights`` maps process ids to weights. Stops when every process has used
    its weight or ``total_time`` units have passed. Ties go to the first process.
    """
    pairs = list(weights.items()) if isinstance(weights, Mapping) else list(weights)
    for pid, weight in pairs:
        if weight <= 0:
            raise ValueError(f"process {pid} needs a positive weight")
    remaining = [weight for _, weight in pairs]
    turns: list[FairShareTurn] = []
    for time in range(total_time):
        if not any(remaining):
            break
        best: int | None = None
        best_ratio = 0.0
        for index, (_, weight) in enumerate(pairs):
            ratio = remaining[index] / weight
            if ratio > best_ratio:
                best_ratio = ratio
                best = index
        if best is None:
            break
        turns.append(FairShareTurn(pairs[best][0], best_ratio, time))
        remaining[best] -= 1
    return turns