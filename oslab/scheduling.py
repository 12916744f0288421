"""CPU scheduling algorithms: FCFS, SJF, SRTN, round robin and priority scheduling."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

SJF_BURST_LIMIT = 9999


@dataclass(frozen=True)
class Process:
    """A process to schedule: its id, CPU burst, arrival time and priority."""

    id: int
    burst: int
    arrival: int = 0
    priority: int = 0

    def __post_init__(self) -> None:
        if self.burst < 0:
            raise ValueError(f"process {self.id} has a negative burst time")


@dataclass(frozen=True)
class Slice:
    """A stretch of time during which one process runs."""

    pid: int
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"Process {self.pid} is running from time {self.start} to {self.end}"


@dataclass(frozen=True)
class FcfsRow:
    """Waiting and turnaround time of one process under first come, first served."""

    process: Process
    waiting: int
    turnaround: int


def _require_positive_bursts(processes: list[Process]) -> None:
    for process in processes:
        if process.burst <= 0:
            raise ValueError(f"process {process.id} needs a positive burst time")


def fcfs(processes: Iterable[Process]) -> list[FcfsRow]:
    """Serve processes in the order given and return each one's waiting and turnaround time."""
    rows: list[FcfsRow] = []
    waiting = 0
    previous: Process | None = None
    for process in processes:
        if previous is not None:
            waiting = previous.burst + waiting + previous.arrival - process.arrival
        rows.append(FcfsRow(process, waiting, process.burst + waiting))
        previous = process
    return rows


def sjf(processes: Iterable[Process]) -> list[Slice]:
    """Non-preemptive shortest job first; ties go to the process listed first."""
    pending = list(processes)
    for process in pending:
        if process.burst >= SJF_BURST_LIMIT:
            raise ValueError(f"burst time of process {process.id} must be below {SJF_BURST_LIMIT}")
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


def srtn(processes: Iterable[Process]) -> list[Slice]:
    """Preemptive shortest remaining time next, one time unit per slice."""
    items = list(processes)
    _require_positive_bursts(items)
    remaining = [p.burst for p in items]
    time = 0
    slices: list[Slice] = []
    while any(remaining):
        ready = [i for i, p in enumerate(items) if p.arrival <= time and remaining[i] > 0]
        if not ready:
            time = min(p.arrival for i, p in enumerate(items) if remaining[i] > 0)
            continue
        chosen = min(ready, key=lambda i: remaining[i])
        remaining[chosen] -= 1
        slices.append(Slice(items[chosen].id, time, time + 1))
        time += 1
    return slices


def round_robin(processes: Iterable[Process], quantum: int = 2) -> list[Slice]:
    """Cycle through the processes in order, giving each at most ``quantum`` per turn.

    Arrival times are ignored. The slice that finishes a process is reported
    as ending at its completion and starting one full burst earlier.
    """
    if quantum <= 0:
        raise ValueError("quantum must be positive")
    items = list(processes)
    _require_positive_bursts(items)
    remaining = [p.burst for p in items]
    time = 0
    slices: list[Slice] = []
    while any(remaining):
        for index, process in enumerate(items):
            left = remaining[index]
            if left <= 0:
                continue
            if left <= quantum:
                time += left
                remaining[index] = 0
                slices.append(Slice(process.id, time - process.burst, time))
            else:
                time += quantum
                remaining[index] = left - quantum
                slices.append(Slice(process.id, time - quantum, time))
    return slices


def priority_schedule(processes: Iterable[Process]) -> list[Slice]:
    """Run processes to completion, highest priority first; ties keep the given order."""
    items = list(processes)
    _require_positive_bursts(items)
    for process in items:
        if process.priority < 0:
            raise ValueError(f"process {process.id} needs a non-negative priority")
    time = 0
    slices: list[Slice] = []
    for process in sorted(items, key=lambda p: -p.priority):
        slices.append(Slice(process.id, time, time + process.burst))
        time += process.burst
    return slices