"""Banker's algorithm: find an order in which every process can run to completion."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

MULTI_AVAILABLE = (1, 1, 1)
MULTI_MAX_CLAIM = (
    (7, 5, 3),
    (3, 2, 2),
    (9, 0, 2),
    (2, 2, 2),
    (4, 3, 3),
)
MULTI_ALLOCATION = (
    (0, 2, 0),
    (2, 0, 0),
    (4, 0, 2),
    (2, 1, 1),
    (0, 1, 2),
)

SINGLE_AVAILABLE = (0,)
SINGLE_MAX_CLAIM = ((7,), (3,), (9,), (2,), (4,))
SINGLE_ALLOCATION = ((0,), (2,), (3,), (2,), (2,))


@dataclass
class SimulationResult:
    """Outcome of running processes one by one until all finish or none can run."""

    order: list[int]
    deadlocked: bool
    log: list[str] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        return not self.deadlocked


def _row(values: Sequence[int]) -> str:
    return "".join(f"{value} " for value in values)


class BankersState:
    """Available resources with each process's maximum claim, allocation and remaining need."""

    def __init__(
        self,
        available: Sequence[int] = MULTI_AVAILABLE,
        max_claim: Sequence[Sequence[int]] = MULTI_MAX_CLAIM,
        allocation: Sequence[Sequence[int]] = MULTI_ALLOCATION,
    ) -> None:
        self.available = list(available)
        self.max_claim = [list(row) for row in max_claim]
        self.allocation = [list(row) for row in allocation]
        width = len(self.available)
        if len(self.max_claim) != len(self.allocation):
            raise ValueError("max claim and allocation must list the same processes")
        for row in (*self.max_claim, *self.allocation):
            if len(row) != width:
                raise ValueError(f"every row must hold {width} resource counts")
        self.need = [
            [claim - held for claim, held in zip(claims, held_row)]
            for claims, held_row in zip(self.max_claim, self.allocation)
        ]
        self.finished = [False] * len(self.max_claim)

    @property
    def num_processes(self) -> int:
        return len(self.max_claim)

    def _check(self, pid: int) -> None:
        if not 0 <= pid < self.num_processes:
            raise ValueError(f"process must be in 0..{self.num_processes - 1}, not {pid}")

    def find_runnable(self) -> int | None:
        """Return the lowest unfinished process whose need fits what is available."""
        for pid, need in enumerate(self.need):
            if self.finished[pid]:
                continue
            if all(wanted <= free for wanted, free in zip(need, self.available)):
                return pid
        return None

    def run_process(self, pid: int) -> None:
        """Let a process finish, returning everything it holds to the available pool."""
        self._check(pid)
        self.available = [free + held for free, held in zip(self.available, self.allocation[pid])]
        width = len(self.available)
        self.allocation[pid] = [0] * width
        self.need[pid] = [0] * width
        self.finished[pid] = True

    def simulate(self) -> SimulationResult:
        """Run processes while one can, and report the order or the deadlock."""
        log = [f"Initial {self.format_state()}"]
        order: list[int] = []
        while not all(self.finished):
            pid = self.find_runnable()
            if pid is None:
                log.append("Deadlock detected: No process can run with current resources")
                return SimulationResult(order, True, log)
            log.append(f"Selected P{pid} to run")
            log.append(f"Running Process P{pid}")
            self.run_process(pid)
            order.append(pid)
            log.append(f"After P{pid} completes: {self.format_state()}")
        log.append(
            "Execution order of processes: " + " -> ".join(f"P{pid}" for pid in order)
        )
        log.append("All processes completed successfully")
        return SimulationResult(order, False, log)

    def format_state(self) -> str:
        """Return the table of available resources and each process's claims."""
        if len(self.available) == 1:
            header = "Process | Max | Alloc | Need"
        else:
            header = "Process | Max       | Alloc     | Need"
        lines = ["System State:", f"Available: {_row(self.available)}", header]
        for pid in range(self.num_processes):
            lines.append(
                f"P{pid}      | {_row(self.max_claim[pid])}| "
                f"{_row(self.allocation[pid])}| {_row(self.need[pid])}"
            )
        return "\n".join(lines) + "\n"