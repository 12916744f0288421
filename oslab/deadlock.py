"""Deadlock detection by looking for a cycle in the resource allocation graph."""

from __future__ import annotations

from collections.abc import Sequence

ALLOCATION = (
    (1, 0, 0),
    (0, 1, 0),
    (0, 0, 1),
    (0, 0, 0),
)
REQUEST = (
    (0, 1, 0),
    (0, 0, 1),
    (1, 0, 0),
    (0, 0, 1),
)

Matrix = Sequence[Sequence[int]]


def _check_shapes(allocation: Matrix, request: Matrix) -> None:
    if len(allocation) != len(request):
        raise ValueError("allocation and request must list the same processes")
    widths = {len(row) for row in (*allocation, *request)}
    if len(widths) > 1:
        raise ValueError("every row must hold the same number of resources")


def detect_deadlock(
    allocation: Matrix = ALLOCATION, request: Matrix = REQUEST
) -> tuple[int, int] | None:
    """Return the edge ``(waiter, holder)`` that closes a wait-for cycle, or None.

    A process waits for every process holding a resource it requests.
    """
    _check_shapes(allocation, request)
    count = len(allocation)
    visited = [False] * count
    on_stack = [False] * count

    def visit(process: int) -> tuple[int, int] | None:
        visited[process] = True
        on_stack[process] = True
        for resource, wanted in enumerate(request[process]):
            if wanted <= 0:
                continue
            for holder in range(count):
                if allocation[holder][resource] <= 0:
                    continue
                if not visited[holder]:
                    edge = visit(holder)
                    if edge is not None:
                        return edge
                elif on_stack[holder]:
                    return process, holder
        on_stack[process] = False
        return None

    for process in range(count):
        if not visited[process]:
            edge = visit(process)
            if edge is not None:
                return edge
    return None


def format_state(allocation: Matrix = ALLOCATION, request: Matrix = REQUEST) -> str:
    """Return the table of what each process holds and requests."""
    _check_shapes(allocation, request)
    lines = ["System State:", "Process | Allocation | Request"]
    for pid, (held, wanted) in enumerate(zip(allocation, request)):
        held_text = "".join(f"{value} " for value in held)
        wanted_text = "".join(f"{value} " for value in wanted)
        lines.append(f"P{pid}      | {held_text}| {wanted_text}")
    return "\n".join(lines) + "\n"