# oslab

Small operating-systems exercises as a Python library. Each module covers
one topic from a typical OS course. Functions return their results as
ordinary Python values, most often a list of log lines or a timeline, and
leave printing to the caller.

## Modules

| Module | What it covers |
| --- | --- |
| `oslab.intro` | `greeting_lines`, `square`, `parse_int`, `sum_arguments`, `running_sums`, `loop_lines` |
| `oslab.syscalls` | `read_input` and `write_message` on binary streams; `run_child` starts a program (by default `/bin/ls -l /`), runs `ps ax` meanwhile and reports the exit status |
| `oslab.mathlib` | `add`, `subtract`, `multiply`, `divide` (dividing by zero gives `0.0`), `demo_lines` |
| `oslab.stringlib` | `str_length`, `str_concat`, `str_compare`, `demo_lines` |
| `oslab.ipc` | `shared_memory_roundtrip` and `pipe_roundtrip` through a child process; `Message` and the thread-safe `MessageQueue`; `message_queue_demo`, `message_queue_ext_demo` |
| `oslab.peterson` | `PetersonLock` for two threads and `run_peterson` |
| `oslab.threads` | `hello_threads`, `popup_event`, `Popup` and `run_popups` |
| `oslab.buffers` | `BoundedBuffer` (condition variables), `RingBuffer` (one slot kept free), `SlotBuffer` (counting semaphores) and `produce_consume` |
| `oslab.mutual_exclusion` | `locked_counter`, `StrictAlternation`, `TurnFlagLock` and `run_alternation` |
| `oslab.scheduling` | `Process`, `Slice`, `FcfsRow`; `fcfs`, `sjf`, `srtn`, `round_robin`, `priority_schedule` |
| `oslab.more_scheduling` | `multi_queue`, `spn`, `guaranteed`, `lottery`, `fair_share` |
| `oslab.policy_threads` | `run_policy_threads`: a "FIFO" and a "Round Robin" thread run side by side under the caller's own policy |
| `oslab.readers_writers` | `ReadersWriterLock` (readers preferred) and `run_readers_writers` |
| `oslab.dining` | `DiningTable`: philosophers that always take the lower-numbered fork first |
| `oslab.bankers` | `BankersState`: the banker's algorithm, with `simulate` returning a `SimulationResult` |
| `oslab.deadlock` | `detect_deadlock` and `format_state` for a resource-allocation graph |

## Examples

The small libraries:

```python
from oslab.mathlib import add, divide
from oslab.stringlib import str_concat, str_compare

add(10, 5)                          # 15
divide(12.5, 2.5)                   # 5.0
divide(1.0, 0)                      # 0.0
str_concat("Hello, ", "world!")     # "Hello, world!"
str_compare("Hello, ", "world!")    # -1
```

Scheduling returns a timeline of `Slice` objects:

```python
from oslab.scheduling import Process, sjf

workload = [
    Process(1, burst=10, arrival=1),
    Process(2, burst=8, arrival=2),
    Process(3, burst=6, arrival=3),
    Process(4, burst=4, arrival=4),
    Process(5, burst=2, arrival=5),
]
for piece in sjf(workload):
    print(piece)
# Process 1 is running from time 1 to 11
# Process 5 is running from time 11 to 13
# Process 4 is running from time 13 to 17
# Process 3 is running from time 17 to 23
# Process 2 is running from time 23 to 31
```

The banker's algorithm on its built-in three-resource example:

```python
from oslab.bankers import BankersState

result = BankersState().simulate()
result.order        # [3, 1, 2, 4, 0]
result.completed    # True
print("\n".join(result.log))
```

The module also holds a one-resource example in `SINGLE_AVAILABLE`,
`SINGLE_MAX_CLAIM` and `SINGLE_ALLOCATION`.

Deadlock detection returns the edge that closes a wait-for cycle, or `None`:

```python
from oslab.deadlock import detect_deadlock, format_state

print(format_state())   # the built-in four-process example
detect_deadlock()       # (2, 0): P0 waits for P1, P1 for P2, P2 for P0
```

The concurrency functions start real threads (and, in `oslab.ipc`, real
processes) and hand back what happened. Their delays are parameters, so
they can be set to zero or a fraction of a second.

## What the package does not do

There are no command-line programs: nothing is installed as a command, and
functions such as `loop_lines` or `sum_arguments` take their input as
arguments instead of prompting for it. `oslab.policy_threads` does not ask
the operating system for real-time scheduling; the policy names are labels
only. `MessageQueue` lives inside one process and is not a System V queue.

## Installation

Python 3.10 or later; there are no runtime dependencies. The `test` extra
adds pytest for the test suite.