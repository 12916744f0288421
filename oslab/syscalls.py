"""Reading, writing and starting child processes through the operating system."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Sequence
from typing import BinaryIO

BUFFER_SIZE = 1024
GREETING = "Hello, world!\n"
DEFAULT_CHILD = ("/bin/ls", "-l", "/")
DEFAULT_STATUS = ("ps", "ax")


def read_input(stream: BinaryIO | None = None, size: int = BUFFER_SIZE) -> str:
    """Read at most ``size`` bytes in a single read and return them as text."""
    if stream is None:
        stream = sys.stdin.buffer
    reader = getattr(stream, "read1", stream.read)
    data = reader(size)
    return data.decode(errors="replace")


def write_message(stream: BinaryIO | None = None, message: str | bytes = GREETING) -> int:
    """Write a message to a binary stream and return the number of bytes written."""
    if stream is None:
        stream = sys.stdout.buffer
    data = message.encode() if isinstance(message, str) else bytes(message)
    written = stream.write(data)
    stream.flush()
    return len(data) if written is None else written


def run_child(
    args: Sequence[str] = DEFAULT_CHILD,
    status_command: Sequence[str] | None = DEFAULT_STATUS,
) -> str:
    """Start a program, show the process list while it runs, and report how it ended.

    Raises OSError when the program cannot be started.
    """
    child = subprocess.Popen(list(args))
    if status_command is not None:
        try:
            subprocess.run(list(status_command), check=False)
        except OSError:
            pass
    status = child.wait()
    if status >= 0:
        return f"Child process exited with status {status}"
    return "Child process terminated abnormally"