"""Inter-process communication: shared memory, pipes and typed message queues."""

from __future__ import annotations

import multiprocessing
import os
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

MAX_MSG_SIZE = 128
SHM_SIZE = 1024
PIPE_BUFFER_SIZE = 256
MSG_TYPE_1 = 1
MSG_TYPE_2 = 2

SHM_GREETING = "Hello, shared memory!"
PIPE_GREETING = "Hello, child process!"
QUEUE_GREETING = "Hello, message queue!"


@dataclass(frozen=True)
class Message:
    """A message with a positive type, its text and the id of its sender."""

    mtype: int
    text: str
    sender: int | None = None


def _truncate(text: str, limit: int) -> str:
    return text.encode()[:limit].decode(errors="ignore")


class MessageQueue:
    """Thread-safe queue of typed messages.

    ``receive`` selects like System V queues: type 0 takes the first message,
    a positive type the first message of that type, and a negative type the
    first message of the lowest type not above its absolute value.
    """

    def __init__(self, max_size: int = MAX_MSG_SIZE) -> None:
        self.max_size = max_size
        self.last_sender: int | None = None
        self._messages: list[Message] = []
        self._cond = threading.Condition()

    def __len__(self) -> int:
        with self._cond:
            return len(self._messages)

    def send(self, mtype: int, text: str, sender: int | None = None) -> Message:
        """Append a message and return it as stored (text cut to fit)."""
        if mtype <= 0:
            raise ValueError("message type must be greater than 0")
        message = Message(
            mtype,
            _truncate(text, self.max_size - 1),
            os.getpid() if sender is None else sender,
        )
        with self._cond:
            self._messages.append(message)
            self.last_sender = message.sender
            self._cond.notify_all()
        return message

    def receive(self, mtype: int = 0) -> Message:
        """Remove and return a matching message, waiting until one arrives."""
        with self._cond:
            while (index := self._match(mtype)) is None:
                self._cond.wait()
            return self._messages.pop(index)

    def _match(self, mtype: int) -> int | None:
        candidates = list(enumerate(self._messages))
        if mtype > 0:
            candidates = [(i, m) for i, m in candidates if m.mtype == mtype]
        elif mtype < 0:
            candidates = [(i, m) for i, m in candidates if m.mtype <= -mtype]
            candidates = sorted(candidates, key=lambda pair: pair[1].mtype)
        return candidates[0][0] if candidates else None


def _report(conn: Any, func: Callable[..., Any], *args: Any) -> None:
    with conn:
        conn.send(func(*args))


def _spawn(func: Callable[..., Any], *args: Any) -> tuple[Any, Any]:
    receiver, sender = multiprocessing.Pipe(duplex=False)
    child = multiprocessing.Process(target=_report, args=(sender, func, *args))
    child.start()
    sender.close()
    return child, receiver


def _collect(child: Any, receiver: Any) -> Any:
    try:
        result = receiver.recv()
    except EOFError as exc:
        raise ChildProcessError("child process ended without a result") from exc
    finally:
        receiver.close()
        child.join()
    if child.exitcode != 0:
        raise ChildProcessError(f"child process exited with status {child.exitcode}")
    return result


def _read_shared(segment: Any) -> str:
    return segment.value.decode(errors="replace")


def _read_pipe(reader: Any) -> str:
    with reader:
        data = reader.recv_bytes()
    return data[:PIPE_BUFFER_SIZE].decode(errors="replace")


def shared_memory_roundtrip(message: str = SHM_GREETING) -> str:
    """Write a message into shared memory and return what a child process reads there."""
    data = message.encode()
    if len(data) >= SHM_SIZE:
        raise ValueError(f"message does not fit in {SHM_SIZE} bytes of shared memory")
    segment = multiprocessing.RawArray("c", SHM_SIZE)
    segment.value = data
    child, result = _spawn(_read_shared, segment)
    return _collect(child, result)


def pipe_roundtrip(message: str = PIPE_GREETING) -> str:
    """Send a message down a pipe and return what the child process received."""
    reader, writer = multiprocessing.Pipe(duplex=False)
    child, result = _spawn(_read_pipe, reader)
    reader.close()
    with writer:
        writer.send_bytes(message.encode())
    return _collect(child, result)


def message_queue_demo() -> list[str]:
    """Send one message through a queue, receive it back and report both steps."""
    queue = MessageQueue()
    sent = queue.send(MSG_TYPE_1, QUEUE_GREETING)
    lines = [f"Message sent: {sent.text}"]
    received = queue.receive(MSG_TYPE_1)
    lines.append(f"Message received: {received.text}")
    return lines


def message_queue_ext_demo(delay: float = 1.0) -> list[str]:
    """Run a sender thread and a receiver over one queue and return the timestamped log."""
    queue = MessageQueue()
    lines: list[str] = []
    lock = threading.Lock()

    def record(action: str, text: str) -> None:
        with lock:
            lines.append(f"{action}: {time.ctime()} - {text}")

    def child() -> None:
        ident = threading.get_native_id()
        first = queue.send(MSG_TYPE_1, f"Message from child (PID: {ident})", ident)
        record("Child sent", first.text)
        time.sleep(delay)
        second = queue.send(MSG_TYPE_2, "Second message from child", ident)
        record("Child sent", second.text)

    sender = threading.Thread(target=child, name="child")
    sender.start()
    time.sleep(2 * delay)
    for mtype in (MSG_TYPE_1, MSG_TYPE_2):
        record("Parent received", queue.receive(mtype).text)
    sender.join()

    lines.append(f"Messages in queue: {len(queue)}")
    lines.append(f"Last sender PID: {queue.last_sender}")
    lines.append("Message queue removed successfully")
    return lines