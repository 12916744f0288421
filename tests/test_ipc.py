import threading
import time

import pytest

from oslab.ipc import (
    MAX_MSG_SIZE,
    Message,
    MessageQueue,
    message_queue_demo,
    message_queue_ext_demo,
    pipe_roundtrip,
    shared_memory_roundtrip,
)


def test_queue_fifo_within_type():
    queue = MessageQueue()
    queue.send(1, "a", sender=10)
    queue.send(1, "b", sender=11)
    assert queue.receive(1) == Message(1, "a", 10)
    assert queue.receive(1).text == "b"
    assert len(queue) == 0


def test_queue_receive_by_type_skips_others():
    queue = MessageQueue()
    queue.send(1, "first")
    queue.send(2, "second")
    assert queue.receive(2).text == "second"
    assert len(queue) == 1
    assert queue.receive(0).text == "first"


def test_queue_negative_type_picks_lowest():
    queue = MessageQueue()
    queue.send(3, "three")
    queue.send(2, "two")
    queue.send(5, "five")
    assert queue.receive(-4).text == "two"
    assert queue.receive(-4).text == "three"
    assert [queue.receive(0).text] == ["five"]


def test_queue_rejects_non_positive_type():
    queue = MessageQueue()
    with pytest.raises(ValueError):
        queue.send(0, "nope")


def test_queue_truncates_long_text():
    queue = MessageQueue()
    stored = queue.send(1, "x" * 500)
    assert len(stored.text) == MAX_MSG_SIZE - 1


def test_queue_tracks_last_sender():
    queue = MessageQueue()
    queue.send(1, "a", sender=77)
    queue.send(2, "b", sender=88)
    assert queue.last_sender == 88


def test_queue_receive_waits_for_sender():
    queue = MessageQueue()

    def later():
        time.sleep(0.05)
        queue.send(4, "late")

    thread = threading.Thread(target=later)
    thread.start()
    assert queue.receive(4).text == "late"
    thread.join()


def test_shared_memory_roundtrip_default():
    assert shared_memory_roundtrip() == "Hello, shared memory!"


def test_shared_memory_roundtrip_custom():
    assert shared_memory_roundtrip("payload") == "payload"


def test_shared_memory_too_large():
    with pytest.raises(ValueError):
        shared_memory_roundtrip("y" * 2000)


def test_pipe_roundtrip():
    assert pipe_roundtrip() == "Hello, child process!"
    assert pipe_roundtrip("over the pipe") == "over the pipe"


def test_message_queue_demo():
    assert message_queue_demo() == [
        "Message sent: Hello, message queue!",
        "Message received: Hello, message queue!",
    ]


def test_message_queue_ext_demo():
    lines = message_queue_ext_demo(0)
    assert lines[-3] == "Messages in queue: 0"
    assert lines[-2].startswith("Last sender PID: ")
    assert lines[-1] == "Message queue removed successfully"
    received = [line for line in lines if line.startswith("Parent received")]
    assert len(received) == 2
    assert "Message from child (PID: " in received[0]
    assert received[1].endswith("Second message from child")