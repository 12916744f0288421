from oslab.threads import Popup, hello_threads, popup_event, run_popups


def test_hello_threads_counts_per_thread():
    lines = hello_threads(3, 7)
    assert len(lines) == 3 * 7 + 1
    for thread_id in (1, 2, 3):
        assert lines.count(f"Thread {thread_id}: Hello, world!") == 7
    assert lines[-1] == "Main thread: All threads have finished execution."


def test_hello_threads_no_threads():
    assert hello_threads(0, 5) == ["Main thread: All threads have finished execution."]


def test_popup_event_order():
    lines = popup_event(0.0, 0.0)
    assert lines[0] == "Main thread: Pop-up event detected. Creating pop-up thread..."
    assert lines[-1] == "Main thread: All tasks completed."
    assert sorted(lines[1:-1]) == sorted([
        "Pop-up thread: Pop-up event detected!",
        "Pop-up thread: Pop-up dismissed.",
        "Main thread: Continuing other tasks while pop-up is displayed...",
    ])
    assert lines.index("Pop-up thread: Pop-up event detected!") < lines.index(
        "Pop-up thread: Pop-up dismissed."
    )


def test_popup_message_truncated_to_buffer():
    popup = Popup(1, "x" * 300, 1)
    assert popup.message == "x" * 127


def test_popup_rejects_negative_duration():
    import pytest

    with pytest.raises(ValueError):
        Popup(1, "hi", -1)


def test_run_popups_countdown_and_completion():
    popups = [Popup(1, "alpha", 2), Popup(2, "beta", 3)]
    lines = run_popups(popups, stagger=0.0, tick=0.0)
    assert lines[0] == "Main thread: Creating popup 1 for 'alpha'"
    for popup in popups:
        countdown = [
            line for line in lines if line.startswith(f"Popup {popup.id}: ")
        ]
        assert countdown == [
            f"Popup {popup.id}: {n} seconds remaining"
            for n in range(popup.duration, 0, -1)
        ]
        assert any(line.endswith(f"Popup {popup.id}: {popup.message}") for line in lines)
        assert any(line.endswith(f"Popup {popup.id}: Dismissed") for line in lines)
    completed = [line for line in lines if line.endswith("has completed")]
    assert completed == [
        "Main thread: Popup 1 has completed",
        "Main thread: Popup 2 has completed",
    ]
    assert lines[-1].endswith("] Main thread: All popups and tasks completed")
    assert "Main thread: Performing background tasks..." in lines


def test_run_popups_defaults_use_sample_messages():
    lines = run_popups(stagger=0.0, tick=0.0)
    assert "Main thread: Creating popup 1 for 'System Update Available'" in lines
    assert "Main thread: Creating popup 3 for 'New Message Received'" in lines
    assert sum(1 for line in lines if line.startswith("Popup 3: ")) == 4