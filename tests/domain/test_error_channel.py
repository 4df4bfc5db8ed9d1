from __future__ import annotations

import threading

import pytest

from lib_greeter.domain.error_channel import ERROR_BUFFER_SIZE, ErrorChannel, ErrorState
from lib_greeter.domain.errors import ErrorKind, InvalidArgumentError


def test_channel_starts_clear() -> None:
    channel = ErrorChannel()
    assert not channel.has_error()
    assert channel.get_last_error() == ""
    assert channel.last_error_kind() is None
    assert channel.snapshot() == ErrorState()


def test_set_error_formats_printf_style() -> None:
    channel = ErrorChannel()
    channel.set_error("Test error %d", 42)
    assert channel.has_error()
    assert channel.get_last_error() == "Test error 42"


def test_set_error_without_args_keeps_percent_literal() -> None:
    channel = ErrorChannel()
    channel.set_error("100% broken")
    assert channel.get_last_error() == "100% broken"


def test_get_last_error_does_not_clear() -> None:
    channel = ErrorChannel()
    channel.set_error("Some error")
    assert channel.get_last_error() == "Some error"
    assert channel.get_last_error() == "Some error"
    assert channel.has_error()


def test_next_error_overwrites_previous() -> None:
    channel = ErrorChannel()
    channel.set_error("first", kind=ErrorKind.TRUNCATION)
    channel.set_error("second")
    assert channel.get_last_error() == "second"
    assert channel.last_error_kind() is None


def test_long_messages_are_truncated_to_buffer_size() -> None:
    channel = ErrorChannel()
    channel.set_error("x" * (ERROR_BUFFER_SIZE * 2))
    message = channel.get_last_error()
    assert len(message) == ERROR_BUFFER_SIZE - 1
    assert channel.has_error()


def test_custom_capacity_bounds_message() -> None:
    channel = ErrorChannel(capacity=6)
    channel.set_error("Buffer too small")
    assert channel.get_last_error() == "Buffe"


def test_non_positive_capacity_is_rejected() -> None:
    with pytest.raises(ValueError, match="positive"):
        ErrorChannel(capacity=0)


def test_clear_error_is_idempotent() -> None:
    channel = ErrorChannel()
    channel.set_error("Some error")

    channel.clear_error()
    assert not channel.has_error()
    assert channel.get_last_error() == ""

    channel.clear_error()
    assert not channel.has_error()
    assert channel.get_last_error() == ""


def test_record_stores_message_and_kind() -> None:
    channel = ErrorChannel()
    channel.record(InvalidArgumentError("Name cannot be empty"))
    assert channel.get_last_error() == "Name cannot be empty"
    assert channel.last_error_kind() is ErrorKind.INVALID_ARGUMENT


def test_unset_state_cannot_carry_a_message() -> None:
    with pytest.raises(ValueError):
        ErrorState(message="stale", is_set=False)


def test_threads_do_not_share_error_state() -> None:
    channel = ErrorChannel()
    channel.set_error("main thread error")
    barrier = threading.Barrier(2)
    seen: dict[str, tuple[bool, str]] = {}

    def worker(label: str) -> None:
        before = channel.has_error()
        channel.set_error("error from %s", label)
        barrier.wait()
        seen[label] = (before, channel.get_last_error())
        channel.clear_error()

    threads = [threading.Thread(target=worker, args=(label,)) for label in ("a", "b")]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert seen == {"a": (False, "error from a"), "b": (False, "error from b")}
    assert channel.get_last_error() == "main thread error"


@pytest.mark.parametrize(
    "kind, hard",
    [
        (ErrorKind.INVALID_ARGUMENT, True),
        (ErrorKind.ALLOCATION_FAILURE, True),
        (ErrorKind.USE_AFTER_DESTROY, True),
        (ErrorKind.TRUNCATION, False),
    ],
)
def test_only_truncation_leaves_a_usable_result(kind: ErrorKind, hard: bool) -> None:
    assert kind.is_hard_failure is hard
