"""Per-thread "last error" channel built atop :class:`threading.local`.

Purpose
-------
Let any operation record a human-readable failure reason without changing its
return type, and let callers retrieve or clear that reason afterwards, in the
spirit of ``errno`` paired with a formatted message.

Contents
--------
* :data:`ERROR_BUFFER_SIZE` – capacity of the message buffer (terminator
  slot included).
* :class:`ErrorState` – immutable snapshot of one thread's channel.
* :class:`ErrorChannel` – the channel itself.

System Role
-----------
Owned by the façade in :mod:`lib_greeter.lib_greeter` as a process-wide
instance and injected into the application use cases, which record every
failure here before returning their failure indicator.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any

from .errors import ErrorKind, GreeterError


ERROR_BUFFER_SIZE = 1024


@dataclass(slots=True, frozen=True)
class ErrorState:
    """Snapshot of the error channel for the calling thread.

    Attributes
    ----------
    message:
        Last recorded message, or ``""`` when nothing is pending.
    is_set:
        ``True`` once an error has been recorded and not yet cleared.
    kind:
        Classification of the pending error, if it was recorded with one.
    """

    message: str = ""
    is_set: bool = False
    kind: ErrorKind | None = None

    def __post_init__(self) -> None:
        if not self.is_set and (self.message or self.kind is not None):
            raise ValueError("an unset error state must not carry a message or kind")


_CLEAR = ErrorState()


class ErrorChannel:
    """Record and query the last error of the calling thread.

    Every thread sees its own state, created lazily on first use. Calls from
    a single thread are sequential, so no locking is involved.

    Examples
    --------
    >>> channel = ErrorChannel()
    >>> channel.has_error()
    False
    >>> channel.set_error("Test error %d", 42)
    >>> channel.get_last_error()
    'Test error 42'
    >>> channel.clear_error()
    >>> channel.get_last_error()
    ''
    """

    def __init__(self, *, capacity: int = ERROR_BUFFER_SIZE) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._local = threading.local()

    @property
    def capacity(self) -> int:
        """Return the message buffer size, terminator slot included."""

        return self._capacity

    def set_error(self, fmt: str, *args: Any, kind: ErrorKind | None = None) -> None:
        """Render ``fmt % args`` into the buffer and mark the state as set.

        The message is cut to ``capacity - 1`` characters. Any unread error is
        overwritten.
        """

        message = fmt % args if args else fmt
        self._store(ErrorState(message=message[: self._capacity - 1], is_set=True, kind=kind))

    def record(self, error: GreeterError) -> None:
        """Store ``error``'s message and kind as the pending error."""

        self.set_error(error.message, kind=error.kind)

    def get_last_error(self) -> str:
        """Return the pending message, or ``""`` when nothing is set."""

        return self.snapshot().message

    def has_error(self) -> bool:
        """Return whether an error is pending for the calling thread."""

        return self.snapshot().is_set

    def last_error_kind(self) -> ErrorKind | None:
        """Return the kind of the pending error, if any."""

        return self.snapshot().kind

    def clear_error(self) -> None:
        """Reset the calling thread's state; calling it again changes nothing."""

        self._store(_CLEAR)

    def snapshot(self) -> ErrorState:
        """Return the calling thread's current state."""

        return getattr(self._local, "state", _CLEAR)

    def _store(self, state: ErrorState) -> None:
        self._local.state = state


__all__ = ["ERROR_BUFFER_SIZE", "ErrorChannel", "ErrorState"]
