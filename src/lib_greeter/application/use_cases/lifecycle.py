"""Greeter lifecycle operations reporting failures through the error channel.

Purpose
-------
Expose the greeter as a handle-style API: failures never raise, they return a
failure indicator (``None``, ``-1`` or ``False``) and leave a descriptive
message in the calling thread's :class:`ErrorChannel`.

Contents
--------
* :class:`GreeterLifecycle` – create/destroy/greet/get_name/set_name bound to
  one channel.

System Role
-----------
Boundary between the exception-raising domain and callers that prefer the
return-code contract. :mod:`lib_greeter.lib_greeter` binds one instance to the
process-wide channel; tests inject private channels.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from lib_greeter.domain import (
    ErrorChannel,
    ErrorKind,
    Greeter,
    GreeterConfig,
    GreeterError,
    InvalidArgumentError,
    OutputBuffer,
)

logger = logging.getLogger(__name__)

_NULL_GREETER = "greeter is NULL"

_T = TypeVar("_T")


class GreeterLifecycle:
    """Handle-style greeter operations sharing one error channel.

    Successful calls leave the channel untouched, so a stale error from an
    earlier failure stays readable until the caller clears it.

    Examples
    --------
    >>> channel = ErrorChannel()
    >>> lifecycle = GreeterLifecycle(channel=channel)
    >>> greeter = lifecycle.create()
    >>> buffer = OutputBuffer(128)
    >>> lifecycle.greet(greeter, buffer)
    13
    >>> buffer.value
    'Hello, World!'
    >>> lifecycle.destroy(greeter)
    """

    def __init__(self, *, channel: ErrorChannel) -> None:
        self._channel = channel

    @property
    def channel(self) -> ErrorChannel:
        return self._channel

    def create(self, config: GreeterConfig | None = None) -> Greeter | None:
        """Return a live greeter, or ``None`` after recording why it failed."""

        if config is not None and not isinstance(config, GreeterConfig):
            return self._fail(InvalidArgumentError(f"config must be a GreeterConfig, got {type(config).__name__}"), None)
        try:
            greeter = Greeter.from_config(config)
        except GreeterError as error:
            return self._fail(error, None)
        logger.debug("greeter created", extra={"greeter_name": greeter.name, "uppercase": greeter.uppercase})
        return greeter

    def destroy(self, greeter: Greeter | None) -> None:
        """Release ``greeter``; absent or already destroyed handles are ignored."""

        if greeter is None or greeter.closed:
            return
        greeter.close()
        logger.debug("greeter destroyed")

    def greet(self, greeter: Greeter | None, buffer: OutputBuffer | None) -> int:
        """Render into ``buffer`` and return the full required length.

        A buffer that is too small still receives the truncated text and the
        full length is returned; the truncation is only recorded in the
        channel. ``-1`` means nothing was written.
        """

        if greeter is None:
            return self._fail(InvalidArgumentError(_NULL_GREETER), -1)
        try:
            length, complete = greeter.write(buffer)  # type: ignore[arg-type]
        except GreeterError as error:
            return self._fail(error, -1)
        if complete or buffer is None:
            return length
        self._channel.set_error(
            "Buffer too small (need %d, have %d)",
            length + 1,
            buffer.capacity,
            kind=ErrorKind.TRUNCATION,
        )
        logger.debug("greeting truncated", extra={"required": length, "capacity": buffer.capacity})
        return length

    def get_name(self, greeter: Greeter | None) -> str | None:
        """Return the current name, or ``None`` after recording the failure."""

        if greeter is None:
            return self._fail(InvalidArgumentError(_NULL_GREETER), None)
        try:
            return greeter.name
        except GreeterError as error:
            return self._fail(error, None)

    def set_name(self, greeter: Greeter | None, name: str | None) -> bool:
        """Rename ``greeter``; on failure the previous name is kept."""

        if greeter is None:
            return self._fail(InvalidArgumentError(_NULL_GREETER), False)
        try:
            greeter.rename(name)  # type: ignore[arg-type]
        except GreeterError as error:
            return self._fail(error, False)
        logger.debug("greeter renamed", extra={"greeter_name": greeter.name})
        return True

    def _fail(self, error: GreeterError, result: _T) -> _T:
        self._channel.record(error)
        logger.debug("greeter operation failed: %s", error.message, extra={"error_kind": error.kind.value})
        return result


__all__ = ["GreeterLifecycle"]
