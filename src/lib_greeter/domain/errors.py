"""Error taxonomy shared by the greeter and the error channel.

Purpose
-------
Give every failure the library can report a stable classification so callers
can branch on the kind of problem instead of parsing messages.

Contents
--------
* :class:`ErrorKind` – enumeration of reportable failure classes.
* :class:`GreeterError` and subclasses – exceptions raised by the domain layer
  and translated into channel records by the application layer.

System Role
-----------
Domain objects raise these exceptions; :mod:`lib_greeter.application.use_cases.lifecycle`
catches them at the API boundary and stores them in the
:class:`~lib_greeter.domain.error_channel.ErrorChannel`.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Classification of failures recorded in the error channel."""

    INVALID_ARGUMENT = "invalid_argument"
    TRUNCATION = "truncation"
    ALLOCATION_FAILURE = "allocation_failure"
    USE_AFTER_DESTROY = "use_after_destroy"

    @property
    def is_hard_failure(self) -> bool:
        """Return ``True`` when the failing operation produced no usable result.

        Examples
        --------
        >>> ErrorKind.TRUNCATION.is_hard_failure
        False
        >>> ErrorKind.INVALID_ARGUMENT.is_hard_failure
        True
        """

        return self is not ErrorKind.TRUNCATION


class GreeterError(Exception):
    """Base class for failures raised by the greeter domain."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT

    @property
    def message(self) -> str:
        return str(self)


class InvalidArgumentError(GreeterError, ValueError):
    """Absent handle, invalid name, or unusable output buffer."""

    kind = ErrorKind.INVALID_ARGUMENT


class AllocationFailureError(GreeterError, MemoryError):
    """Taking an owned copy of a text field ran out of memory."""

    kind = ErrorKind.ALLOCATION_FAILURE


class UseAfterDestroyError(GreeterError, RuntimeError):
    """An operation was attempted on a destroyed greeter."""

    kind = ErrorKind.USE_AFTER_DESTROY


__all__ = [
    "AllocationFailureError",
    "ErrorKind",
    "GreeterError",
    "InvalidArgumentError",
    "UseAfterDestroyError",
]
