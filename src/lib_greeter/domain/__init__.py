"""Domain entities and value objects used by the greeter library."""

from __future__ import annotations

from .buffer import OutputBuffer
from .error_channel import ERROR_BUFFER_SIZE, ErrorChannel, ErrorState
from .errors import (
    AllocationFailureError,
    ErrorKind,
    GreeterError,
    InvalidArgumentError,
    UseAfterDestroyError,
)
from .greeter import (
    DEFAULT_GREETING,
    DEFAULT_NAME,
    MAX_NAME_LENGTH,
    Greeter,
    GreeterConfig,
    validate_name,
)

__all__ = [
    "AllocationFailureError",
    "DEFAULT_GREETING",
    "DEFAULT_NAME",
    "ERROR_BUFFER_SIZE",
    "ErrorChannel",
    "ErrorKind",
    "ErrorState",
    "Greeter",
    "GreeterConfig",
    "GreeterError",
    "InvalidArgumentError",
    "MAX_NAME_LENGTH",
    "OutputBuffer",
    "UseAfterDestroyError",
    "validate_name",
]
