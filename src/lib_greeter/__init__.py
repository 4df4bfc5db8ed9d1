"""Public package surface of the greeter library.

Exposes the handle-style greeter API, the per-thread error channel queries
and the value types callers construct (:class:`GreeterConfig`,
:class:`OutputBuffer`). The exception-raising :class:`Greeter` class is
exported for callers that prefer it over return codes.
"""

from __future__ import annotations

from .domain import (
    ERROR_BUFFER_SIZE,
    MAX_NAME_LENGTH,
    AllocationFailureError,
    ErrorKind,
    Greeter,
    GreeterConfig,
    GreeterError,
    InvalidArgumentError,
    OutputBuffer,
    UseAfterDestroyError,
)
from .lib_greeter import (
    clear_error,
    create,
    demo,
    destroy,
    get_last_error,
    get_name,
    get_version,
    greet,
    has_error,
    last_error_kind,
    set_error,
    set_name,
    summary_info,
)

__all__ = [
    "AllocationFailureError",
    "ERROR_BUFFER_SIZE",
    "ErrorKind",
    "Greeter",
    "GreeterConfig",
    "GreeterError",
    "InvalidArgumentError",
    "MAX_NAME_LENGTH",
    "OutputBuffer",
    "UseAfterDestroyError",
    "clear_error",
    "create",
    "demo",
    "destroy",
    "get_last_error",
    "get_name",
    "get_version",
    "greet",
    "has_error",
    "last_error_kind",
    "set_error",
    "set_name",
    "summary_info",
]
