"""Greeter façade binding the use cases to the process-wide error channel.

Purpose
-------
Expose the handle-style API (``create`` / ``greet`` / ``get_name`` /
``set_name`` / ``destroy``) and the error-channel queries as plain module
functions, the way host code and the CLI consume them.

Contents
--------
* Error channel: :func:`set_error`, :func:`get_last_error`,
  :func:`has_error`, :func:`clear_error`, :func:`last_error_kind`.
* Greeter lifecycle: :func:`create`, :func:`destroy`, :func:`greet`,
  :func:`get_name`, :func:`set_name`.
* Utility: :func:`get_version`, :func:`summary_info`, :func:`demo`.

System Role
-----------
Composition point of the package: owns the single :class:`ErrorChannel`
instance and the :class:`GreeterLifecycle` bound to it. Policy lives in the
domain and application layers.
"""

from __future__ import annotations

from typing import Any

from .adapters import RichConsoleAdapter
from .application.ports import ConsolePort
from .application.use_cases import DemoReport, GreeterLifecycle, run_demo
from .domain import ErrorChannel, ErrorKind, Greeter, GreeterConfig, OutputBuffer


_CHANNEL = ErrorChannel()
_LIFECYCLE = GreeterLifecycle(channel=_CHANNEL)


def set_error(fmt: str, *args: Any, kind: ErrorKind | None = None) -> None:
    """Record a printf-style message as the calling thread's last error.

    Examples
    --------
    >>> set_error("Test error %d", 42)
    >>> get_last_error()
    'Test error 42'
    >>> clear_error()
    """

    _CHANNEL.set_error(fmt, *args, kind=kind)


def get_last_error() -> str:
    """Return the calling thread's pending error message, or ``""``."""

    return _CHANNEL.get_last_error()


def has_error() -> bool:
    """Return whether the calling thread has a pending error."""

    return _CHANNEL.has_error()


def last_error_kind() -> ErrorKind | None:
    return _CHANNEL.last_error_kind()


def clear_error() -> None:
    """Discard the calling thread's pending error."""

    _CHANNEL.clear_error()


def create(config: GreeterConfig | None = None) -> Greeter | None:
    """Create a greeter from ``config``; ``None`` means all defaults.

    Returns ``None`` and records the reason when the configuration is invalid.

    Examples
    --------
    >>> greeter = create(GreeterConfig(name="Carbide User", greeting="Welcome"))
    >>> get_name(greeter)
    'Carbide User'
    >>> destroy(greeter)
    >>> create(GreeterConfig(name="")) is None
    True
    >>> get_last_error()
    'Name cannot be empty'
    >>> clear_error()
    """

    return _LIFECYCLE.create(config)


def destroy(greeter: Greeter | None) -> None:
    """Release ``greeter``. ``None`` and destroyed handles are ignored."""

    _LIFECYCLE.destroy(greeter)


def greet(greeter: Greeter | None, buffer: OutputBuffer | None) -> int:
    """Render ``"<greeting>, <name>!"`` into ``buffer``.

    Returns the full length of the rendering even when the buffer was too
    small (the truncation is recorded in the error channel), or ``-1`` when
    the greeter or buffer is unusable.

    Examples
    --------
    >>> greeter = create()
    >>> buffer = OutputBuffer(5)
    >>> greet(greeter, buffer)
    13
    >>> buffer.value
    'Hell'
    >>> get_last_error()
    'Buffer too small (need 14, have 5)'
    >>> clear_error(); destroy(greeter)
    """

    return _LIFECYCLE.greet(greeter, buffer)


def get_name(greeter: Greeter | None) -> str | None:
    """Return the greeter's current name, or ``None`` on failure."""

    return _LIFECYCLE.get_name(greeter)


def set_name(greeter: Greeter | None, name: str | None) -> bool:
    """Rename the greeter; returns ``False`` and keeps the old name on failure."""

    return _LIFECYCLE.set_name(greeter, name)


def get_version() -> str:
    """Return the library version string.

    Examples
    --------
    >>> get_version()
    '1.0.0'
    """

    from . import __init__conf__

    return __init__conf__.version


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


def demo(*, console: ConsolePort | None = None, buffer_size: int = 128) -> DemoReport:
    """Run the guided walkthrough against the process-wide channel.

    Output goes to ``console`` or, when omitted, to a Rich console on stdout.
    """

    return run_demo(
        lifecycle=_LIFECYCLE,
        console=console if console is not None else RichConsoleAdapter(),
        version=get_version(),
        buffer_size=buffer_size,
    )


__all__ = [
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
