"""Guided walkthrough of the greeter API.

Purpose
-------
Exercise every public greeter operation the way a first-time user would:
default and custom greeters, uppercase rendering, renaming, and the expected
failure for an empty name.

Contents
--------
* :class:`DemoReport` – collected output and overall success flag.
* :func:`run_demo` – runs the five scenarios through a :class:`ConsolePort`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from lib_greeter.application.ports.console import ConsolePort, MessageRole
from lib_greeter.domain import GreeterConfig, OutputBuffer

from .lifecycle import GreeterLifecycle


@dataclass(slots=True)
class DemoReport:
    """Outcome of :func:`run_demo`.

    Attributes
    ----------
    lines:
        Every line handed to the console, in order.
    ok:
        ``False`` as soon as one scenario failed unexpectedly.
    failures:
        Channel messages of the scenarios that failed.
    """

    lines: list[str] = field(default_factory=list)
    ok: bool = True
    failures: list[str] = field(default_factory=list)


def run_demo(
    *,
    lifecycle: GreeterLifecycle,
    console: ConsolePort,
    version: str,
    buffer_size: int = 128,
) -> DemoReport:
    """Run the walkthrough and return what was printed.

    Examples
    --------
    >>> from lib_greeter.domain import ErrorChannel
    >>> class _Collect:
    ...     def emit(self, text, *, role=MessageRole.TEXT):
    ...         pass
    >>> report = run_demo(lifecycle=GreeterLifecycle(channel=ErrorChannel()), console=_Collect(), version="1.0.0")
    >>> report.ok
    True
    >>> "  Welcome, Carbide User!" in report.lines
    True
    """

    report = DemoReport()
    channel = lifecycle.channel

    def emit(text: str, role: MessageRole = MessageRole.TEXT) -> None:
        report.lines.append(text)
        console.emit(text, role=role)

    def fail() -> None:
        message = channel.get_last_error()
        report.ok = False
        report.failures.append(message)
        emit(f"  Error: {message}", MessageRole.ERROR)

    def render(greeter) -> str:
        buffer = OutputBuffer(buffer_size)
        lifecycle.greet(greeter, buffer)
        return buffer.value

    def scenario(config: GreeterConfig | None, body: Callable[..., None]) -> None:
        greeter = lifecycle.create(config)
        if greeter is None:
            fail()
            return
        try:
            body(greeter)
        finally:
            lifecycle.destroy(greeter)

    emit(f"Greeter Library v{version}", MessageRole.TITLE)
    emit("====================", MessageRole.TITLE)

    emit("Example 1: Default greeter", MessageRole.HEADING)
    scenario(None, lambda greeter: emit(f"  {render(greeter)}"))

    emit("Example 2: Custom greeter", MessageRole.HEADING)
    scenario(
        GreeterConfig(name="Carbide User", greeting="Welcome"),
        lambda greeter: emit(f"  {render(greeter)}"),
    )

    emit("Example 3: Uppercase greeter", MessageRole.HEADING)
    scenario(GreeterConfig(uppercase=True), lambda greeter: emit(f"  {render(greeter)}"))

    emit("Example 4: Changing name", MessageRole.HEADING)

    def rename(greeter) -> None:
        emit(f'  Before: name = "{lifecycle.get_name(greeter)}"')
        emit(f"  Greeting: {render(greeter)}")
        if not lifecycle.set_name(greeter, "New Name"):
            fail()
            return
        emit(f'  After: name = "{lifecycle.get_name(greeter)}"')
        emit(f"  Greeting: {render(greeter)}")

    scenario(None, rename)

    emit("Example 5: Error handling", MessageRole.HEADING)
    greeter = lifecycle.create(GreeterConfig(name=""))
    if greeter is None:
        emit(f"  Expected error: {channel.get_last_error()}")
        channel.clear_error()
    else:
        lifecycle.destroy(greeter)
        report.ok = False
        report.failures.append("empty name was accepted")
        emit("  Error: empty name was accepted", MessageRole.ERROR)

    if report.ok:
        emit("All examples completed successfully!", MessageRole.SUCCESS)
    return report


__all__ = ["DemoReport", "run_demo"]
