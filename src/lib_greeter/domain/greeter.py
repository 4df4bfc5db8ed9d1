"""Greeter entity and its configuration value.

Purpose
-------
Model the library's only stateful object: a name and greeting template
rendered as ``"<greeting>, <name>!"``.

Contents
--------
* :data:`DEFAULT_NAME`, :data:`DEFAULT_GREETING`, :data:`MAX_NAME_LENGTH`.
* :func:`validate_name` – shared by construction and renaming.
* :class:`GreeterConfig` – frozen configuration with per-field defaults.
* :class:`Greeter` – the live object with an explicit destroyed state.

System Role
-----------
Pure domain code: raises :class:`~lib_greeter.domain.errors.GreeterError`
subclasses and never touches the error channel. The application layer turns
those exceptions into return codes and channel records.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import TracebackType

from .buffer import OutputBuffer
from .errors import AllocationFailureError, InvalidArgumentError, UseAfterDestroyError


DEFAULT_NAME = "World"
DEFAULT_GREETING = "Hello"
MAX_NAME_LENGTH = 256
# Names must stay strictly below this length.


def validate_name(name: object) -> str:
    """Return ``name`` when it is a usable greeter name.

    Raises
    ------
    InvalidArgumentError
        When ``name`` is missing, not text, empty, or too long.

    Examples
    --------
    >>> validate_name("Ada")
    'Ada'
    >>> validate_name("")
    Traceback (most recent call last):
    ...
    lib_greeter.domain.errors.InvalidArgumentError: Name cannot be empty
    """

    if name is None:
        raise InvalidArgumentError("Name cannot be NULL")
    if not isinstance(name, str):
        raise InvalidArgumentError(f"Name must be text, got {type(name).__name__}")
    if not name:
        raise InvalidArgumentError("Name cannot be empty")
    if len(name) >= MAX_NAME_LENGTH:
        raise InvalidArgumentError(f"Name too long ({len(name)} chars, max {MAX_NAME_LENGTH - 1})")
    return name


def _owned_copy(text: str) -> str:
    """Return an independent plain-``str`` copy of ``text``."""

    try:
        return "".join(text)
    except MemoryError as exc:
        raise AllocationFailureError(f"Failed to allocate string of length {len(text)}") from exc


@dataclass(slots=True, frozen=True)
class GreeterConfig:
    """Configuration consumed by :meth:`Greeter.from_config`.

    ``None`` fields fall back to the defaults; an explicit empty string is
    kept and rejected by validation.

    Examples
    --------
    >>> GreeterConfig(name="Ada").with_defaults()
    GreeterConfig(name='Ada', greeting='Hello', uppercase=False)
    """

    name: str | None = None
    greeting: str | None = None
    uppercase: bool = False

    def with_defaults(self) -> "GreeterConfig":
        """Return a copy with every unset field replaced by its default."""

        return replace(
            self,
            name=DEFAULT_NAME if self.name is None else self.name,
            greeting=DEFAULT_GREETING if self.greeting is None else self.greeting,
            uppercase=bool(self.uppercase),
        )


class Greeter:
    """Greeter holding exclusively owned copies of its name and greeting.

    Instances move from live to destroyed exactly once via :meth:`close`.
    Every other operation on a destroyed instance raises
    :class:`UseAfterDestroyError`.

    Examples
    --------
    >>> with Greeter.from_config(GreeterConfig(uppercase=True)) as greeter:
    ...     greeter.render()
    'HELLO, WORLD!'
    """

    __slots__ = ("_name", "_greeting", "_uppercase", "_closed")

    def __init__(self, name: str, greeting: str, uppercase: bool = False) -> None:
        validated = validate_name(name)
        if not isinstance(greeting, str):
            raise InvalidArgumentError(f"Greeting must be text, got {type(greeting).__name__}")
        self._closed = False
        self._name = _owned_copy(validated)
        self._greeting = _owned_copy(greeting)
        self._uppercase = bool(uppercase)

    @classmethod
    def from_config(cls, config: GreeterConfig | None = None) -> "Greeter":
        """Build a greeter from ``config`` (all defaults when ``None``)."""

        config = config or GreeterConfig()
        return cls(
            DEFAULT_NAME if config.name is None else config.name,
            DEFAULT_GREETING if config.greeting is None else config.greeting,
            config.uppercase,
        )

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def name(self) -> str:
        self._ensure_live()
        return self._name

    @property
    def greeting(self) -> str:
        self._ensure_live()
        return self._greeting

    @property
    def uppercase(self) -> bool:
        self._ensure_live()
        return self._uppercase

    def render(self) -> str:
        """Return the full, untruncated greeting text."""

        self._ensure_live()
        text = f"{self._greeting}, {self._name}!"
        return text.upper() if self._uppercase else text

    def write(self, buffer: OutputBuffer) -> tuple[int, bool]:
        """Render into ``buffer``.

        Returns the full rendered length and whether it fitted. Nothing is
        written when the greeter is destroyed or the buffer is unusable.
        """

        self._ensure_live()
        if buffer is None or not buffer.usable:
            raise InvalidArgumentError("Invalid output buffer")
        text = self.render()
        return len(text), buffer.write(text)

    def rename(self, name: str) -> None:
        """Replace the name; the old name survives any validation failure."""

        self._ensure_live()
        self._name = _owned_copy(validate_name(name))

    def close(self) -> None:
        """Release the owned text. Closing twice is a no-op."""

        if self._closed:
            return
        self._closed = True
        self._name = ""
        self._greeting = ""

    def _ensure_live(self) -> None:
        if self._closed:
            raise UseAfterDestroyError("greeter has been destroyed")

    def __enter__(self) -> "Greeter":
        self._ensure_live()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        if self._closed:
            return "Greeter(<destroyed>)"
        return f"Greeter(name={self._name!r}, greeting={self._greeting!r}, uppercase={self._uppercase})"


__all__ = [
    "DEFAULT_GREETING",
    "DEFAULT_NAME",
    "MAX_NAME_LENGTH",
    "Greeter",
    "GreeterConfig",
    "validate_name",
]
