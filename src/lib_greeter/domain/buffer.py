"""Caller-allocated output region with bounded-write semantics."""

from __future__ import annotations


class OutputBuffer:
    """Fixed-capacity text buffer mirroring a terminated character array.

    ``capacity`` counts the terminator slot, so the buffer holds at most
    ``capacity - 1`` characters. A zero-capacity buffer can be created but
    cannot receive output.

    Examples
    --------
    >>> buffer = OutputBuffer(5)
    >>> buffer.write("Hello, World!")
    False
    >>> buffer.value
    'Hell'
    """

    __slots__ = ("_capacity", "_value")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._value = ""

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def usable(self) -> bool:
        """Return ``True`` when at least the terminator slot exists."""

        return self._capacity > 0

    @property
    def value(self) -> str:
        """Return the text currently held by the buffer."""

        return self._value

    def write(self, text: str) -> bool:
        """Replace the contents with as much of ``text`` as fits.

        Returns ``True`` when ``text`` fitted completely.
        """

        if not self.usable:
            raise ValueError("cannot write into a zero-capacity buffer")
        limit = self._capacity - 1
        self._value = text[:limit]
        return len(text) <= limit

    def clear(self) -> None:
        self._value = ""

    def __len__(self) -> int:
        return len(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"OutputBuffer(capacity={self._capacity}, value={self._value!r})"


__all__ = ["OutputBuffer"]
