"""Console port describing how walkthrough output reaches a terminal.

Purpose
-------
Define the abstraction for adapters that render demo output, letting the
application layer depend on a narrow protocol instead of Rich.

Contents
--------
* :class:`MessageRole` – semantic role of an emitted line.
* :class:`ConsolePort` – runtime-checkable protocol with a single ``emit``
  method.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, runtime_checkable


class MessageRole(Enum):
    """Semantic role adapters map onto styles."""

    TITLE = "title"
    HEADING = "heading"
    TEXT = "text"
    ERROR = "error"
    SUCCESS = "success"


@runtime_checkable
class ConsolePort(Protocol):
    """Render one line of output to an interactive console."""

    def emit(self, text: str, *, role: MessageRole = MessageRole.TEXT) -> None:
        """Render ``text`` styled according to ``role``."""


__all__ = ["ConsolePort", "MessageRole"]
