"""Protocols the application layer depends on."""

from __future__ import annotations

from .console import ConsolePort, MessageRole

__all__ = ["ConsolePort", "MessageRole"]
