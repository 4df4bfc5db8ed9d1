"""Concrete adapters plugged into the application ports."""

from __future__ import annotations

from .console.rich_console import RichConsoleAdapter

__all__ = ["RichConsoleAdapter"]
