"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Bridge the walkthrough use case with Rich so CLI output is styled per
message role.

Contents
--------
* :data:`_STYLE_MAP` - default role-to-style mapping.
* :class:`RichConsoleAdapter` - adapter constructed by the CLI.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console

from lib_greeter.application.ports.console import ConsolePort, MessageRole


_STYLE_MAP: Mapping[MessageRole, str] = {
    MessageRole.TITLE: "bold",
    MessageRole.HEADING: "cyan",
    MessageRole.TEXT: "",
    MessageRole.ERROR: "bold red",
    MessageRole.SUCCESS: "green",
}

#: Default Rich styles keyed by :class:`MessageRole`.


class RichConsoleAdapter(ConsolePort):
    """Render walkthrough lines using Rich with optional style overrides."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        no_color: bool = False,
        styles: Mapping[MessageRole | str, str] | None = None,
    ) -> None:
        if console is not None:
            self._console = console
        else:
            self._console = Console(no_color=no_color)
        self._no_color = no_color
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            role = MessageRole(key.strip().lower()) if isinstance(key, str) else key
            merged[role] = value
        self._style_map = merged

    def emit(self, text: str, *, role: MessageRole = MessageRole.TEXT) -> None:
        """Print ``text`` using the style configured for ``role``.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.emit("Hello, World!", role=MessageRole.TEXT)
        >>> 'Hello, World!' in console.export_text()
        True
        """
        style = "" if self._no_color else self._style_map.get(role, "")
        if role is MessageRole.HEADING:
            self._console.print()
        self._console.print(text, style=style, highlight=False, markup=False)


__all__ = ["RichConsoleAdapter"]
