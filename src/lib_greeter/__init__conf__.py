"""Static package metadata surfaced by the CLI banner and :func:`get_version`."""

from __future__ import annotations

from typing import Callable

name = "lib_greeter"
title = "Greeter library demonstrating config defaults, bounded writes and a per-thread error channel"
version = "1.0.0"
author = "bitranox"
shell_command = "lib_greeter"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Print the metadata banner, or hand it to ``writer`` when given.

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_greeter:
    <BLANKLINE>
        name          = lib_greeter
    ...
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is None:
        print(text, end="")
    else:
        writer(text)
