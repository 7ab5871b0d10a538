"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "mycli"
title = "Greeting CLI with best-effort Grafana Loki log shipping"
version = "0.1.0"
homepage = "https://github.com/example/mycli"
author = "mycli maintainers"
author_email = "maintainers@example.com"
shell_command = "mycli"


def print_info(writer: Callable[[str], object] = print) -> None:
    """Write the metadata banner through ``writer``.

    ``writer`` receives the complete banner as one string ending with a
    newline; the default ``print`` call suppresses its own newline.

    Examples
    --------
    >>> chunks = []
    >>> print_info(writer=chunks.append)
    >>> chunks[0].splitlines()[0]
    'Info for mycli:'
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    text = "\n".join(lines) + "\n"
    if writer is print:
        print(text, end="")
    else:
        writer(text)
