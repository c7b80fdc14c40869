"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_protect"
title = "Field-level redaction of financial messages in transaction logs"
version = "0.1.0"
shell_command = "lib_log_protect"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner line by line through ``writer``.

    Each line ends with a newline so ``writer`` can be a plain ``list.append``.
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    if writer is None:
        writer = sys.stdout.write
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:\n")
    writer("\n")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}\n")
