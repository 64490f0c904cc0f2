"""Rich consoles for CLI output and the shared error exit."""

from __future__ import annotations

import sys
from typing import NoReturn

from rich.console import Console

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False, style="bold red")


def fail(message: str) -> NoReturn:
    """Report *message* on stderr and exit with status 1."""
    err_console.print(f"ERROR: {message}", markup=False)
    sys.exit(1)
