"""Console output helpers shared by the commands."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def set_color(enabled: bool) -> None:
    """Enable or disable colored output on both consoles."""
    console.no_color = not enabled
    err_console.no_color = not enabled


def info(message: str) -> None:
    console.print(message, markup=False)


def success(message: str) -> None:
    """Print a bold green status line."""
    console.print(message, style="bold green", markup=False)


def warning(message: str) -> None:
    err_console.print(message, style="yellow", markup=False)


def error(message: str) -> None:
    """Print an error line on stderr."""
    err_console.print(message, style="bold red", markup=False)


def print_json(data: Any) -> None:
    """Print data as indented JSON on stdout."""
    console.out(json.dumps(data, indent=4), highlight=False)
