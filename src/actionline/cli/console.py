"""CLI console helpers built on Rich.

Consoles are created per call so they always target the *current*
``sys.stdout`` / ``sys.stderr`` (which tests and embedding programs may
swap out).  Soft wrapping is enabled so long argparse messages are
written verbatim instead of being re-wrapped to the terminal width.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


def get_rich_console(*, stderr: bool = True) -> Console:
    """Create a Rich console targeting stderr (default) or stdout."""
    return Console(stderr=stderr, soft_wrap=True, highlight=False, emoji=False)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy over a fresh Rich console."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr: bool = stderr

    def print(self, *objects: object, markup: bool = True) -> None:
        get_rich_console(stderr=self._stderr).print(*objects, markup=markup)


console = _ConsoleProxy(stderr=True)
"""Diagnostics and failures — standard error."""

output = _ConsoleProxy(stderr=False)
"""Help text, early-exit messages and action output — standard output."""


def print_error(message: str) -> None:
    """Write a single failure line prefixed with a red ``Error:`` marker."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_hint(hint: str) -> None:
    console.print(f"[yellow]Hint:[/yellow] {escape(hint)}")


def print_verbatim(text: str, *, stderr: bool = True) -> None:
    """Write *text* without interpreting Rich markup (e.g. argparse usage)."""
    target = console if stderr else output
    target.print(text.rstrip("\n"), markup=False)
