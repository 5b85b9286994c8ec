"""User prompts and console output helpers."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

# soft_wrap keeps long paths and export lines on one line
console = Console(soft_wrap=True, highlight=False, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)


def prompt_index(message: str) -> int | None:
    """Prompt until the user enters a non-negative integer.

    Returns the number, or None on cancel ('c', 'cancel') or end of input.
    The number is not checked against any list length here.
    """
    console.print(f"{message} [dim](c to cancel)[/dim]")
    while True:
        try:
            raw = input().strip()
        except EOFError:
            return None
        if raw.lower() in ("c", "cancel"):
            return None
        if raw.isascii() and raw.isdigit():
            return int(raw)
        console.print("[red]Please enter a valid number.[/red]")


def error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def warn(message: str) -> None:
    """Print a warning to stderr."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def info(message: str) -> None:
    """Print an info message. Accepts rich markup; escape paths first."""
    console.print(message)
