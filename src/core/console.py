"""
Shared console for colored output.
"""

from rich.console import Console
from rich.style import Style

console = Console(highlight=False)


def print_bin(name: str, color: str, text: str) -> None:
    """Print a bin name in its display color followed by plain text."""
    console.print(name, style=Style(color=color, bold=True), end=" ", markup=False)
    console.print(text, markup=False)


def print_note(text: str) -> None:
    """Print an informational line in gray."""
    console.print(text, style="grey50", markup=False)


def print_alert(text: str) -> None:
    console.print(text, style="bold red", markup=False)
