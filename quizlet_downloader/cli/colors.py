"""CLI color utilities.

Status lines carry a color cue: yellow while working, green when done, red
on failure.
"""

from rich.box import ASCII
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

custom_theme = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "dim": "dim white",
    "working": "yellow",
})

console = Console(theme=custom_theme, soft_wrap=True)


def print_success(text: str):
    """Print success message."""
    console.print(f"[success]{escape(text)}[/success]")


def print_error(text: str):
    """Print error message."""
    console.print(f"[error]{escape(text)}[/error]")


def print_warning(text: str):
    """Print warning message."""
    console.print(f"[warning]{escape(text)}[/warning]")


def print_working(text: str):
    """Print an in-progress status line."""
    console.print(f"[working]{escape(text)}[/working]")


def print_dim(text: str):
    console.print(f"[dim]{escape(text)}[/dim]")


def print_options_table(options: dict):
    """Print option names and values."""
    table = Table(show_header=True, header_style="bold cyan", box=ASCII)
    table.add_column("Option", style="cyan")
    table.add_column("Value", style="white")
    for key, value in options.items():
        table.add_row(key, escape(str(value)))
    console.print(table)
