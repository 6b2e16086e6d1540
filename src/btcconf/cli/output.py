"""
Output formatting utilities for the CLI.

Messages and summary values often carry user input (paths, shell commands,
error text), so everything passed in here is printed literally. Only the
prefixes, panel bodies and styles built in this module use rich markup.
"""

from collections.abc import Iterable

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

ACCENT = "#7571f9"
HIGHLIGHT = "#ff8700"

# Global console instance
console = Console()


def _print_message(marker: str, message: str) -> None:
    console.print(f"{marker} {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    _print_message("[green]✓[/green]", message)


def print_error(message: str) -> None:
    """Print an error message."""
    _print_message("[red]✗[/red]", message)


def print_warning(message: str) -> None:
    """Print a warning message."""
    _print_message("[yellow]![/yellow]", message)


def print_info(message: str) -> None:
    """Print an info message."""
    _print_message("[blue]i[/blue]", message)


def highlight(text: str) -> str:
    """Markup for a user-supplied value shown inside a panel body."""
    return f"[{HIGHLIGHT}]{escape(text)}[/{HIGHLIGHT}]"


def print_panel(content: str, title: str | None = None) -> None:
    """Print content in a panel. ``content`` is rich markup."""
    console.print(Panel(content, title=title, border_style=ACCENT, padding=(1, 2)))


def build_summary_table(rows: Iterable[tuple[str, str]], title: str | None = None) -> Table:
    """Two-column table of option titles and their configured values."""
    table = Table(title=title, title_justify="left", border_style=ACCENT)
    table.add_column("Option", style="bold")
    table.add_column("Value", style="#02bf87", overflow="fold")

    for option, value in rows:
        table.add_row(escape(option), escape(value))

    return table


def print_summary(rows: Iterable[tuple[str, str]], title: str | None = None) -> None:
    """Print the summary of a completed wizard run."""
    console.print(build_summary_table(rows, title=title))
