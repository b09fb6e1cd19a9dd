"""Console helpers shared by all commands."""
from typing import Dict, Optional, Sequence

import typer
from rich.console import Console
from rich.table import Table

from wpsync_common import WpSyncError

console = Console()


def success(message: str):
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def error(message: str):
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def warning(message: str):
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def info(message: str):
    """Print an informational message."""
    console.print(f"[cyan]{message}[/cyan]")


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask a yes/no question; an empty answer takes the default."""
    return typer.confirm(message, default=default)


def handle_error(e: Exception, verbose: bool = False):
    """Print an exception the way the CLI reports errors."""
    if isinstance(e, WpSyncError):
        error(e.message)
        stderr = getattr(e, "stderr", "")
        if stderr:
            console.print(f"[dim]{stderr}[/dim]", markup=False)
    else:
        error(str(e))
    if verbose:
        console.print_exception()


class ConsoleReporter:
    """SyncReporter printing to the rich console."""

    def log(self, message: str, style: Optional[str] = None):
        console.print(message, style=style, markup=False, highlight=False)

    def success(self, message: str):
        success(message)

    def warning(self, message: str):
        warning(message)

    def table(self, rows: Sequence[Dict[str, str]], columns: Sequence[str]):
        table = Table(show_header=True, header_style="bold cyan")
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*(str(row.get(column, "")) for column in columns))
        console.print(table)


class TyperPrompter:
    """Prompter backed by typer.confirm. Ctrl-D / closed stdin counts as no."""

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return confirm_action(message, default=default)
        except typer.Abort:
            console.print()
            return False
