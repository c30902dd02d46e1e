"""Console helpers shared by CLI commands."""
from rich.console import Console

from depalign_common.errors import DepAlignError

console = Console()


def success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def info(message: str) -> None:
    console.print(f"[bold blue]ℹ[/bold blue] {message}")


def warning(message: str) -> None:
    console.print(f"[bold yellow]⚠[/bold yellow] {message}")


def error(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")


def handle_error(e: Exception, verbose: bool = False) -> None:
    """Print an error; full traceback only in verbose mode."""
    if isinstance(e, DepAlignError):
        error(f"{e.message} [dim]({e.code})[/dim]")
    else:
        error(f"Unexpected error: {e}")
    if verbose:
        console.print_exception()
