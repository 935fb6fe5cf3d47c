"""Rich consoles shared by opx modules."""

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def error(message: str) -> None:
    """Print an error to stderr with a red ``Error:`` prefix."""
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, emoji=False, soft_wrap=True)
