"""Shared consoles and the session header panel."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()
err_console = Console(stderr=True)


def print_header(piece: str, modes: list[str], menu_style: str) -> None:
    """Print application header with the piece and available modes."""
    parts = [f"[bold]{escape(piece)}[/bold]"]
    mode_list = ", ".join(f"[green]{escape(mode)}[/green]" for mode in modes)
    parts.append(mode_list or "[dim]no modes[/dim]")
    parts.append(f"[dim]{menu_style}[/dim]")

    console.print(
        Panel(
            f"[bold cyan]tuneprompt[/bold cyan] {' | '.join(parts)}",
            border_style="cyan",
            width=min(80, console.width),
        )
    )
