"""Console backends for testing and local use."""

from typing import Any, Optional

from rich.console import Console
from rich.markup import escape


class ConsoleLivePlayer:
    """Live player that reports what it would play."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.played: list[tuple[Any, int]] = []

    def play(self, piece: Any, *, bpm: int) -> None:
        """Print the piece and tempo instead of playing."""
        self.played.append((piece, bpm))
        self.console.print(
            f"[cyan]▶ {escape(str(piece))}[/cyan] [dim]at {bpm} BPM (dry run)[/dim]"
        )


class ConsoleWavRenderer:
    """WAV renderer that reports what it would write."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.rendered: list[tuple[Any, str, int, float]] = []

    def render(self, piece: Any, path: str, *, bpm: int, volume: float) -> None:
        """Print the render settings instead of writing a file."""
        self.rendered.append((piece, path, bpm, volume))
        self.console.print(
            f"[cyan]● {escape(str(piece))}[/cyan] [dim]→ {escape(path)} at {bpm} BPM, "
            f"volume {volume} (dry run)[/dim]"
        )
