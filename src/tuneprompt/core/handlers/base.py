"""Base interfaces for mode handlers and the playback backends they drive.

This module defines three interfaces:

1. ModeHandler (ABC) - Asks for the settings one output mode needs and
   hands them to its backend. Used by InteractiveSession.

2. LivePlayer (Protocol) - Plays a piece through the speakers.

3. WavRenderer (Protocol) - Writes a piece to a WAV file.

The backends live outside this package; handlers only pass them values
that have already been validated.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from tuneprompt.core.modes import AfterPlay, PlayResult

if TYPE_CHECKING:
    from tuneprompt.core.prompter import Prompter


class ModeHandler(ABC):
    """Abstract base class for output mode handlers.

    Subclasses must implement handle. Backend failures should be raised
    as HandlerError so the session can report them and carry on.
    """

    @abstractmethod
    def handle(self, piece: Any, prompter: "Prompter") -> PlayResult:
        """Gather settings, run the backend, and say what to do next."""
        pass

    def ask_next(self, prompter: "Prompter") -> PlayResult:
        """Ask whether to go back to the mode menu or exit."""
        return prompter.select(AfterPlay).result


@runtime_checkable
class LivePlayer(Protocol):
    """Backend that plays a piece in real time."""

    def play(self, piece: Any, *, bpm: int) -> None:
        """Play piece at bpm, blocking until it finishes."""
        ...


@runtime_checkable
class WavRenderer(Protocol):
    """Backend that renders a piece to a WAV file."""

    def render(self, piece: Any, path: str, *, bpm: int, volume: float) -> None:
        """Write piece to path (absolute, parent directory exists)."""
        ...
