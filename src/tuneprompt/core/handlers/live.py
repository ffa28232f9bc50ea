"""Live playback mode."""

from typing import TYPE_CHECKING, Any

from tuneprompt.core.modes import Mode, PlayResult
from tuneprompt.core.handlers.base import LivePlayer, ModeHandler
from tuneprompt.core.handlers.registry import HandlerRegistry
from tuneprompt.utils.constants import DEFAULT_MAX_BPM, DEFAULT_MIN_BPM
from tuneprompt.utils.debug import debug_session

if TYPE_CHECKING:
    from tuneprompt.core.prompter import Prompter


@HandlerRegistry.register(Mode.LIVE)
class LiveModeHandler(ModeHandler):
    """Ask for a tempo and play the piece live."""

    def __init__(
        self,
        player: LivePlayer,
        min_bpm: int = DEFAULT_MIN_BPM,
        max_bpm: int = DEFAULT_MAX_BPM,
    ):
        self.player = player
        self.min_bpm = min_bpm
        self.max_bpm = max_bpm

    def handle(self, piece: Any, prompter: "Prompter") -> PlayResult:
        bpm = prompter.ask_range("Enter BPM", self.min_bpm, self.max_bpm)

        debug_session("Playing live", bpm=bpm)
        self.player.play(piece, bpm=bpm)

        return self.ask_next(prompter)
