"""WAV file rendering mode."""

from typing import TYPE_CHECKING, Any

from tuneprompt.core.modes import Mode, PlayResult
from tuneprompt.core.handlers.base import ModeHandler, WavRenderer
from tuneprompt.core.handlers.registry import HandlerRegistry
from tuneprompt.utils.constants import DEFAULT_MAX_BPM, DEFAULT_MIN_BPM
from tuneprompt.utils.debug import debug_session

if TYPE_CHECKING:
    from tuneprompt.core.prompter import Prompter


@HandlerRegistry.register(Mode.FILE)
class FileModeHandler(ModeHandler):
    """Ask for tempo, volume and output path, then render to WAV."""

    def __init__(
        self,
        renderer: WavRenderer,
        min_bpm: int = DEFAULT_MIN_BPM,
        max_bpm: int = DEFAULT_MAX_BPM,
    ):
        self.renderer = renderer
        self.min_bpm = min_bpm
        self.max_bpm = max_bpm

    def handle(self, piece: Any, prompter: "Prompter") -> PlayResult:
        bpm = prompter.ask_range("Enter BPM", self.min_bpm, self.max_bpm)
        volume = prompter.ask_positive_float("Enter volume")
        path = prompter.ask_path("Enter output file path")

        debug_session("Rendering", bpm=bpm, volume=volume, path=path)
        self.renderer.render(piece, path, bpm=bpm, volume=volume)
        prompter.say(f"Output file: {path}")

        return self.ask_next(prompter)
