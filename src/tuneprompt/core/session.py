"""Interactive session: pick an output mode, run it, repeat."""

from typing import Any, Mapping, Optional

from rich.markup import escape

from tuneprompt.core.handlers import HandlerRegistry, LivePlayer, ModeHandler, WavRenderer
from tuneprompt.core.modes import Mode, PlayResult
from tuneprompt.core.prompter import Prompter
from tuneprompt.utils.constants import DEFAULT_MAX_BPM, DEFAULT_MIN_BPM, Messages
from tuneprompt.utils.debug import debug_session, log_error
from tuneprompt.utils.exceptions import ConfigurationError, HandlerError


def build_handlers(
    player: Optional[LivePlayer] = None,
    renderer: Optional[WavRenderer] = None,
    min_bpm: int = DEFAULT_MIN_BPM,
    max_bpm: int = DEFAULT_MAX_BPM,
) -> dict[Mode, ModeHandler]:
    """Create a handler for each mode whose backend was given.

    Modes without a backend are left out and never offered.
    """
    backends = {Mode.LIVE: player, Mode.FILE: renderer}
    handlers: dict[Mode, ModeHandler] = {}
    for mode in HandlerRegistry.modes():
        backend = backends.get(mode)
        if backend is None:
            continue
        handlers[mode] = HandlerRegistry.create(
            mode, backend, min_bpm=min_bpm, max_bpm=max_bpm
        )
    return handlers


class InteractiveSession:
    """Loop that asks for a mode and dispatches to its handler.

    Args:
        handlers: Handler per available mode; menu order follows Mode
        prompter: Prompts to use (default: stdin/stdout)
    """

    def __init__(
        self,
        handlers: Mapping[Mode, ModeHandler],
        prompter: Optional[Prompter] = None,
    ):
        self.handlers = dict(handlers)
        self.prompter = prompter or Prompter()

    def start(self, piece: Any) -> None:
        """Run until a handler returns PlayResult.EXIT.

        Raises:
            ConfigurationError: If no mode has a handler
            InputStreamError: If the input stream fails
        """
        if not self.handlers:
            raise ConfigurationError("No output modes available: no handlers registered")

        debug_session("Session started", piece=piece, modes=[m.value for m in self.handlers])

        while True:
            mode = self.prompter.select(Mode, list(self.handlers))
            debug_session("Mode selected", mode=mode.value)

            try:
                result = self.handlers[mode].handle(piece, self.prompter)
            except HandlerError as e:
                log_error("session", f"{mode.info.name} failed: {e}", e, echo=False)
                self.prompter.console.print(
                    f"[red]{escape(mode.info.name)} failed:[/red] {escape(str(e))}"
                )
                continue

            if result is PlayResult.EXIT:
                break

        debug_session("Session ended")
        self.prompter.say(Messages.EXITING)


def start(
    piece: Any,
    player: Optional[LivePlayer] = None,
    renderer: Optional[WavRenderer] = None,
    prompter: Optional[Prompter] = None,
) -> None:
    """Play a piece interactively with the given backends.

    Example:
        start(piece, player=MyPlayer(), renderer=MyRenderer())
    """
    handlers = build_handlers(player=player, renderer=renderer)
    InteractiveSession(handlers, prompter).start(piece)
