"""Choice types used by the interactive session."""

from enum import Enum
from typing import Any, Iterable, Optional

from tuneprompt.core.selection import SelectionInfo, Selections


class PlayResult(Enum):
    """What the session does after a mode handler returns."""

    CONTINUE = "continue"
    EXIT = "exit"


class Mode(Enum):
    """Output modes a piece can be played in."""

    LIVE = "live"
    FILE = "file"

    @property
    def info(self) -> SelectionInfo:
        return _MODE_INFO[self]

    @classmethod
    def get_selections(cls, context: Optional[Iterable["Mode"]] = None) -> Selections["Mode"]:
        """Menu of output modes.

        Args:
            context: Modes that have a handler available. None offers all.
        """
        available = set(cls) if context is None else set(context)
        return Selections(
            description="Select an option",
            options=[(mode.info, mode) for mode in cls if mode in available],
        )


_MODE_INFO = {
    Mode.LIVE: SelectionInfo("Play", "Play music live"),
    Mode.FILE: SelectionInfo("Write", "Render music to a WAV file"),
}


class AfterPlay(Enum):
    """Asked once a piece has been played or written."""

    MENU = PlayResult.CONTINUE
    EXIT = PlayResult.EXIT

    @classmethod
    def get_selections(cls, context: Any = None) -> Selections["AfterPlay"]:
        return Selections(
            description="What next",
            options=[
                (SelectionInfo("Menu", "Return to the mode menu"), cls.MENU),
                (SelectionInfo("Exit", "Exit interactive mode"), cls.EXIT),
            ],
            default=0,
        )

    @property
    def result(self) -> PlayResult:
        return self.value
