"""tuneprompt - Interactive terminal prompts for playing music pieces."""

from importlib.metadata import version

__version__ = version("tuneprompt")

from tuneprompt.core import (
    InteractiveSession,
    Mode,
    PlayResult,
    Prompter,
    Selectable,
    SelectionInfo,
    Selections,
    start,
)

__all__ = [
    "InteractiveSession",
    "Mode",
    "PlayResult",
    "Prompter",
    "Selectable",
    "SelectionInfo",
    "Selections",
    "start",
]
