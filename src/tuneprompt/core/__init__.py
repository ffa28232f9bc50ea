"""Core modules for tuneprompt.

This package provides:
- Selectable / Selections / SelectionInfo: Choice types and their menus
- Prompter: Selection and validated scalar prompts
- Mode / PlayResult / AfterPlay: Choice types used by the session
- InteractiveSession: Mode menu loop dispatching to handlers
"""

from tuneprompt.core.modes import AfterPlay, Mode, PlayResult
from tuneprompt.core.prompter import Prompter
from tuneprompt.core.selection import (
    Selectable,
    SelectionInfo,
    Selections,
    resolve_selection,
)
from tuneprompt.core.session import InteractiveSession, build_handlers, start

__all__ = [
    "AfterPlay",
    "InteractiveSession",
    "Mode",
    "PlayResult",
    "Prompter",
    "Selectable",
    "SelectionInfo",
    "Selections",
    "build_handlers",
    "resolve_selection",
    "start",
]
