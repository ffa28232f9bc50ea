"""UI components for interactive CLI."""

from tuneprompt.cli.ui.base import MenuUI
from tuneprompt.cli.ui.panels import console, err_console, print_header

__all__ = [
    "MenuUI",
    "console",
    "err_console",
    "print_header",
]
