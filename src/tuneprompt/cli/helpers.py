"""Helper functions for CLI - prompter and handler setup."""

import sys

from tuneprompt.cli.ui import console
from tuneprompt.core import Prompter, build_handlers
from tuneprompt.core.handlers import ConsoleLivePlayer, ConsoleWavRenderer
from tuneprompt.utils.config import Config
from tuneprompt.utils.constants import MenuStyle


def use_arrow_menu(config: Config) -> bool:
    """Arrow menus need a real terminal on stdin."""
    return config.menu_style == MenuStyle.ARROW and sys.stdin.isatty()


def build_prompter(config: Config) -> Prompter:
    """Create the prompter for the configured menu style."""
    menu = None
    if use_arrow_menu(config):
        # Lazy load - simple-term-menu only works on a tty
        from tuneprompt.cli.ui.menu import RichTerminalMenu

        menu = RichTerminalMenu()
    return Prompter(console=console, menu=menu)


def build_console_handlers(config: Config):
    """Handlers backed by the dry-run console player and renderer."""
    return build_handlers(
        player=ConsoleLivePlayer(console),
        renderer=ConsoleWavRenderer(console),
        min_bpm=config.min_bpm,
        max_bpm=config.max_bpm,
    )
