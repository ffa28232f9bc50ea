"""Output mode handlers.

This package provides:
- ModeHandler: Base ABC for any mode handler
- LivePlayer / WavRenderer: Protocols for the playback backends
- HandlerRegistry: Mode -> handler class registry
- LiveModeHandler / FileModeHandler: The two built-in modes
- ConsoleLivePlayer / ConsoleWavRenderer: Dry-run backends
"""

from tuneprompt.core.handlers.base import LivePlayer, ModeHandler, WavRenderer
from tuneprompt.core.handlers.console import ConsoleLivePlayer, ConsoleWavRenderer
from tuneprompt.core.handlers.file import FileModeHandler
from tuneprompt.core.handlers.live import LiveModeHandler
from tuneprompt.core.handlers.registry import HandlerRegistry

__all__ = [
    "ConsoleLivePlayer",
    "ConsoleWavRenderer",
    "FileModeHandler",
    "HandlerRegistry",
    "LiveModeHandler",
    "LivePlayer",
    "ModeHandler",
    "WavRenderer",
]
