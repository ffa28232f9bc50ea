"""Handler registry for output modes.

This module provides a decorator-based registry for mode handlers,
enabling self-registration of handlers with the mode they serve.

Example:
    @HandlerRegistry.register(Mode.LIVE)
    class LiveModeHandler(ModeHandler):
        def handle(self, piece, prompter): ...

    # Later, build the handler:
    handler = HandlerRegistry.create(Mode.LIVE, player=player)
"""

from typing import TYPE_CHECKING, Any, Optional

from tuneprompt.core.modes import Mode

if TYPE_CHECKING:
    from tuneprompt.core.handlers.base import ModeHandler


class HandlerRegistry:
    """Registry for mode handlers.

    Uses class-level storage to allow decorators to register handlers
    at import time. Handlers are stored as classes and instantiated
    on demand.
    """

    _handlers: dict[Mode, type["ModeHandler"]] = {}

    @classmethod
    def register(cls, mode: Mode):
        """Decorator to register a handler for a mode.

        Args:
            mode: The mode the handler serves

        Returns:
            Decorator function that registers the handler class
        """

        def decorator(handler_cls: type["ModeHandler"]):
            cls._handlers[mode] = handler_cls
            return handler_cls

        return decorator

    @classmethod
    def get(cls, mode: Mode) -> Optional[type["ModeHandler"]]:
        """Get handler class for mode, or None if not registered."""
        return cls._handlers.get(mode)

    @classmethod
    def create(cls, mode: Mode, *args: Any, **kwargs: Any) -> Optional["ModeHandler"]:
        """Create handler instance for mode.

        Extra arguments go to the handler's constructor.

        Returns:
            Handler instance or None if not registered
        """
        handler_cls = cls.get(mode)
        return handler_cls(*args, **kwargs) if handler_cls else None

    @classmethod
    def modes(cls) -> list[Mode]:
        """Get registered modes in menu order."""
        return [mode for mode in Mode if mode in cls._handlers]

    @classmethod
    def clear(cls) -> None:
        """Clear all registered handlers.

        Primarily used for testing.
        """
        cls._handlers.clear()
