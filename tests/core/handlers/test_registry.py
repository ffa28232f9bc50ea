"""Tests for HandlerRegistry."""

from tuneprompt.core.handlers import FileModeHandler, HandlerRegistry, LiveModeHandler
from tuneprompt.core.handlers.base import ModeHandler
from tuneprompt.core.modes import Mode, PlayResult


def test_builtin_handlers_registered():
    assert HandlerRegistry.get(Mode.LIVE) is LiveModeHandler
    assert HandlerRegistry.get(Mode.FILE) is FileModeHandler
    assert HandlerRegistry.modes() == [Mode.LIVE, Mode.FILE]


def test_register_and_create(clean_registry):
    @clean_registry.register(Mode.FILE)
    class StubHandler(ModeHandler):
        def __init__(self, label):
            self.label = label

        def handle(self, piece, prompter):
            return PlayResult.EXIT

    handler = clean_registry.create(Mode.FILE, "stub")
    assert isinstance(handler, StubHandler)
    assert handler.label == "stub"
    assert clean_registry.modes() == [Mode.FILE]


def test_create_unregistered(clean_registry):
    assert clean_registry.create(Mode.LIVE) is None
    assert clean_registry.get(Mode.LIVE) is None


def test_modes_follow_enum_order(clean_registry):
    @clean_registry.register(Mode.FILE)
    class FileStub(ModeHandler):
        def handle(self, piece, prompter):
            return PlayResult.EXIT

    @clean_registry.register(Mode.LIVE)
    class LiveStub(ModeHandler):
        def handle(self, piece, prompter):
            return PlayResult.EXIT

    assert clean_registry.modes() == [Mode.LIVE, Mode.FILE]


def test_clear(clean_registry):
    clean_registry.register(Mode.LIVE)(LiveModeHandler)
    clean_registry.clear()
    assert clean_registry.modes() == []
