"""Tests for the session's choice types."""

import copy

from tests.helpers.prompting import make_prompter, output_of
from tuneprompt.core.modes import AfterPlay, Mode, PlayResult


def test_mode_menu_lists_all_modes():
    selections = Mode.get_selections()
    assert selections.description == "Select an option"
    assert [(info.name, info.description) for info, _ in selections.options] == [
        ("Play", "Play music live"),
        ("Write", "Render music to a WAV file"),
    ]
    assert selections.default is None


def test_mode_menu_limited_to_available():
    selections = Mode.get_selections([Mode.FILE])
    assert [value for _, value in selections.options] == [Mode.FILE]


def test_mode_menu_keeps_declaration_order():
    selections = Mode.get_selections([Mode.FILE, Mode.LIVE])
    assert [value for _, value in selections.options] == [Mode.LIVE, Mode.FILE]


def test_select_write_mode_end_to_end():
    prompter = make_prompter("write\n")
    assert prompter.select(Mode) is Mode.FILE
    assert "    2. Write (Render music to a WAV file)" in output_of(prompter)


def test_enum_members_survive_copy():
    assert copy.copy(Mode.LIVE) is Mode.LIVE


def test_after_play_defaults_to_menu():
    prompter = make_prompter("\n")
    assert prompter.select(AfterPlay).result is PlayResult.CONTINUE
    assert "Default: Menu" in output_of(prompter)


def test_after_play_exit():
    assert make_prompter("exit\n").select(AfterPlay).result is PlayResult.EXIT
