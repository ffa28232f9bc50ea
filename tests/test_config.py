"""Tests for configuration module."""

import json
from pathlib import Path

import pytest

from tuneprompt.utils.config import Config
from tuneprompt.utils.exceptions import ConfigurationError


def test_config_default_values(mock_tuneprompt_dir):
    """Config should have sensible defaults."""
    config = Config(mock_tuneprompt_dir)

    assert config.debug is False
    assert config.menu_style == "line"
    assert config.min_bpm == 1
    assert config.max_bpm == 999
    assert config.env == {}


def test_config_loads_from_file(mock_tuneprompt_dir):
    """Config should load values from config.json."""
    config_file = mock_tuneprompt_dir / "config.json"
    config_file.write_text(
        json.dumps({"debug": True, "menu_style": "arrow", "min_bpm": 40, "max_bpm": 240})
    )

    config = Config(mock_tuneprompt_dir)

    assert config.debug is True
    assert config.menu_style == "arrow"
    assert config.min_bpm == 40
    assert config.max_bpm == 240


def test_config_ignores_corrupt_file(mock_tuneprompt_dir):
    """A broken config.json falls back to defaults."""
    (mock_tuneprompt_dir / "config.json").write_text("{not json")

    config = Config(mock_tuneprompt_dir)

    assert config.menu_style == "line"


def test_config_save(mock_tuneprompt_dir):
    """Config should save changes to file."""
    config = Config(mock_tuneprompt_dir)
    config.max_bpm = 300
    config.save()

    data = json.loads((mock_tuneprompt_dir / "config.json").read_text())
    assert data["max_bpm"] == 300


def test_config_get_tuneprompt_dir_from_env(temp_dir, monkeypatch):
    """Config should use TUNEPROMPT_DIR env var if set."""
    custom_dir = temp_dir / "custom"
    custom_dir.mkdir()
    monkeypatch.setenv("TUNEPROMPT_DIR", str(custom_dir))

    from tuneprompt.utils.config import get_tuneprompt_dir

    assert get_tuneprompt_dir() == custom_dir


def test_config_default_tuneprompt_dir(monkeypatch):
    """Config should default to ~/.config/tuneprompt (XDG-compliant)."""
    monkeypatch.delenv("TUNEPROMPT_DIR", raising=False)

    from tuneprompt.utils.config import get_tuneprompt_dir

    assert get_tuneprompt_dir() == Path.home() / ".config" / "tuneprompt"


def test_shell_env_overrides(mock_tuneprompt_dir, monkeypatch):
    """TUNEPROMPT_* vars override file values, cast to the attribute type."""
    monkeypatch.setenv("TUNEPROMPT_DEBUG", "yes")
    monkeypatch.setenv("TUNEPROMPT_MAX_BPM", "180")
    monkeypatch.setenv("TUNEPROMPT_MENU_STYLE", "arrow")

    config = Config(mock_tuneprompt_dir)

    assert config.debug is True
    assert config.max_bpm == 180
    assert config.menu_style == "arrow"


def test_bad_int_override_ignored(mock_tuneprompt_dir, monkeypatch):
    monkeypatch.setenv("TUNEPROMPT_MIN_BPM", "fast")
    assert Config(mock_tuneprompt_dir).min_bpm == 1


def test_config_env_section(mock_tuneprompt_dir):
    """Persisted env overrides apply after reload."""
    config = Config(mock_tuneprompt_dir)
    config.set_env("MIN_BPM", "30")
    assert config.min_bpm == 30

    config2 = Config(mock_tuneprompt_dir)
    assert config2.min_bpm == 30
    assert config2.list_env() == {"MIN_BPM": "30"}

    assert config2.unset_env("MIN_BPM") is True
    assert config2.unset_env("MIN_BPM") is False
    assert Config(mock_tuneprompt_dir).list_env() == {}


def test_private_attributes_not_overridable(mock_tuneprompt_dir, monkeypatch):
    monkeypatch.setenv("TUNEPROMPT__CONFIG_FILE", "/tmp/elsewhere.json")
    config = Config(mock_tuneprompt_dir)
    assert config._config_file == mock_tuneprompt_dir / "config.json"


def test_set_menu_style(mock_tuneprompt_dir):
    config = Config(mock_tuneprompt_dir)
    config.set_menu_style("arrow")
    assert Config(mock_tuneprompt_dir).menu_style == "arrow"

    with pytest.raises(ConfigurationError):
        config.set_menu_style("mouse")


class TestValidate:
    """Tests for Config.validate."""

    def test_defaults_are_valid(self, mock_tuneprompt_dir):
        Config(mock_tuneprompt_dir).validate()

    def test_unknown_menu_style(self, mock_tuneprompt_dir):
        config = Config(mock_tuneprompt_dir)
        config.menu_style = "mouse"
        with pytest.raises(ConfigurationError, match="menu style"):
            config.validate()

    def test_inverted_bpm_range(self, mock_tuneprompt_dir):
        config = Config(mock_tuneprompt_dir)
        config.min_bpm = 200
        config.max_bpm = 100
        with pytest.raises(ConfigurationError, match="greater than"):
            config.validate()

    def test_negative_min_bpm(self, mock_tuneprompt_dir):
        config = Config(mock_tuneprompt_dir)
        config.min_bpm = -5
        with pytest.raises(ConfigurationError, match="negative"):
            config.validate()

    @pytest.mark.parametrize("value", ["40", None, True, 12.5])
    def test_wrongly_typed_bpm_in_file(self, mock_tuneprompt_dir, value):
        (mock_tuneprompt_dir / "config.json").write_text(json.dumps({"min_bpm": value}))
        config = Config(mock_tuneprompt_dir)
        with pytest.raises(ConfigurationError, match="min_bpm must be a whole number"):
            config.validate()

    def test_wrongly_typed_max_bpm(self, mock_tuneprompt_dir):
        config = Config(mock_tuneprompt_dir)
        config.max_bpm = "fast"
        with pytest.raises(ConfigurationError, match="max_bpm"):
            config.validate()


def test_non_mapping_env_section_ignored(mock_tuneprompt_dir):
    (mock_tuneprompt_dir / "config.json").write_text(json.dumps({"env": ["MIN_BPM=30"]}))

    config = Config(mock_tuneprompt_dir)

    assert config.env == {}
    assert config.min_bpm == 1


def test_debug_log_path(mock_tuneprompt_dir):
    assert Config(mock_tuneprompt_dir).debug_log_path == mock_tuneprompt_dir / "debug.log"
