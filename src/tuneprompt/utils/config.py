"""Configuration management."""

import json
import os
from pathlib import Path
from typing import Optional

from tuneprompt.utils.exceptions import ConfigurationError


def get_tuneprompt_dir() -> Path:
    """Get the tuneprompt data directory (XDG-compliant)."""
    if env_dir := os.environ.get("TUNEPROMPT_DIR"):
        return Path(env_dir)
    return Path.home() / ".config" / "tuneprompt"


class Config:
    """Application configuration."""

    def __init__(self, tuneprompt_dir: Optional[Path] = None):
        """Load config from directory."""
        self.tuneprompt_dir = tuneprompt_dir or get_tuneprompt_dir()
        self._config_file = self.tuneprompt_dir / "config.json"
        self._load()

    def _load(self):
        """Load config from file."""
        from tuneprompt.utils.constants import (
            DEFAULT_MAX_BPM,
            DEFAULT_MIN_BPM,
            MenuStyle,
        )

        # Set defaults
        self.debug = False
        self.menu_style = MenuStyle.LINE
        self.min_bpm = DEFAULT_MIN_BPM
        self.max_bpm = DEFAULT_MAX_BPM
        # Env var overrides
        self.env: dict[str, str] = {}

        if self._config_file.exists():
            try:
                data = json.loads(self._config_file.read_text())
                self.debug = data.get("debug", False)
                self.menu_style = data.get("menu_style", MenuStyle.LINE)
                self.min_bpm = data.get("min_bpm", DEFAULT_MIN_BPM)
                self.max_bpm = data.get("max_bpm", DEFAULT_MAX_BPM)
                env = data.get("env", {})
                self.env = env if isinstance(env, dict) else {}
            except (json.JSONDecodeError, IOError):
                pass

        # Apply env section from config, then shell env vars override
        self._apply_env_overrides()

    def _apply_env_overrides(self):
        """Apply env overrides: first from config.env, then from shell TUNEPROMPT_* vars."""
        prefix = "TUNEPROMPT_"

        def apply_env_dict(env_dict: dict[str, str]):
            for key, value in env_dict.items():
                # Support both TUNEPROMPT_FOO and FOO formats in config.env
                if key.startswith(prefix):
                    attr_name = key[len(prefix) :].lower()
                else:
                    attr_name = key.lower()
                if attr_name.startswith("_") or not hasattr(self, attr_name):
                    continue
                # Convert value based on current attribute type
                current = getattr(self, attr_name)
                if isinstance(current, bool):
                    setattr(self, attr_name, value.lower() in ("true", "1", "yes"))
                elif isinstance(current, int):
                    try:
                        setattr(self, attr_name, int(value))
                    except ValueError:
                        pass
                elif isinstance(current, str):
                    setattr(self, attr_name, value)

        # First apply config.env (persisted overrides)
        apply_env_dict(self.env)

        # Then apply shell env vars (highest priority)
        shell_env = {k: v for k, v in os.environ.items() if k.startswith(prefix)}
        apply_env_dict(shell_env)

    def validate(self):
        """Check values that would break the prompts.

        Raises:
            ConfigurationError: If a value is unusable
        """
        from tuneprompt.utils.constants import MenuStyle

        if self.menu_style not in MenuStyle.ALL:
            raise ConfigurationError(
                f"Unknown menu style {self.menu_style!r}, "
                f"expected one of: {', '.join(MenuStyle.ALL)}"
            )
        for name in ("min_bpm", "max_bpm"):
            value = getattr(self, name)
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError(f"{name} must be a whole number, got {value!r}")
        if self.min_bpm < 0:
            raise ConfigurationError(f"min_bpm must not be negative, got {self.min_bpm}")
        if self.min_bpm > self.max_bpm:
            raise ConfigurationError(
                f"min_bpm ({self.min_bpm}) is greater than max_bpm ({self.max_bpm})"
            )

    def save(self):
        """Save config to file."""
        self.tuneprompt_dir.mkdir(parents=True, exist_ok=True)
        data = {
            "debug": self.debug,
            "menu_style": self.menu_style,
            "min_bpm": self.min_bpm,
            "max_bpm": self.max_bpm,
            "env": self.env,
        }
        self._config_file.write_text(json.dumps(data, indent=2))

    def set_env(self, key: str, value: str):
        """Set an env var override in config."""
        self.env[key] = value
        self.save()
        # Re-apply to update attributes
        self._apply_env_overrides()

    def unset_env(self, key: str) -> bool:
        """Remove an env var override. Returns True if key existed."""
        if key in self.env:
            del self.env[key]
            self.save()
            return True
        return False

    def list_env(self) -> dict[str, str]:
        """List all env var overrides."""
        return self.env.copy()

    def set_debug(self, enabled: bool):
        """Enable or disable debug mode."""
        self.debug = enabled
        self.save()

    def set_menu_style(self, style: str):
        """Switch between the line prompt and the arrow-key menu."""
        from tuneprompt.utils.constants import MenuStyle

        if style not in MenuStyle.ALL:
            raise ConfigurationError(
                f"Unknown menu style {style!r}, expected one of: {', '.join(MenuStyle.ALL)}"
            )
        self.menu_style = style
        self.save()

    @property
    def debug_log_path(self) -> Path:
        """Path to debug log file."""
        return self.tuneprompt_dir / "debug.log"
