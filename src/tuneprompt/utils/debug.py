"""Debug logging utility."""

import sys
from datetime import datetime
from typing import Optional

from tuneprompt.utils.config import Config, get_tuneprompt_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_tuneprompt_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = _get_config().debug_log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _emit(line: str):
    """Write line to the log file and stderr."""
    _log_to_file(line)
    try:
        print(line, file=sys.stderr)
    except BrokenPipeError:
        pass  # Parent process closed stderr, continue silently


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'select', 'validate', 'session'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    extras = " ".join(f"{k}={v!r}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[tuneprompt:{category}] {timestamp} {message}"
    if extras:
        line += f" | {extras}"

    _emit(line)


def debug_select(message: str, **kwargs):
    """Log selection-related debug message."""
    debug("select", message, **kwargs)


def debug_validate(message: str, **kwargs):
    """Log validator-related debug message."""
    debug("validate", message, **kwargs)


def debug_session(message: str, **kwargs):
    """Log session-related debug message."""
    debug("session", message, **kwargs)


def log_error(
    category: str,
    message: str,
    exc: Optional[BaseException] = None,
    echo: bool = True,
):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'session', 'cli'
        message: Error message
        exc: Optional exception to include traceback
        echo: Also print to stderr. Callers that already showed the user
            a message pass False so the traceback only lands in the file.
    """
    import traceback

    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
    line = f"[tuneprompt:{category}] {timestamp} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    if echo:
        _emit(line)
    else:
        _log_to_file(line)
