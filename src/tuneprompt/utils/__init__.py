"""Utilities for tuneprompt."""

from tuneprompt.utils.exceptions import (
    ConfigurationError,
    HandlerError,
    InputStreamError,
    TunepromptError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "HandlerError",
    "InputStreamError",
    "TunepromptError",
    "ValidationError",
]
