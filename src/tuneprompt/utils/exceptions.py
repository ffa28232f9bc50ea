"""Custom exceptions for tuneprompt.

This module defines a hierarchy of exceptions for different error types:
- TunepromptError: Base exception for all tuneprompt errors
- InputStreamError: The input stream itself failed (fatal, never retried)
- ValidationError: User input was rejected (recoverable, prompt re-asks)
- ConfigurationError: Configuration related errors
- HandlerError: A playback or rendering backend failed
"""


class TunepromptError(Exception):
    """Base exception for all tuneprompt errors.

    All tuneprompt-specific exceptions inherit from this class, allowing
    callers to catch all tuneprompt errors with a single except clause.
    """

    pass


class InputStreamError(TunepromptError):
    """The input stream could not be read.

    Raised when reading a line fails, such as:
    - stdin was closed (end of file)
    - the underlying file descriptor raised an OSError
    - the bytes read could not be decoded

    Retrying cannot succeed, so prompts never catch this.
    """

    pass


class ValidationError(TunepromptError):
    """User input failed validation.

    The message is user-facing. Prompt loops print it and ask again;
    it never escapes a prompt.
    """

    pass


class ParseError(ValidationError):
    """Input could not be parsed as the expected type."""

    pass


class OutOfRangeError(ValidationError):
    """Input parsed but violates a bound.

    Attributes:
        value: The parsed value that was rejected
    """

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value


class PathResolutionError(ValidationError):
    """Input could not be resolved to a usable absolute file path."""

    pass


class ConfigurationError(TunepromptError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unknown menu style
    - Inverted BPM bounds
    - No mode handlers registered
    """

    pass


class HandlerError(TunepromptError):
    """A live player or WAV renderer failed.

    The session reports it and returns to the mode menu.
    """

    pass
