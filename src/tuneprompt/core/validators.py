"""Parse and check rules behind the scalar prompts.

Each function takes the raw text of one input line and either returns
the validated value or raises a ValidationError subclass whose message
is shown to the user as-is.
"""

import math
import os
import re
from pathlib import Path, PurePath

from tuneprompt.utils.constants import Messages
from tuneprompt.utils.exceptions import OutOfRangeError, ParseError, PathResolutionError

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def check_bounds(minimum: int, maximum: int) -> None:
    """Reject inverted or negative bounds at the call site."""
    if minimum < 0:
        raise ValueError(f"minimum must not be negative, got {minimum}")
    if minimum > maximum:
        raise ValueError(f"minimum ({minimum}) is greater than maximum ({maximum})")


def parse_range(text: str, minimum: int, maximum: int) -> int:
    """Parse an unsigned integer within [minimum, maximum]."""
    text = text.strip()
    if not _UNSIGNED_RE.fullmatch(text):
        raise ParseError(Messages.INVALID_INTEGER)

    value = int(text)
    if not minimum <= value <= maximum:
        raise OutOfRangeError(
            Messages.OUT_OF_RANGE.format(minimum=minimum, maximum=maximum), value=value
        )
    return value


def parse_positive_float(text: str) -> float:
    """Parse a finite float that is zero or greater.

    Only plain ASCII decimal literals, optionally with an exponent, are
    accepted.
    """
    text = text.strip()
    if not _FLOAT_RE.fullmatch(text):
        raise ParseError(Messages.INVALID_FLOAT)

    value = float(text)
    # Exponents can still overflow to inf
    if not math.isfinite(value):
        raise ParseError(Messages.INVALID_FLOAT)
    if value < 0.0:
        raise OutOfRangeError(Messages.NEGATIVE_FLOAT, value=value)
    return value


def resolve_absolute_path(text: str) -> str:
    """Resolve a file path against an existing parent directory.

    The parent must exist; the file itself may or may not. Nothing is
    created on disk.

    Returns:
        Absolute path string with the parent canonicalized

    Raises:
        PathResolutionError: With the message for the first failed check
    """
    path = PurePath(text)
    file_name = path.name
    if not file_name or file_name == "..":
        raise PathResolutionError(Messages.NO_FILE_NAME)

    # A bare file name has parent "." (the working directory)
    parent = path.parent
    if parent == path:
        raise PathResolutionError(Messages.NO_PARENT)

    try:
        absolute_parent = Path(parent).resolve(strict=True)
    except (OSError, RuntimeError, ValueError):
        raise PathResolutionError(Messages.CANNOT_CANONICALIZE) from None

    if not absolute_parent.exists() or not absolute_parent.is_dir():
        raise PathResolutionError(Messages.PARENT_NOT_DIR)

    output = str(absolute_parent / file_name)
    try:
        os.fsencode(output)
    except UnicodeError:
        raise PathResolutionError(Messages.NOT_REPRESENTABLE) from None
    return output
