"""Interactive prompts: option selection and validated scalar input.

Every prompt has the same shape: print the question once, then read a
line, validate it, and on failure print why and read again. There is no
retry limit. Only a broken input stream ends a prompt without a value,
by raising InputStreamError.
"""

import copy
import sys
from typing import TYPE_CHECKING, Any, Callable, Optional, TextIO, TypeVar

from rich.console import Console

from tuneprompt.core.selection import Selections, resolve_selection
from tuneprompt.core.validators import (
    check_bounds,
    parse_positive_float,
    parse_range,
    resolve_absolute_path,
)
from tuneprompt.utils.constants import Messages
from tuneprompt.utils.debug import debug_select, debug_validate
from tuneprompt.utils.exceptions import InputStreamError, ValidationError

if TYPE_CHECKING:
    from tuneprompt.cli.ui.base import MenuUI

T = TypeVar("T")


class Prompter:
    """Line-based prompts over a text stream and a rich console.

    Args:
        console: Where prompts and errors are printed (default: stdout)
        stream: Where lines are read from (default: sys.stdin at read time)
        menu: Optional MenuUI; when set, ``select`` shows an arrow-key
            menu instead of reading typed answers
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        menu: Optional["MenuUI"] = None,
    ):
        self.console = console or Console()
        self.stream = stream
        self.menu = menu

    def say(self, text: str) -> None:
        """Print plain text (no rich markup, highlighting or wrapping)."""
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def read_line(self) -> str:
        """Read one line from the input stream.

        Raises:
            InputStreamError: If the stream fails or is at end of file
        """
        stream = self.stream if self.stream is not None else sys.stdin
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise InputStreamError(f"Failed to read line: {e}") from e
        if not line:
            raise InputStreamError("Failed to read line: input stream closed")
        return line

    def select(self, selectable: Any, context: Any = None) -> Any:
        """Ask the user to pick one of a Selectable's options.

        Args:
            selectable: Type implementing ``get_selections(context)``
            context: Passed through to ``get_selections``

        Returns:
            A copy of the chosen option's value
        """
        selections = selectable.get_selections(context)
        if not selections.options:
            raise ValueError(f"{selections.description!r} has no options to select from")

        debug_select(
            "Prompting",
            description=selections.description,
            options=len(selections.options),
            default=selections.default,
        )

        if self.menu is not None:
            index = self._select_with_menu(selections)
        else:
            index = self._select_with_line(selections)

        info, value = selections.options[index]
        debug_select("Selected", name=info.name, index=index)
        return copy.copy(value)

    def _select_with_line(self, selections: Selections) -> int:
        self.say(f"{selections.description}:")
        for ordinal, (info, _) in enumerate(selections.options, start=1):
            self.say(f"    {ordinal}. {info.name} ({info.description})")
        if selections.default_option is not None:
            self.say(f"Default: {selections.default_option[0].name}")

        while True:
            text = self.read_line()
            index = resolve_selection(selections, text)
            if index is not None:
                return index

            # Empty input only misses when there is no default
            if not text.strip():
                self.say(Messages.EMPTY_SELECTION)
                continue
            debug_select("No match", input=text.strip())
            self.say(Messages.INVALID_SELECTION)

    def _select_with_menu(self, selections: Selections) -> int:
        cursor = selections.default if selections.default is not None else 0
        while True:
            index = self.menu.select(
                selections.labels(),
                title=selections.description,
                cursor_index=cursor,
            )
            if index is not None:
                return index
            self.say(Messages.SELECTION_CANCELLED)

    def ask(self, prompt: str, parse: Callable[[str], T]) -> T:
        """Print prompt once, then read lines until ``parse`` accepts one.

        ``parse`` raises ValidationError to reject a line; its message is
        printed and the next line is read.
        """
        self.say(prompt)
        while True:
            text = self.read_line()
            try:
                return parse(text)
            except ValidationError as e:
                debug_validate("Rejected", input=text.strip(), reason=type(e).__name__)
                self.say(str(e))

    def ask_range(self, prompt: str, minimum: int, maximum: int) -> int:
        """Ask for a whole number between minimum and maximum, inclusive."""
        check_bounds(minimum, maximum)
        return self.ask(
            f"{prompt} (Between {minimum} and {maximum}):",
            lambda text: parse_range(text, minimum, maximum),
        )

    def ask_positive_float(self, prompt: str) -> float:
        """Ask for a number that is zero or greater."""
        return self.ask(f"{prompt} (Between 0.0 and infinity):", parse_positive_float)

    def ask_path(self, prompt: str) -> str:
        """Ask for a file path whose parent directory already exists.

        Returns:
            The absolute path, with the parent canonicalized
        """
        return self.ask(f"{prompt}:", lambda text: resolve_absolute_path(text.strip()))
