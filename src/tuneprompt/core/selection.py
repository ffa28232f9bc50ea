"""Selectable choice types and option matching.

A choice domain (an Enum, usually) becomes selectable by implementing
``get_selections`` as a classmethod:

    class Mode(Enum):
        LIVE = "live"

        @classmethod
        def get_selections(cls, context=None) -> Selections["Mode"]:
            return Selections(
                description="Select an option",
                options=[(SelectionInfo("Play", "Play music live"), cls.LIVE)],
            )

    mode = prompter.select(Mode)
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@dataclass(frozen=True)
class SelectionInfo:
    """Display text for one option.

    Attributes:
        name: Short label, matched by prefix
        description: Longer text, also matched by prefix
    """

    name: str
    description: str

    def matches(self, text: str) -> bool:
        """Case-insensitive prefix match against name or description.

        ``text`` must already be stripped and lower-cased.
        """
        return self.name.lower().startswith(text) or self.description.lower().startswith(
            text
        )


@dataclass
class Selections(Generic[T]):
    """One menu: a heading, ordered options and an optional default.

    Option order defines the 1-based ordinals the user can type.

    Attributes:
        description: Heading printed above the options
        options: (SelectionInfo, value) pairs in display order
        default: Index into options returned on empty input, or None
    """

    description: str
    options: list[tuple[SelectionInfo, T]] = field(default_factory=list)
    default: Optional[int] = None

    def __post_init__(self):
        if self.default is not None and not 0 <= self.default < len(self.options):
            raise ValueError(
                f"default index {self.default} is out of range for "
                f"{len(self.options)} option(s)"
            )

    @property
    def default_option(self) -> Optional[tuple[SelectionInfo, T]]:
        """The (info, value) pair at the default index, if any."""
        if self.default is None:
            return None
        return self.options[self.default]

    def labels(self) -> list[str]:
        """Option lines without ordinals, as ``name (description)``."""
        return [f"{info.name} ({info.description})" for info, _ in self.options]


@runtime_checkable
class Selectable(Protocol[T_co]):
    """Capability implemented by choice types.

    Implementations build a fresh Selections for every prompt. The
    context is whatever the caller passes to ``select``; it is not stored.
    """

    @classmethod
    def get_selections(cls, context: Any = None) -> "Selections[T_co]":
        """Return the menu for this choice type."""
        ...


def resolve_selection(selections: Selections[T], text: str) -> Optional[int]:
    """Resolve raw user input to an option index.

    Input is stripped and lower-cased. Empty input resolves to the default
    (or None without one). Otherwise options are scanned in order and the
    first one whose ordinal equals the input, or whose name or description
    starts with it, wins.

    Returns:
        Index into ``selections.options`` or None if nothing matched
    """
    text = text.strip().lower()
    if not text:
        return selections.default

    for index, (info, _) in enumerate(selections.options):
        if str(index + 1) == text or info.matches(text):
            return index
    return None
