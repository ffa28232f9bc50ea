"""Base protocol for menu UI."""

from typing import Optional, Protocol


class MenuUI(Protocol):
    """Protocol for menu implementations.

    Allows swapping menu backends if needed.
    """

    def select(
        self,
        options: list[str],
        title: str = "",
        cursor_index: int = 0,
    ) -> Optional[int]:
        """Show selection menu, return selected index or None if cancelled."""
        ...
