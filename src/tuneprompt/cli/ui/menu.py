"""Terminal menu wrapper using simple-term-menu."""

from typing import Optional

from simple_term_menu import TerminalMenu


class RichTerminalMenu:
    """Arrow-key menu with cyan cursor styling."""

    def select(
        self,
        options: list[str],
        title: str = "",
        cursor_index: int = 0,
    ) -> Optional[int]:
        """Show selection menu.

        Args:
            options: List of option strings
            title: Optional title shown above menu
            cursor_index: Starting cursor position

        Returns:
            Selected index or None if cancelled (q/Esc)

        Raises:
            KeyboardInterrupt: On Ctrl-C, so the caller can abort
        """
        if not options:
            return None

        menu = TerminalMenu(
            options,
            title=title if title else None,
            cursor_index=cursor_index,
            menu_cursor="> ",
            menu_cursor_style=("fg_cyan", "bold"),
            menu_highlight_style=("fg_cyan", "bold"),
            cycle_cursor=True,
            clear_screen=False,
            raise_error_on_interrupt=True,
        )

        return menu.show()
