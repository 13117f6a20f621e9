"""Terminal interface using Blessed for display and Curtsies for input."""

import select
import sys
from typing import Optional

import blessed
from curtsies import Input

from .constants import EditorConstants


class TerminalInterface:
    """Handles terminal I/O using Blessed."""

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._input: Optional[Input] = None

    def setup(self):
        """Enter fullscreen mode and start reading keys."""
        print(self.term.enter_fullscreen)
        print(self.term.hide_cursor)
        print(self.term.clear)
        self.is_fullscreen = True
        if self._input is None:
            # Enter raw mode immediately so reads work
            self._input = Input(keynames='curtsies')
            self._input.__enter__()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            finally:
                self._input = None
        if self.is_fullscreen:
            print(self.term.exit_fullscreen)
            print(self.term.normal_cursor)
            self.is_fullscreen = False

    def draw_lines(self, lines: list[str], cursor_y: int, cursor_x: int,
                   view_width: int = 80, status: Optional[str] = None):
        """Draw text lines, the status line and position the cursor.

        Args:
            lines: List of strings to display
            cursor_y: Cursor row position (0-based)
            cursor_x: Cursor column position (0-based)
            view_width: Width of the text area
            status: Message for the status line; a help hint when None
        """
        print(self.term.home + self.term.clear, end='')

        for y, line in enumerate(lines):
            print(self.term.move(y, 0) + line[:view_width], end='')

        print(self.term.move(self.term.height - 1, 0), end='')
        if status:
            print(self.term.reverse + status[:self.term.width].ljust(self.term.width) + self.term.normal, end='')
        else:
            help_text = "F1 for help"
            print(' ' * (self.term.width - len(help_text) - 1) + help_text, end='')

        print(self.term.move(cursor_y, cursor_x) + self.term.normal_cursor, end='', flush=True)

    def draw_centered(self, title: str, lines: list[str], footer: str):
        """Draw a full-screen page of text, e.g. the help screen."""
        print(self.term.home + self.term.clear, end='')
        print(self.term.move(1, max(0, (self.term.width - len(title)) // 2))
              + self.term.bold + title + self.term.normal, end='')
        top = max(3, (self.term.height - len(lines)) // 2)
        left = max(0, (self.term.width - max((len(line) for line in lines), default=0)) // 2)
        for i, line in enumerate(lines):
            print(self.term.move(top + i, left) + line, end='')
        print(self.term.move(self.term.height - 1, 0) + footer, end='')
        print(self.term.hide_cursor, end='', flush=True)

    def get_key(self, timeout=None):
        """Get a single keypress from the user.

        Args:
            timeout: Timeout in seconds (None for blocking, 0 for non-blocking)

        Returns:
            The curtsies key name, or None if nothing arrived in time.
        """
        if self._input is None:
            return None
        if timeout is not None:
            r, _, _ = select.select([sys.stdin], [], [], float(timeout))
            if not r:
                return None
        return str(next(self._input))

    @property
    def width(self):
        """Terminal width in columns."""
        return self.term.width

    @property
    def height(self):
        """Terminal height in rows (excluding status line)."""
        return self.term.height - EditorConstants.STATUS_LINES
