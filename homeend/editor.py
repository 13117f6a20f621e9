"""Main editor controller."""

import logging
import os
import select
import signal
import sys
from typing import Optional

from .commands import CommandRegistry, EditorCommand
from .config import NavigationConfig
from .constants import EditorConstants
from .history import MarkRing
from .host import TextModelHost
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .model import TextModel
from .session import SessionRegistry, get_sessions
from .view import WindowView

logger = logging.getLogger(__name__)

HELP_LINES = [
    "",
    "NAVIGATION",
    "  Home       Line start, window top, document start, back",
    "  End        Line end, window bottom, document end, back",
    "  Alt-<n>    Prefix: Home/End jump to n tenths of the document",
    "  Ctrl-O     Jump back to the last mark",
    "  Ctrl-A/E   Beginning/end of line",
    "  PgUp/PgDn  Scroll by a screenful",
    "",
    "OTHER",
    "  Ctrl-Q     Quit",
    "  F1         Help",
]


class Editor:
    """Text editor application controller."""

    def __init__(self, terminal=None, config: Optional[NavigationConfig] = None,
                 sessions: Optional[SessionRegistry] = None):
        """Initialize the editor components.

        Args:
            terminal: TerminalInterface to draw on. Created on run() if None.
            config: Loaded configuration; defaults if None.
            sessions: Navigation session registry; the global one if None.
        """
        self.config = config or NavigationConfig()
        self.terminal = terminal
        self.keyboard = KeyboardHandler(self.terminal)
        self.view = WindowView()
        self.view.CONTEXT_LINES = self.config.page_context_lines
        self.model = TextModel(self.view, paragraphs=[""])
        self.marks = MarkRing(self.config.mark_ring_size)
        self.sessions = sessions if sessions is not None else get_sessions()
        self.command_registry = CommandRegistry()
        # Command identity tracking for repeat-sensitive commands
        self.this_command: Optional[EditorCommand] = None
        self.last_command: Optional[EditorCommand] = None
        self.prefix_argument = 0
        self.running = False
        self.filename = None
        self.modified = False
        self.status_message = None
        self.help_visible = False
        self.view.render()

    def navigation_host(self) -> TextModelHost:
        """Return the navigation surface for the current document."""
        return TextModelHost(self.model, self.marks)

    def load_file(self, filename: str):
        """Load a file into the editor.

        Args:
            filename: Path to file to load
        """
        self.filename = filename
        try:
            with open(filename, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            # New file - start with empty document
            logger.info(f"{filename} does not exist, starting empty")
            content = ""
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error loading file: {e}")
            sys.exit(1)
        self.sessions.discard(self.model)
        paragraphs = content.split('\n') if content else [""]
        self.model = TextModel(self.view, paragraphs=paragraphs)
        self.marks.clear()
        self.last_command = None
        self.view.start_paragraph_index = 0
        self.view.render()
        self.modified = False
        logger.info(f"Loaded {filename}: {len(paragraphs)} lines")

    def show_help(self):
        """Show the help screen."""
        self.help_visible = True

    def hide_help(self):
        """Hide the help screen and return to editor."""
        self.help_visible = False

    def handle_key_event(self, key_event: KeyEvent):
        """Handle a keyboard event.

        Args:
            key_event: KeyEvent object with parsed key information
        """
        # If help is visible, any key dismisses it
        if self.help_visible:
            self.hide_help()
            self.last_command = None
            return

        # Clear status message on any keypress
        self.status_message = None

        if key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape':
            # ESC cancels a pending prefix argument and any repeat chain
            self.prefix_argument = 0
            self.last_command = None
            return

        was_modified = self.command_registry.execute(self, key_event)
        if was_modified:
            self.modified = True

    def _resize_view(self):
        if self.terminal is None:
            return
        self.view.num_rows = max(1, self.terminal.height)
        self.view.num_columns = max(1, self.terminal.width)
        self.view.render()

    def _draw(self):
        """Draw the current editor state to terminal."""
        if self.help_visible:
            self.terminal.draw_centered("HOMEEND HELP", HELP_LINES, " Press any key to continue")
            return
        status = f" {self.status_message}" if self.status_message else None
        self.terminal.draw_lines(
            self.view.lines,
            self.view.visual_cursor_y,
            self.view.visual_cursor_x,
            view_width=self.view.num_columns,
            status=status,
        )

    def run(self):
        """Run the main editor loop."""
        if self.terminal is None:
            from .terminal import TerminalInterface
            self.terminal = TerminalInterface()
            self.keyboard = KeyboardHandler(self.terminal)

        resize_r, resize_w = os.pipe()

        def _handle_resize(signum, frame):
            del signum, frame  # Unused
            # Write to pipe to wake up select()
            os.write(resize_w, EditorConstants.RESIZE_PIPE_MARKER)

        self.terminal.setup()
        self.running = True
        original_winch_handler = signal.signal(signal.SIGWINCH, _handle_resize)
        logger.info("Editor started")
        try:
            self._resize_view()
            self._draw()
            while self.running:
                ready, _, _ = select.select([0, resize_r], [], [])
                if resize_r in ready:
                    os.read(resize_r, 1024)
                    self._resize_view()
                if 0 in ready:
                    key_event = self.keyboard.get_key_event(timeout=0)
                    if key_event:
                        self.handle_key_event(key_event)
                self._draw()
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(resize_r)
            os.close(resize_w)
            self.terminal.cleanup()
            logger.info("Editor stopped")
