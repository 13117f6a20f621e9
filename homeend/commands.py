"""Command pattern implementation for editor actions."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .constants import EditorConstants
from .errors import NavigationError
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


class EditorCommand(ABC):
    """Base class for editor commands."""

    name: str = "command"
    # Prefix commands build up an argument for the next command and are
    # invisible to repeat detection.
    is_prefix: bool = False

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Base class for cursor movement commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Movement commands don't modify the document."""
        self._move(editor, key_event)
        editor.view.update_desired_x()
        return False

    @abstractmethod
    def _move(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the movement."""
        pass


class LeftCharCommand(MovementCommand):
    name = "backward-char"

    def _move(self, editor, key_event):
        editor.model.left_char()


class RightCharCommand(MovementCommand):
    name = "forward-char"

    def _move(self, editor, key_event):
        editor.model.right_char()


class UpLineCommand(MovementCommand):
    name = "previous-line"

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        # Preserve desired column on vertical move (no update_desired_x)
        self._move(editor, key_event)
        return False

    def _move(self, editor, key_event):
        editor.view.move_cursor_up()


class DownLineCommand(MovementCommand):
    name = "next-line"

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._move(editor, key_event)
        return False

    def _move(self, editor, key_event):
        editor.view.move_cursor_down()


class BeginningOfLineCommand(MovementCommand):
    name = "beginning-of-line"

    def _move(self, editor, key_event):
        editor.model.move_beginning_of_line()


class EndOfLineCommand(MovementCommand):
    name = "end-of-line"

    def _move(self, editor, key_event):
        editor.model.move_end_of_line()


class PageDownCommand(MovementCommand):
    name = "scroll-up"

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._move(editor, key_event)
        return False

    def _move(self, editor, key_event):
        editor.view.scroll_page_down()


class PageUpCommand(MovementCommand):
    name = "scroll-down"

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        self._move(editor, key_event)
        return False

    def _move(self, editor, key_event):
        editor.view.scroll_page_up()


class PopMarkCommand(MovementCommand):
    """Jump back to the most recently recorded mark."""
    name = "pop-mark"

    def _move(self, editor, key_event):
        position = editor.marks.pop()
        if position is None:
            editor.status_message = EditorConstants.NO_MARK_MESSAGE
            return
        editor.model.set_cursor(position)


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Editing commands modify the document."""
        self._edit(editor, key_event)
        editor.view.update_desired_x()
        return True

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the edit."""
        pass


class BackspaceCommand(EditCommand):
    name = "delete-backward-char"

    def _edit(self, editor, key_event):
        editor.model.backspace()


class InsertNewlineCommand(EditCommand):
    name = "newline"

    def _edit(self, editor, key_event):
        editor.model.insert_text('\n')


class InsertTextCommand(EditCommand):
    name = "self-insert"

    def _edit(self, editor, key_event):
        char = key_event.value
        # Filter out control characters
        if ord(char[0]) >= 32 or char == '\t':
            editor.model.insert_text(char)


class SystemCommand(EditorCommand):
    """Base class for system commands like quit and help."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """System commands don't modify document content directly."""
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class QuitCommand(SystemCommand):
    name = "quit"

    def _execute_system(self, editor, key_event):
        editor.running = False


class HelpCommand(SystemCommand):
    name = "help"

    def _execute_system(self, editor, key_event):
        editor.show_help()


class DigitArgumentCommand(SystemCommand):
    """Alt-<digit>: accumulate a numeric prefix argument."""
    name = "digit-argument"
    is_prefix = True

    def _execute_system(self, editor, key_event):
        digit = key_event.digit
        if digit is None:
            return
        value = editor.prefix_argument * 10 + digit
        editor.prefix_argument = min(value, EditorConstants.MAX_PREFIX_ARGUMENT)
        editor.status_message = f"Arg: {editor.prefix_argument}"


class CommandRegistry:
    """Registry for mapping key combinations to commands.

    Also does the bookkeeping repeat-sensitive commands rely on: while a
    command runs, editor.this_command is that command and
    editor.last_command is the one that ran before it.
    """

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        from .navigation import NavigateHomeCommand, NavigateEndCommand

        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), LeftCharCommand())
        self.register((KeyType.SPECIAL, 'right'), RightCharCommand())
        self.register((KeyType.SPECIAL, 'up'), UpLineCommand())
        self.register((KeyType.SPECIAL, 'down'), DownLineCommand())

        # Line movement
        self.register((KeyType.CTRL, 'a'), BeginningOfLineCommand())
        self.register((KeyType.CTRL, 'e'), EndOfLineCommand())

        # Cycling navigation
        self.register((KeyType.SPECIAL, 'home'), NavigateHomeCommand())
        self.register((KeyType.SPECIAL, 'end'), NavigateEndCommand())
        self.register((KeyType.CTRL, 'o'), PopMarkCommand())

        # Paging (PageDown/PageUp)
        self.register((KeyType.SPECIAL, 'page_down'), PageDownCommand())
        self.register((KeyType.SPECIAL, 'page_up'), PageUpCommand())

        # Numeric prefix argument (Alt-0 .. Alt-9)
        digit_argument = DigitArgumentCommand()
        for digit in '0123456789':
            self.register((KeyType.ALT, digit), digit_argument)

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.SPECIAL, 'f1'), HelpCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None and key_event.key_type == KeyType.REGULAR:
            command = self._insert_text
        if command is None:
            # Unbound keys still interrupt repeat-sensitive commands
            editor.last_command = None
            editor.prefix_argument = 0
            return False
        return self.run(editor, command, key_event)

    def run(self, editor: 'Editor', command: EditorCommand, key_event: 'KeyEvent') -> bool:
        """Run command with last/this command tracking and error handling."""
        if command.is_prefix:
            command.execute(editor, key_event)
            return False

        editor.this_command = command
        try:
            modified = command.execute(editor, key_event)
        except NavigationError as e:
            logger.info(f"{command.name}: {e}")
            editor.status_message = str(e)
            # The press is absorbed; the next press starts from scratch
            editor.this_command = None
            modified = False
        finally:
            editor.prefix_argument = 0
        editor.last_command = editor.this_command
        return modified
