"""Cycling Home/End navigation.

Pressing Home repeatedly moves the cursor to the start of the line, then
the top of the window, then the start of the document, and finally back to
where the cycle started. End does the same towards the bottom. Any other
command in between starts the cycle afresh.
"""

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from .commands import EditorCommand
from .errors import BoundaryNoOp
from .host import NavigationHost
from .session import NavigationSession
from .stages import END_STAGES, HOME_STAGES, Stage

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent

logger = logging.getLogger(__name__)


class NavigationCommand(EditorCommand):
    """Base class for the cycling navigation commands."""

    name: str = "navigate"
    direction: str = ""
    stages: Sequence[Stage] = ()

    def __str__(self):
        return self.name

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Navigation never modifies the document."""
        session = editor.sessions.get(editor.model)
        self.navigate(editor.navigation_host(), session, editor.last_command,
                      editor.prefix_argument)
        editor.view.update_desired_x()
        return False

    def navigate(self, host: NavigationHost, session: NavigationSession,
                 last_command, argument: int = 0) -> Optional[int]:
        """Handle one key press.

        Args:
            host: The editor surface to query and move.
            session: Cycle state of the document being navigated.
            last_command: The command executed before this one.
            argument: Prefix argument; non-zero jumps to that tenth of
                the document instead of cycling.

        Returns:
            The stage that was used, or None for a percentage jump.

        Raises:
            BoundaryNoOp: A new cycle would start at the document boundary.
        """
        if argument:
            logger.debug(f"{self.name}: percentage jump to {argument}/10")
            self._jump_to_percent(host, argument)
            return None

        tracker = session.tracker
        initial_stage = None
        if last_command is not self or not tracker.in_cycle(self):
            if self._at_document_boundary(host):
                raise BoundaryNoOp(self.direction)
            tracker.observe(self)
            origin = host.cursor()
            host.push_mark(origin)
            session.begin(origin)
            initial_stage = 1 if self._at_line_boundary(host) else 0
            logger.debug(f"{self.name}: new cycle at {origin}, stage {initial_stage}")

        stage, position = tracker.invoke(self, self.stages, host, session.origin, initial_stage)
        logger.debug(f"{self.name}: stage {self.stages[stage].name} -> {position}")
        host.move_cursor_to(position)
        return stage

    def _at_document_boundary(self, host: NavigationHost) -> bool:
        raise NotImplementedError

    def _at_line_boundary(self, host: NavigationHost) -> bool:
        raise NotImplementedError

    def _jump_to_percent(self, host: NavigationHost, argument: int) -> None:
        raise NotImplementedError


class NavigateHomeCommand(NavigationCommand):
    name = "navigate-home"
    direction = "home"
    stages = HOME_STAGES

    def _at_document_boundary(self, host):
        return host.at_document_start()

    def _at_line_boundary(self, host):
        return host.at_line_start()

    def _jump_to_percent(self, host, argument):
        host.jump_to_percent_from_start(argument)


class NavigateEndCommand(NavigationCommand):
    name = "navigate-end"
    direction = "end"
    stages = END_STAGES

    def _at_document_boundary(self, host):
        return host.at_document_end()

    def _at_line_boundary(self, host):
        return host.at_line_end()

    def _jump_to_percent(self, host, argument):
        host.jump_to_percent_from_end(argument)
