"""Exceptions raised by navigation commands."""

from .constants import EditorConstants


class NavigationError(Exception):
    """Base class for recoverable navigation failures.

    The editor shows the message in the status line and absorbs the key
    press; the document and cursor are left as they were.
    """


class BoundaryNoOp(NavigationError):
    """A cycle cannot start because the cursor is at the document boundary."""

    def __init__(self, direction: str):
        where = "beginning" if direction == "home" else "end"
        super().__init__(EditorConstants.NOTHING_TO_DO_MESSAGE.format(where))
        self.direction = direction
