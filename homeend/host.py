"""The editor surface that navigation commands drive.

Navigation commands only talk to a NavigationHost. TextModelHost is the
implementation used by the homeend editor; tests may supply their own.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .constants import EditorConstants
from .history import MarkRing
from .model import CursorPosition, TextModel


class NavigationHost(ABC):
    """Boundary queries, cursor mutation and history for one document."""

    @abstractmethod
    def cursor(self) -> CursorPosition:
        """Return a copy of the current cursor position."""

    @abstractmethod
    def line_start(self) -> CursorPosition:
        """Return the start of the cursor's line."""

    @abstractmethod
    def line_end(self, paragraph_index: Optional[int] = None) -> CursorPosition:
        """Return the end of the given line, or of the cursor's line."""

    @abstractmethod
    def window_start(self) -> CursorPosition:
        """Return the start of the top visible line."""

    @abstractmethod
    def window_end(self) -> CursorPosition:
        """Return the start of the bottom visible line.

        When that line is the last line of the document this is the
        document end instead.
        """

    @abstractmethod
    def document_start(self) -> CursorPosition:
        pass

    @abstractmethod
    def document_end(self) -> CursorPosition:
        pass

    @abstractmethod
    def move_cursor_to(self, position: CursorPosition) -> None:
        pass

    @abstractmethod
    def push_mark(self, position: CursorPosition) -> None:
        """Record a position for a later "pop mark" command."""

    @abstractmethod
    def jump_to_percent_from_start(self, n: int) -> None:
        pass

    @abstractmethod
    def jump_to_percent_from_end(self, n: int) -> None:
        pass

    # Predicates are derived from the queries above.

    def at_line_start(self) -> bool:
        return self.cursor() == self.line_start()

    def at_line_end(self) -> bool:
        return self.cursor() == self.line_end()

    def at_document_start(self) -> bool:
        return self.cursor() == self.document_start()

    def at_document_end(self) -> bool:
        return self.cursor() == self.document_end()


class TextModelHost(NavigationHost):
    """NavigationHost over a TextModel, its window view and a mark ring."""

    def __init__(self, model: TextModel, marks: MarkRing):
        self.model = model
        self.marks = marks

    @property
    def view(self):
        return self.model.view

    def cursor(self) -> CursorPosition:
        return self.model.cursor_position.copy()

    def line_start(self) -> CursorPosition:
        return self.model.beginning_of_line()

    def line_end(self, paragraph_index: Optional[int] = None) -> CursorPosition:
        return self.model.end_of_line(paragraph_index)

    def window_start(self) -> CursorPosition:
        return CursorPosition(self.view.start_paragraph_index, 0)

    def window_end(self) -> CursorPosition:
        last = self.view.end_paragraph_index - 1
        if last >= len(self.model.paragraphs) - 1:
            return self.model.end_of_document()
        return CursorPosition(last, 0)

    def document_start(self) -> CursorPosition:
        return self.model.beginning_of_document()

    def document_end(self) -> CursorPosition:
        return self.model.end_of_document()

    def move_cursor_to(self, position: CursorPosition) -> None:
        self.model.set_cursor(position)

    def push_mark(self, position: CursorPosition) -> None:
        self.marks.push(position)

    def _decile_lines(self, n: int) -> int:
        n = max(0, min(n, EditorConstants.PERCENT_DIVISIONS))
        return len(self.model.paragraphs) * n // EditorConstants.PERCENT_DIVISIONS

    def jump_to_percent_from_start(self, n: int) -> None:
        line = min(self._decile_lines(n), len(self.model.paragraphs) - 1)
        self.model.set_cursor(CursorPosition(line, 0))

    def jump_to_percent_from_end(self, n: int) -> None:
        line = len(self.model.paragraphs) - self._decile_lines(n)
        if line >= len(self.model.paragraphs):
            self.model.set_cursor(self.model.end_of_document())
        else:
            self.model.set_cursor(CursorPosition(line, 0))
