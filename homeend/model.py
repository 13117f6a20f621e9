from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

@dataclass
class CursorPosition:
    paragraph_index: int = 0
    character_index: int = 0

    def __lt__(self, other):
        if self.paragraph_index != other.paragraph_index:
            return self.paragraph_index < other.paragraph_index
        return self.character_index < other.character_index

    def __le__(self, other):
        return self < other or self == other

    def __gt__(self, other):
        return other < self

    def __ge__(self, other):
        return not self < other

    def copy(self) -> "CursorPosition":
        return CursorPosition(self.paragraph_index, self.character_index)


class TextView(ABC):
    _model: "Optional[TextModel]" = None
    start_paragraph_index: int = 0
    end_paragraph_index: int = 1

    @property
    def model(self):
        assert self._model
        return self._model

    @abstractmethod
    def render(self):
        """Render the view from start_paragraph_index.

        Assume that end_paragraph_index is out of date, so update it.
        If the cursor turns out to be outside the view, center the
        view on the cursor and update both start_paragraph_index and
        end_paragraph_index.

        """


class TextModel:
    """A document of logical lines (paragraphs) with a single cursor.

    Each paragraph is shown on one display row; there is no soft wrapping.
    """
    paragraphs: list[str]
    cursor_position: CursorPosition
    view: TextView

    def __init__(self, view: TextView, paragraphs: Optional[list[str]] = None):
        self.view = view
        self.view._model = self
        self.paragraphs = paragraphs if paragraphs else [""]
        self.cursor_position = CursorPosition()

    # --- Boundary queries ---

    def beginning_of_document(self) -> CursorPosition:
        return CursorPosition(0, 0)

    def end_of_document(self) -> CursorPosition:
        last = len(self.paragraphs) - 1
        return CursorPosition(last, len(self.paragraphs[last]))

    def beginning_of_line(self, paragraph_index: Optional[int] = None) -> CursorPosition:
        if paragraph_index is None:
            paragraph_index = self.cursor_position.paragraph_index
        return CursorPosition(paragraph_index, 0)

    def end_of_line(self, paragraph_index: Optional[int] = None) -> CursorPosition:
        if paragraph_index is None:
            paragraph_index = self.cursor_position.paragraph_index
        return CursorPosition(paragraph_index, len(self.paragraphs[paragraph_index]))

    def clamp(self, position: CursorPosition) -> CursorPosition:
        """Return the nearest valid position to the one given."""
        pi = max(0, min(position.paragraph_index, len(self.paragraphs) - 1))
        ci = max(0, min(position.character_index, len(self.paragraphs[pi])))
        return CursorPosition(pi, ci)

    # --- Cursor movement ---

    def set_cursor(self, position: CursorPosition):
        self.cursor_position = self.clamp(position)
        self.view.render()

    def right_char(self):
        if self.cursor_position.character_index < len(self.paragraphs[self.cursor_position.paragraph_index]):
            self.cursor_position.character_index += 1
        elif self.cursor_position.paragraph_index + 1 < len(self.paragraphs):
            self.cursor_position.paragraph_index += 1
            self.cursor_position.character_index = 0
        self.view.render()

    def left_char(self):
        if self.cursor_position.character_index > 0:
            self.cursor_position.character_index -= 1
        elif self.cursor_position.paragraph_index > 0:
            self.cursor_position.paragraph_index -= 1
            self.cursor_position.character_index = len(self.paragraphs[self.cursor_position.paragraph_index])
        self.view.render()

    def up_line(self, desired_x: int):
        """Move to the previous line, as close to column desired_x as it allows."""
        if self.cursor_position.paragraph_index > 0:
            self.cursor_position.paragraph_index -= 1
            para = self.paragraphs[self.cursor_position.paragraph_index]
            self.cursor_position.character_index = min(desired_x, len(para))
        self.view.render()

    def down_line(self, desired_x: int):
        """Move to the next line, as close to column desired_x as it allows."""
        if self.cursor_position.paragraph_index + 1 < len(self.paragraphs):
            self.cursor_position.paragraph_index += 1
            para = self.paragraphs[self.cursor_position.paragraph_index]
            self.cursor_position.character_index = min(desired_x, len(para))
        self.view.render()

    def move_beginning_of_line(self):
        """Move cursor to beginning of line (Emacs-style Ctrl-A)."""
        self.cursor_position.character_index = 0
        self.view.render()

    def move_end_of_line(self):
        """Move cursor to end of line (Emacs-style Ctrl-E)."""
        para = self.paragraphs[self.cursor_position.paragraph_index]
        self.cursor_position.character_index = len(para)
        self.view.render()

    def move_beginning_of_document(self):
        self.set_cursor(self.beginning_of_document())

    def move_end_of_document(self):
        self.set_cursor(self.end_of_document())

    # --- Editing ---

    def insert_text(self, text: str):
        paragraphs = text.split("\n")
        para_idx = self.cursor_position.paragraph_index
        char_idx = self.cursor_position.character_index
        current_paragraph = self.paragraphs[para_idx]
        before_cursor = current_paragraph[:char_idx]
        after_cursor = current_paragraph[char_idx:]

        paragraphs[0] = before_cursor + paragraphs[0]
        paragraphs[-1] += after_cursor
        self.paragraphs = (
            self.paragraphs[: para_idx]
            + paragraphs
            + self.paragraphs[para_idx + 1 :]
        )
        self.cursor_position.paragraph_index = para_idx + len(paragraphs) - 1
        self.cursor_position.character_index = len(paragraphs[-1]) - len(after_cursor)
        self.view.render()

    def backspace(self):
        """Delete the character before the cursor, joining lines at column 0."""
        para_idx = self.cursor_position.paragraph_index
        char_idx = self.cursor_position.character_index
        if char_idx > 0:
            para = self.paragraphs[para_idx]
            self.paragraphs[para_idx] = para[:char_idx-1] + para[char_idx:]
            self.cursor_position.character_index -= 1
        elif para_idx > 0:
            prev_para = self.paragraphs[para_idx - 1]
            self.paragraphs[para_idx - 1] = prev_para + self.paragraphs[para_idx]
            del self.paragraphs[para_idx]
            self.cursor_position = CursorPosition(para_idx - 1, len(prev_para))
        self.view.render()
