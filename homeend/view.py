from .model import TextView
from .constants import EditorConstants


class WindowView(TextView):
    """The visible window onto a TextModel.

    One document line per display row. start_paragraph_index is the top
    visible line and end_paragraph_index is one past the bottom visible line.
    """
    num_rows: int = 24
    num_columns: int = EditorConstants.DEFAULT_VIEW_WIDTH
    lines: list[str] = []
    visual_cursor_y: int = 0
    visual_cursor_x: int = 0
    desired_x: int = 0  # Desired X position for up/down navigation
    CONTEXT_LINES: int = EditorConstants.DEFAULT_PAGE_CONTEXT_LINES

    def __init__(self, num_rows: int = 24, num_columns: int = EditorConstants.DEFAULT_VIEW_WIDTH):
        self.num_rows = num_rows
        self.num_columns = num_columns
        self.start_paragraph_index = 0
        self.end_paragraph_index = 1
        self.lines = []

    def render(self):
        total = len(self.model.paragraphs)
        self.start_paragraph_index = max(0, min(self.start_paragraph_index, total - 1))
        self.end_paragraph_index = min(total, self.start_paragraph_index + max(1, self.num_rows))

        cursor = self.model.cursor_position
        if not (self.start_paragraph_index <= cursor.paragraph_index < self.end_paragraph_index):
            self.center_view_on_cursor()
            self.end_paragraph_index = min(total, self.start_paragraph_index + max(1, self.num_rows))

        self.lines = [
            para[:self.num_columns]
            for para in self.model.paragraphs[self.start_paragraph_index:self.end_paragraph_index]
        ]
        self.visual_cursor_y = cursor.paragraph_index - self.start_paragraph_index
        self.visual_cursor_x = min(cursor.character_index, max(0, self.num_columns - 1))

    def center_view_on_cursor(self):
        half_rows = max(1, self.num_rows) // 2
        self.start_paragraph_index = max(0, self.model.cursor_position.paragraph_index - half_rows)

    def update_desired_x(self):
        """Update the desired X position based on current cursor position."""
        self.desired_x = self.model.cursor_position.character_index

    def move_cursor_up(self):
        """Move cursor up one line, maintaining desired X position."""
        self.model.up_line(self.desired_x)

    def move_cursor_down(self):
        """Move cursor down one line, maintaining desired X position."""
        self.model.down_line(self.desired_x)

    # --- Paging (Emacs-style C-v / M-v) ---

    def scroll_page_down(self) -> None:
        # Scroll forward: one screenful minus context
        step = max(1, self.num_rows - self.CONTEXT_LINES)
        total = len(self.model.paragraphs)
        self.start_paragraph_index = min(max(0, total - 1), self.start_paragraph_index + step)

        # Cursor behavior: if cursor above new top, move to top line at desired_x
        cursor = self.model.cursor_position
        if cursor.paragraph_index < self.start_paragraph_index:
            para = self.model.paragraphs[self.start_paragraph_index]
            cursor.paragraph_index = self.start_paragraph_index
            cursor.character_index = min(self.desired_x, len(para))
        self.render()

    def scroll_page_up(self) -> None:
        # Scroll backward: one screenful minus context
        step = max(1, self.num_rows - self.CONTEXT_LINES)
        self.start_paragraph_index = max(0, self.start_paragraph_index - step)

        # Cursor behavior: if cursor below bottom, move to bottom line of view
        total = len(self.model.paragraphs)
        bottom = min(total, self.start_paragraph_index + max(1, self.num_rows)) - 1
        cursor = self.model.cursor_position
        if cursor.paragraph_index > bottom:
            para = self.model.paragraphs[bottom]
            cursor.paragraph_index = bottom
            cursor.character_index = min(self.desired_x, len(para))
        self.render()
