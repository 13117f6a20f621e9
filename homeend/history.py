"""Navigation history: a bounded ring of marked cursor positions."""

from typing import Optional

from .constants import EditorConstants
from .model import CursorPosition


class MarkRing:
    """Positions recorded before big jumps, newest last.

    Navigation cycles push the position they started from so that a
    separate "pop mark" command can jump back to it later. Small movements
    (arrows, Ctrl-A/E) are not recorded.
    """

    def __init__(self, max_entries: int = EditorConstants.DEFAULT_MARK_RING_SIZE):
        self._entries: list[CursorPosition] = []
        self._max_entries = max_entries

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, position: CursorPosition) -> None:
        self._entries.append(position.copy())
        if len(self._entries) > self._max_entries:
            self._entries.pop(0)

    def pop(self) -> Optional[CursorPosition]:
        if not self._entries:
            return None
        return self._entries.pop()

    def peek(self) -> Optional[CursorPosition]:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()
