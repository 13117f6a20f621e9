"""Per-document navigation state.

Each open document gets its own NavigationSession, holding the origin of
the current home/end cycle and the repeat tracker for its stages. Sessions
are created on first use and dropped when their document is garbage
collected.
"""

import weakref
from typing import Optional

from .model import CursorPosition
from .repeat import RepeatTracker


class NavigationSession:
    """Cycle state owned by one document."""

    def __init__(self):
        self.origin: Optional[CursorPosition] = None
        self.tracker = RepeatTracker()

    def begin(self, origin: CursorPosition) -> None:
        self.origin = origin.copy()

    def reset(self) -> None:
        self.origin = None
        self.tracker.reset()


class SessionRegistry:
    """Maps documents to their NavigationSession."""

    def __init__(self):
        self._sessions: "weakref.WeakKeyDictionary[object, NavigationSession]" = weakref.WeakKeyDictionary()

    def get(self, document) -> NavigationSession:
        """Get the session for document, creating it on first use."""
        session = self._sessions.get(document)
        if session is None:
            session = NavigationSession()
            self._sessions[document] = session
        return session

    def discard(self, document) -> None:
        self._sessions.pop(document, None)

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, document) -> bool:
        return document in self._sessions


_registry: Optional[SessionRegistry] = None


def get_sessions() -> SessionRegistry:
    """Get the process-wide session registry.

    Returns:
        The singleton SessionRegistry instance.
    """
    global _registry
    if _registry is None:
        _registry = SessionRegistry()
    return _registry
