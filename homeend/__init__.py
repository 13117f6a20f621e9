"""homeend - cycling Home/End navigation for a text editor."""

from .model import TextModel, TextView, CursorPosition
from .view import WindowView
from .errors import NavigationError, BoundaryNoOp
from .host import NavigationHost, TextModelHost
from .history import MarkRing
from .stages import DEFER, Stage, HOME_STAGES, END_STAGES
from .repeat import RepeatTracker
from .session import NavigationSession, SessionRegistry, get_sessions
from .navigation import NavigationCommand, NavigateHomeCommand, NavigateEndCommand

__all__ = [
    'TextModel',
    'TextView',
    'CursorPosition',
    'WindowView',
    'NavigationError',
    'BoundaryNoOp',
    'NavigationHost',
    'TextModelHost',
    'MarkRing',
    'DEFER',
    'Stage',
    'HOME_STAGES',
    'END_STAGES',
    'RepeatTracker',
    'NavigationSession',
    'SessionRegistry',
    'get_sessions',
    'NavigationCommand',
    'NavigateHomeCommand',
    'NavigateEndCommand',
]
