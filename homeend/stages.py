"""Stage tables for the home and end navigation cycles.

Each table holds four stages, tried in order on successive presses of the
same key: line boundary, window boundary, document boundary, origin. A stage
function looks at the host and returns either the position to move to or
DEFER, meaning "the cursor is already there, use the next stage".
"""

from typing import Callable, NamedTuple, Optional, Union

from .host import NavigationHost
from .model import CursorPosition


class _Defer:
    def __repr__(self):
        return "DEFER"


DEFER = _Defer()

StageResult = Union[CursorPosition, _Defer]


class Stage(NamedTuple):
    name: str
    target: Callable[[NavigationHost, Optional[CursorPosition]], StageResult]


LINE, WINDOW, DOCUMENT, ORIGIN = range(4)


def _unless_there(host: NavigationHost, target: CursorPosition) -> StageResult:
    if host.cursor() == target:
        return DEFER
    return target


def _return_to_origin(host, origin):
    # Terminal stage: always produces a position
    return origin if origin is not None else host.cursor()


# --- home ---

def _home_line(host, origin):
    if host.at_line_start():
        return DEFER
    return host.line_start()


def _home_window(host, origin):
    if host.at_document_start():
        return DEFER
    return _unless_there(host, host.window_start())


def _home_document(host, origin):
    return _unless_there(host, host.document_start())


# --- end ---

def _end_line(host, origin):
    if host.at_line_end():
        return DEFER
    return host.line_end()


def _end_window(host, origin):
    if host.at_document_end():
        return DEFER
    window_end = host.window_end()
    document_end = host.document_end()
    if window_end >= document_end:
        target = document_end
    else:
        # One line above the bottom visible line, kept inside the window
        line = max(host.window_start().paragraph_index, window_end.paragraph_index - 1)
        target = host.line_end(line)
    return _unless_there(host, target)


def _end_document(host, origin):
    return _unless_there(host, host.document_end())


HOME_STAGES = (
    Stage("line", _home_line),
    Stage("window", _home_window),
    Stage("document", _home_document),
    Stage("origin", _return_to_origin),
)

END_STAGES = (
    Stage("line", _end_line),
    Stage("window", _end_window),
    Stage("document", _end_document),
    Stage("origin", _return_to_origin),
)
