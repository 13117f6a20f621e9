"""Test NavigationCommand.navigate() against a stand-in host."""

import pytest
from unittest.mock import Mock

from homeend.errors import BoundaryNoOp, NavigationError
from homeend.host import NavigationHost
from homeend.model import CursorPosition
from homeend.navigation import NavigateHomeCommand, NavigateEndCommand
from homeend.session import NavigationSession


class GridHost(NavigationHost):
    """A host over a document of equal-length lines with a fixed window."""

    def __init__(self, num_lines, line_length, top, rows, cursor):
        self.num_lines = num_lines
        self.line_length = line_length
        self.top = top
        self.rows = rows
        self.position = CursorPosition(*cursor)
        self.marks = []
        self.percent_calls = []

    def cursor(self):
        return self.position.copy()

    def line_start(self):
        return CursorPosition(self.position.paragraph_index, 0)

    def line_end(self, paragraph_index=None):
        if paragraph_index is None:
            paragraph_index = self.position.paragraph_index
        return CursorPosition(paragraph_index, self.line_length)

    def window_start(self):
        return CursorPosition(self.top, 0)

    def window_end(self):
        last = min(self.top + self.rows, self.num_lines) - 1
        if last >= self.num_lines - 1:
            return self.document_end()
        return CursorPosition(last, 0)

    def document_start(self):
        return CursorPosition(0, 0)

    def document_end(self):
        return CursorPosition(self.num_lines - 1, self.line_length)

    def move_cursor_to(self, position):
        self.position = position.copy()

    def push_mark(self, position):
        self.marks.append(position.copy())

    def jump_to_percent_from_start(self, n):
        self.percent_calls.append(('start', n))

    def jump_to_percent_from_end(self, n):
        self.percent_calls.append(('end', n))


@pytest.fixture
def host():
    return GridHost(num_lines=1000, line_length=30, top=100, rows=41, cursor=(120, 0))


@pytest.fixture
def session():
    return NavigationSession()


def press(command, host, session, presses, last=None):
    """Press command repeatedly, returning (stage, position) per press."""
    results = []
    for _ in range(presses):
        stage = command.navigate(host, session, last)
        results.append((stage, host.cursor()))
        last = command
    return results


def test_end_sequence(host, session):
    end = NavigateEndCommand()

    results = press(end, host, session, 4)

    assert results == [
        (0, CursorPosition(120, 30)),
        (1, CursorPosition(139, 30)),
        (2, CursorPosition(999, 30)),
        (3, CursorPosition(120, 0)),
    ]


def test_home_sequence_starting_at_line_start(host, session):
    home = NavigateHomeCommand()

    results = press(home, host, session, 3)

    assert results == [
        (1, CursorPosition(100, 0)),
        (2, CursorPosition(0, 0)),
        (3, CursorPosition(120, 0)),
    ]


def test_new_cycle_records_origin_and_mark(host, session):
    home = NavigateHomeCommand()
    host.position = CursorPosition(120, 7)

    home.navigate(host, session, last_command=None)

    assert session.origin == CursorPosition(120, 7)
    assert host.marks == [CursorPosition(120, 7)]


def test_repeated_press_does_not_push_mark(host, session):
    home = NavigateHomeCommand()
    host.position = CursorPosition(120, 7)

    press(home, host, session, 3)

    assert host.marks == [CursorPosition(120, 7)]


def test_different_last_command_starts_over(host, session):
    home = NavigateHomeCommand()
    other = Mock()
    host.position = CursorPosition(120, 7)
    home.navigate(host, session, last_command=None)

    host.position = CursorPosition(130, 5)
    stage = home.navigate(host, session, last_command=other)

    assert stage == 0
    assert host.cursor() == CursorPosition(130, 0)
    assert session.origin == CursorPosition(130, 5)


def test_boundary_no_op_leaves_everything_alone(session):
    host = GridHost(num_lines=10, line_length=5, top=0, rows=5, cursor=(0, 0))
    home = NavigateHomeCommand()

    with pytest.raises(BoundaryNoOp) as excinfo:
        home.navigate(host, session, last_command=None)

    assert excinfo.value.direction == "home"
    assert isinstance(excinfo.value, NavigationError)
    assert host.cursor() == CursorPosition(0, 0)
    assert host.marks == []
    assert session.origin is None
    assert not session.tracker.in_cycle(home)


def test_end_boundary_no_op(session):
    host = GridHost(num_lines=10, line_length=5, top=5, rows=5, cursor=(9, 5))
    end = NavigateEndCommand()

    with pytest.raises(BoundaryNoOp, match="end of document"):
        end.navigate(host, session, last_command=end)


@pytest.mark.parametrize("command_class, expected", [
    (NavigateHomeCommand, ('start', 4)),
    (NavigateEndCommand, ('end', 4)),
])
def test_argument_uses_percentage_jump(command_class, expected, host, session):
    command = command_class()

    stage = command.navigate(host, session, last_command=None, argument=4)

    assert stage is None
    assert host.percent_calls == [expected]
    assert host.marks == []
    assert session.origin is None
    assert host.cursor() == CursorPosition(120, 0)


def test_argument_at_boundary_does_not_raise(session):
    host = GridHost(num_lines=10, line_length=5, top=0, rows=5, cursor=(0, 0))
    home = NavigateHomeCommand()

    home.navigate(host, session, last_command=None, argument=2)

    assert host.percent_calls == [('start', 2)]


def test_commands_are_distinct_identities(host, session):
    """Two home commands are different commands for repeat detection."""
    first = NavigateHomeCommand()
    second = NavigateHomeCommand()
    host.position = CursorPosition(120, 7)

    first.navigate(host, session, last_command=None)
    host.position = CursorPosition(120, 7)
    stage = second.navigate(host, session, last_command=first)

    assert stage == 0
    assert len(host.marks) == 2


def test_boundary_no_op_keeps_other_cycles(session):
    host = GridHost(num_lines=10, line_length=5, top=0, rows=5, cursor=(3, 2))
    home = NavigateHomeCommand()
    end = NavigateEndCommand()
    end.navigate(host, session, last_command=None)
    host.position = CursorPosition(0, 0)

    with pytest.raises(BoundaryNoOp):
        home.navigate(host, session, last_command=end)

    assert session.tracker.in_cycle(end)
    assert session.tracker.next_stage(end) == 1


def test_one_row_window_keeps_end_target_on_screen(session):
    host = GridHost(num_lines=100, line_length=8, top=50, rows=1, cursor=(50, 0))
    end = NavigateEndCommand()

    results = press(end, host, session, 2)

    assert results == [
        (0, CursorPosition(50, 8)),
        (2, CursorPosition(99, 8)),
    ]
