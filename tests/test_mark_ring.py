"""Test the mark ring used to jump back after navigation."""

from homeend.history import MarkRing
from homeend.model import CursorPosition


def test_empty_ring():
    ring = MarkRing()
    assert len(ring) == 0
    assert ring.peek() is None
    assert ring.pop() is None


def test_push_and_pop_newest_first():
    ring = MarkRing()
    ring.push(CursorPosition(1, 0))
    ring.push(CursorPosition(2, 0))

    assert ring.peek() == CursorPosition(2, 0)
    assert ring.pop() == CursorPosition(2, 0)
    assert ring.pop() == CursorPosition(1, 0)
    assert ring.pop() is None


def test_push_stores_a_copy():
    ring = MarkRing()
    position = CursorPosition(3, 4)
    ring.push(position)
    position.paragraph_index = 10
    assert ring.peek() == CursorPosition(3, 4)


def test_duplicates_are_kept():
    ring = MarkRing()
    ring.push(CursorPosition(5, 5))
    ring.push(CursorPosition(5, 5))
    assert len(ring) == 2


def test_oldest_entry_dropped_when_full():
    ring = MarkRing(max_entries=3)
    for i in range(5):
        ring.push(CursorPosition(i, 0))

    assert len(ring) == 3
    assert [ring.pop() for _ in range(3)] == [
        CursorPosition(4, 0),
        CursorPosition(3, 0),
        CursorPosition(2, 0),
    ]


def test_clear():
    ring = MarkRing()
    ring.push(CursorPosition(1, 1))
    ring.clear()
    assert len(ring) == 0
