import pytest

from clashtui.coord import Coord
from clashtui.events import KeyCode, ListEvent, QuitEvent
from clashtui.movable_list import MovableListState, NoSort, item_to_line, item_width
from clashtui.text import Line, Span


class _Order:
    """Ascending or descending integer order, flipped by next/prev."""

    def __init__(self):
        self.descending = False

    def sort_fn(self, a, b):
        result = (a > b) - (a < b)
        return -result if self.descending else result

    def next_self(self):
        self.descending = not self.descending

    def prev_self(self):
        self.descending = not self.descending


def _press(state, code, fast=False, times=1):
    results = [state.handle(ListEvent(fast, code)) for _ in range(times)]
    return results


def test_item_to_line_from_str():
    assert item_to_line("abc") == Line([Span.raw("abc")])


def test_item_to_line_copies_line():
    line = Line([Span.raw("a"), Span.raw("b")])
    out = item_to_line(line)
    assert out == line
    out.spans.append(Span.raw("c"))
    assert len(line) == 2


def test_item_to_line_uses_to_line():
    assert item_to_line(QuitEvent()) == Line([])


def test_item_to_line_rejects_unknown():
    with pytest.raises(TypeError):
        item_to_line(42)


def test_item_width_matches_text_length():
    assert item_width("hello") == len("hello")


def test_defaults():
    state = MovableListState()
    assert state.padding == 1
    assert state.with_index is False
    assert state.offset == Coord()
    assert len(state) == 0


def test_push_without_hold_keeps_offset():
    state = MovableListState()
    state.push("a")
    state.push("b")
    assert state.offset.y == 0
    assert list(state) == ["a", "b"]


def test_push_with_hold_follows_items():
    state = MovableListState()
    state.hold()
    for item in ["a", "b", "c"]:
        state.push(item)
    assert state.offset.y == len(state)


def test_extend_keeps_offset():
    state = MovableListState()
    state.hold()
    state.extend(["a", "b"])
    assert state.offset.y == 0
    assert state[1] == "b"


def test_handle_down_stops_at_last_item():
    state = MovableListState(items=list(range(5)))
    results = _press(state, KeyCode.DOWN, times=10)
    assert results == [None] * 10
    assert state.offset.y == len(state) - 1
    assert state.offset.hold is True


def test_handle_fast_down():
    state = MovableListState(items=list(range(20)))
    _press(state, KeyCode.DOWN, fast=True)
    assert state.offset.y == 5


def test_handle_up_saturates():
    state = MovableListState(items=list(range(20)))
    _press(state, KeyCode.DOWN, times=2)
    _press(state, KeyCode.UP, fast=True)
    assert state.offset.y == 0


def test_handle_left_and_right():
    state = MovableListState(items=["x"])
    _press(state, KeyCode.LEFT)
    assert state.offset.x == 0
    _press(state, KeyCode.RIGHT, fast=True)
    assert state.offset.x == 7
    _press(state, KeyCode.LEFT)
    assert state.offset.x == 6


def test_handle_other_key_only_holds():
    state = MovableListState(items=["x", "y"])
    _press(state, KeyCode.ENTER)
    assert state.offset == Coord(0, 0, True)


def test_current_pos_counts_from_start():
    state = MovableListState(items=list(range(10)))
    _press(state, KeyCode.DOWN, times=3)
    pos = state.current_pos()
    assert pos.y == len(state) - state.offset.y
    assert pos.hold is True


def test_toggle_and_end():
    state = MovableListState(items=list(range(10)))
    state.toggle()
    assert state.offset.hold is True
    _press(state, KeyCode.DOWN)
    state.toggle()
    assert state.offset == Coord()
    _press(state, KeyCode.DOWN)
    state.end()
    assert state.offset == Coord()


def test_sorted_merge_and_cycling():
    state = MovableListState(sort_method=_Order())
    state.sorted_merge([3, 1, 2])
    assert state.items == [1, 2, 3]
    state.next_sort()
    assert state.items == [3, 2, 1]
    state.prev_sort()
    assert state.items == [1, 2, 3]


def test_no_sort_keeps_order():
    state = MovableListState(items=["b", "a", "c"])
    state.sort().next_sort().prev_sort()
    assert state.items == ["b", "a", "c"]
    assert str(NoSort()) == ""


def test_drain_front():
    state = MovableListState(items=list(range(6)))
    drained = state.drain_front(2)
    assert drained == [0, 1]
    assert state.items == [2, 3, 4, 5]


def test_drain_front_too_many():
    state = MovableListState(items=[1])
    with pytest.raises(ValueError):
        state.drain_front(3)