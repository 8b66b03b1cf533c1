"""State of a scrollable, sortable list of renderable items."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any, Callable, Iterable, Iterator, Protocol

from clashtui.coord import Coord
from clashtui.events import Action, KeyCode, ListEvent
from clashtui.text import Line, Span


class SortMethod(Protocol):
    """A comparison that can cycle through its own variants."""

    def sort_fn(self, a: Any, b: Any) -> int: ...

    def next_self(self) -> None: ...

    def prev_self(self) -> None: ...


def _unordered_key(_item: Any) -> int:
    return 0


# (label, key) for every variant of the no-op sort; a single variant whose
# key ranks all items equal, so a stable sort keeps the insertion order.
_NO_SORT_VARIANTS: tuple[tuple[str, Callable[[Any], Any]], ...] = (
    ("", _unordered_key),
)


@dataclass
class NoSort:
    """A sort method that keeps items in their original order."""

    variant: int = 0

    def sort_fn(self, a: Any, b: Any) -> int:
        key = _NO_SORT_VARIANTS[self.variant][1]
        ka, kb = key(a), key(b)
        return (ka > kb) - (ka < kb)

    def next_self(self) -> None:
        self.variant = (self.variant + 1) % len(_NO_SORT_VARIANTS)

    def prev_self(self) -> None:
        self.variant = (self.variant - 1) % len(_NO_SORT_VARIANTS)

    def __str__(self) -> str:
        return _NO_SORT_VARIANTS[self.variant][0]


def item_to_line(item: Any) -> Line:
    """Render a list item as a line: strings, spans, lines or objects with ``to_line``."""
    if isinstance(item, Line):
        return Line(list(item.spans))
    if isinstance(item, Span):
        return Line([item])
    if isinstance(item, str):
        return Line([Span.raw(item)])
    to_line = getattr(item, "to_line", None)
    if callable(to_line):
        return to_line()
    raise TypeError(f"cannot render {type(item).__name__} as a list item")


def item_width(item: Any) -> int:
    """Terminal width of an item once rendered."""
    return item_to_line(item).width()


_FAST_X = 7
_FAST_Y = 5


@dataclass
class MovableListState:
    """Items, scroll offset and sort order of a list view."""

    items: list[Any] = field(default_factory=list)
    offset: Coord = field(default_factory=Coord)
    placeholder: str | None = None
    padding: int = 1
    sort_method: Any = field(default_factory=NoSort)
    with_index: bool = False
    reverse_index: bool = False

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def push(self, item: Any) -> None:
        """Append an item, keeping a held view on the same rows."""
        self.items.append(item)
        if self.offset.hold:
            self.offset.y += 1

    def extend(self, items: Iterable[Any]) -> None:
        self.items.extend(items)

    def sorted_merge(self, items: Iterable[Any]) -> None:
        """Replace the items and sort them with the current method."""
        self.items = list(items)
        self.sort()

    def _sort_items(self) -> None:
        self.items.sort(key=cmp_to_key(self.sort_method.sort_fn))

    def sort(self) -> MovableListState:
        self._sort_items()
        return self

    def next_sort(self) -> MovableListState:
        self.sort_method.next_self()
        self._sort_items()
        return self

    def prev_sort(self) -> MovableListState:
        self.sort_method.prev_self()
        self._sort_items()
        return self

    def current_pos(self) -> Coord:
        """Cursor position counted from the start of the list."""
        return Coord(
            x=self.offset.x,
            y=max(0, len(self.items) - self.offset.y),
            hold=self.offset.hold,
        )

    def toggle(self) -> MovableListState:
        self.offset.toggle()
        return self

    def end(self) -> MovableListState:
        self.offset.end()
        return self

    def hold(self) -> MovableListState:
        self.offset.lock()
        return self

    def handle(self, event: ListEvent) -> Action | None:
        """Move the view for an arrow key; holds the view. Never produces an action."""
        last = max(0, len(self.items) - 1)
        offset = self.offset
        offset.hold = True
        step_x = _FAST_X if event.fast else 1
        step_y = _FAST_Y if event.fast else 1
        code = event.code
        if code is KeyCode.LEFT:
            offset.x = max(0, offset.x - step_x)
        elif code is KeyCode.RIGHT:
            offset.x += step_x
        elif code is KeyCode.UP:
            offset.y = max(0, offset.y - step_y)
        elif code is KeyCode.DOWN:
            offset.y = min(offset.y + step_y, last)
        return None

    def drain_front(self, count: int) -> list[Any]:
        """Remove and return the first ``count`` items."""
        if count < 0 or count > len(self.items):
            raise ValueError(f"cannot drain {count} of {len(self.items)} items")
        drained = self.items[:count]
        del self.items[:count]
        return drained