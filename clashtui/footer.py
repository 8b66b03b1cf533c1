"""A one-row footer with items packed from the left and the right."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Union

from clashtui.text import Buffer, Line, Rect, Span
from clashtui.wrap import wrap_by as _wrap_value

FooterContent = Union[str, Span, Line]


@dataclass
class FooterItem:
    """A piece of footer content that can be shown or hidden."""

    content: FooterContent
    visible: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.content, (str, Span, Line)):
            raise TypeError(
                f"footer content must be str, Span or Line, not {type(self.content).__name__}"
            )

    @classmethod
    def raw(cls, content: str) -> FooterItem:
        return cls(str(content))

    @classmethod
    def span(cls, content: Span) -> FooterItem:
        return cls(content)

    @classmethod
    def line(cls, content: Line) -> FooterItem:
        return cls(content)

    def to_line(self) -> Line:
        """The content as a line of spans."""
        content = self.content
        if isinstance(content, str):
            return Line([Span.raw(content)])
        if isinstance(content, Span):
            return Line([content])
        return Line(list(content.spans))

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def wrap_by(self, char: str) -> FooterItem:
        """Surround the content with ``char`` in place and return this item."""
        self.content = _wrap_value(self.content, char)
        return self

    def wrapped(self) -> FooterItem:
        return self.wrap_by(" ")


@dataclass
class Footer:
    """Items laid out on the last row of an area, left ones first, right ones from the edge."""

    left: list[FooterItem] = field(default_factory=list)
    right: list[FooterItem] = field(default_factory=list)
    left_offset: int = 2
    right_offset: int = 2

    def items(self) -> Iterator[FooterItem]:
        yield from self.left
        yield from self.right

    def show(self) -> None:
        for item in self.items():
            item.show()

    def hide(self) -> None:
        for item in self.items():
            item.hide()

    def push_left(self, item: FooterItem) -> Footer:
        self.left.append(item)
        return self

    def push_right(self, item: FooterItem) -> Footer:
        self.right.append(item)
        return self

    def extend_left(self, items: Iterable[FooterItem]) -> Footer:
        self.left.extend(items)
        return self

    def extend_right(self, items: Iterable[FooterItem]) -> Footer:
        self.right.extend(items)
        return self

    def pop_left(self) -> FooterItem | None:
        return self.left.pop() if self.left else None

    def pop_right(self) -> FooterItem | None:
        return self.right.pop() if self.right else None

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the items on the bottom row of ``area`` until they would overlap."""
        if area.height == 0:
            return
        y = area.y + area.height - 1
        left_x = area.x + self.left_offset
        right_x = max(0, area.x + area.width + 1 - self.right_offset)
        left_items = iter(self.left)
        right_items = iter(self.right)
        while True:
            changed = False

            item = next(left_items, None)
            if item is not None and item.visible:
                line = item.to_line()
                width = line.width()
                if max(0, right_x - left_x) <= width:
                    break
                buf.set_line(left_x, y, line, width)
                left_x += width + 1
                changed = True

            item = next(right_items, None)
            if item is not None and item.visible:
                line = item.to_line()
                width = line.width()
                if max(0, right_x - left_x) <= width:
                    break
                right_x = max(0, right_x - (width + 1))
                buf.set_line(right_x, y, line, width)
                changed = True

            if not changed:
                break