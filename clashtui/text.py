"""Styled text primitives and a cell buffer for terminal rendering."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, Flag, auto
from typing import Iterable, Iterator

from wcwidth import wcwidth


class Color(Enum):
    """Terminal colours."""

    RESET = auto()
    BLACK = auto()
    RED = auto()
    GREEN = auto()
    YELLOW = auto()
    BLUE = auto()
    MAGENTA = auto()
    CYAN = auto()
    GRAY = auto()
    DARK_GRAY = auto()
    LIGHT_RED = auto()
    LIGHT_GREEN = auto()
    LIGHT_YELLOW = auto()
    LIGHT_BLUE = auto()
    LIGHT_MAGENTA = auto()
    LIGHT_CYAN = auto()
    WHITE = auto()


class Modifier(Flag):
    """Text attributes that can be combined."""

    BOLD = auto()
    DIM = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    SLOW_BLINK = auto()
    RAPID_BLINK = auto()
    REVERSED = auto()
    HIDDEN = auto()
    CROSSED_OUT = auto()


_NO_MODIFIER = Modifier(0)


@dataclass(frozen=True)
class Style:
    """Foreground, background and modifiers applied to text."""

    fg: Color | None = None
    bg: Color | None = None
    add_modifier: Modifier = _NO_MODIFIER
    sub_modifier: Modifier = _NO_MODIFIER

    def with_fg(self, color: Color) -> Style:
        return replace(self, fg=color)

    def with_bg(self, color: Color) -> Style:
        return replace(self, bg=color)

    def with_modifier(self, modifier: Modifier) -> Style:
        return replace(
            self,
            add_modifier=self.add_modifier | modifier,
            sub_modifier=self.sub_modifier & ~modifier,
        )

    def patch(self, other: Style) -> Style:
        """Return this style overlaid with ``other``."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=(self.add_modifier & ~other.sub_modifier) | other.add_modifier,
            sub_modifier=(self.sub_modifier & ~other.add_modifier) | other.sub_modifier,
        )


def _char_width(char: str) -> int:
    return max(wcwidth(char), 0)


def text_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies."""
    return sum(_char_width(char) for char in text)


def _graphemes(text: str) -> Iterator[str]:
    cluster = ""
    for char in text:
        if cluster and wcwidth(char) == 0:
            cluster += char
            continue
        if cluster:
            yield cluster
        cluster = char
    if cluster:
        yield cluster


@dataclass(frozen=True)
class StyledGrapheme:
    """A single user-perceived character with its style."""

    symbol: str
    style: Style = Style()


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""

    content: str
    style: Style = Style()

    @classmethod
    def raw(cls, content: str) -> Span:
        return cls(content)

    @classmethod
    def styled(cls, content: str, style: Style) -> Span:
        return cls(content, style)

    def width(self) -> int:
        return text_width(self.content)

    def styled_graphemes(self, base: Style = Style()) -> Iterator[StyledGrapheme]:
        """Yield graphemes styled by ``base`` patched with this span's style."""
        style = base.patch(self.style)
        for symbol in _graphemes(self.content):
            if symbol != "\n":
                yield StyledGrapheme(symbol, style)


@dataclass
class Line:
    """A sequence of spans rendered on one row."""

    spans: list[Span] = field(default_factory=list)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)

    def width(self) -> int:
        return sum(span.width() for span in self.spans)

    def plain(self) -> str:
        return "".join(span.content for span in self.spans)


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the screen."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass
class Cell:
    """One screen cell."""

    symbol: str = " "
    style: Style = Style()


@dataclass
class Buffer:
    """A grid of cells covering an area."""

    area: Rect
    cells: list[Cell]

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        return cls(area, [Cell() for _ in range(area.area)])

    def _index(self, x: int, y: int) -> int:
        area = self.area
        if not (area.left <= x < area.right and area.top <= y < area.bottom):
            raise IndexError(f"({x}, {y}) is outside {area}")
        return (y - area.y) * area.width + (x - area.x)

    def get(self, x: int, y: int) -> Cell:
        return self.cells[self._index(x, y)]

    def set_cell(self, x: int, y: int, symbol: str, style: Style) -> Cell:
        cell = self.get(x, y)
        cell.symbol = symbol
        cell.style = cell.style.patch(style)
        return cell

    def _set_string(self, x: int, y: int, text: str, limit: int, style: Style) -> int:
        max_x = min(self.area.right, x + limit)
        for grapheme in _graphemes(text):
            width = text_width(grapheme)
            if width == 0:
                continue
            if width > max_x - x:
                break
            self.set_cell(x, y, grapheme, style)
            for extra in range(x + 1, x + width):
                cell = self.get(extra, y)
                cell.symbol = ""
                cell.style = Style()
            x += width
        return x

    def set_line(self, x: int, y: int, line: Line, width: int) -> int:
        """Write ``line`` at (x, y) using at most ``width`` columns; return the end x."""
        if not (self.area.top <= y < self.area.bottom) or x < self.area.left:
            raise IndexError(f"({x}, {y}) is outside {self.area}")
        remaining = width
        for span in line.spans:
            if remaining <= 0:
                break
            end = self._set_string(x, y, span.content, remaining, span.style)
            remaining -= end - x
            x = end
        return x

    def row_text(self, y: int) -> str:
        return "".join(self.get(x, y).symbol for x in range(self.area.left, self.area.right))


def into_spans(graphemes: Iterable[StyledGrapheme]) -> Line:
    """Merge consecutive graphemes of equal style into spans."""
    spans: list[Span] = []
    for grapheme in graphemes:
        if spans and spans[-1].style == grapheme.style:
            spans[-1] = Span(spans[-1].content + grapheme.symbol, grapheme.style)
        else:
            spans.append(Span(grapheme.symbol, grapheme.style))
    return Line(spans)


def styled_chars_to_line(pairs: Iterable[tuple[Style, str]]) -> Line:
    """Merge consecutive (style, char) pairs of equal style into spans."""
    return into_spans(StyledGrapheme(char, style) for style, char in pairs)