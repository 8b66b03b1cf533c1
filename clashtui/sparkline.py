"""A sparkline widget drawing values as bars, optionally upside down."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from clashtui.text import Buffer, Rect, Style


@dataclass(frozen=True)
class BarSet:
    """Symbols for bar heights from empty to full in eighths."""

    empty: str
    one_eighth: str
    one_quarter: str
    three_eighths: str
    half: str
    five_eighths: str
    three_quarters: str
    seven_eighths: str
    full: str

    def symbol(self, level: int) -> str:
        """Symbol for a height in eighths; 8 or more is full."""
        if level < 0:
            raise ValueError("level must not be negative")
        symbols = (
            self.empty,
            self.one_eighth,
            self.one_quarter,
            self.three_eighths,
            self.half,
            self.five_eighths,
            self.three_quarters,
            self.seven_eighths,
        )
        return symbols[level] if level < len(symbols) else self.full


NINE_LEVELS = BarSet(
    empty=" ",
    one_eighth="▁",
    one_quarter="▂",
    three_eighths="▃",
    half="▄",
    five_eighths="▅",
    three_quarters="▆",
    seven_eighths="▇",
    full="█",
)

DOTS = BarSet(
    empty=" ",
    one_eighth="⡀",
    one_quarter="⣀",
    three_eighths="⣄",
    half="⣤",
    five_eighths="⣦",
    three_quarters="⣶",
    seven_eighths="⣷",
    full="⣿",
)

REV_DOTS = BarSet(
    empty=" ",
    one_eighth="⠁",
    one_quarter="⠉",
    three_eighths="⠋",
    half="⠛",
    five_eighths="⠟",
    three_quarters="⠿",
    seven_eighths="⡿",
    full="⣿",
)


@dataclass
class Sparkline:
    """Bars for ``data``, scaled to ``max`` (or the largest value when unset)."""

    data: Sequence[int] = field(default_factory=list)
    max: int | None = None
    bar_set: BarSet = NINE_LEVELS
    style: Style = Style()
    reversed: bool = False

    def render(self, area: Rect, buf: Buffer) -> None:
        if area.height < 1:
            return
        top = self.max if self.max is not None else max(self.data, default=1)
        shown = self.data[: min(area.width, len(self.data))]
        levels = [value * area.height * 8 // top if top != 0 else 0 for value in shown]
        for row in reversed(range(area.height)):
            for i, level in enumerate(levels):
                x = area.x + i
                y = area.y + area.height - row - 1 if self.reversed else area.y + row
                buf.set_cell(x, y, self.bar_set.symbol(level), self.style)
                levels[i] = level - 8 if level > 8 else 0