"""Cursor position within a scrollable list."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(order=True)
class Coord:
    """Scroll offset and whether the view is held in place."""

    x: int = 0
    y: int = 0
    hold: bool = False

    def toggle(self) -> None:
        if self.hold:
            self.end()
        else:
            self.lock()

    def end(self) -> None:
        self.x = 0
        self.y = 0
        self.hold = False

    def lock(self) -> None:
        self.hold = True