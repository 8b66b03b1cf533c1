"""Helpers for building footers and cutting text windows."""

from __future__ import annotations

from itertools import islice

from clashtui.text import Color, Line, Modifier, Span, Style, styled_chars_to_line
from clashtui.wrap import wrapped


def help_footer(content: str, normal: Style, highlight: Style) -> Line:
    """Render ``content`` as ``[F]irst``-style help with the first character highlighted."""
    if not content:
        return Line([])
    if len(content) == 1:
        return Line([Span.raw(content)])
    first, rest = content[0], content[1:]
    return Line(
        [
            Span.styled("[", normal),
            Span.styled(first, highlight),
            Span.styled("]", normal),
            Span.styled(rest, normal),
        ]
    )


def tagged_footer(label: str, style: Style, content) -> Line:
    """A help label followed by a reversed tag holding ``content``."""
    line = wrapped(help_footer(label, style, style.with_modifier(Modifier.BOLD)))
    tag = Span.styled(
        wrapped(str(content)),
        Style(fg=Color.WHITE).with_modifier(Modifier.REVERSED),
    )
    return Line([*line.spans, tag])


def string_window(string: str, start: int, end: int) -> str:
    """Characters of ``string`` from ``start`` up to ``end``."""
    return string[start:end]


def line_window(line: Line, start: int, end: int) -> Line:
    """Characters of ``line`` from ``start`` up to ``end``, styles kept."""
    spans = line.spans
    if not spans:
        return Line([])
    if len(spans) == 1:
        only = spans[0]
        return Line([Span(string_window(only.content, start, end), only.style)])
    pairs = ((span.style, char) for span in spans for char in span.content)
    return styled_chars_to_line(islice(pairs, start, max(start, end)))


def text_style() -> Style:
    """Default style for body text."""
    return Style(fg=Color.WHITE)