"""Surround text values with a character on both sides."""

from __future__ import annotations

from functools import singledispatch

from clashtui.text import Line, Span


@singledispatch
def wrap_by(value, char: str):
    """Return ``value`` with ``char`` placed before and after it."""
    raise TypeError(f"cannot wrap {type(value).__name__}")


@wrap_by.register
def _(value: str, char: str) -> str:
    return f"{char}{value}{char}"


@wrap_by.register
def _(value: Span, char: str) -> Span:
    return Span(wrap_by(value.content, char), value.style)


@wrap_by.register
def _(value: Line, char: str) -> Line:
    spans = value.spans
    if not spans:
        return Line([Span.raw(wrap_by("", char))])
    if len(spans) == 1:
        return Line([wrap_by(spans[0], char)])
    first, *middle, last = spans
    return Line(
        [
            Span(f"{char}{first.content}", first.style),
            *middle,
            Span(f"{last.content}{char}", last.style),
        ]
    )


def wrapped(value):
    """Wrap ``value`` with spaces."""
    return wrap_by(value, " ")