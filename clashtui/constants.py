"""Shared symbols, styles and spans for the proxy views."""

from __future__ import annotations

from clashtui.text import Color, Span, Style

PROXY_LATENCY_SIGN = "⬤ "
NOT_PROXY_SIGN = "✪ "
NO_LATENCY_SIGN = "⊝"
FOCUSED_INDICATOR = "🮇  "
FOCUSED_EXPANDED_INDICATOR = "🮇   "
UNFOCUSED_INDICATOR = "   "
EXPANDED_FOCUSED_INDICATOR = "🮇  ➤"

DEFAULT_STYLE = Style()
PROXY_TYPE_STYLE = Style(fg=Color.DARK_GRAY)
NO_LATENCY_STYLE = Style(fg=Color.DARK_GRAY)
LOW_LATENCY_STYLE = Style(fg=Color.LIGHT_GREEN)
MID_LATENCY_STYLE = Style(fg=Color.LIGHT_YELLOW)
HIGH_LATENCY_STYLE = Style(fg=Color.LIGHT_RED)

_INDICATOR_STYLE = Style(fg=Color.LIGHT_YELLOW)

DELIMITER_SPAN = Span(" ", DEFAULT_STYLE)
NOT_PROXY_SPAN = Span(NOT_PROXY_SIGN, NO_LATENCY_STYLE)
NO_LATENCY_SPAN = Span(PROXY_LATENCY_SIGN, NO_LATENCY_STYLE)
LOW_LATENCY_SPAN = Span(PROXY_LATENCY_SIGN, LOW_LATENCY_STYLE)
MID_LATENCY_SPAN = Span(PROXY_LATENCY_SIGN, MID_LATENCY_STYLE)
HIGH_LATENCY_SPAN = Span(PROXY_LATENCY_SIGN, HIGH_LATENCY_STYLE)
FOCUSED_INDICATOR_SPAN = Span(FOCUSED_INDICATOR, _INDICATOR_STYLE)
UNFOCUSED_INDICATOR_SPAN = Span(UNFOCUSED_INDICATOR, DEFAULT_STYLE)
EXPANDED_INDICATOR_SPAN = Span(FOCUSED_EXPANDED_INDICATOR, _INDICATOR_STYLE)
EXPANDED_FOCUSED_INDICATOR_SPAN = Span(EXPANDED_FOCUSED_INDICATOR, _INDICATOR_STYLE)


def _tier(delay: int) -> int:
    if delay < 0:
        raise ValueError("delay must not be negative")
    if delay == 0:
        return 0
    if delay <= 200:
        return 1
    if delay <= 400:
        return 2
    return 3


_STYLES = (NO_LATENCY_STYLE, LOW_LATENCY_STYLE, MID_LATENCY_STYLE, HIGH_LATENCY_STYLE)
_SPANS = (NO_LATENCY_SPAN, LOW_LATENCY_SPAN, MID_LATENCY_SPAN, HIGH_LATENCY_SPAN)


def delay_style(delay: int) -> Style:
    """Style for a latency in milliseconds; 0 means unknown."""
    return _STYLES[_tier(delay)]


def delay_span(delay: int) -> Span:
    """Latency dot coloured by how long ``delay`` milliseconds is; 0 means unknown."""
    return _SPANS[_tier(delay)]