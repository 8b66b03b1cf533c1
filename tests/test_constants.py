import pytest

from clashtui import constants as c
from clashtui.text import Color


@pytest.mark.parametrize(
    "delay, expected",
    [
        (0, c.NO_LATENCY_STYLE),
        (1, c.LOW_LATENCY_STYLE),
        (200, c.LOW_LATENCY_STYLE),
        (201, c.MID_LATENCY_STYLE),
        (400, c.MID_LATENCY_STYLE),
        (401, c.HIGH_LATENCY_STYLE),
        (10_000, c.HIGH_LATENCY_STYLE),
    ],
)
def test_delay_style_tiers(delay, expected):
    assert c.delay_style(delay) == expected


@pytest.mark.parametrize(
    "delay, expected",
    [
        (0, c.NO_LATENCY_SPAN),
        (150, c.LOW_LATENCY_SPAN),
        (300, c.MID_LATENCY_SPAN),
        (500, c.HIGH_LATENCY_SPAN),
    ],
)
def test_delay_span_tiers(delay, expected):
    assert c.delay_span(delay) == expected


@pytest.mark.parametrize("delay", [0, 1, 200, 201, 400, 401])
def test_delay_span_uses_matching_style_and_sign(delay):
    span = c.delay_span(delay)
    assert span.content == c.PROXY_LATENCY_SIGN
    assert span.style == c.delay_style(delay)


@pytest.mark.parametrize(
    "delay, color",
    [
        (0, Color.DARK_GRAY),
        (100, Color.LIGHT_GREEN),
        (300, Color.LIGHT_YELLOW),
        (900, Color.LIGHT_RED),
    ],
)
def test_latency_colours_from_source(delay, color):
    assert c.delay_style(delay).fg is color
    assert c.delay_span(delay).style.fg is color


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        c.delay_style(-1)
    with pytest.raises(ValueError):
        c.delay_span(-5)