from datetime import timedelta

import pytest

from clashtui.hms import hms


def _parse(text):
    sign = -1 if text.startswith("-") else 1
    total = 0
    for token in text.lstrip("-").split():
        number, unit = int(token[:-1]), token[-1]
        total += number * {"h": 3600, "m": 60, "s": 1}[unit]
    return sign * total


def test_pinned_values():
    assert hms(0) == "0s"
    assert hms(3661) == "1h 1m 1s"
    assert hms(-5) == "-0h 0m 5s"


@pytest.mark.parametrize("seconds", [1, 59, 60, 61, 3599, 3600, 7322, 86400, -1, -4000])
def test_round_trip(seconds):
    assert _parse(hms(seconds)) == seconds


@pytest.mark.parametrize("seconds", [0, 30, 59])
def test_seconds_only_below_a_minute(seconds):
    assert "m" not in hms(seconds)
    assert "h" not in hms(seconds)


@pytest.mark.parametrize("seconds", [60, 600, 3599])
def test_no_hours_below_an_hour(seconds):
    assert "h" not in hms(seconds)
    assert "m" in hms(seconds)


def test_negative_always_shows_hours():
    assert hms(-30).startswith("-")
    assert "h" in hms(-30)


def test_timedelta_matches_seconds():
    assert hms(timedelta(seconds=4000)) == hms(4000)
    assert hms(timedelta(seconds=-90)) == hms(-90)


def test_float_truncates():
    assert hms(59.9) == hms(59)


def test_rejects_other_types():
    with pytest.raises(TypeError):
        hms("10")