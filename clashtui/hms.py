"""Human-readable hours/minutes/seconds formatting."""

from __future__ import annotations

from datetime import timedelta


def _as_seconds(value) -> int:
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return int(value)
    raise TypeError(f"cannot format {type(value).__name__} as a duration")


def hms(value) -> str:
    """Format seconds or a timedelta as ``"1h 2m 3s"``, dropping leading zero units."""
    seconds = _as_seconds(value)
    negative = seconds < 0
    hours, rest = divmod(abs(seconds), 3600)
    minutes, secs = divmod(rest, 60)
    show_hours = negative or hours > 0
    parts = []
    if show_hours:
        parts.append(f"{hours}h")
    if show_hours or minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{secs}s")
    return ("-" if negative else "") + " ".join(parts)