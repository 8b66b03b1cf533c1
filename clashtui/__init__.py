"""Building blocks for a terminal Clash dashboard: styled text, widgets, list state, events and logging."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "coord",
    "events",
    "footer",
    "helper",
    "hms",
    "logger",
    "movable_list",
    "sparkline",
    "text",
    "timing",
    "wrap",
]