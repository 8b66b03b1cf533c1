"""Logging into the UI event stream, console logging setup and level colours."""

from __future__ import annotations

import logging
import os
from pathlib import PurePath
from typing import Any, Callable, TextIO

from clashtui.events import DiagnosticEvent, Event
from clashtui.text import Color

TRACE = 5
_OFF = logging.CRITICAL + 1

_SHELLS = ("bash", "elvish", "fish", "powershell", "zsh")

_LEVEL_NAMES = {
    "off": _OFF,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": TRACE,
}

_MODEL_LEVEL_COLORS = {
    "debug": Color.GRAY,
    "info": Color.BLUE,
    "warning": Color.YELLOW,
    "error": Color.RED,
}


def _level_name(level: int) -> str:
    if level >= logging.ERROR:
        return "ERROR"
    if level >= logging.WARNING:
        return "WARN"
    if level >= logging.INFO:
        return "INFO"
    if level >= logging.DEBUG:
        return "DEBUG"
    return "TRACE"


def level_color(level: int | str) -> Color:
    """Colour for a logging level number or a server log level name."""
    if isinstance(level, str):
        try:
            return _MODEL_LEVEL_COLORS[level.lower()]
        except KeyError:
            raise ValueError(f"unknown log level {level!r}") from None
    if level >= logging.ERROR:
        return Color.RED
    if level >= logging.WARNING:
        return Color.YELLOW
    if level >= logging.INFO:
        return Color.BLUE
    return Color.GRAY


class TuiLogHandler(logging.Handler):
    """Sends each record as a diagnostic event and optionally appends it to a file."""

    def __init__(
        self,
        sender: Callable[[Event], Any],
        file: TextIO | None = None,
        level: int = logging.INFO,
    ) -> None:
        super().__init__(level)
        self.sender = sender
        self.file = file

    def emit(self, record: logging.LogRecord) -> None:
        content = record.getMessage()
        if self.file is not None:
            self.file.write(f"{_level_name(record.levelno):<5} > {content}\n")
        self.sender(DiagnosticEvent(record.levelno, content))


def detect_shell() -> str | None:
    """Name of a supported shell taken from ``$SHELL``, if any."""
    shell = os.environ.get("SHELL")
    if shell is None:
        return None
    name = PurePath(shell).name
    return name if name in _SHELLS else None


_CONSOLE_LABELS = (
    (logging.ERROR, "Error", "31"),
    (logging.WARNING, " Warn", "33"),
    (logging.INFO, " Info", "32"),
    (logging.DEBUG, "Debug", "34"),
)


class _ConsoleFormatter(logging.Formatter):
    def __init__(self, color: bool) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        label, code = "Trace", "35"
        for threshold, name, ansi in _CONSOLE_LABELS:
            if record.levelno >= threshold:
                label, code = name, ansi
                break
        if self.color:
            label = f"\x1b[{code}m{label}\x1b[0m"
        return f" {label} > {record.getMessage()}"


class _ConsoleHandler(logging.StreamHandler):
    pass


def _parse_level(text: str) -> int | None:
    return _LEVEL_NAMES.get(text.strip().lower())


def _apply_filters(spec: str) -> None:
    root = logging.getLogger()
    root.setLevel(_OFF)
    directives = spec.split("/", 1)[0]
    for directive in directives.split(","):
        directive = directive.strip()
        if not directive:
            continue
        if "=" in directive:
            name, _, level_text = directive.partition("=")
            level = _parse_level(level_text)
            if level is None or not name.strip():
                continue
            logging.getLogger(name.strip().replace("::", ".")).setLevel(level)
            continue
        level = _parse_level(directive)
        if level is not None:
            root.setLevel(level)
        else:
            logging.getLogger(directive.replace("::", ".")).setLevel(TRACE)


def init_logger(level: int | None = None) -> logging.Handler:
    """Log to stderr as ``" Info > message"``; level from the argument, ``CLASHCTL_LOG`` or INFO."""
    root = logging.getLogger()
    if level is not None:
        root.setLevel(level)
    elif (spec := os.environ.get("CLASHCTL_LOG")) is not None:
        _apply_filters(spec)
    else:
        root.setLevel(logging.INFO)

    for existing in list(root.handlers):
        if isinstance(existing, _ConsoleHandler):
            root.removeHandler(existing)

    handler = _ConsoleHandler()
    isatty = getattr(handler.stream, "isatty", None)
    handler.setFormatter(_ConsoleFormatter(color=bool(isatty and isatty())))
    root.addHandler(handler)
    return handler