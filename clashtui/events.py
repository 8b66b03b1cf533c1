"""Events flowing into the UI state, the actions it asks for, and their errors."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Any, Union

from clashtui.text import Color, Line, Span, Style


class TuiError(Exception):
    """Base error of the terminal UI."""

    message = "TUI error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class BackendError(TuiError):
    """The channel to the backend is gone."""

    message = "TUI backend error"


class InternalError(TuiError):
    """An internal conversion failed."""

    message = "TUI internal error"


class KeyCode(Enum):
    """Non-character keys; character keys are one-character strings."""

    BACKSPACE = auto()
    ENTER = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    TAB = auto()
    BACK_TAB = auto()
    DELETE = auto()
    INSERT = auto()
    ESC = auto()


Code = Union[KeyCode, str]


class KeyModifiers(Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()


def _check_code(code: Code) -> None:
    if isinstance(code, KeyCode):
        return
    if isinstance(code, str) and len(code) == 1:
        return
    raise TypeError(f"key code must be a KeyCode or a single character, not {code!r}")


@dataclass(frozen=True)
class KeyEvent:
    """A key press."""

    code: Code
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        _check_code(self.code)


@dataclass(frozen=True)
class TestLatency:
    """Ask the backend to measure the latency of these proxies."""

    __test__ = False

    proxies: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "proxies", tuple(self.proxies))


@dataclass(frozen=True)
class ApplySelection:
    """Ask the backend to select ``proxy`` in ``group``."""

    group: str
    proxy: str


Action = Union[TestLatency, ApplySelection]


class InputKind(Enum):
    """What a user input means."""

    ESC = auto()
    TAB_GOTO = auto()
    TOGGLE_DEBUG = auto()
    TOGGLE_HOLD = auto()
    LIST = auto()
    TEST_LATENCY = auto()
    NEXT_SORT = auto()
    PREV_SORT = auto()
    OTHER = auto()


@dataclass(frozen=True)
class ListEvent:
    """Cursor movement inside a list, ``fast`` when Control or Shift is held."""

    fast: bool
    code: Code

    def __post_init__(self) -> None:
        _check_code(self.code)


class Event:
    """Base of everything the state handler receives."""

    def is_quit(self) -> bool:
        return isinstance(self, QuitEvent)

    def is_input(self) -> bool:
        return isinstance(self, InputEvent)

    def is_update(self) -> bool:
        return isinstance(self, UpdateEvent)

    def is_diagnostic(self) -> bool:
        return isinstance(self, DiagnosticEvent)

    def to_line(self) -> Line:
        """A one-line description for the debug list."""
        return Line([])


@dataclass(frozen=True)
class QuitEvent(Event):
    """The UI should stop."""

    def to_line(self) -> Line:
        return Line([])


@dataclass(frozen=True)
class ActionEvent(Event):
    """An action was dispatched to the backend."""

    action: Action

    def to_line(self) -> Line:
        return Line(
            [Span.styled("⋉ ", Style(fg=Color.YELLOW)), Span.raw(repr(self.action))]
        )


_INPUT_VALUE_TYPES: dict[InputKind, type] = {
    InputKind.TAB_GOTO: int,
    InputKind.LIST: ListEvent,
    InputKind.OTHER: KeyEvent,
}


@dataclass(frozen=True)
class InputEvent(Event):
    """A user input; ``value`` is the tab number, list event or raw key where the kind needs one."""

    kind: InputKind
    value: Any = None

    def __post_init__(self) -> None:
        expected = _INPUT_VALUE_TYPES.get(self.kind)
        if expected is None:
            if self.value is not None:
                raise TypeError(f"{self.kind.name} input takes no value")
        elif not isinstance(self.value, expected) or isinstance(self.value, bool):
            raise TypeError(f"{self.kind.name} input needs a {expected.__name__}")

    def to_line(self) -> Line:
        return Line([Span.styled("✜  ", Style(fg=Color.GREEN)), Span.raw(repr(self))])


@dataclass(frozen=True)
class UpdateEvent(Event):
    """Fresh data from the backend."""

    KINDS = frozenset(
        {
            "config",
            "connection",
            "version",
            "traffic",
            "proxies",
            "rules",
            "log",
            "proxy_test_latency_done",
        }
    )

    kind: str
    payload: Any = field(default=None, compare=True)

    def __post_init__(self) -> None:
        if self.kind not in self.KINDS:
            raise ValueError(f"unknown update kind {self.kind!r}")

    def __str__(self) -> str:
        if self.kind == "proxy_test_latency_done":
            return "Test latency done"
        return repr(self.payload)

    def to_line(self) -> Line:
        return Line([Span.styled("⇵  ", Style(fg=Color.YELLOW)), Span.raw(str(self))])


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


_LEVEL_COLORS = {
    "DEBUG": Color.GRAY,
    "INFO": Color.BLUE,
    "WARN": Color.YELLOW,
    "ERROR": Color.RED,
}


@dataclass(frozen=True)
class DiagnosticEvent(Event):
    """A log record produced by the UI itself."""

    level: int
    message: str

    def to_line(self) -> Line:
        name = _level_name(self.level)
        return Line(
            [
                Span.styled(
                    f"✇  {name:<6}", Style(fg=_LEVEL_COLORS.get(name, Color.GRAY))
                ),
                Span.raw(self.message),
            ]
        )


_LIST_CODES = frozenset({KeyCode.LEFT, KeyCode.RIGHT, KeyCode.UP, KeyCode.DOWN, KeyCode.ENTER})


def event_from_code(code: Code) -> Event:
    """Event for an unmodified key; raises InternalError when the key means nothing."""
    if code in ("q", "x"):
        return QuitEvent()
    if code == "t":
        return InputEvent(InputKind.TEST_LATENCY)
    if code is KeyCode.ESC:
        return InputEvent(InputKind.ESC)
    if code == " ":
        return InputEvent(InputKind.TOGGLE_HOLD)
    if isinstance(code, str) and len(code) == 1 and code in "0123456789":
        return InputEvent(InputKind.TAB_GOTO, int(code))
    raise InternalError()


def event_from_key(key: KeyEvent) -> Event:
    """Event for a key press, falling back to an OTHER input."""
    mods, code = key.modifiers, key.code
    if mods == KeyModifiers.CONTROL and code == "c":
        return QuitEvent()
    if mods == KeyModifiers.CONTROL and code == "d":
        return InputEvent(InputKind.TOGGLE_DEBUG)
    if isinstance(code, KeyCode) and code in _LIST_CODES:
        fast = mods in (KeyModifiers.CONTROL, KeyModifiers.SHIFT)
        return InputEvent(InputKind.LIST, ListEvent(fast, code))
    if mods == KeyModifiers.ALT and code == "s":
        return InputEvent(InputKind.PREV_SORT)
    if mods == KeyModifiers.NONE and code == "s":
        return InputEvent(InputKind.NEXT_SORT)
    if mods == KeyModifiers.NONE:
        try:
            return event_from_code(code)
        except InternalError:
            pass
    return InputEvent(InputKind.OTHER, key)