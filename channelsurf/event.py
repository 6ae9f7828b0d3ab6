"""Terminal input events and their normalisation into application keys."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


class KeyKind(enum.Enum):
    """The kinds of key the application understands.

    The value of each member is its display form; for the kinds that
    carry a payload it is the prefix put before that payload.
    """

    BACKSPACE = "Backspace"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    CTRL_SPACE = "Ctrl-Space"
    CTRL_BACKSPACE = "Ctrl-Backspace"
    CTRL_ENTER = "Ctrl-Enter"
    CTRL_LEFT = "Ctrl-Left"
    CTRL_RIGHT = "Ctrl-Right"
    CTRL_UP = "Ctrl-Up"
    CTRL_DOWN = "Ctrl-Down"
    CTRL_DELETE = "Ctrl-Del"
    ALT_SPACE = "Alt-Space"
    ALT_ENTER = "Alt-Enter"
    ALT_BACKSPACE = "Alt-Backspace"
    ALT_DELETE = "Alt-Delete"
    ALT_UP = "Alt-Up"
    ALT_DOWN = "Alt-Down"
    ALT_LEFT = "Alt-Left"
    ALT_RIGHT = "Alt-Right"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    BACK_TAB = "BackTab"
    DELETE = "Delete"
    INSERT = "Insert"
    F = "F"
    CHAR = ""
    ALT = "Alt-"
    CTRL = "Ctrl-"
    NULL = "Null"
    ESC = "Esc"
    TAB = "Tab"


_CHAR_KINDS = frozenset({KeyKind.CHAR, KeyKind.ALT, KeyKind.CTRL})


@dataclass(frozen=True)
class Key:
    """A key as seen by the application: a kind plus an optional payload.

    Character kinds (``CHAR``, ``ALT``, ``CTRL``) carry a single character;
    ``F`` carries the function-key number (0-255).
    """

    kind: KeyKind
    value: str | int | None = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_KINDS:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"{self.kind.name} key needs a single character")
        elif self.kind is KeyKind.F:
            if (
                not isinstance(self.value, int)
                or isinstance(self.value, bool)
                or not 0 <= self.value <= 255
            ):
                raise ValueError("F key needs a number between 0 and 255")
        elif self.value is not None:
            raise ValueError(f"{self.kind.name} key takes no value")

    @classmethod
    def char(cls, c: str) -> Key:
        return cls(KeyKind.CHAR, c)

    @classmethod
    def alt(cls, c: str) -> Key:
        return cls(KeyKind.ALT, c)

    @classmethod
    def ctrl(cls, c: str) -> Key:
        return cls(KeyKind.CTRL, c)

    @classmethod
    def function(cls, number: int) -> Key:
        return cls(KeyKind.F, number)

    def __str__(self) -> str:
        if self.value is None:
            return self.kind.value
        return f"{self.kind.value}{self.value}"


class KeyCode(enum.Enum):
    """Raw key codes reported by the terminal."""

    BACKSPACE = enum.auto()
    ENTER = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    TAB = enum.auto()
    BACK_TAB = enum.auto()
    DELETE = enum.auto()
    INSERT = enum.auto()
    F = enum.auto()
    CHAR = enum.auto()
    NULL = enum.auto()
    ESC = enum.auto()
    CAPS_LOCK = enum.auto()
    SCROLL_LOCK = enum.auto()
    NUM_LOCK = enum.auto()
    PRINT_SCREEN = enum.auto()
    PAUSE = enum.auto()
    MENU = enum.auto()


class KeyModifiers(enum.Flag):
    """Modifier keys held during a key event."""

    NONE = 0
    SHIFT = enum.auto()
    CONTROL = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()
    HYPER = enum.auto()
    META = enum.auto()


class KeyEventKind(enum.Enum):
    PRESS = enum.auto()
    REPEAT = enum.auto()
    RELEASE = enum.auto()


@dataclass(frozen=True)
class KeyEvent:
    """A raw key event.

    ``value`` is the character for ``KeyCode.CHAR`` and the number for
    ``KeyCode.F``; it is ``None`` for every other code.
    """

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS
    value: str | int | None = None


class EventKind(enum.Enum):
    CLOSED = enum.auto()
    INPUT = enum.auto()
    FOCUS_LOST = enum.auto()
    FOCUS_GAINED = enum.auto()
    RESIZE = enum.auto()
    TICK = enum.auto()


@dataclass(frozen=True)
class Event:
    """An application event: input keys, resizes, focus changes and ticks."""

    kind: EventKind
    key: Key | None = None
    size: tuple[int, int] | None = None

    def __post_init__(self) -> None:
        if (self.kind is EventKind.INPUT) != (self.key is not None):
            raise ValueError("only INPUT events carry a key, and they must")
        if (self.kind is EventKind.RESIZE) != (self.size is not None):
            raise ValueError("only RESIZE events carry a size, and they must")

    @classmethod
    def input(cls, key: Key) -> Event:
        return cls(EventKind.INPUT, key=key)

    @classmethod
    def resize(cls, width: int, height: int) -> Event:
        return cls(EventKind.RESIZE, size=(width, height))


# code -> (plain, with control, with alt)
_MODIFIABLE = {
    KeyCode.BACKSPACE: (KeyKind.BACKSPACE, KeyKind.CTRL_BACKSPACE, KeyKind.ALT_BACKSPACE),
    KeyCode.DELETE: (KeyKind.DELETE, KeyKind.CTRL_DELETE, KeyKind.ALT_DELETE),
    KeyCode.ENTER: (KeyKind.ENTER, KeyKind.CTRL_ENTER, KeyKind.ALT_ENTER),
    KeyCode.UP: (KeyKind.UP, KeyKind.CTRL_UP, KeyKind.ALT_UP),
    KeyCode.DOWN: (KeyKind.DOWN, KeyKind.CTRL_DOWN, KeyKind.ALT_DOWN),
    KeyCode.LEFT: (KeyKind.LEFT, KeyKind.CTRL_LEFT, KeyKind.ALT_LEFT),
    KeyCode.RIGHT: (KeyKind.RIGHT, KeyKind.CTRL_RIGHT, KeyKind.ALT_RIGHT),
}

_PLAIN = {
    KeyCode.HOME: KeyKind.HOME,
    KeyCode.END: KeyKind.END,
    KeyCode.PAGE_UP: KeyKind.PAGE_UP,
    KeyCode.PAGE_DOWN: KeyKind.PAGE_DOWN,
    KeyCode.TAB: KeyKind.TAB,
    KeyCode.BACK_TAB: KeyKind.BACK_TAB,
    KeyCode.INSERT: KeyKind.INSERT,
    KeyCode.ESC: KeyKind.ESC,
}

_NULL = Key(KeyKind.NULL)


def _convert_char(c: str, modifiers: KeyModifiers) -> Key:
    if modifiers in (KeyModifiers.NONE, KeyModifiers.SHIFT):
        return Key.char(c)
    if c == " ":
        if modifiers == KeyModifiers.CONTROL:
            return Key(KeyKind.CTRL_SPACE)
        if modifiers == KeyModifiers.ALT:
            return Key(KeyKind.ALT_SPACE)
        return _NULL
    if modifiers == KeyModifiers.CONTROL:
        return Key.ctrl(c)
    if modifiers == KeyModifiers.ALT:
        return Key.alt(c)
    return _NULL


def convert_raw_event_to_key(event: KeyEvent) -> Key:
    """Normalise a raw key event into a Key; unknown or released keys give Null."""
    log.debug("Raw event: %r", event)
    if event.kind is KeyEventKind.RELEASE:
        return _NULL
    code = event.code
    if code in _MODIFIABLE:
        plain, with_ctrl, with_alt = _MODIFIABLE[code]
        if event.modifiers == KeyModifiers.CONTROL:
            return Key(with_ctrl)
        if event.modifiers == KeyModifiers.ALT:
            return Key(with_alt)
        return Key(plain)
    if code in _PLAIN:
        return Key(_PLAIN[code])
    if code is KeyCode.F:
        return Key.function(event.value)
    if code is KeyCode.CHAR:
        return _convert_char(event.value, event.modifiers)
    return _NULL