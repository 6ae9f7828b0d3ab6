import pytest

from channelsurf.event import (
    Event,
    EventKind,
    Key,
    KeyCode,
    KeyEvent,
    KeyEventKind,
    KeyKind,
    KeyModifiers,
    convert_raw_event_to_key,
)


def press(code, modifiers=KeyModifiers.NONE, value=None):
    return KeyEvent(code=code, modifiers=modifiers, kind=KeyEventKind.PRESS, value=value)


@pytest.mark.parametrize(
    "event, expected",
    [
        (press(KeyCode.CHAR, KeyModifiers.NONE, "a"), Key.char("a")),
        (press(KeyCode.CHAR, KeyModifiers.CONTROL, "a"), Key.ctrl("a")),
        (press(KeyCode.CHAR, KeyModifiers.ALT, "a"), Key.alt("a")),
        (press(KeyCode.CHAR, KeyModifiers.SHIFT, "a"), Key.char("a")),
        (press(KeyCode.CHAR, KeyModifiers.NONE, " "), Key.char(" ")),
        (press(KeyCode.CHAR, KeyModifiers.CONTROL, " "), Key(KeyKind.CTRL_SPACE)),
        (press(KeyCode.CHAR, KeyModifiers.ALT, " "), Key(KeyKind.ALT_SPACE)),
        (press(KeyCode.CHAR, KeyModifiers.SHIFT, " "), Key.char(" ")),
        (press(KeyCode.BACKSPACE), Key(KeyKind.BACKSPACE)),
        (press(KeyCode.BACKSPACE, KeyModifiers.CONTROL), Key(KeyKind.CTRL_BACKSPACE)),
        (press(KeyCode.BACKSPACE, KeyModifiers.ALT), Key(KeyKind.ALT_BACKSPACE)),
        (press(KeyCode.BACKSPACE, KeyModifiers.SHIFT), Key(KeyKind.BACKSPACE)),
        (press(KeyCode.DELETE), Key(KeyKind.DELETE)),
        (press(KeyCode.DELETE, KeyModifiers.CONTROL), Key(KeyKind.CTRL_DELETE)),
        (press(KeyCode.DELETE, KeyModifiers.ALT), Key(KeyKind.ALT_DELETE)),
        (press(KeyCode.DELETE, KeyModifiers.SHIFT), Key(KeyKind.DELETE)),
        (press(KeyCode.ENTER), Key(KeyKind.ENTER)),
        (press(KeyCode.ENTER, KeyModifiers.CONTROL), Key(KeyKind.CTRL_ENTER)),
        (press(KeyCode.ENTER, KeyModifiers.ALT), Key(KeyKind.ALT_ENTER)),
        (press(KeyCode.ENTER, KeyModifiers.SHIFT), Key(KeyKind.ENTER)),
        (press(KeyCode.UP), Key(KeyKind.UP)),
    ],
)
def test_convert_raw_event_to_key(event, expected):
    assert convert_raw_event_to_key(event) == expected


def test_release_events_are_null():
    event = KeyEvent(KeyCode.CHAR, KeyModifiers.NONE, KeyEventKind.RELEASE, "a")
    assert convert_raw_event_to_key(event) == Key(KeyKind.NULL)


def test_combined_modifiers_on_char_give_null():
    event = press(KeyCode.CHAR, KeyModifiers.CONTROL | KeyModifiers.ALT, "x")
    assert convert_raw_event_to_key(event) == Key(KeyKind.NULL)


def test_combined_modifiers_on_arrow_give_plain_key():
    event = press(KeyCode.LEFT, KeyModifiers.CONTROL | KeyModifiers.SHIFT)
    assert convert_raw_event_to_key(event) == Key(KeyKind.LEFT)


def test_function_key_keeps_number():
    assert convert_raw_event_to_key(press(KeyCode.F, value=5)) == Key.function(5)


def test_unhandled_code_is_null():
    assert convert_raw_event_to_key(press(KeyCode.CAPS_LOCK)) == Key(KeyKind.NULL)


@pytest.mark.parametrize(
    "key, text",
    [
        (Key(KeyKind.CTRL_SPACE), "Ctrl-Space"),
        (Key(KeyKind.CTRL_DELETE), "Ctrl-Del"),
        (Key(KeyKind.ALT_DELETE), "Alt-Delete"),
        (Key(KeyKind.PAGE_UP), "PageUp"),
        (Key(KeyKind.BACK_TAB), "BackTab"),
        (Key.function(12), "F12"),
        (Key.char("q"), "q"),
        (Key.alt("x"), "Alt-x"),
        (Key.ctrl("c"), "Ctrl-c"),
        (Key(KeyKind.NULL), "Null"),
        (Key(KeyKind.ESC), "Esc"),
    ],
)
def test_key_display(key, text):
    assert str(key) == text


def test_keys_are_hashable_and_equal_by_value():
    assert {Key.ctrl("c"): 1}[Key(KeyKind.CTRL, "c")] == 1


@pytest.mark.parametrize(
    "kind, value",
    [
        (KeyKind.CHAR, None),
        (KeyKind.CHAR, "ab"),
        (KeyKind.F, 256),
        (KeyKind.F, "1"),
        (KeyKind.ENTER, "x"),
    ],
)
def test_invalid_keys_are_rejected(kind, value):
    with pytest.raises(ValueError):
        Key(kind, value)


def test_event_constructors():
    assert Event.input(Key.char("a")).key == Key.char("a")
    assert Event.resize(80, 24).size == (80, 24)
    assert Event(EventKind.TICK).kind is EventKind.TICK


def test_input_event_requires_key():
    with pytest.raises(ValueError):
        Event(EventKind.INPUT)