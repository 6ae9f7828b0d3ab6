"""Grouping of keybindings for display in the help bar."""

from __future__ import annotations

import enum
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field

from channelsurf.event import Key
from channelsurf.theme import Mode

SELECT_PREV_ENTRY = "select_prev_entry"
SELECT_NEXT_ENTRY = "select_next_entry"
SELECT_PREV_PAGE = "select_prev_page"
SELECT_NEXT_PAGE = "select_next_page"
SCROLL_PREVIEW_HALF_PAGE_UP = "scroll_preview_half_page_up"
SCROLL_PREVIEW_HALF_PAGE_DOWN = "scroll_preview_half_page_down"
CONFIRM_SELECTION = "confirm_selection"
TOGGLE_SELECTION_DOWN = "toggle_selection_down"
TOGGLE_SELECTION_UP = "toggle_selection_up"
COPY_ENTRY_TO_CLIPBOARD = "copy_entry_to_clipboard"
TOGGLE_REMOTE_CONTROL = "toggle_remote_control"
TOGGLE_HELP = "toggle_help"


class DisplayableAction(enum.Enum):
    RESULTS_NAVIGATION = "Results navigation"
    PREVIEW_NAVIGATION = "Preview navigation"
    SELECT_ENTRY = "Select entry"
    COPY_ENTRY_TO_CLIPBOARD = "Copy entry to clipboard"
    TOGGLE_REMOTE_CONTROL = "Toggle Remote control"
    CANCEL = "Cancel"
    QUIT = "Quit"
    TOGGLE_HELP_BAR = "Toggle help bar"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DisplayableKeybindings:
    """Serialized keys for each displayable group of actions."""

    bindings: dict[DisplayableAction, list[str]] = field(default_factory=dict)

    def __getitem__(self, action: DisplayableAction) -> list[str]:
        return self.bindings[action]

    def __contains__(self, action: object) -> bool:
        return action in self.bindings


def _format_binding(binding: Key | Iterable[Key]) -> str:
    if isinstance(binding, Key):
        return str(binding)
    return ", ".join(str(key) for key in binding)


def serialized_keys_for_actions(
    keybindings: Mapping[Hashable, Key | Iterable[Key]], actions: Sequence[Hashable]
) -> list[str]:
    """The display form of the binding of each action, in order."""
    serialized = []
    for action in actions:
        if action not in keybindings:
            raise KeyError(f"no keybinding for action {action!r}")
        serialized.append(_format_binding(keybindings[action]))
    return serialized


def to_displayable(
    keybindings: Mapping[Hashable, Key | Iterable[Key]],
) -> dict[Mode, DisplayableKeybindings]:
    """Group the keybindings into what the help bar shows for each mode."""

    def keys(*actions: str) -> list[str]:
        return serialized_keys_for_actions(keybindings, actions)

    channel = DisplayableKeybindings(
        {
            DisplayableAction.RESULTS_NAVIGATION: keys(
                SELECT_PREV_ENTRY, SELECT_NEXT_ENTRY, SELECT_PREV_PAGE, SELECT_NEXT_PAGE
            ),
            DisplayableAction.PREVIEW_NAVIGATION: keys(
                SCROLL_PREVIEW_HALF_PAGE_UP, SCROLL_PREVIEW_HALF_PAGE_DOWN
            ),
            DisplayableAction.SELECT_ENTRY: keys(
                CONFIRM_SELECTION, TOGGLE_SELECTION_DOWN, TOGGLE_SELECTION_UP
            ),
            DisplayableAction.COPY_ENTRY_TO_CLIPBOARD: keys(COPY_ENTRY_TO_CLIPBOARD),
            DisplayableAction.TOGGLE_REMOTE_CONTROL: keys(TOGGLE_REMOTE_CONTROL),
            DisplayableAction.TOGGLE_HELP_BAR: keys(TOGGLE_HELP),
        }
    )
    remote_control = DisplayableKeybindings(
        {
            DisplayableAction.RESULTS_NAVIGATION: keys(SELECT_PREV_ENTRY, SELECT_NEXT_ENTRY),
            DisplayableAction.SELECT_ENTRY: keys(CONFIRM_SELECTION),
            DisplayableAction.TOGGLE_REMOTE_CONTROL: keys(TOGGLE_REMOTE_CONTROL),
        }
    )
    return {Mode.CHANNEL: channel, Mode.REMOTE_CONTROL: remote_control}


def format_key_group(group_name: str, keys: Sequence[str]) -> tuple[str, str]:
    """A help row: the group label and its keys separated by slashes."""
    if not keys:
        raise ValueError(f"group {group_name!r} has no keys")
    return f"{group_name}: ", " / ".join(keys)


_CHANNEL_ROWS = (
    ("Results navigation", DisplayableAction.RESULTS_NAVIGATION),
    ("Preview navigation", DisplayableAction.PREVIEW_NAVIGATION),
    ("Select entry", DisplayableAction.SELECT_ENTRY),
    ("Copy entry to clipboard", DisplayableAction.COPY_ENTRY_TO_CLIPBOARD),
    ("Toggle Remote control", DisplayableAction.TOGGLE_REMOTE_CONTROL),
)

_REMOTE_CONTROL_ROWS = (
    ("Browse channels", DisplayableAction.RESULTS_NAVIGATION),
    ("Select channel", DisplayableAction.SELECT_ENTRY),
    ("Toggle Remote control", DisplayableAction.TOGGLE_REMOTE_CONTROL),
)


def build_keybindings_rows(
    keybindings: Mapping[Mode, DisplayableKeybindings], mode: Mode
) -> list[tuple[str, str]]:
    """The rows of the keybindings table shown for ``mode``."""
    groups = keybindings[mode]
    layout = _CHANNEL_ROWS if mode is Mode.CHANNEL else _REMOTE_CONTROL_ROWS
    return [format_key_group(label, groups[action]) for label, action in layout]