"""Colour schemes, modes, logos and the help-bar metadata rows."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Hashable

Color = Hashable

RESET = "reset"


class Mode(enum.Enum):
    CHANNEL = "Channel"
    REMOTE_CONTROL = "Remote Control"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GeneralColorscheme:
    border_fg: Color
    background: Color | None = None


@dataclass(frozen=True)
class HelpColorscheme:
    metadata_field_name_fg: Color
    metadata_field_value_fg: Color


@dataclass(frozen=True)
class ResultsColorscheme:
    result_name_fg: Color = RESET
    result_preview_fg: Color = RESET
    result_line_number_fg: Color = RESET
    result_selected_bg: Color = RESET
    result_selected_fg: Color = RESET
    match_foreground_color: Color = RESET


@dataclass(frozen=True)
class PreviewColorscheme:
    title_fg: Color
    highlight_bg: Color
    content_fg: Color
    gutter_fg: Color
    gutter_selected_fg: Color


@dataclass(frozen=True)
class InputColorscheme:
    input_fg: Color
    results_count_fg: Color


@dataclass(frozen=True)
class ModeColorscheme:
    channel: Color
    remote_control: Color


@dataclass(frozen=True)
class Colorscheme:
    general: GeneralColorscheme
    help: HelpColorscheme
    results: ResultsColorscheme
    preview: PreviewColorscheme
    input: InputColorscheme
    mode: ModeColorscheme


def mode_color(mode: Mode, colorscheme: ModeColorscheme) -> Color:
    """The colour that represents ``mode``."""
    if mode is Mode.CHANNEL:
        return colorscheme.channel
    return colorscheme.remote_control


_LOGO = (
    "  _______________\n"
    " |,----------.  |\\\n"
    " ||           |=| |\n"
    " ||           | | |\n"
    " ||           |o| |\n"
    " |`-----------' |/ \n"
    " `--------------'"
)

_REMOTE_LOGO = (
    "\n"
    " _____________\n"
    "/             \\\n"
    "| (*)     (#) |\n"
    "|             |\n"
    "| (1) (2) (3) |\n"
    "| (4) (5) (6) |\n"
    "| (7) (8) (9) |\n"
    "|             |\n"
    "|      _      |\n"
    "|     | |     |\n"
    "|  (_¯(0)¯_)  |\n"
    "|     | |     |\n"
    "|      ¯      |\n"
    "|             |\n"
    "|             |\n"
    "| === === === |\n"
    "|             |\n"
    "|     T.V     |\n"
    "`-------------´"
)


def logo_lines() -> list[str]:
    """The lines of the help-bar logo."""
    return _LOGO.split("\n")


def remote_logo_lines() -> list[str]:
    """The lines of the remote-control logo."""
    return _REMOTE_LOGO.split("\n")


def metadata_rows(mode: Mode, current_channel_name: str, version: str) -> list[tuple[str, str]]:
    """Label and value pairs shown in the help bar's metadata block."""
    return [
        ("version: ", version),
        ("current directory: ", os.getcwd()),
        ("current channel: ", current_channel_name),
        ("current mode: ", str(mode)),
    ]