import dataclasses

import pytest

from channelsurf.theme import (
    Colorscheme,
    GeneralColorscheme,
    HelpColorscheme,
    InputColorscheme,
    Mode,
    ModeColorscheme,
    PreviewColorscheme,
    ResultsColorscheme,
    logo_lines,
    metadata_rows,
    mode_color,
    remote_logo_lines,
)


@pytest.mark.parametrize(
    "mode, expected",
    [(Mode.CHANNEL, "Channel"), (Mode.REMOTE_CONTROL, "Remote Control")],
)
def test_mode_display(mode, expected):
    rows = metadata_rows(mode, "files", "0.11.9")
    assert rows[3] == ("current mode: ", expected)
    assert str(mode) == expected


def test_mode_color_selects_by_mode():
    scheme = ModeColorscheme(channel="blue", remote_control="red")
    assert mode_color(Mode.CHANNEL, scheme) == "blue"
    assert mode_color(Mode.REMOTE_CONTROL, scheme) == "red"


def test_results_colorscheme_defaults_to_reset():
    scheme = ResultsColorscheme()
    assert {getattr(scheme, f.name) for f in dataclasses.fields(scheme)} == {"reset"}


def test_colorschemes_are_immutable_and_comparable():
    general = GeneralColorscheme(border_fg="white")
    assert general.background is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        general.border_fg = "black"
    scheme = Colorscheme(
        general=general,
        help=HelpColorscheme("a", "b"),
        results=ResultsColorscheme(),
        preview=PreviewColorscheme("t", "h", "c", "g", "s"),
        input=InputColorscheme("i", "r"),
        mode=ModeColorscheme("blue", "red"),
    )
    assert scheme == dataclasses.replace(scheme)
    assert hash(scheme) == hash(dataclasses.replace(scheme))


def test_logo_lines():
    lines = logo_lines()
    assert lines[0] == "  _______________"
    assert lines[-1] == " `--------------'"
    assert " |`-----------' |/ " in lines


def test_remote_logo_lines():
    lines = remote_logo_lines()
    assert lines[0] == ""
    assert lines[-1] == "`-------------´"
    assert "|     T.V     |" in lines


def test_metadata_rows(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    rows = metadata_rows(Mode.REMOTE_CONTROL, "files", "0.11.9")
    assert rows[0] == ("version: ", "0.11.9")
    assert rows[1][0] == "current directory: "
    assert rows[1][1] == str(tmp_path.resolve()) or rows[1][1] == str(tmp_path)
    assert rows[2] == ("current channel: ", "files")
    assert rows[3] == ("current mode: ", "Remote Control")