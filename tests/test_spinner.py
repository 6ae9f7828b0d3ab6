import pytest

from channelsurf.spinner import FRAMES, Spinner, SpinnerState


def test_starts_at_first_frame():
    assert Spinner().current() == "⠋"


def test_tick_advances():
    spinner = Spinner()
    spinner.tick()
    assert spinner.current() == "⠙"
    assert spinner.state.current_frame == 1


def test_wraps_around():
    spinner = Spinner()
    for _ in range(len(FRAMES)):
        spinner.tick()
    assert spinner.current() == FRAMES[0]


def test_frame_by_index():
    spinner = Spinner()
    assert spinner.frame(len(FRAMES) - 1) == "⠏"


def test_custom_frames():
    spinner = Spinner(("a", "b"))
    spinner.tick()
    assert spinner.current() == "b"
    spinner.tick()
    assert spinner.current() == "a"


def test_state_total_frames_matches():
    spinner = Spinner(["x", "y", "z"])
    assert spinner.state.total_frames == len(spinner.frames)


def test_empty_frames_rejected():
    with pytest.raises(ValueError):
        Spinner(())
    with pytest.raises(ValueError):
        SpinnerState(0)