"""A small text spinner shown while matching runs."""

from __future__ import annotations

from dataclasses import dataclass, field

FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")


@dataclass
class SpinnerState:
    total_frames: int
    current_frame: int = 0

    def __post_init__(self) -> None:
        if self.total_frames < 1:
            raise ValueError("a spinner needs at least one frame")

    def tick(self) -> None:
        self.current_frame = (self.current_frame + 1) % self.total_frames


@dataclass
class Spinner:
    """Cycles through a fixed sequence of frames, one per tick."""

    frames: tuple[str, ...] = FRAMES
    state: SpinnerState = field(init=False)

    def __post_init__(self) -> None:
        self.frames = tuple(self.frames)
        self.state = SpinnerState(len(self.frames))

    def frame(self, index: int) -> str:
        return self.frames[index]

    def current(self) -> str:
        return self.frames[self.state.current_frame]

    def tick(self) -> None:
        self.state.tick()