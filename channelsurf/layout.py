"""Screen geometry: rectangles, constraint-based splitting and the UI layout."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

UI_WIDTH_PERCENT = 95
UI_HEIGHT_PERCENT = 95

HELP_BAR_MAX_HEIGHT = 9
LOGO_WIDTH = 24
REMOTE_CONTROL_WIDTH = 24
INPUT_HEIGHT = 3
RESULTS_MIN_HEIGHT = 3


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        if min(self.x, self.y, self.width, self.height) < 0:
            raise ValueError("rectangle coordinates and sizes must not be negative")

    def area(self) -> int:
        return self.width * self.height

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


class _ConstraintKind(enum.Enum):
    LENGTH = enum.auto()
    MIN = enum.auto()
    MAX = enum.auto()
    PERCENTAGE = enum.auto()
    FILL = enum.auto()


# allocation order when space is short: minimums first, maximums last
_PRIORITY = {
    _ConstraintKind.MIN: 0,
    _ConstraintKind.LENGTH: 1,
    _ConstraintKind.PERCENTAGE: 2,
    _ConstraintKind.MAX: 3,
    _ConstraintKind.FILL: 4,
}


@dataclass(frozen=True)
class Constraint:
    """A sizing rule for one chunk of a split."""

    kind: _ConstraintKind
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("constraint values must not be negative")
        if self.kind is _ConstraintKind.PERCENTAGE and self.value > 100:
            raise ValueError("a percentage cannot exceed 100")

    @classmethod
    def length(cls, value: int) -> Constraint:
        return cls(_ConstraintKind.LENGTH, value)

    @classmethod
    def min(cls, value: int) -> Constraint:
        return cls(_ConstraintKind.MIN, value)

    @classmethod
    def max(cls, value: int) -> Constraint:
        return cls(_ConstraintKind.MAX, value)

    @classmethod
    def percentage(cls, value: int) -> Constraint:
        return cls(_ConstraintKind.PERCENTAGE, value)

    @classmethod
    def fill(cls, weight: int = 1) -> Constraint:
        return cls(_ConstraintKind.FILL, weight)

    def _desired(self, total: int) -> int:
        if self.kind is _ConstraintKind.PERCENTAGE:
            return total * self.value // 100
        if self.kind is _ConstraintKind.FILL:
            return 0
        return self.value


class Direction(enum.Enum):
    HORIZONTAL = enum.auto()
    VERTICAL = enum.auto()


def _sizes(total: int, constraints: Sequence[Constraint]) -> list[int]:
    sizes = [0] * len(constraints)
    remaining = total
    order = sorted(range(len(constraints)), key=lambda i: _PRIORITY[constraints[i].kind])
    for i in order:
        granted = min(constraints[i]._desired(total), remaining)
        sizes[i] = granted
        remaining -= granted
    if remaining <= 0 or not constraints:
        return sizes

    fills = [i for i, c in enumerate(constraints) if c.kind is _ConstraintKind.FILL and c.value > 0]
    if fills:
        weight = sum(constraints[i].value for i in fills)
        shares = {i: remaining * constraints[i].value // weight for i in fills}
        shares[fills[-1]] += remaining - sum(shares.values())
        for i, share in shares.items():
            sizes[i] += share
        return sizes

    mins = [i for i, c in enumerate(constraints) if c.kind is _ConstraintKind.MIN]
    grower = mins[-1] if mins else len(constraints) - 1
    sizes[grower] += remaining
    return sizes


def split(area: Rect, direction: Direction, constraints: Sequence[Constraint]) -> list[Rect]:
    """Cut ``area`` into consecutive chunks along ``direction``, one per constraint."""
    horizontal = direction is Direction.HORIZONTAL
    total = area.width if horizontal else area.height
    chunks = []
    position = area.x if horizontal else area.y
    for size in _sizes(total, constraints):
        if horizontal:
            chunks.append(Rect(position, area.y, size, area.height))
        else:
            chunks.append(Rect(area.x, position, area.width, size))
        position += size
    return chunks


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """A rectangle centred in ``area`` covering the given percentages of it."""
    if not (0 <= percent_x <= 100 and 0 <= percent_y <= 100):
        raise ValueError("percentages must lie between 0 and 100")
    margin_y = (100 - percent_y) // 2
    rows = split(
        area,
        Direction.VERTICAL,
        [
            Constraint.percentage(margin_y),
            Constraint.percentage(percent_y),
            Constraint.percentage(margin_y),
        ],
    )
    margin_x = (100 - percent_x) // 2
    return split(
        rows[1],
        Direction.HORIZONTAL,
        [
            Constraint.percentage(margin_x),
            Constraint.percentage(percent_x),
            Constraint.percentage(margin_x),
        ],
    )[1]


@dataclass(frozen=True)
class Dimensions:
    """Width and height of the UI as percentages of the terminal."""

    x: int = UI_WIDTH_PERCENT
    y: int = UI_HEIGHT_PERCENT

    @classmethod
    def from_scale(cls, scale: int) -> Dimensions:
        return cls(scale, scale)


@dataclass(frozen=True)
class HelpBarLayout:
    left: Rect
    middle: Rect
    right: Rect


class InputPosition(enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value


class Orientation(enum.Enum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"


class PreviewTitlePosition(enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UiOptions:
    """The parts of the UI configuration that shape the layout."""

    ui_scale: int = 100
    show_help_bar: bool = False
    show_preview_panel: bool = True
    orientation: Orientation = Orientation.LANDSCAPE
    input_bar_position: InputPosition = InputPosition.TOP

    def __post_init__(self) -> None:
        if not 0 <= self.ui_scale <= 100:
            raise ValueError("ui_scale must lie between 0 and 100")


@dataclass(frozen=True)
class Layout:
    """Where each part of the UI is drawn.

    The default gives the results area a non-zero height so that the first
    frame, drawn before any real layout is known, still shows results.
    """

    help_bar: HelpBarLayout | None = None
    results: Rect = Rect(0, 0, 0, 100)
    input: Rect = Rect()
    preview_window: Rect | None = None
    remote_control: Rect | None = None

    @classmethod
    def build(
        cls,
        area: Rect,
        ui_options: UiOptions,
        show_remote: bool,
        show_preview: bool,
    ) -> Layout:
        show_preview = show_preview and ui_options.show_preview_panel
        dimensions = Dimensions.from_scale(ui_options.ui_scale)
        main_block = centered_rect(dimensions.x, dimensions.y, area)

        help_bar = None
        main_rect = main_block
        if ui_options.show_help_bar:
            bar, main_rect = split(
                main_block,
                Direction.VERTICAL,
                [Constraint.max(HELP_BAR_MAX_HEIGHT), Constraint.fill(1)],
            )
            left, middle, right = split(
                bar,
                Direction.HORIZONTAL,
                [Constraint.fill(1), Constraint.fill(1), Constraint.length(LOGO_WIDTH)],
            )
            help_bar = HelpBarLayout(left, middle, right)

        remote_constraints = [Constraint.fill(1)]
        if show_remote:
            remote_constraints.append(Constraint.length(REMOTE_CONTROL_WIDTH))
        remote_chunks = split(main_rect, Direction.HORIZONTAL, remote_constraints)
        remote_control = remote_chunks[1] if show_remote else None

        portrait = ui_options.orientation is Orientation.PORTRAIT
        main_chunks = split(
            remote_chunks[0],
            Direction.VERTICAL if portrait else Direction.HORIZONTAL,
            [Constraint.fill(1)] * (2 if show_preview else 1),
        )

        input_top = ui_options.input_bar_position is InputPosition.TOP
        if not show_preview:
            result_window, preview_window = main_chunks[0], None
        elif portrait and not input_top:
            result_window, preview_window = main_chunks[1], main_chunks[0]
        else:
            result_window, preview_window = main_chunks[0], main_chunks[1]

        results_constraints = [Constraint.min(RESULTS_MIN_HEIGHT), Constraint.length(INPUT_HEIGHT)]
        if input_top:
            input_rect, results = split(
                result_window, Direction.VERTICAL, list(reversed(results_constraints))
            )
        else:
            results, input_rect = split(result_window, Direction.VERTICAL, results_constraints)

        return cls(help_bar, results, input_rect, preview_window, remote_control)