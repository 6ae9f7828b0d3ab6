"""Selection state for a scrolling list of results."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Picker:
    """Tracks the selected entry and its position within the visible window.

    ``selected`` is the index of the selected entry among all entries,
    ``relative_selected`` is its row within the window currently shown.
    When ``is_inverted`` is set, moving "next" walks backwards and vice versa.
    """

    input: str = ""
    entries: list[Any] = field(default_factory=list)
    total_items: int = 0
    is_inverted: bool = False
    _selected: int | None = field(default=None, repr=False)
    _relative_selected: int | None = field(default=None, repr=False)

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def relative_selected(self) -> int | None:
        return self._relative_selected

    def offset(self) -> int:
        """Index of the first visible entry."""
        absolute = self._selected or 0
        relative = self._relative_selected or 0
        return max(absolute - relative, 0)

    def inverted(self) -> Picker:
        """Return a copy with the direction of movement flipped."""
        return dataclasses.replace(
            self, entries=list(self.entries), is_inverted=not self.is_inverted
        )

    def reset_selection(self) -> None:
        self._selected = 0
        self._relative_selected = 0

    def reset_input(self) -> None:
        self.input = ""

    def select(self, index: int | None) -> None:
        self._selected = index

    def relative_select(self, index: int | None) -> None:
        self._relative_selected = index

    def select_next(self, step: int, total_items: int, height: int) -> None:
        """Move the selection ``step`` entries forward, wrapping around."""
        move = self._prev if self.is_inverted else self._next
        self._repeat(move, step, total_items, height)

    def select_prev(self, step: int, total_items: int, height: int) -> None:
        """Move the selection ``step`` entries backward, wrapping around."""
        move = self._next if self.is_inverted else self._prev
        self._repeat(move, step, total_items, height)

    @staticmethod
    def _repeat(move, step: int, total_items: int, height: int) -> None:
        if step <= 0:
            return
        if total_items <= 0:
            raise ValueError("cannot move the selection in an empty list")
        if height <= 0:
            raise ValueError("window height must be positive")
        for _ in range(step):
            move(total_items, height)

    def _next(self, total_items: int, height: int) -> None:
        selected = self._selected or 0
        relative = self._relative_selected or 0
        self._selected = (selected + 1) % total_items
        self._relative_selected = min(relative + 1, height - 1)
        if self._selected == 0:
            self._relative_selected = 0

    def _prev(self, total_items: int, height: int) -> None:
        selected = self._selected or 0
        relative = self._relative_selected or 0
        self._selected = (selected + total_items - 1) % total_items
        self._relative_selected = max(relative - 1, 0)
        if self._selected == total_items - 1:
            self._relative_selected = min(height - 1, total_items - 1)