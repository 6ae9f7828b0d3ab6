"""Previews of entries, their display state and a bounded cache for them."""

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

log = logging.getLogger(__name__)

PREVIEW_NOT_SUPPORTED_MSG = "Preview for this file type is not supported"
FILE_TOO_LARGE_MSG = "File too large"
LOADING_MSG = "Loading..."
TIMEOUT_MSG = "Preview timed out"

DEFAULT_PREVIEW_CACHE_SIZE = 100
PREVIEW_MIN_SCROLL_LINES = 3
_U16_MAX = 0xFFFF


def _count_lines(text: str) -> int:
    if not text:
        return 0
    count = text.count("\n")
    return count if text.endswith("\n") else count + 1


class ContentKind(enum.Enum):
    EMPTY = enum.auto()
    LOADING = enum.auto()
    TIMEOUT = enum.auto()
    ANSI_TEXT = enum.auto()


@dataclass(frozen=True)
class PreviewContent:
    """Content of a preview; only ``ANSI_TEXT`` carries text."""

    kind: ContentKind = ContentKind.EMPTY
    text: str | None = None

    def __post_init__(self) -> None:
        if (self.kind is ContentKind.ANSI_TEXT) != (self.text is not None):
            raise ValueError("only ANSI_TEXT content carries text, and it must")

    @classmethod
    def ansi_text(cls, text: str) -> PreviewContent:
        return cls(ContentKind.ANSI_TEXT, text)

    def total_lines(self) -> int:
        """Number of lines of text, capped at 65535; zero for non-text content."""
        if self.text is None:
            return 0
        return min(_count_lines(self.text), _U16_MAX)


@dataclass(frozen=True)
class Preview:
    title: str = ""
    content: PreviewContent = field(default_factory=PreviewContent)
    icon: Any = None
    total_lines: int = 0


@dataclass
class PreviewState:
    """What the preview pane shows and how far it is scrolled."""

    enabled: bool = False
    preview: Preview = field(default_factory=Preview)
    scroll: int = 0
    target_line: int | None = None

    def scroll_down(self, offset: int) -> None:
        limit = max(self.preview.total_lines - PREVIEW_MIN_SCROLL_LINES, 0)
        self.scroll = min(self.scroll + offset, _U16_MAX, limit)

    def scroll_up(self, offset: int) -> None:
        self.scroll = max(self.scroll - offset, 0)

    def reset(self) -> None:
        self.preview = Preview()
        self.scroll = 0
        self.target_line = None

    def update(self, preview: Preview, scroll: int, target_line: int | None) -> None:
        """Switch to ``preview`` unless it has the same title as the current one."""
        if self.preview.title != preview.title:
            self.preview = preview
            self.scroll = scroll
            self.target_line = target_line


class PreviewCache:
    """A fixed-size cache of previews that evicts the oldest inserted key."""

    def __init__(self, capacity: int = DEFAULT_PREVIEW_CACHE_SIZE) -> None:
        if capacity < 1:
            raise ValueError("cache capacity must be positive")
        self.capacity = capacity
        self._entries: dict[str, Preview] = {}
        self._order: deque[str] = deque()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str) -> Preview | None:
        return self._entries.get(key)

    def insert(self, key: str, preview: Preview) -> None:
        """Store ``preview`` under ``key``, evicting the oldest key if full."""
        log.debug("Inserting preview into cache: %s", key)
        known = key in self._entries
        self._entries[key] = preview
        if known:
            return
        self._order.append(key)
        if len(self._order) > self.capacity:
            oldest = self._order.popleft()
            log.debug("Cache full, removing oldest entry: %s", oldest)
            del self._entries[oldest]

    def get_or_insert(self, key: str, factory: Callable[[], Preview]) -> Preview:
        cached = self.get(key)
        if cached is not None:
            return cached
        preview = factory()
        self.insert(key, preview)
        return preview


def loading(title: str) -> Preview:
    return Preview(title, PreviewContent(ContentKind.LOADING), None, 1)


def timeout(title: str) -> Preview:
    return Preview(title, PreviewContent(ContentKind.TIMEOUT), None, 1)