"""Fuzzy matching of items against a search pattern."""

from __future__ import annotations

import dataclasses
import enum
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

_SCORE_MATCH = 16
_BONUS_CONSECUTIVE = 8
_BONUS_BOUNDARY = 8
_BONUS_PATH_SEPARATOR = 8
_BONUS_PREFIX = 16
_PENALTY_GAP = 1
_PATH_SEPARATORS = frozenset("/\\")


@dataclass(frozen=True)
class MatcherConfig:
    """How the matcher compares patterns with items.

    ``n_threads`` of ``None`` means "use the default"; matching is
    case-insensitive by default, with no preference for prefix matches
    and no special handling of paths.
    """

    n_threads: int | None = None
    ignore_case: bool = True
    prefer_prefix: bool = False
    match_paths: bool = False

    def with_n_threads(self, n_threads: int) -> MatcherConfig:
        return dataclasses.replace(self, n_threads=n_threads)

    def with_ignore_case(self, ignore_case: bool) -> MatcherConfig:
        return dataclasses.replace(self, ignore_case=ignore_case)

    def with_prefer_prefix(self, prefer_prefix: bool) -> MatcherConfig:
        return dataclasses.replace(self, prefer_prefix=prefer_prefix)

    def with_match_paths(self, match_paths: bool) -> MatcherConfig:
        return dataclasses.replace(self, match_paths=match_paths)


@dataclass(frozen=True)
class MatchedItem(Generic[T]):
    """An item that matched, the string it was matched on and the matched positions."""

    inner: T
    matched_string: str
    match_indices: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class Status:
    """Whether the matcher still has work pending."""

    running: bool = False


class LazyMutex(Generic[T]):
    """A lock around a value that is built on first use."""

    def __init__(self, init: Callable[[], T]) -> None:
        self._init = init
        self._lock = threading.Lock()
        self._ready = False
        self._value: T | None = None

    @contextmanager
    def lock(self) -> Iterator[T]:
        """Hold the lock and yield the value, building it if needed."""
        with self._lock:
            if not self._ready:
                self._value = self._init()
                self._ready = True
            yield self._value


def _fold(text: str, ignore_case: bool) -> list[str]:
    if not ignore_case:
        return list(text)
    folded = []
    for c in text:
        low = c.lower()
        folded.append(low if len(low) == 1 else c)
    return folded


def _is_boundary(text: str, i: int) -> bool:
    if i == 0:
        return True
    prev = text[i - 1]
    if not prev.isalnum():
        return True
    return prev.islower() and text[i].isupper()


def _score(text: str, indices: list[int], prefer_prefix: bool, match_paths: bool) -> int:
    score = 0
    prev: int | None = None
    for i in indices:
        score += _SCORE_MATCH
        if prev is not None:
            if i == prev + 1:
                score += _BONUS_CONSECUTIVE
            else:
                score -= _PENALTY_GAP * (i - prev - 1)
        if _is_boundary(text, i):
            score += _BONUS_BOUNDARY
            if match_paths and i > 0 and text[i - 1] in _PATH_SEPARATORS:
                score += _BONUS_PATH_SEPARATOR
        prev = i
    if prefer_prefix and indices:
        score += max(_BONUS_PREFIX - indices[0], 0)
    return score


def _fuzzy(
    pattern: str,
    text: str,
    ignore_case: bool,
    prefer_prefix: bool = False,
    match_paths: bool = False,
) -> tuple[int, list[int]] | None:
    if not pattern:
        return 0, []
    hay = _fold(text, ignore_case)
    needle = _fold(pattern, ignore_case)

    # forward pass: earliest position where the whole pattern has been seen
    pos = 0
    end = -1
    for i, c in enumerate(hay):
        if c == needle[pos]:
            pos += 1
            if pos == len(needle):
                end = i
                break
    if end < 0:
        return None

    # backward pass: tightest start for that end
    pos = len(needle) - 1
    start = end
    for i in range(end, -1, -1):
        if hay[i] == needle[pos]:
            pos -= 1
            if pos < 0:
                start = i
                break

    indices = []
    pending = iter(needle)
    want = next(pending)
    for i, c in enumerate(hay[start : end + 1], start):
        if want is not None and c == want:
            indices.append(i)
            want = next(pending, None)
    return _score(text, indices, prefer_prefix, match_paths), indices


def fuzzy_match(pattern: str, text: str, ignore_case: bool = True) -> tuple[int, list[int]] | None:
    """Fuzzy-match ``pattern`` against ``text``.

    Returns ``(score, indices)`` where ``indices`` are the character
    positions in ``text`` that matched, or ``None`` if there is no match.
    """
    return _fuzzy(pattern, text, ignore_case)


class _AtomKind(enum.Enum):
    FUZZY = enum.auto()
    SUBSTRING = enum.auto()
    PREFIX = enum.auto()
    SUFFIX = enum.auto()
    EXACT = enum.auto()


@dataclass(frozen=True)
class _Atom:
    kind: _AtomKind
    needle: str
    negative: bool
    ignore_case: bool

    @classmethod
    def parse(cls, raw: str, ignore_case: bool) -> _Atom | None:
        negative = raw.startswith("!")
        if negative:
            raw = raw[1:]
        kind = _AtomKind.SUBSTRING if negative else _AtomKind.FUZZY
        if raw.startswith("^"):
            raw = raw[1:]
            kind = _AtomKind.PREFIX
            if raw.endswith("$") and raw:
                raw = raw[:-1]
                kind = _AtomKind.EXACT
        elif raw.startswith("'"):
            raw = raw[1:]
            kind = _AtomKind.SUBSTRING
        elif raw.endswith("$"):
            raw = raw[:-1]
            kind = _AtomKind.SUFFIX
        if not raw:
            return None
        smart_ignore = ignore_case and raw == raw.lower()
        return cls(kind, raw, negative, smart_ignore)

    def _positive(self, text: str, prefer_prefix: bool, match_paths: bool):
        if self.kind is _AtomKind.FUZZY:
            return _fuzzy(self.needle, text, self.ignore_case, prefer_prefix, match_paths)
        hay = "".join(_fold(text, self.ignore_case))
        needle = "".join(_fold(self.needle, self.ignore_case))
        if self.kind is _AtomKind.SUBSTRING:
            start = hay.find(needle)
        elif self.kind is _AtomKind.PREFIX:
            start = 0 if hay.startswith(needle) else -1
        elif self.kind is _AtomKind.SUFFIX:
            start = len(hay) - len(needle) if hay.endswith(needle) else -1
        else:
            start = 0 if hay == needle else -1
        if start < 0:
            return None
        indices = list(range(start, start + len(needle)))
        return _score(text, indices, prefer_prefix, match_paths), indices

    def match(self, text: str, prefer_prefix: bool, match_paths: bool):
        found = self._positive(text, prefer_prefix, match_paths)
        if self.negative:
            return None if found is not None else (0, [])
        return found


def _parse_pattern(pattern: str, ignore_case: bool) -> list[_Atom]:
    atoms = (_Atom.parse(raw, ignore_case) for raw in pattern.split())
    return [atom for atom in atoms if atom is not None]


@dataclass(frozen=True)
class _Hit:
    index: int
    score: int
    indices: list[int]


@dataclass(frozen=True)
class _Snapshot(Generic[T]):
    items: list[tuple[T, str]] = field(default_factory=list)
    hits: list[_Hit] = field(default_factory=list)


class Injector(Generic[T]):
    """Pushes items into a matcher; safe to use from other threads."""

    def __init__(self, sink: Callable[[T, str], None]) -> None:
        self._sink = sink

    def push(self, item: T, to_text: Callable[[T], str]) -> None:
        """Add ``item``, matched on the string ``to_text(item)`` returns."""
        text = to_text(item)
        if not isinstance(text, str):
            raise TypeError("to_text must return a string")
        self._sink(item, text)


class Matcher(Generic[T]):
    """Matches items against a pattern on a single string dimension.

    Items and pattern changes take effect on the next ``tick``; ``results``
    and ``get_result`` read the state computed by the last tick.
    """

    def __init__(self, config: MatcherConfig | None = None) -> None:
        self.config = config or MatcherConfig()
        self.total_item_count = 0
        self.matched_item_count = 0
        self.status = Status()
        self.last_pattern = ""
        self._lock = threading.Lock()
        self._items: list[tuple[T, str]] = []
        self._atoms: list[_Atom] = []
        self._dirty = False
        self._snapshot: _Snapshot[T] = _Snapshot()

    def _push(self, item: T, text: str) -> None:
        with self._lock:
            self._items.append((item, text))
            self._dirty = True

    def injector(self) -> Injector[T]:
        return Injector(self._push)

    def find(self, pattern: str) -> None:
        """Set the pattern to match; unchanged patterns are not reparsed."""
        if pattern == self.last_pattern:
            return
        atoms = _parse_pattern(pattern, self.config.ignore_case)
        with self._lock:
            self._atoms = atoms
            self._dirty = True
        self.last_pattern = pattern

    def tick(self) -> None:
        """Bring the matched results up to date with items and pattern."""
        with self._lock:
            dirty = self._dirty
            items = list(self._items)
            atoms = list(self._atoms)
            self._dirty = False
        if dirty:
            self._snapshot = _Snapshot(items, self._match_all(items, atoms))
        self.status = Status(running=False)

    def _match_all(self, items: list[tuple[T, str]], atoms: list[_Atom]) -> list[_Hit]:
        prefer_prefix = self.config.prefer_prefix
        match_paths = self.config.match_paths
        hits = []
        for index, (_, text) in enumerate(items):
            total = 0
            positions: set[int] = set()
            for atom in atoms:
                found = atom.match(text, prefer_prefix, match_paths)
                if found is None:
                    break
                score, indices = found
                total += score
                positions.update(indices)
            else:
                hits.append(_Hit(index, total, sorted(positions)))
        hits.sort(key=lambda hit: (-hit.score, hit.index))
        return hits

    def results(self, num_entries: int, offset: int) -> list[MatchedItem[T]]:
        """Up to ``num_entries`` matched items, starting at rank ``offset``."""
        snapshot = self._snapshot
        self.total_item_count = len(snapshot.items)
        self.matched_item_count = len(snapshot.hits)
        stop = min(num_entries + offset, self.matched_item_count)
        return [
            MatchedItem(
                inner=snapshot.items[hit.index][0],
                matched_string=snapshot.items[hit.index][1],
                match_indices=list(hit.indices),
            )
            for hit in snapshot.hits[offset:stop]
        ]

    def get_result(self, index: int) -> MatchedItem[T] | None:
        """The matched item at rank ``index``, without match positions."""
        snapshot = self._snapshot
        if not 0 <= index < len(snapshot.hits):
            return None
        item, text = snapshot.items[snapshot.hits[index].index]
        return MatchedItem(inner=item, matched_string=text, match_indices=[])