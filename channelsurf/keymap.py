"""Routing table from keys to actions."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping
from typing import Any

from channelsurf.event import Key


class Keymap(Mapping):
    """A read-only mapping of keys to actions."""

    def __init__(self, mapping: Mapping[Key, Any] | None = None) -> None:
        self._map: dict[Key, Any] = dict(mapping or {})

    def __getitem__(self, key: Key) -> Any:
        return self._map[key]

    def __iter__(self) -> Iterator[Key]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"Keymap({self._map!r})"

    @classmethod
    def from_keybindings(
        cls, keybindings: Mapping[Hashable, Key | Iterable[Key]]
    ) -> Keymap:
        """Reverse action-to-binding keybindings into a key-indexed keymap.

        A binding is either a single key or an iterable of keys. When several
        actions claim the same key, the one seen last wins.
        """
        table: dict[Key, Any] = {}
        for action, binding in keybindings.items():
            keys = [binding] if isinstance(binding, Key) else list(binding)
            for key in keys:
                if not isinstance(key, Key):
                    raise TypeError(f"binding for {action!r} holds a non-key: {key!r}")
                table[key] = action
        return cls(table)