"""Bounded, deduplicating, most-recently-used clipboard history."""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterator, Optional, Tuple

from .exceptions import ConfigurationError

DEFAULT_CAPACITY = 50


@dataclass(frozen=True)
class Entry:
    """One captured clipboard text snapshot."""
    content: str
    captured_at: datetime = field(default_factory=datetime.now)


class HistoryStore:
    """Ordered collection of entries, most recent first.

    Content is the identity of an entry: pushing text that is already stored
    moves it to the front with the new timestamp instead of adding a second
    copy. When the store grows past ``capacity`` the least recently active
    entry is dropped.

    Dedup is a linear scan over at most ``capacity`` entries.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigurationError(f"History capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._entries = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, entry: Entry) -> None:
        """Insert entry at the front, replacing any entry with the same content"""
        for existing in self._entries:
            if existing.content == entry.content:
                self._entries.remove(existing)
                break

        self._entries.appendleft(entry)

        if len(self._entries) > self._capacity:
            self._entries.pop()

    def get(self, index: int) -> Optional[Entry]:
        """Get entry by rank, or None when out of range"""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def iter(self) -> Iterator[Entry]:
        """Iterate over a snapshot of the current entries, front to back"""
        return iter(self.snapshot())

    def snapshot(self) -> Tuple[Entry, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return self.iter()

    def __repr__(self):
        return f"<HistoryStore(len={len(self._entries)}, capacity={self._capacity})>"
