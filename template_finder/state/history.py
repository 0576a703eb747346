from __future__ import annotations

from typing import Iterator

from template_finder.errors import InvalidConfiguration
from template_finder.schemas import CatalogItem

DEFAULT_HISTORY_SIZE = 10
DEFAULT_RECENT_SIZE = 5


def check_limit(name: str, limit: object) -> int:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise InvalidConfiguration(f"{name} must be a positive integer, got {limit!r}")
    return limit


class QueryHistory:
    """Most-recent-first list of distinct query strings, evicted from the tail."""

    def __init__(self, limit: int = DEFAULT_HISTORY_SIZE) -> None:
        self.limit = check_limit("history size", limit)
        self._entries: list[str] = []

    def add(self, query: str | None) -> bool:
        text = (query or "").strip()
        if not text or text in self._entries:
            return False
        self._entries.insert(0, text)
        del self._entries[self.limit :]
        return True

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._entries)


class RecentItems:
    """Most-recent-first list of selected templates, unique by name."""

    def __init__(self, limit: int = DEFAULT_RECENT_SIZE) -> None:
        self.limit = check_limit("recent items size", limit)
        self._items: list[CatalogItem] = []

    def push(self, item: CatalogItem) -> None:
        self._items = [x for x in self._items if x.name != item.name]
        self._items.insert(0, item)
        del self._items[self.limit :]

    def refresh(self, name: str, item: CatalogItem) -> bool:
        # Swap in the edited version without changing its place in the list.
        for idx, existing in enumerate(self._items):
            if existing.name == name:
                self._items[idx] = item
                return True
        return False

    def names(self) -> list[str]:
        return [x.name for x in self._items]

    def snapshot(self) -> tuple[CatalogItem, ...]:
        return tuple(self._items)

    def clear(self) -> None:
        self._items.clear()

    def __iter__(self) -> Iterator[CatalogItem]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._items)
