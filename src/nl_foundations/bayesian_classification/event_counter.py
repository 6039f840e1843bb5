from __future__ import annotations

from typing import Dict, Generic, Hashable, ItemsView, Iterator, Optional, TypeVar, ValuesView

__all__ = ["EventCounter"]

T = TypeVar("T", bound=Hashable)


class EventCounter(Generic[T]):
    """Maintain a mapping between events of type T and a count of occurrences."""

    def __init__(self) -> None:
        self._counts: Dict[T, int] = {}

    def inc(self, key: T) -> None:
        self._counts[key] = self._counts.get(key, 0) + 1

    def get(self, key: T) -> Optional[int]:
        return self._counts.get(key)

    def values(self) -> ValuesView[int]:
        return self._counts.values()

    def items(self) -> ItemsView[T, int]:
        return self._counts.items()

    def total(self) -> int:
        return sum(self._counts.values())

    def __getitem__(self, key: T) -> int:
        return self._counts[key]

    def __contains__(self, key: object) -> bool:
        return key in self._counts

    def __iter__(self) -> Iterator[T]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"EventCounter({self._counts!r})"
