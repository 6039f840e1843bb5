from __future__ import annotations

import math
from typing import Dict, Generic, Hashable, Iterable, TypeVar

__all__ = ["Sample"]

T = TypeVar("T", bound=Hashable)


class Sample(Generic[T]):
    """A collection of events with per-event counts and a running total."""

    def __init__(self) -> None:
        self.counts: Dict[T, int] = {}
        self.total = 0

    @classmethod
    def from_iterable(cls, events: Iterable[T]) -> "Sample[T]":
        sample: Sample[T] = cls()
        sample.extend(events)
        return sample

    def add(self, event: T) -> None:
        self.counts[event] = self.counts.get(event, 0) + 1
        self.total += 1

    def extend(self, events: Iterable[T]) -> None:
        for event in events:
            self.add(event)

    def p(self, event: T) -> float:
        """The probability of an event in this sample."""
        if self.total == 0:
            return math.nan
        return self.counts.get(event, 0) / self.total

    def __len__(self) -> int:
        return len(self.counts)
