from __future__ import annotations

import math
from typing import Callable, Dict, Generic, Hashable, Iterable, Sequence, TypeVar

from .event_counter import EventCounter

__all__ = ["ContextCounter", "Trainer", "train", "ProgressCallback"]

T = TypeVar("T", bound=Hashable)
K = TypeVar("K", bound=Hashable)

ProgressCallback = Callable[[str, int, int], None]


class ContextCounter(Generic[T]):
    """Collection of statistics about a binary event."""

    def __init__(self) -> None:
        self.total = 0
        self.positive = 0
        self.pos_counts: EventCounter[T] = EventCounter()
        self.neg_counts: EventCounter[T] = EventCounter()

    def seen(self, context: Iterable[T], pos: bool) -> None:
        """Record one observation of the event together with its context."""
        self.total += 1
        if pos:
            self.positive += 1
        target = self.pos_counts if pos else self.neg_counts
        for event in context:
            target.inc(event)

    def base_probability(self) -> float:
        """Raw probability of the event; NaN until something was observed."""
        if self.total == 0:
            return math.nan
        return self.positive / self.total

    def pos_context(self, to_key: Callable[[T], K], event_counts: EventCounter[T]) -> Dict[K, float]:
        return self._ctx_probability(self.pos_counts, event_counts, to_key)

    def neg_context(self, to_key: Callable[[T], K], event_counts: EventCounter[T]) -> Dict[K, float]:
        return self._ctx_probability(self.neg_counts, event_counts, to_key)

    @staticmethod
    def _ctx_probability(
        context: EventCounter[T],
        word_counts: EventCounter[T],
        to_key: Callable[[T], K],
    ) -> Dict[K, float]:
        # Add-one (Laplace) smoothing. The maximum-likelihood estimate
        #     v / word_counts[k]
        # becomes
        #     (v + 1) / (word_counts[k] + sum(word_counts))
        total = word_counts.total()
        probabilities: Dict[K, float] = {}
        for key, count in context.items():
            denom = (word_counts.get(key) or 0) + total
            probabilities[to_key(key)] = (count + 1) / denom
        return probabilities

    def __repr__(self) -> str:
        return f"ContextCounter(positive={self.positive}, total={self.total})"


class Trainer(Generic[T]):
    """
    Accumulates per-instance context statistics over a token sequence.

    Every token is counted (after ``untag``) into the corpus-wide ``seen``
    counter. Tokens accepted by ``is_example`` additionally record the window of
    up to ``size`` preceding tokens against their own :class:`ContextCounter`,
    positive when ``is_tag`` holds for the raw token.
    """

    def __init__(self, context_size: int) -> None:
        if context_size < 0:
            raise ValueError("context size must be >= 0")
        self._size = context_size
        self._seen: EventCounter[T] = EventCounter()
        self.contexts: Dict[T, ContextCounter[T]] = {}

    def train(
        self,
        events: Sequence[T],
        is_example: Callable[[T], bool],
        untag: Callable[[T], T],
        is_tag: Callable[[T], bool],
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        total_events = len(events)
        stride = max(1, total_events // 20) if total_events else 1
        for idx, event in enumerate(events):
            self._seen.inc(untag(event))
            if is_example(event):
                start = max(idx, self._size) - self._size
                window = [untag(word) for word in events[start:idx]]
                self._counter(untag(event)).seen(window, is_tag(event))
            processed = idx + 1
            if progress_callback and (processed % stride == 0 or processed == total_events):
                progress_callback("train", processed, total_events)

    def size(self) -> int:
        return self._size

    def seen(self) -> EventCounter[T]:
        return self._seen

    def p_unseen(self) -> float:
        """Probability assigned to context tokens never observed in training."""
        total = self._seen.total()
        if total == 0:
            return math.nan
        return 1.0 / total

    def _counter(self, instance: T) -> ContextCounter[T]:
        counter = self.contexts.get(instance)
        if counter is None:
            counter = ContextCounter()
            self.contexts[instance] = counter
        return counter


def train(
    events: Sequence[T],
    is_example: Callable[[T], bool],
    untag: Callable[[T], T],
    is_tag: Callable[[T], bool],
    context_size: int,
    *,
    progress_callback: ProgressCallback | None = None,
) -> Trainer[T]:
    """Run a single training pass and return the populated trainer."""
    trainer: Trainer[T] = Trainer(context_size)
    trainer.train(events, is_example, untag, is_tag, progress_callback=progress_callback)
    return trainer
