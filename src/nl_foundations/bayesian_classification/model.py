from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Generic, Hashable, Iterable, Mapping, Optional, Sequence, Tuple, TypeVar

from .event_counter import EventCounter
from .training import ContextCounter, Trainer

__all__ = ["Ambiguity", "Classification", "Model", "build_model"]

T = TypeVar("T", bound=Hashable)
U = TypeVar("U", bound=Hashable)
V = TypeVar("V", bound=Hashable)

ProbabilityMap = Mapping[U, float]


def _log2(p: float) -> float:
    if p == 0.0:
        return -math.inf
    return math.log2(p)


def _frozen(values: Dict[U, float]) -> ProbabilityMap:
    return MappingProxyType(values)


def _identity(value):
    return value


@dataclass(frozen=True)
class Classification:
    positive: float
    negative: float
    is_instance: bool


@dataclass(frozen=True)
class Ambiguity(Generic[U]):
    """Smoothed statistics for one conditioning token."""

    p_raw: float
    pos_context: ProbabilityMap
    neg_context: ProbabilityMap

    @classmethod
    def from_counter(
        cls,
        counter: ContextCounter[T],
        event_counts: EventCounter[T],
        to_key: Callable[[T], U],
    ) -> "Ambiguity[U]":
        return cls(
            p_raw=counter.base_probability(),
            pos_context=_frozen(counter.pos_context(to_key, event_counts)),
            neg_context=_frozen(counter.neg_context(to_key, event_counts)),
        )

    def localize(self, convert: Callable[[U], V]) -> "Ambiguity[V]":
        return Ambiguity(
            p_raw=self.p_raw,
            pos_context=_frozen({convert(k): v for k, v in self.pos_context.items()}),
            neg_context=_frozen({convert(k): v for k, v in self.neg_context.items()}),
        )

    def log_likelihood(self, p_unseen: float, context: Iterable[U]) -> Tuple[float, float]:
        pos = _log2(self.p_raw)
        neg = _log2(1.0 - self.p_raw)
        for event in context:
            pos += _log2(self.pos_context.get(event, p_unseen))
            neg += _log2(self.neg_context.get(event, p_unseen))
        return pos, neg


@dataclass(frozen=True)
class Model(Generic[U]):
    """
    Immutable binary-event classifier built from a :class:`Trainer`.

    ``size`` is the context width used in training and ``p_unseen`` the
    probability given to context tokens the trainer never saw. A model keyed in
    one token space can be re-keyed with :meth:`localize`; the original is left
    untouched.
    """

    size: int
    p_unseen: float
    contexts: Mapping[U, Ambiguity[U]]

    @classmethod
    def from_trainer(cls, trainer: Trainer[T], to_key: Callable[[T], U] = _identity) -> "Model[U]":
        seen = trainer.seen()
        contexts = {
            to_key(instance): Ambiguity.from_counter(counter, seen, to_key)
            for instance, counter in trainer.contexts.items()
        }
        return cls(size=trainer.size(), p_unseen=trainer.p_unseen(), contexts=MappingProxyType(contexts))

    def localize(self, convert: Callable[[U], V]) -> "Model[V]":
        contexts = {convert(key): ambiguity.localize(convert) for key, ambiguity in self.contexts.items()}
        return Model(size=self.size, p_unseen=self.p_unseen, contexts=MappingProxyType(contexts))

    def context(self, idx: int, words: Sequence[U]) -> Sequence[U]:
        """Up to ``size`` tokens immediately preceding position ``idx``."""
        start = max(self.size, idx) - self.size
        return words[start:idx]

    def ambiguity(self, instance: U) -> Optional[Ambiguity[U]]:
        return self.contexts.get(instance)

    def log_likelihood(self, instance: U, context: Iterable[U]) -> Tuple[float, float]:
        ambiguity = self.contexts.get(instance)
        if ambiguity is None:
            return 0.0, 1.0
        return ambiguity.log_likelihood(self.p_unseen, context)

    def is_instance(self, instance: U, context: Iterable[U]) -> bool:
        pos, neg = self.log_likelihood(instance, context)
        return pos > neg

    def classify(self, instance: U, context: Iterable[U]) -> Classification:
        pos, neg = self.log_likelihood(instance, context)
        return Classification(positive=pos, negative=neg, is_instance=pos > neg)

    def __contains__(self, instance: object) -> bool:
        return instance in self.contexts

    def __len__(self) -> int:
        return len(self.contexts)


def build_model(trainer: Trainer[T], to_key: Callable[[T], U] = _identity) -> Model[U]:
    return Model.from_trainer(trainer, to_key)
