from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .case_string import CaseStr
from .sample import Sample
from .word_sequence import CharClass, WordSequence, char_class

__all__ = [
    "BigramScore",
    "any_alphabetic",
    "compute_t",
    "format_bigram",
    "significant_bigrams",
    "t_statistic",
]

Pair = Tuple[int, int]


@dataclass(frozen=True)
class BigramScore:
    t: float
    first: str
    second: str
    first_count: int
    second_count: int
    observed: int


def any_alphabetic(segment: str) -> bool:
    """Filter for words containing any alphabetic characters."""
    return any(char_class(ch) is CharClass.ALPHABETIC for ch in segment)


def t_statistic(mean: float, variance: float, size: float, distribution_mean: float) -> float:
    return (mean - distribution_mean) / math.sqrt(variance / size)


def compute_t(words: Sample[int], bigrams: Sample[Pair]) -> List[Tuple[float, Pair]]:
    """
    Score each observed bigram against the independence hypothesis.

    Under independence P(w1 w2) = P(w1) P(w2); for small probabilities the
    Bernoulli variance p(1 - p) is close to p, so the null mean doubles as the
    variance estimate.
    """
    scored: List[Tuple[float, Pair]] = []
    for pair in bigrams.counts:
        p_obs = bigrams.p(pair)
        p_indep = words.p(pair[0]) * words.p(pair[1])
        scored.append((t_statistic(p_obs, p_indep, float(bigrams.total), p_indep), pair))
    return scored


def significant_bigrams(text: str, *, case_sensitive: bool = False) -> List[BigramScore]:
    """Rank adjacent word pairs of ``text`` by descending t-value."""
    key = str if case_sensitive else CaseStr
    ws = WordSequence(text, key, any_alphabetic)
    word_samples: Sample[int] = Sample.from_iterable(ws.words)
    bigram_samples: Sample[Pair] = Sample.from_iterable(zip(ws.words, ws.words[1:]))
    scored = compute_t(word_samples, bigram_samples)
    scored.sort(reverse=True)
    return [
        BigramScore(
            t=t,
            first=str(ws[pair[0]]),
            second=str(ws[pair[1]]),
            first_count=word_samples.counts[pair[0]],
            second_count=word_samples.counts[pair[1]],
            observed=bigram_samples.counts[pair],
        )
        for t, pair in scored
    ]


def format_bigram(score: BigramScore) -> str:
    return (
        f"{score.t:2.2f}\t{score.first_count:6}\t{score.second_count:6}\t"
        f"{score.observed:6}\t{score.first} {score.second}"
    )
