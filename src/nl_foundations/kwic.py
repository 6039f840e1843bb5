from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from .word_sequence import WordSequence

__all__ = ["MISSING_WORD", "KwicSegment", "format_segments", "get_segment", "kwic_segments"]

MISSING_WORD = "--MISSING--"


@dataclass(frozen=True)
class KwicSegment:
    left: str
    word: str
    right: str


def kwic_segments(text: str, word: str, window: int) -> List[KwicSegment]:
    """Every occurrence of ``word`` with up to ``window`` tokens on each side."""
    if window < 0:
        raise ValueError("window must be >= 0")
    ws: WordSequence[str] = WordSequence(text)
    target = ws.to_word(word)
    if target is None:
        return []
    return [get_segment(idx, window, ws) for idx, current in enumerate(ws.words) if current == target]


def get_segment(position: int, window: int, ws: WordSequence[str]) -> KwicSegment:
    start = max(0, position - window)
    end = min(len(ws.words), position + window + 1)
    return KwicSegment(
        left=_join(ws.words[start:position], ws.fmap),
        word=_get_word(ws.words[position], ws.fmap),
        right=_join(ws.words[position + 1 : end], ws.fmap),
    )


def _join(words: Sequence[int], dictionary: Dict[int, str]) -> str:
    return " ".join(_get_word(word, dictionary) for word in words)


def _get_word(word: int, dictionary: Dict[int, str]) -> str:
    return dictionary.get(word, MISSING_WORD)


def format_segments(segments: Sequence[KwicSegment]) -> List[str]:
    """Left context right-justified, then the keyword, then the right context."""
    if not segments:
        return []
    width = max(len(segment.left) for segment in segments)
    return [f"{segment.left:>{width}}  {segment.word}  {segment.right}" for segment in segments]
