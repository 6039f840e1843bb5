from __future__ import annotations

import unicodedata
from enum import Enum
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

__all__ = [
    "CharClass",
    "char_class",
    "WordSequence",
    "tokenize",
    "accept_all",
]

K = TypeVar("K", bound=Hashable)

KeyTransform = Callable[[str], K]
AcceptPredicate = Callable[[str], bool]


class CharClass(Enum):
    ALPHABETIC = "alphabetic"
    NUMERIC = "numeric"
    WHITESPACE = "whitespace"
    CONTROL = "control"
    OTHER = "other"


def char_class(ch: str) -> CharClass:
    category = unicodedata.category(ch)
    if category.startswith("L") or category == "Nl":
        return CharClass.ALPHABETIC
    if category.startswith("N"):
        return CharClass.NUMERIC
    if ch.isspace():
        return CharClass.WHITESPACE
    if category == "Cc":
        return CharClass.CONTROL
    return CharClass.OTHER


def _is_mark(ch: str) -> bool:
    return unicodedata.category(ch).startswith("M")


_SEPARATORS = frozenset({CharClass.WHITESPACE, CharClass.CONTROL})


def accept_all(_segment: str) -> bool:
    return True


class WordSequence(Generic[K]):
    """
    Text segmented into class-homogeneous runs and interned as word ids.

    ``words`` holds one id per emitted token in source order. ``fmap`` maps an
    id to its canonical key, ``bmap`` maps the key back, and ``class_of_word``
    records the character class seen when the id was first allocated. Ids are
    handed out in first-occurrence order starting at 0.

    ``key`` canonicalizes a raw segment (``str`` for exact matching,
    ``CaseStr`` for case-insensitive matching); ``accept`` filters segments
    before they are interned.
    """

    def __init__(
        self,
        text: str,
        key: KeyTransform = str,
        accept: AcceptPredicate | None = None,
    ) -> None:
        self.fmap: Dict[int, K] = {}
        self.bmap: Dict[K, int] = {}
        self.class_of_word: Dict[int, CharClass] = {}
        self.words: List[int] = []
        self._key = key
        self._accept = accept or accept_all
        self._scan(text)

    # ------------------------------------------------------------------ #
    # Segmentation
    # ------------------------------------------------------------------ #
    def _scan(self, text: str) -> None:
        word_start = 0
        last_cls = CharClass.WHITESPACE
        for idx, ch in enumerate(text):
            cls = char_class(ch)
            # Combining marks stay inside the word they modify.
            if idx > 0 and last_cls is CharClass.ALPHABETIC and _is_mark(ch):
                cls = CharClass.ALPHABETIC
            if idx == 0:
                last_cls = cls
            elif cls != last_cls:
                self._flush(text[word_start:idx], last_cls)
                word_start = idx
                last_cls = cls
        if text:
            self._flush(text[word_start:], last_cls)

    def _flush(self, segment: str, cls: CharClass) -> None:
        if cls in _SEPARATORS or not self._accept(segment):
            return
        self.words.append(self.insert_word(self._key(segment), cls))

    # ------------------------------------------------------------------ #
    # Interning
    # ------------------------------------------------------------------ #
    def insert_word(self, key: K, cls: CharClass) -> int:
        """Return the id for ``key``, allocating the next id on first sight."""
        word = self.bmap.get(key)
        if word is not None:
            return word
        word = len(self.fmap)
        self.fmap[word] = key
        self.bmap[key] = word
        self.class_of_word[word] = cls
        return word

    def to_word(self, key: K) -> Optional[int]:
        return self.bmap.get(key)

    def to_key(self, word: int) -> Optional[K]:
        return self.fmap.get(word)

    def class_of(self, word: int) -> Optional[CharClass]:
        return self.class_of_word.get(word)

    def iter_tokens(self) -> Iterator[Tuple[int, K]]:
        for word in self.words:
            yield word, self.fmap[word]

    def __getitem__(self, word: int) -> K:
        return self.fmap[word]

    def __len__(self) -> int:
        return len(self.fmap)

    def __repr__(self) -> str:
        return f"WordSequence(tokens={len(self.words)}, distinct={len(self.fmap)})"


def tokenize(
    text: str,
    key: KeyTransform = str,
    accept: AcceptPredicate | None = None,
) -> WordSequence:
    """Segment ``text`` and intern every accepted token."""
    return WordSequence(text, key, accept)
