from __future__ import annotations

from functools import total_ordering
from typing import Union

__all__ = ["CaseStr", "as_str"]


@total_ordering
class CaseStr:
    """
    Case-insensitive string key.

    Equality, ordering and hashing all work on the lowercase-mapped text, so
    ``CaseStr("The")`` and ``CaseStr("the")`` intern to the same word. The raw
    spelling is kept and returned by :meth:`as_str`.
    """

    __slots__ = ("_raw", "_folded")

    def __init__(self, raw: str) -> None:
        self._raw = raw
        self._folded = raw.lower()

    def as_str(self) -> str:
        return self._raw

    def is_empty(self) -> bool:
        return not self._raw

    def __len__(self) -> int:
        return len(self._raw)

    def __str__(self) -> str:
        return self._folded

    def __repr__(self) -> str:
        return f"CaseStr({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CaseStr):
            return NotImplemented
        return self._folded == other._folded

    # Python's str ordering is already lexicographic with shorter-is-less on a
    # shared prefix, which is exactly the folded ordering we want.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CaseStr):
            return NotImplemented
        return self._folded < other._folded

    def __hash__(self) -> int:
        return hash(self._folded)


Key = Union[str, CaseStr]


def as_str(key: Key) -> str:
    """Return the raw text behind a ``str`` or ``CaseStr`` key."""
    if isinstance(key, CaseStr):
        return key.as_str()
    return key
