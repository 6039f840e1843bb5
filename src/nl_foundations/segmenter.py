from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .bayesian_classification import Model, ProgressCallback, Trainer
from .word_sequence import CharClass, WordSequence

__all__ = [
    "TokenDecision",
    "render",
    "segment",
    "split_sentences",
    "train_sentence_model",
]

DEFAULT_CONTEXT_SIZE = 2
DEFAULT_MARKER = "+"


@dataclass(frozen=True)
class TokenDecision:
    """One token of a segmented document; punctuation carries its scores."""

    index: int
    word: int
    text: str
    char_class: CharClass
    scores: Tuple[float, float] | None
    is_boundary: bool


def _training_marks(ws: WordSequence[str], marker: str) -> Dict[int, int]:
    """Map each marked punctuation id to the id of its unmarked spelling."""
    marks: Dict[int, int] = {}
    for word in sorted(set(ws.words)):
        text = ws[word]
        if ws.class_of_word[word] is not CharClass.OTHER:
            continue
        if len(text) <= len(marker) or not text.endswith(marker):
            continue
        marks[word] = ws.insert_word(text[: -len(marker)], CharClass.OTHER)
    return marks


def train_sentence_model(
    text: str,
    context_size: int = DEFAULT_CONTEXT_SIZE,
    marker: str = DEFAULT_MARKER,
    *,
    progress_callback: ProgressCallback | None = None,
) -> Model[str]:
    """
    Train a sentence-boundary model from text whose sentence-final punctuation
    is suffixed with ``marker`` (``"end.+ Next"``). Every other punctuation run
    is a negative example.
    """
    if not marker:
        raise ValueError("training marker cannot be empty")
    ws: WordSequence[str] = WordSequence(text)
    marks = _training_marks(ws, marker)

    trainer: Trainer[int] = Trainer(context_size)
    trainer.train(
        ws.words,
        lambda word: ws.class_of_word[word] is CharClass.OTHER,
        lambda word: marks.get(word, word),
        lambda word: word in marks,
        progress_callback=progress_callback,
    )
    return Model.from_trainer(trainer, lambda word: ws[word])


def segment(model: Model[str], text: str) -> List[TokenDecision]:
    """Classify every punctuation run of ``text`` as a boundary or not."""
    ws: WordSequence[str] = WordSequence(text)
    unseen = len(ws)
    local: Model[int] = model.localize(lambda key: _to_word(ws, key, unseen))

    decisions: List[TokenDecision] = []
    for idx, word in enumerate(ws.words):
        cls = ws.class_of_word[word]
        scores: Tuple[float, float] | None = None
        boundary = False
        if cls is CharClass.OTHER:
            result = local.classify(word, local.context(idx, ws.words))
            scores = (result.positive, result.negative)
            boundary = result.is_instance
        decisions.append(TokenDecision(idx, word, ws[word], cls, scores, boundary))
    return decisions


def _to_word(ws: WordSequence[str], key: str, unseen: int) -> int:
    word = ws.to_word(key)
    return unseen if word is None else word


def split_sentences(model: Model[str], text: str) -> List[str]:
    sentences: List[str] = []
    current: List[str] = []
    for decision in segment(model, text):
        current.append(decision.text)
        if decision.is_boundary:
            sentences.append(" ".join(current))
            current = []
    if current:
        sentences.append(" ".join(current))
    return sentences


def render(decisions: Sequence[TokenDecision], line_width: int = 80, *, show_scores: bool = True) -> str:
    """
    Lay tokens out space-separated, wrapping once a line passes ``line_width``
    characters. Boundaries end the line and leave a blank line behind them.
    """
    pieces: List[str] = []
    length = 0
    for decision in decisions:
        length += len(decision.text) + 1
        if length > line_width:
            length = 0
            pieces.append(f"{decision.text}\n")
        else:
            pieces.append(f"{decision.text} ")
        if decision.scores is not None:
            if show_scores:
                pieces.append(f"({decision.scores[0]},{decision.scores[1]}) ")
            if decision.is_boundary:
                length = 0
                pieces.append("\n\n")
    pieces.append("\n")
    return "".join(pieces)
