"""
Natural-language foundations: tokenization, counting and context classifiers.

    * ``word_sequence``: class-run tokenizer that interns tokens as word ids.
    * ``case_string``: case-insensitive key usable wherever a ``str`` key is.
    * ``bayesian_classification``: binary-event trainer and smoothed model.
    * ``segmenter``: sentence-boundary detection built on the classifier.
    * ``collocations`` / ``kwic``: corpus inspection tools.

See segmenter.train_sentence_model for the end-to-end train/apply flow.
"""

from .bayesian_classification import Model, Trainer, build_model, train
from .case_string import CaseStr
from .textfile import TextFileError, read_text
from .word_sequence import CharClass, WordSequence, tokenize

__all__ = [
    "CaseStr",
    "CharClass",
    "Model",
    "TextFileError",
    "Trainer",
    "WordSequence",
    "build_model",
    "read_text",
    "tokenize",
    "train",
]
