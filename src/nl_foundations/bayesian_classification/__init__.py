"""
Binary-event classification over token context windows.

    * ``event_counter``: occurrence counts for arbitrary hashable events.
    * ``training``: per-instance context statistics gathered in one pass.
    * ``model``: smoothed, immutable log-likelihood classifier built from a trainer.
"""

from .event_counter import EventCounter
from .model import Ambiguity, Classification, Model, build_model
from .training import ContextCounter, ProgressCallback, Trainer, train

__all__ = [
    "Ambiguity",
    "Classification",
    "ContextCounter",
    "EventCounter",
    "Model",
    "ProgressCallback",
    "Trainer",
    "build_model",
    "train",
]
