from __future__ import annotations
from typing import List, Mapping, Tuple

from .features import Window, feature_keys

__all__ = ["Scorer"]


class Scorer:
    """
    Calculates the split score of a candidate boundary from a trained model.

    The score is the plain sum of the model weights of every feature key the
    boundary's window produces. Keys absent from the model contribute
    nothing: the trained tables only store features that were observed
    during training.

    The scorer holds no per-call state, so one instance can serve any number
    of segmentations at once.

    Attributes:
        model: The feature-key to weight mapping. Any read-only mapping works;
               :class:`~phrasecut.model.Model` is the usual choice.
    """

    def __init__(self, model: Mapping[str, int]):
        self.model = model

    def score(self, window: Window) -> int:
        """
        Sums the model weights for every feature of ``window``.

        Args:
            window: The window of the boundary being scored.

        Returns:
            The integer score. Positive values favour a split.
        """
        get = self.model.get
        return sum(get(key, 0) for key in feature_keys(window))

    def explain(self, window: Window) -> List[Tuple[str, int]]:
        """Returns the ``(key, weight)`` pairs that contributed to the score of ``window``."""
        return [(key, self.model[key]) for key in feature_keys(window) if key in self.model]
