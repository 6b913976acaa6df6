"""Greedy left-to-right chunk building.

The :class:`Segmenter` walks the text one boundary at a time. For each
boundary it scores the current window, decides split or merge, then slides
the window and pushes the boundary's outcome into the decision history.
Because every score depends on the outcomes of the three previous
boundaries, boundaries are evaluated strictly in order.

Two tests run on every score and are deliberately independent:

1.  The split test, ``score > threshold`` (or, for normalised models,
    ``2 * score + base_score > 0``), decides where chunks end.
2.  The history test, ``score > 0``, decides the tag recorded for the
    boundary, whatever threshold the caller picked.
"""
from __future__ import annotations
from typing import List, Mapping, Optional

from .features import Window, cell_at
from .scorer import Scorer
from .types import NEGATIVE, POSITIVE, Span

__all__ = [
    "DEFAULT_THRESHOLD",
    "Segmenter",
    "segment",
    "segment_spans",
    "parse",
    "parse_with_threshold",
]

DEFAULT_THRESHOLD = 1000


class Segmenter:
    """
    Splits text into line-breakable chunks using a :class:`Scorer`.

    Attributes:
        scorer: Scorer wrapping the trained model.
        threshold: Score a boundary must exceed to become a split. ``None``
                   selects the normalised rule, which needs a model carrying
                   a ``base_score``.
    """

    def __init__(self, scorer: Scorer, threshold: Optional[int] = DEFAULT_THRESHOLD):
        self.scorer = scorer
        self.threshold = threshold
        self.base_score: Optional[int] = None
        if threshold is None:
            self.base_score = getattr(scorer.model, "base_score", None)
            if self.base_score is None:
                raise ValueError(
                    "A normalised decision needs a model built from a nested table "
                    "(no base score available); pass an explicit threshold instead."
                )

    def _is_split(self, score: int) -> bool:
        if self.threshold is None:
            return 2 * score + self.base_score > 0
        return score > self.threshold

    def spans(self, text: str) -> List[Span]:
        """
        Returns the chunk boundaries of ``text`` as half-open character ranges.

        The ranges are contiguous, ordered and cover the whole text. An empty
        text yields the single empty range ``(0, 0)``; a one-character text
        is returned whole without being scored.
        """
        n = len(text)
        if n <= 1:
            return [(0, n)]

        out: List[Span] = []
        start = 0
        window = Window.start(text)

        for i in range(1, n):
            score = self.scorer.score(window)

            if self._is_split(score):
                out.append((start, i))
                start = i

            outcome = POSITIVE if score > 0 else NEGATIVE
            window = window.advance(cell_at(text, i + 3), outcome)

        out.append((start, n))
        return out

    def chunks(self, text: str) -> List[str]:
        """Returns the chunks of ``text``; joined in order they equal ``text``."""
        return [text[start:end] for start, end in self.spans(text)]


def segment(model: Mapping[str, int], text: str, threshold: Optional[int] = DEFAULT_THRESHOLD) -> List[str]:
    """
    Segments ``text`` into chunks with the given model.

    Args:
        model: Trained feature-key to weight mapping.
        text: The text to segment.
        threshold: Split cutoff; ``None`` uses the model's normalised rule.

    Returns:
        The ordered chunks. ``""`` yields ``[""]``.
    """
    return Segmenter(Scorer(model), threshold).chunks(text)


def segment_spans(model: Mapping[str, int], text: str, threshold: Optional[int] = DEFAULT_THRESHOLD) -> List[Span]:
    """Like :func:`segment` but returns ``(start, end)`` ranges into ``text``."""
    return Segmenter(Scorer(model), threshold).spans(text)


def parse(model: Mapping[str, int], text: str) -> List[str]:
    """Shorthand for ``parse_with_threshold(model, text, DEFAULT_THRESHOLD)``."""
    return parse_with_threshold(model, text, DEFAULT_THRESHOLD)


def parse_with_threshold(model: Mapping[str, int], text: str, threshold: int) -> List[str]:
    return segment(model, text, threshold)
