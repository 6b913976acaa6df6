"""Sliding-window feature extraction.

Each candidate boundary is described by a :class:`Window` of six characters,
their Unicode block codes and the tags of the three previous decisions. The
window is turned into a fixed catalogue of feature keys whose spelling must
match the keys of the trained weight tables character for character: a key
is the family prefix (``"UW4:"``, ``"TQ2:"``, ...) followed by the window
values concatenated without any separator.

Feature families:

-   ``UP``/``BP``: unigrams and bigrams of the previous decisions.
-   ``UW``/``BW``/``TW``: character unigrams, bigrams and trigrams.
-   ``UB``/``BB``/``TB``: block-code unigrams, bigrams and trigrams.
-   ``UQ``/``BQ``/``TQ``: previous decisions crossed with block n-grams.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .types import ABSENT, UNKNOWN, Cell, DecisionTag
from .unicode_blocks import block_feature

__all__ = ["Window", "cell_at", "build_key", "feature_keys", "FEATURE_COUNT"]


def cell_at(chars: Sequence[str], index: int) -> Cell:
    """Returns the character and block code at ``index``, or ``ABSENT`` when out of range."""
    if index < 0 or index >= len(chars):
        return ABSENT
    ch = chars[index]
    return Cell(ch, block_feature(ch))


@dataclass(frozen=True)
class Window:
    """
    The view of the text around a single candidate boundary.

    For boundary ``i`` (a split would fall between ``chars[i - 1]`` and
    ``chars[i]``) the six cells cover positions ``i - 3`` through ``i + 2``,
    so the fourth cell holds the character that would open the new chunk.

    Attributes:
        cells: Six cells, ``w1/b1`` .. ``w6/b6``.
        tags: Three decision tags; ``p1`` is the oldest, ``p3`` the most
              recent boundary.
    """

    cells: Tuple[Cell, Cell, Cell, Cell, Cell, Cell]
    tags: Tuple[DecisionTag, DecisionTag, DecisionTag] = (UNKNOWN, UNKNOWN, UNKNOWN)

    @classmethod
    def start(cls, chars: Sequence[str]) -> "Window":
        """Builds the window for boundary 1 with an all-unknown history."""
        return cls(cells=(ABSENT, ABSENT) + tuple(cell_at(chars, i) for i in range(4)))

    def advance(self, incoming: Cell, outcome: DecisionTag) -> "Window":
        """
        Slides the window one position to the right.

        Args:
            incoming: The cell entering at the sixth position.
            outcome: The decision tag of the boundary that was just scored.

        Returns:
            The window of the next boundary.
        """
        return Window(cells=self.cells[1:] + (incoming,), tags=self.tags[1:] + (outcome,))


def build_key(parts: Iterable[str]) -> str:
    """Concatenates a family prefix and its values into a feature key."""
    return "".join(parts)


def feature_keys(window: Window) -> List[str]:
    """
    Generates every feature key for the boundary described by ``window``.

    The order of the returned keys is fixed but irrelevant to scoring.

    Args:
        window: The window of the boundary being scored.

    Returns:
        A list of ``FEATURE_COUNT`` keys.
    """
    (w1, b1), (w2, b2), (w3, b3), (w4, b4), (w5, b5), (w6, b6) = window.cells
    p1, p2, p3 = window.tags

    return [
        build_key(("UP1:", p1)),
        build_key(("UP2:", p2)),
        build_key(("UP3:", p3)),
        build_key(("BP1:", p1, p2)),
        build_key(("BP2:", p2, p3)),
        build_key(("UW1:", w1)),
        build_key(("UW2:", w2)),
        build_key(("UW3:", w3)),
        build_key(("UW4:", w4)),
        build_key(("UW5:", w5)),
        build_key(("UW6:", w6)),
        build_key(("BW1:", w2, w3)),
        build_key(("BW2:", w3, w4)),
        build_key(("BW3:", w4, w5)),
        build_key(("TW1:", w1, w2, w3)),
        build_key(("TW2:", w2, w3, w4)),
        build_key(("TW3:", w3, w4, w5)),
        build_key(("TW4:", w4, w5, w6)),
        build_key(("UB1:", b1)),
        build_key(("UB2:", b2)),
        build_key(("UB3:", b3)),
        build_key(("UB4:", b4)),
        build_key(("UB5:", b5)),
        build_key(("UB6:", b6)),
        build_key(("BB1:", b2, b3)),
        build_key(("BB2:", b3, b4)),
        build_key(("BB3:", b4, b5)),
        build_key(("TB1:", b1, b2, b3)),
        build_key(("TB2:", b2, b3, b4)),
        build_key(("TB3:", b3, b4, b5)),
        build_key(("TB4:", b4, b5, b6)),
        build_key(("UQ1:", p1, b1)),
        build_key(("UQ2:", p2, b2)),
        build_key(("UQ3:", p3, b3)),
        build_key(("BQ1:", p2, b2, b3)),
        build_key(("BQ2:", p2, b3, b4)),
        build_key(("BQ3:", p3, b2, b3)),
        build_key(("BQ4:", p3, b3, b4)),
        build_key(("TQ1:", p2, b1, b2, b3)),
        build_key(("TQ2:", p2, b2, b3, b4)),
        build_key(("TQ3:", p3, b1, b2, b3)),
        build_key(("TQ4:", p3, b2, b3, b4)),
    ]


FEATURE_COUNT = 42
