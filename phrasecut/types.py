from __future__ import annotations
from typing import Literal, NamedTuple, Tuple

__all__ = [
    "DecisionTag",
    "UNKNOWN",
    "POSITIVE",
    "NEGATIVE",
    "INVALID_FEATURE",
    "Cell",
    "ABSENT",
    "Span",
]

DecisionTag = Literal["U", "B", "O"]

UNKNOWN: DecisionTag = "U"
POSITIVE: DecisionTag = "B"
NEGATIVE: DecisionTag = "O"

# Block value of out-of-range window positions. Never produced by the block
# classifier, so keys built from it cannot match a trained feature.
INVALID_FEATURE = "▔"

# Half-open character range ``(start, end)`` into the segmented text.
Span = Tuple[int, int]


class Cell(NamedTuple):
    """One window position: the character and its 3-digit block code."""

    char: str
    block: str

    @property
    def is_absent(self) -> bool:
        return self.block == INVALID_FEATURE


ABSENT = Cell("", INVALID_FEATURE)
