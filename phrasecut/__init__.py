"""Machine-learning powered phrase segmentation for line breaking.

Splits text written without spaces (Japanese, Chinese, Thai) into chunks
that are safe to wrap between, using a trained additive model over character
and Unicode-block features.

    >>> from phrasecut import Model, segment
    >>> model = Model.from_flat({"BB2:108120": 1500})
    >>> segment(model, "水と油")
    ['水と', '油']
"""
from .model import Model
from .scorer import Scorer
from .segmenter import (
    DEFAULT_THRESHOLD,
    Segmenter,
    parse,
    parse_with_threshold,
    segment,
    segment_spans,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "Model",
    "Scorer",
    "Segmenter",
    "parse",
    "parse_with_threshold",
    "segment",
    "segment_spans",
]

__version__ = "0.1.0"
