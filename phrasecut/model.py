"""The immutable feature-weight table consumed by the scorer.

Trained tables come in two shapes:

-   **flat**: ``{"UW4:あ": 112, "BB2:108120": 1500, ...}``. Scores are
    compared against a configurable threshold (1000 by default).
-   **nested**: ``{"UW4": {"あ": 112}, "BB2": {"108120": 1500}, ...}``. The
    family prefix and the value are joined with ``":"`` to form the same
    flat keys, and the negated sum of every weight is kept as
    ``base_score`` so that a boundary can also be decided by the sign of
    ``2 * score + base_score``.

Once built, a :class:`Model` is never mutated and can be shared by any
number of concurrent segmentations.
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Optional

logger = logging.getLogger(__name__)

__all__ = ["Model"]


def _check_weight(key: Any, weight: Any) -> int:
    if not isinstance(key, str):
        raise TypeError(f"Feature key {key!r} is not a string.")
    # bool is an int subclass but never a trained weight.
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Weight for feature {key!r} must be an integer, got {type(weight).__name__}.")
    return weight


class Model(Mapping):
    """
    A read-only mapping from feature key to integer weight.

    Attributes:
        base_score: The negated sum of all weights for tables built from the
                    nested format, otherwise ``None``.
    """

    __slots__ = ("_weights", "_base_score")

    def __init__(self, weights: Mapping, base_score: Optional[int] = None):
        self._weights: Dict[str, int] = {k: _check_weight(k, v) for k, v in weights.items()}
        self._base_score = base_score

    @property
    def base_score(self) -> Optional[int]:
        return self._base_score

    @classmethod
    def from_flat(cls, table: Mapping) -> "Model":
        """Builds a model from a flat ``{"UW4:あ": weight}`` table."""
        if not isinstance(table, Mapping):
            raise TypeError(f"Model table must be a mapping, got {type(table).__name__}.")
        model = cls(table)
        logger.debug("Built flat model with %d features", len(model))
        return model

    @classmethod
    def from_nested(cls, table: Mapping) -> "Model":
        """
        Builds a model from a nested ``{family: {value: weight}}`` table.

        Args:
            table: Mapping from feature family (e.g. ``"UW4"``) to a mapping
                   of window value to weight.

        Returns:
            A model whose keys are ``"<family>:<value>"`` and whose
            ``base_score`` is the negated sum of every weight.

        Raises:
            TypeError: If the root or any family is not a mapping, or a
                       weight is not an integer.
        """
        if not isinstance(table, Mapping):
            raise TypeError(f"Model table must be a mapping, got {type(table).__name__}.")

        flat: Dict[str, int] = {}
        for family, values in table.items():
            if not isinstance(values, Mapping):
                raise TypeError(f"Feature family {family!r} must map values to weights.")
            for value, weight in values.items():
                key = f"{family}:{value}"
                flat[key] = _check_weight(key, weight)

        model = cls(flat, base_score=-sum(flat.values()))
        logger.debug("Built nested model with %d features (base score %d)", len(model), model.base_score)
        return model

    @classmethod
    def from_dict(cls, table: Mapping) -> "Model":
        """Builds a model from either table shape, detected from its values."""
        if not isinstance(table, Mapping):
            raise TypeError(f"Model table must be a mapping, got {type(table).__name__}.")
        if table and all(isinstance(v, Mapping) for v in table.values()):
            return cls.from_nested(table)
        return cls.from_flat(table)

    def __getitem__(self, key: str) -> int:
        return self._weights[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __contains__(self, key: object) -> bool:
        return key in self._weights

    def get(self, key: str, default: int = 0) -> int:
        return self._weights.get(key, default)

    def to_dict(self) -> Dict[str, int]:
        """Returns a mutable copy of the flat table."""
        return dict(self._weights)

    def __eq__(self, other: object) -> bool:
        # Two models only decide alike if their base scores match too.
        if isinstance(other, Model):
            return self._weights == other._weights and self._base_score == other._base_score
        return super().__eq__(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Model(features={len(self)}, base_score={self.base_score})"
