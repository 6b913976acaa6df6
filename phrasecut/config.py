"""Manages the loading and validation of segmentation settings.

This module defines the `Config` dataclass, a typed container for everything
the command-line tools need to pick a model and a decision rule, and the
`load_config` function that reads it from a YAML file. Paths in the YAML file
are resolved relative to the file's own directory, so a configuration can be
shipped next to the weight tables it points at.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import yaml

from .segmenter import DEFAULT_THRESHOLD

__all__ = ["Config", "default_config", "load_config"]


@dataclass
class Config:
    """
    A typed configuration object for the segmentation tools.

    Attributes:
        threshold: Score a boundary must exceed to become a split.
        language: Language code of the default model (``ja``, ``zh-hans``,
                  ``zh-hant`` or ``th``).
        normalize_scores: When true, decide splits with the model's base score
                          instead of ``threshold``. Requires a nested table.
        paths: Resolved file locations. ``models_dir`` holds one
               ``<language>.json`` table per language; ``model``, when set,
               names an explicit table and wins over the language lookup.
    """
    threshold: int = DEFAULT_THRESHOLD
    language: str = "ja"
    normalize_scores: bool = False
    paths: Dict[str, Optional[str]] = field(default_factory=dict)

    @property
    def effective_threshold(self) -> Optional[int]:
        """The threshold to hand to the segmenter; ``None`` for the normalised rule."""
        return None if self.normalize_scores else self.threshold


def default_config() -> Config:
    """Returns the built-in settings used when no configuration file is given."""
    return Config()


def _resolve(base: Path, value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    p = Path(value).expanduser()
    if not p.is_absolute():
        p = base / p
    return str(p)


def load_config(path: str = "config.yaml") -> Config:
    """
    Loads and validates a YAML configuration file.

    Args:
        path: The path to the configuration file.

    Returns:
        A fully populated `Config` object. Keys missing from the file keep
        their defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid YAML or holds a bad value.
        TypeError: If the root of the YAML document is not a mapping.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            y = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found at: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML file at {path}: {e}")

    # An empty file is a valid "use the defaults" configuration.
    if y is None:
        y = {}
    if not isinstance(y, dict):
        raise TypeError(f"Configuration file {path} must be a dictionary.")

    paths_yaml = y.get("paths") or {}
    if not isinstance(paths_yaml, dict):
        raise TypeError(f"'paths' in {path} must be a dictionary.")

    try:
        threshold = int(y.get("threshold", DEFAULT_THRESHOLD))
    except (TypeError, ValueError):
        raise ValueError(f"'threshold' in {path} must be an integer, got {y.get('threshold')!r}.")

    language = y.get("language", "ja")
    if not isinstance(language, str) or not language:
        raise ValueError(f"'language' in {path} must be a non-empty string, got {language!r}.")

    normalize_scores = y.get("normalize_scores", False)
    if not isinstance(normalize_scores, bool):
        raise ValueError(f"'normalize_scores' in {path} must be true or false, got {normalize_scores!r}.")

    base = Path(path).parent
    return Config(
        threshold=threshold,
        language=language,
        normalize_scores=normalize_scores,
        paths={
            "models_dir": _resolve(base, paths_yaml.get("models_dir")),
            "model": _resolve(base, paths_yaml.get("model")),
        },
    )
