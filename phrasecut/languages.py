"""Per-language default models.

Each supported language has one trained table, stored as ``<code>.json`` in
a models directory. The directory is taken, in order, from the explicit
``models_dir`` argument or the ``PHRASECUT_MODELS_DIR`` environment
variable. Loaded models are cached for the lifetime of the process, so every
caller asking for the same language receives the very same `Model` object.
"""
from __future__ import annotations
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from .io_utils import load_model
from .model import Model

logger = logging.getLogger(__name__)

__all__ = [
    "MODELS_DIR_ENV",
    "SUPPORTED_LANGUAGES",
    "model_path",
    "load_language_model",
    "default_japanese_model",
    "default_simplified_chinese_model",
    "default_traditional_chinese_model",
    "default_thai_model",
]

MODELS_DIR_ENV = "PHRASECUT_MODELS_DIR"

SUPPORTED_LANGUAGES = ("ja", "zh-hans", "zh-hant", "th")


def model_path(language: str, models_dir: Optional[str] = None) -> Path:
    """
    Returns the location of the table for ``language``.

    Raises:
        ValueError: If the language is not supported or no models directory
                    is configured.
    """
    code = language.strip().lower()
    if code not in SUPPORTED_LANGUAGES:
        raise ValueError(
            f"Unsupported language '{language}'. Expected one of: {', '.join(SUPPORTED_LANGUAGES)}"
        )
    directory = models_dir or os.environ.get(MODELS_DIR_ENV)
    if not directory:
        raise ValueError(
            f"No models directory configured. Pass models_dir or set {MODELS_DIR_ENV}."
        )
    return Path(directory).expanduser().resolve() / f"{code}.json"


@lru_cache(maxsize=None)
def _load_cached(path: str) -> Model:
    logger.debug("Loading default model from %s", path)
    return load_model(path)


def load_language_model(language: str, models_dir: Optional[str] = None) -> Model:
    """Loads (once per process) the default model for ``language``."""
    return _load_cached(str(model_path(language, models_dir)))


def default_japanese_model(models_dir: Optional[str] = None) -> Model:
    return load_language_model("ja", models_dir)


def default_simplified_chinese_model(models_dir: Optional[str] = None) -> Model:
    return load_language_model("zh-hans", models_dir)


def default_traditional_chinese_model(models_dir: Optional[str] = None) -> Model:
    return load_language_model("zh-hant", models_dir)


def default_thai_model(models_dir: Optional[str] = None) -> Model:
    return load_language_model("th", models_dir)
