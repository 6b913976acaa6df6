"""Test configuration helpers for ensuring local imports resolve."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    project_root = Path(__file__).resolve().parents[1]
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


_ensure_project_root_on_path()

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture
def models_dir() -> Path:
    return FIXTURES / "models"


@pytest.fixture
def ja_model(models_dir):
    # Hand-built table: a few block-pair and word weights chosen so the
    # documented example sentences split as expected. It checks the
    # scoring arithmetic only and is not an excerpt of a trained model.
    from phrasecut.io_utils import load_model

    return load_model(str(models_dir / "ja.json"))


@pytest.fixture
def zh_hans_model(models_dir):
    # Hand-built like ja_model, not a trained table.
    from phrasecut.io_utils import load_model

    return load_model(str(models_dir / "zh-hans.json"))


@pytest.fixture(autouse=True)
def _clear_model_cache():
    from phrasecut import languages

    languages._load_cached.cache_clear()
    yield
    languages._load_cached.cache_clear()
