"""Provides utility functions for loading and saving models, text and chunks.

Weight tables are JSON documents in either the flat or the nested shape
accepted by :meth:`phrasecut.model.Model.from_dict`. Segmentation results
are stored as ``{"lines": [{"text": ..., "chunks": [...]}, ...]}`` so that a
file can be re-validated later without re-running the model.
"""
import json
import logging
from typing import List, Sequence

from .model import Model

logger = logging.getLogger(__name__)

__all__ = ["load_model", "save_model", "load_lines", "save_chunks", "format_chunks"]


def load_model(path: str) -> Model:
    """
    Loads a trained weight table from a JSON file.

    Args:
        path: The path to the JSON weight table.

    Returns:
        The immutable `Model`.

    Raises:
        FileNotFoundError: If the file at the specified path does not exist.
        ValueError: If the file is not valid JSON.
        TypeError: If the JSON structure is not a weight table.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Model file not found at: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Error decoding JSON from {path}: {e}")

    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object of feature weights in {path}")

    try:
        model = Model.from_dict(data)
    except TypeError as e:
        raise TypeError(f"Invalid weight table in {path}: {e}")

    logger.debug("Loaded %d features from %s", len(model), path)
    return model


def save_model(path: str, model: Model) -> None:
    """Writes ``model`` as a flat JSON weight table."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(model.to_dict(), f, ensure_ascii=False, indent=2)


def load_lines(path: str) -> List[str]:
    """
    Reads a UTF-8 text file as a list of lines without their line endings.

    Only newlines end a line; U+2028 and the other characters that
    ``str.splitlines`` treats as boundaries stay inside the line.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid UTF-8.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Input file not found at: {path}")
    except UnicodeDecodeError as e:
        raise ValueError(f"Input file {path} is not valid UTF-8: {e}")

    # Text mode has already folded "\r\n" and "\r" into "\n".
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def format_chunks(chunks: Sequence[str], delimiter: str = "|") -> str:
    return delimiter.join(chunks)


def save_chunks(path: str, lines: Sequence[str], chunked: Sequence[Sequence[str]]) -> None:
    """
    Saves segmented lines to a JSON file.

    Args:
        path: The destination path for the output JSON file.
        lines: The original lines.
        chunked: The chunks of each line, in the same order as ``lines``.
    """
    if len(lines) != len(chunked):
        raise ValueError(f"Got {len(lines)} lines but {len(chunked)} chunk lists.")
    data = {"lines": [{"text": t, "chunks": list(c)} for t, c in zip(lines, chunked)]}

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
