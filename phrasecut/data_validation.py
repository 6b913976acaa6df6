from __future__ import annotations
from typing import Any, Dict, Iterator, List, Sequence

from .types import Span


def iter_spans(chunks: Sequence[str]) -> Iterator[Span]:
    """
    Yields the ``(start, end)`` character range of each chunk.

    The ranges are derived from the chunk lengths alone, so they describe
    where each chunk would sit if the chunks were laid end to end.
    """
    start = 0
    for chunk in chunks:
        end = start + len(chunk)
        yield (start, end)
        start = end


def validate(text: str, chunks: Sequence[str]) -> Dict[str, Any]:
    """
    Checks that a segmentation result is a faithful partition of ``text``.

    The following problems are reported:
    -   The chunks, joined in order, differ from the original text.
    -   A chunk is empty (the single empty chunk of an empty text is fine).
    -   A chunk does not match the text at its position.

    Args:
        text: The text that was segmented.
        chunks: The segmenter's output for ``text``.

    Returns:
        A dictionary with the total `issue_count` and a list of `issues`,
        each one a dictionary describing the problem.
    """
    issues: List[Dict[str, Any]] = []

    joined = "".join(chunks)
    if joined != text:
        issues.append({
            "type": "round_trip_error",
            "message": f"Chunks join to {len(joined)} characters but the text has {len(text)}.",
        })

    if not chunks:
        issues.append({"type": "no_chunks_error", "message": "Segmentation returned no chunks."})

    allow_empty = text == "" and len(chunks) == 1
    for idx, (start, end) in enumerate(iter_spans(chunks)):
        chunk = chunks[idx]
        if not chunk and not allow_empty:
            issues.append({
                "type": "empty_chunk_error",
                "idx": idx,
                "message": f"Chunk {idx} is empty.",
            })
        if text[start:end] != chunk:
            issues.append({
                "type": "misplaced_chunk_error",
                "idx": idx,
                "start": start,
                "end": end,
                "message": f"Chunk {idx} {chunk!r} does not match the text at [{start}:{end}].",
            })

    return {"issue_count": len(issues), "issues": issues}
