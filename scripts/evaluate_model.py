"""Command-line script for evaluating a weight table against a reference corpus.

The reference file holds one sentence per line with its gold chunks separated
by a delimiter (``▁`` by default), e.g. ``今日は▁とても▁天気です。``. Each line is
re-joined, segmented with the model and compared with the gold chunks:

-   **Boundary metrics**: precision, recall and F1 of the predicted split
    positions against the gold split positions, pooled over the corpus.
-   **Line accuracy**: the share of lines whose chunks match exactly.

Disagreeing lines can be written to a CSV file for error analysis.
"""
import argparse
import csv
import json
import sys
from pathlib import Path
from typing import Dict, List, Sequence, Set

from tqdm import tqdm

# Add project root to path to allow for package imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasecut.io_utils import load_lines, load_model
from phrasecut.scorer import Scorer
from phrasecut.segmenter import DEFAULT_THRESHOLD, Segmenter


def boundaries(chunks: Sequence[str]) -> Set[int]:
    """Returns the character offsets at which ``chunks`` split their text."""
    out = set()
    pos = 0
    for chunk in chunks[:-1]:
        pos += len(chunk)
        out.add(pos)
    return out


def evaluate(segmenter: Segmenter, references: Sequence[List[str]]) -> Dict:
    """
    Compares the segmenter's output with gold chunkings.

    Args:
        segmenter: The configured segmenter.
        references: Gold chunk lists, one per sentence.

    Returns:
        A dictionary with the pooled ``scores`` and the list of
        ``disagreements``.
    """
    tp = fp = fn = exact = 0
    disagreements = []
    for idx, gold in enumerate(tqdm(references, desc="Evaluating", unit="line", file=sys.stderr)):
        text = "".join(gold)
        predicted = segmenter.chunks(text)
        gold_b, pred_b = boundaries(gold), boundaries(predicted)
        tp += len(gold_b & pred_b)
        fp += len(pred_b - gold_b)
        fn += len(gold_b - pred_b)
        if gold_b == pred_b:
            exact += 1
        else:
            disagreements.append({
                "index": idx,
                "text": text,
                "generated": "|".join(predicted),
                "reference": "|".join(gold),
            })

    precision = tp / (tp + fp) if tp + fp else 0.0
    recall = tp / (tp + fn) if tp + fn else 0.0
    f1 = 2 * precision * recall / (precision + recall) if precision + recall else 0.0
    return {
        "scores": {
            "precision": round(precision, 4),
            "recall": round(recall, 4),
            "f1": round(f1, 4),
            "line_accuracy": round(exact / len(references), 4) if references else 0.0,
            "lines": len(references),
        },
        "disagreements": disagreements,
    }


def main(argv=None):
    """Entry point for the command-line model evaluation script."""
    parser = argparse.ArgumentParser(
        description="Evaluate phrase segmentation against a reference corpus.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--model", required=True, help="Path to the JSON weight table to evaluate.")
    parser.add_argument("--reference", required=True, help="Path to the reference file, gold chunks separated by --separator.")
    parser.add_argument("--separator", default="▁", help="Chunk separator used in the reference file.")
    parser.add_argument("--threshold", type=int, default=DEFAULT_THRESHOLD, help="Split threshold.")
    parser.add_argument("--normalize", action="store_true", help="Use the model's base score instead of the threshold.")
    parser.add_argument("--disagreements-out", help="Optional: Path to write a detailed disagreements CSV file.")
    args = parser.parse_args(argv)

    try:
        print("Loading files...", file=sys.stderr)
        model = load_model(args.model)
        references = [line.split(args.separator) for line in load_lines(args.reference) if line.strip()]

        segmenter = Segmenter(Scorer(model), None if args.normalize else args.threshold)
        report = evaluate(segmenter, references)

        print("\n--- Comparison Metrics (vs. Reference) ---")
        print(json.dumps(report["scores"], indent=2))

        if args.disagreements_out and report["disagreements"]:
            Path(args.disagreements_out).parent.mkdir(parents=True, exist_ok=True)
            print(f"\nWriting {len(report['disagreements'])} disagreements to {args.disagreements_out}...", file=sys.stderr)
            with open(args.disagreements_out, "w", newline="", encoding="utf-8") as f:
                writer = csv.DictWriter(f, fieldnames=["index", "text", "generated", "reference"])
                writer.writeheader()
                writer.writerows(report["disagreements"])

    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
