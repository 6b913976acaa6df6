import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

# Add project root to path for robust execution
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from phrasecut.config import default_config, load_config
from phrasecut.data_validation import validate
from phrasecut.io_utils import format_chunks, load_lines, load_model, save_chunks
from phrasecut.languages import load_language_model
from phrasecut.scorer import Scorer
from phrasecut.segmenter import Segmenter


def _status(message: str) -> None:
    print(message, file=sys.stderr)


def main(argv=None):
    """
    Command-line interface for the phrase segmenter.

    This script performs the following steps:
    1.  Loads the configuration file when one is given (otherwise the
        built-in defaults) and applies command-line overrides.
    2.  Loads the model, either an explicit weight table or the default
        table of the selected language.
    3.  Segments every line of the input file.
    4.  Writes the chunks joined by a delimiter, one line per input line, or
        a JSON document when ``--json`` is given.
    """
    parser = argparse.ArgumentParser(
        description="Split unsegmented text into line-breakable chunks.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to the UTF-8 text file to segment, one paragraph per line."
    )
    parser.add_argument(
        "--output",
        help="Path to write the result to. Defaults to standard output."
    )
    parser.add_argument(
        "--config",
        help="Path to a configuration YAML file."
    )
    parser.add_argument(
        "--lang",
        help="Language of the default model (ja, zh-hans, zh-hant, th)."
    )
    parser.add_argument(
        "--model",
        help="Path to a JSON weight table. Overrides --lang."
    )
    parser.add_argument(
        "--models-dir",
        help="Directory holding the <lang>.json default tables."
    )
    parser.add_argument(
        "--threshold",
        type=int,
        help="Score a boundary must exceed to become a split."
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Decide splits with the model's base score instead of the threshold."
    )
    parser.add_argument(
        "--delimiter",
        default="|",
        help="String placed between chunks in text output."
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write a JSON document with the chunks of every line."
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate that every line's chunks reproduce the line exactly."
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        # 1. Load configuration
        if args.config:
            _status(f"Loading configuration from {args.config}...")
            cfg = load_config(args.config)
        else:
            cfg = default_config()

        if args.threshold is not None:
            cfg.threshold = args.threshold
        if args.normalize:
            cfg.normalize_scores = True
        if args.lang:
            cfg.language = args.lang

        # 2. Load the model
        model_file = args.model or cfg.paths.get("model")
        if model_file:
            _status(f"Loading model weights from {model_file}...")
            model = load_model(model_file)
        else:
            _status(f"Loading default '{cfg.language}' model...")
            model = load_language_model(cfg.language, args.models_dir or cfg.paths.get("models_dir"))

        segmenter = Segmenter(Scorer(model), cfg.effective_threshold)

        # 3. Segment
        _status(f"Loading text from {args.input}...")
        lines = load_lines(args.input)

        chunked = [segmenter.chunks(line) for line in tqdm(lines, desc="Segmenting", unit="line", file=sys.stderr)]

        if args.check:
            failures = 0
            for idx, (line, chunks) in enumerate(zip(lines, chunked)):
                report = validate(line, chunks)
                if report["issue_count"]:
                    failures += 1
                    for issue in report["issues"]:
                        _status(f"  - line {idx + 1}: {issue['message']}")
            if failures:
                raise ValueError(f"Validation failed for {failures} line(s).")
            _status(f"Validated {len(lines)} line(s).")

        # 4. Write output
        if args.json:
            if args.output:
                output_path = Path(args.output)
                output_path.parent.mkdir(parents=True, exist_ok=True)
                save_chunks(str(output_path), lines, chunked)
            else:
                data = {"lines": [{"text": t, "chunks": c} for t, c in zip(lines, chunked)]}
                print(json.dumps(data, ensure_ascii=False, indent=2))
        else:
            content = "\n".join(format_chunks(c, args.delimiter) for c in chunked)
            if args.output:
                output_path = Path(args.output)
                output_path.parent.mkdir(parents=True, exist_ok=True)
                with open(output_path, "w", encoding="utf-8") as f:
                    if lines:
                        f.write(content + "\n")
            elif lines:
                print(content)

        if args.output:
            _status(f"\nSuccessfully wrote {len(lines)} segmented line(s) to {args.output}")

    except (FileNotFoundError, ValueError, TypeError, KeyError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
