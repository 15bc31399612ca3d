"""Script to analyze text from an argument, a file, or stdin."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
import time

try:
    from workspace_insights.analysis import analyze
    from workspace_insights.config import KEY_PHRASE_LIMIT, READING_WORDS_PER_MINUTE
    from workspace_insights.ingestion import load_document
    from workspace_insights.telemetry import configure_logging, log_event
except ModuleNotFoundError:
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root / "src"))
    from workspace_insights.analysis import analyze  # type: ignore[reportMissingImports]
    from workspace_insights.config import (  # type: ignore[reportMissingImports]
        KEY_PHRASE_LIMIT,
        READING_WORDS_PER_MINUTE,
    )
    from workspace_insights.ingestion import load_document  # type: ignore[reportMissingImports]
    from workspace_insights.telemetry import (  # type: ignore[reportMissingImports]
        configure_logging,
        log_event,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Analyze text metrics")
    parser.add_argument(
        "text",
        type=str,
        nargs="?",
        default=None,
        help="Text to analyze (reads stdin when omitted and --path is not set)",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Analyze a .txt/.md/.html/.docx/.pdf file instead",
    )
    parser.add_argument(
        "--wpm",
        type=int,
        default=READING_WORDS_PER_MINUTE,
        help="Reading speed in words per minute",
    )
    parser.add_argument(
        "--key-phrases",
        type=int,
        default=KEY_PHRASE_LIMIT,
        help="Maximum number of key phrases to report",
    )
    parser.add_argument(
        "--json", action="store_true", help="Print metrics as JSON"
    )
    return parser.parse_args()


def read_input(args: argparse.Namespace) -> tuple[str, str]:
    if args.path is not None:
        document, report = load_document(args.path)
        if document is None:
            raise SystemExit(f"Could not load {args.path}: {report.skip_reason}")
        return document.text, document.source_path
    if args.text is not None:
        return args.text, "argument"
    return sys.stdin.read(), "stdin"


def main() -> None:
    args = parse_args()
    logger = configure_logging()
    text, source = read_input(args)
    start = time.perf_counter()
    metrics = analyze(text, words_per_minute=args.wpm, key_phrase_limit=args.key_phrases)
    elapsed_ms = (time.perf_counter() - start) * 1000
    log_event(
        logger,
        "analyze",
        source=source,
        word_count=metrics.word_count,
        sentiment=metrics.sentiment.value,
        readability_score=metrics.readability_score,
        elapsed_ms=elapsed_ms,
    )
    if args.json:
        print(json.dumps(metrics.to_dict(), indent=2))
        return
    print(f"Words: {metrics.word_count}")
    print(f"Characters: {metrics.char_count} ({metrics.char_count_no_spaces} without spaces)")
    print(f"Sentences: {metrics.sentence_count}")
    print(f"Paragraphs: {metrics.paragraph_count}")
    print(f"Reading time: {metrics.reading_time_minutes} min")
    print(
        f"Readability: {metrics.readability_score} ({metrics.readability_level.value})"
    )
    print(f"Sentiment: {metrics.sentiment.value}")
    print("Key phrases: " + (", ".join(metrics.key_phrases) or "-"))


if __name__ == "__main__":
    main()
