"""Command-line validator: compare a source JSON file with its translation.

Usage::

    bilingual-json-diff original.json translated.json
    bilingual-json-diff --original en.json --translated bilingual.json --seps "|,/"
    bilingual-json-diff en.json zh.json --mode structural --diff

Exit status:
    0  validation passed (warnings allowed)
    1  at least one missing / type mismatch / value mismatch error
    2  bad arguments, unreadable file, invalid JSON, or oversized document
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from bilingual_json_diff.api import compare_strict, diagnose, line_diff
from bilingual_json_diff.config import DiagnosticsConfig
from bilingual_json_diff.errors import ResourceExceededError
from bilingual_json_diff.linediff import render_side_by_side
from bilingual_json_diff.result import DiagnosticsReport

__all__ = ["build_parser", "main", "parse_separators"]

logger = logging.getLogger(__name__)

# Always stripped, whatever --seps says.
FULLWIDTH_PIPE = "｜"

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bilingual-json-diff",
        description="Check that a translated JSON document matches its source.",
    )
    parser.add_argument("original", nargs="?", help="Source JSON file")
    parser.add_argument("translated", nargs="?", help="Translated JSON file")
    parser.add_argument("--original", dest="original_option", metavar="PATH")
    parser.add_argument("--translated", dest="translated_option", metavar="PATH")
    parser.add_argument(
        "--seps",
        default="|",
        help='Comma-separated separator glyphs to strip (default "|"; "｜" is always added)',
    )
    parser.add_argument(
        "--mode",
        choices=("strict", "structural"),
        default="strict",
        help="strict compares values after normalization; structural compares paths only",
    )
    parser.add_argument(
        "--normalize-source",
        action="store_true",
        help="Also normalize source strings before comparing values",
    )
    parser.add_argument(
        "--diff",
        action="store_true",
        help="Print a side-by-side line diff after the diagnostics",
    )
    parser.add_argument(
        "--width", type=_positive_int, default=60, help="Column width for --diff"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_separators(raw: str) -> tuple[str, ...]:
    """Split a ``--seps`` value; the fullwidth pipe is always included."""
    separators = [s.strip() for s in raw.split(",")]
    separators = [s for s in separators if s]
    if FULLWIDTH_PIPE not in separators:
        separators.append(FULLWIDTH_PIPE)
    return tuple(separators)


def _read_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _print_report(report: DiagnosticsReport) -> None:
    for warning in report.warnings:
        print(f"Warning: {warning.message}")
    for error in report.errors:
        print(f"Error: {error.message}")
    if report.ok:
        print(f"Validation passed with {len(report.warnings)} warning(s).")
    else:
        print(
            f"Validation failed: {len(report.errors)} error(s), "
            f"{len(report.warnings)} warning(s)."
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the validator and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    original_path = args.original_option or args.original
    translated_path = args.translated_option or args.translated
    if not original_path or not translated_path:
        parser.print_usage(sys.stderr)
        print("error: both an original and a translated file are required", file=sys.stderr)
        return EXIT_USAGE

    config = DiagnosticsConfig(
        separators=parse_separators(args.seps),
        normalize_source=args.normalize_source,
    )

    try:
        original = _read_json(original_path)
        translated = _read_json(translated_path)
    except (OSError, ValueError) as exc:
        print(f"Read/Parse error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logger.debug("Comparing %s against %s (%s mode)", original_path, translated_path, args.mode)
    try:
        if args.mode == "structural":
            report = diagnose(original, translated, config=config)
        else:
            report = compare_strict(original, translated, config=config)
        _print_report(report)
        if args.diff:
            diff = line_diff(
                original, translated, normalize_translation=True, config=config
            )
            print(render_side_by_side(diff, width=args.width))
    except ResourceExceededError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    return EXIT_OK if report.ok else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
