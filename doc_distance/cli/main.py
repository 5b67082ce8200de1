"""CLI: doc-distance FILE1 FILE2 - angle between two documents' word vectors."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ..config import load_config, validate_config
from ..core.document import analyze_pair
from ..types import DistanceResult, DocDistanceConfig, DocDistanceError, DocumentStats, TOKENIZER_POLICIES


def _format_stats(stats: DocumentStats) -> str:
    return (
        f"File {stats.source}: {stats.line_count} lines, "
        f"{stats.word_count} words, {stats.distinct_words} distinct words"
    )


def _stats_dict(stats: DocumentStats) -> dict:
    return {
        "path": stats.source,
        "lines": stats.line_count,
        "words": stats.word_count,
        "distinct_words": stats.distinct_words,
    }


def print_report(result: DistanceResult, config: DocDistanceConfig) -> None:
    """Write the per-document diagnostics and the angle to stdout."""
    precision = config.report.precision
    if config.report.format == "json":
        print(json.dumps({
            "documents": [_stats_dict(result.first), _stats_dict(result.second)],
            "inner_product": result.inner_product,
            "angle": round(result.angle, precision),
        }, indent=2))
        return

    print(_format_stats(result.first))
    print(_format_stats(result.second))
    print(f"The distance between the documents is: {result.angle:.{precision}f} (radians)")


def cmd_check_config(config: DocDistanceConfig) -> None:
    """Validate config and exit."""
    errors = validate_config(config)
    if errors:
        print("Config validation errors:")
        for err in errors:
            print(f"  - {err}")
        sys.exit(1)
    print("Config is valid.")
    print(f"  Tokenizer policy: {config.tokenizer.policy}")
    print(f"  Encoding: {config.encoding}")
    print(f"  Precision: {config.report.precision}")
    print(f"  Format: {config.report.format}")
    print(f"  Parallel: {config.parallel}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doc-distance",
        description="Angle between the word-frequency vectors of two text documents",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="Two text files to compare")
    parser.add_argument("--config", "-c", help="Path to config file")
    parser.add_argument("--precision", "-p", type=int, help="Decimal places for the angle")
    parser.add_argument("--policy", choices=TOKENIZER_POLICIES, help="Tokenizer policy")
    parser.add_argument("--encoding", help="Text encoding of the input files")
    parser.add_argument(
        "--parallel", action="store_true", default=None,
        help="Analyze both documents concurrently",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    parser.add_argument(
        "--check-config", action="store_true",
        help="Validate the config file and exit",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    if args.precision is not None:
        config.report.precision = args.precision
    if args.policy is not None:
        config.tokenizer.policy = args.policy
    if args.encoding is not None:
        config.encoding = args.encoding
    if args.parallel is not None:
        config.parallel = args.parallel
    if args.json:
        config.report.format = "json"

    if args.check_config:
        cmd_check_config(config)
        return

    if len(args.files) != 2:
        parser.error("expected exactly two files: doc-distance FILE1 FILE2")

    errors = validate_config(config)
    if errors:
        for err in errors:
            print(f"Config error: {err}", file=sys.stderr)
        sys.exit(1)

    try:
        result = analyze_pair(args.files[0], args.files[1], config)
    except DocDistanceError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print_report(result, config)


if __name__ == "__main__":
    main()
