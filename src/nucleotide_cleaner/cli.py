"""Command line interface for nucleotide-cleaner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigError, load_config_or_default
from .exporter import FORMATS, render_results, write_results
from .pipeline import process_one_sequence

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqclean",
        description="Clean raw DNA/RNA strings and report quality metrics.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    clean_parser = subparsers.add_parser(
        "clean",
        help="Clean one or more raw sequences.",
    )
    clean_parser.add_argument(
        "sequences",
        nargs="+",
        help="Raw sequence strings (quote them if they contain spaces).",
    )
    clean_parser.add_argument(
        "--seq-id",
        action="append",
        default=None,
        help="Identifier for the sequence at the same position. Repeat once per sequence.",
    )
    clean_parser.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML configuration file (built-in defaults when omitted or unreadable).",
    )
    clean_parser.add_argument(
        "--format",
        choices=FORMATS,
        default="json",
        help="Output format.",
    )
    clean_parser.add_argument(
        "--out",
        type=Path,
        help="Write results to this file instead of stdout.",
    )

    config_parser = subparsers.add_parser(
        "show-config",
        help="Print the effective configuration.",
    )
    config_parser.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML configuration file.",
    )
    return parser


def _run_clean_command(args: argparse.Namespace) -> int:
    config = load_config_or_default(args.config)
    seq_ids = args.seq_id or [None] * len(args.sequences)
    results = [
        process_one_sequence(raw, config, seq_id)
        for raw, seq_id in zip(args.sequences, seq_ids)
    ]
    invalid_count = sum(1 for result in results if result.invalid)
    LOGGER.info("Processed %s sequences, %s invalid.", len(results), invalid_count)

    if args.out is not None:
        path = write_results(results, args.out, args.format)
        LOGGER.info("Results written to %s", path)
    else:
        sys.stdout.write(render_results(results, args.format))
    return 0


def _run_show_config_command(args: argparse.Namespace) -> int:
    config = load_config_or_default(args.config)
    for key, value in config.to_dict().items():
        print(f"{key}: {value}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "clean" and args.seq_id and len(args.seq_id) != len(args.sequences):
        parser.error(
            f"got {len(args.seq_id)} --seq-id values for {len(args.sequences)} sequences"
        )
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )
    try:
        if args.command == "clean":
            return _run_clean_command(args)
        if args.command == "show-config":
            return _run_show_config_command(args)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    parser.print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
