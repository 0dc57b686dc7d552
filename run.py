"""Demo runner: clean a handful of example sequences and print a summary."""

from __future__ import annotations

import argparse
from pathlib import Path
import textwrap

from nucleotide_cleaner.config import load_config_or_default
from nucleotide_cleaner.pipeline import ProcessingResult, process_one_sequence

EXAMPLES = [
    ("example-001", "acgtac gta  cgt"),
    ("gaps", "ACGT-ACGT..ACGT"),
    ("rna", "ACGTUACGTU"),
    ("junk-ends", "THISISMYGBIFSEQUENCEACGTACGTACGTNNNNNENDOFSEQUENCE"),
    ("n-runs", "ACGTACGTNNNNNNNNNNNNNNACGTACGTNNNNNNNNNACGTACGT"),
    ("no-anchor", "ACGTXXXXACGT"),
    ("unmerged", "ACGTACGTUNMERGEDACGTACGT"),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the cleaning pipeline on built-in examples without installing the CLI.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("config/config.yaml"),
        help="Path to configuration YAML file.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    config = load_config_or_default(args.config)
    for seq_id, raw in EXAMPLES:
        _print_result(process_one_sequence(raw, config, seq_id))
    return 0


def _print_result(result: ProcessingResult) -> None:
    lines = [
        f"[{result.seq_id}]",
        f"  Input:  {result.raw_sequence!r}",
        f"  Output: {result.sequence!r}",
        f"  Length: {result.sequence_length}",
        f"  GC:     {result.gc_content}",
        f"  Flags:  trimmed={result.ends_trimmed} "
        f"gaps/ws={result.gaps_or_whitespace_removed} "
        f"capped={result.n_nruns_capped} invalid={result.invalid}",
        f"  ID:     {result.nucleotide_sequence_id}",
    ]
    print(textwrap.dedent("\n".join(lines)))


if __name__ == "__main__":
    raise SystemExit(main())
