"""Quality metrics for a cleaned nucleotide sequence."""

from __future__ import annotations

from dataclasses import dataclass

from .patterns import count_occurrences

CANONICAL_BASES = "ACGTN"


@dataclass(slots=True, frozen=True)
class SequenceMetrics:
    length: int
    n_fraction: float | None
    non_acgtn_fraction: float | None
    non_iupac_fraction: float | None
    gc_content: float | None


def _fraction(count: int, total: int) -> float | None:
    return count / total if total else None


def compute_metrics(sequence: str, iupac_dna: str) -> SequenceMetrics:
    """Return length, composition fractions and GC content for ``sequence``.

    GC content counts only unambiguous bases: N and other IUPAC codes are
    left out of both numerator and denominator.
    """
    length = len(sequence)
    n_count = sequence.count("N")
    non_acgtn = count_occurrences(sequence, f"[^{CANONICAL_BASES}]")
    non_iupac = count_occurrences(sequence, f"[^{iupac_dna}]")
    gc = sum(sequence.count(base) for base in "GC")
    acgt = gc + sequence.count("A") + sequence.count("T")
    return SequenceMetrics(
        length=length,
        n_fraction=_fraction(n_count, length),
        non_acgtn_fraction=_fraction(non_acgtn, length),
        non_iupac_fraction=_fraction(non_iupac, length),
        gc_content=_fraction(gc, acgt),
    )
