"""Single-sequence cleaning pipeline."""

from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass

from .anchors import trim_to_first_anchor_or_wipe, trim_to_last_anchor
from .config import DEFAULT_CONFIG, CleaningConfig
from .featurizer import compute_metrics
from .hashing import fingerprint
from .patterns import cap_runs, contains

LOGGER = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


@dataclass(slots=True, frozen=True)
class ProcessingResult:
    seq_id: str | None
    raw_sequence: str
    sequence: str | None
    sequence_length: int
    non_iupac_fraction: float | None
    non_acgtn_fraction: float | None
    n_fraction: float | None
    n_nruns_capped: int
    gc_content: float | None
    natural_language_detected: bool
    ends_trimmed: bool
    gaps_or_whitespace_removed: bool
    nucleotide_sequence_id: str | None
    invalid: bool

    def to_dict(self) -> dict:
        return asdict(self)


def process_one_sequence(
    raw_sequence: str | None,
    config: CleaningConfig = DEFAULT_CONFIG,
    seq_id: str | None = None,
) -> ProcessingResult:
    """Clean one raw DNA/RNA string and report quality metrics.

    Stages run in a fixed order, each reading only the previous output:

    A. drop whitespace, uppercase
    B. flag natural-language contamination
    C. remove alignment gaps
    D. U -> T
    E. trim to the first and last anchor runs (wipe if there are none)
    F. cap long N runs

    Problems with the sequence never raise. A record with characters outside
    the IUPAC alphabet, or with a contamination marker, is returned with
    ``invalid=True`` and no ``sequence``/``nucleotide_sequence_id``; its
    metrics are still filled in.
    """
    raw = raw_sequence or ""

    # A
    raw_has_whitespace = _WHITESPACE.search(raw) is not None
    normalized = _WHITESPACE.sub("", raw).upper()

    # B
    natural_language_detected = contains(normalized, config.natural_language_regex)

    # C
    has_gaps = contains(normalized, config.gap_regex)
    degapped = re.sub(config.gap_regex, "", normalized)
    gaps_or_whitespace_removed = raw_has_whitespace or has_gaps

    # D
    dna = degapped.replace("U", "T")

    # E
    first = trim_to_first_anchor_or_wipe(dna, config.anchor_chars, config.anchor_minrun)
    last = trim_to_last_anchor(first.sequence, config.anchor_chars, config.anchor_minrun)
    ends_trimmed = first.trimmed or last.trimmed
    if dna and not first.sequence:
        LOGGER.debug("No anchor run in %s, sequence wiped.", seq_id or "<unnamed>")

    # F
    cleaned, n_nruns_capped = cap_runs(last.sequence, config.nrun_cap_from, config.nrun_cap_to)

    metrics = compute_metrics(cleaned, config.iupac_dna)
    invalid = bool(metrics.non_iupac_fraction) or natural_language_detected
    if invalid:
        LOGGER.debug(
            "Sequence %s flagged invalid (non_iupac_fraction=%s, natural_language=%s).",
            seq_id or "<unnamed>",
            metrics.non_iupac_fraction,
            natural_language_detected,
        )

    return ProcessingResult(
        seq_id=seq_id,
        raw_sequence=raw,
        sequence=None if invalid else cleaned,
        sequence_length=metrics.length,
        non_iupac_fraction=metrics.non_iupac_fraction,
        non_acgtn_fraction=metrics.non_acgtn_fraction,
        n_fraction=metrics.n_fraction,
        n_nruns_capped=n_nruns_capped,
        gc_content=metrics.gc_content,
        natural_language_detected=natural_language_detected,
        ends_trimmed=ends_trimmed,
        gaps_or_whitespace_removed=gaps_or_whitespace_removed,
        nucleotide_sequence_id=None if invalid else fingerprint(cleaned),
        invalid=invalid,
    )
