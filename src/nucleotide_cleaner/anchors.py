"""Anchor-based end trimming.

An anchor run is a maximal stretch of characters from the anchor alphabet
that is at least ``min_run`` long. The leading pass keeps everything from the
first anchor run onwards and wipes the sequence when there is none; the
trailing pass keeps everything up to the end of the last anchor run and
leaves the input alone when there is none. The trailing pass only ever sees
output of the leading pass, so in the pipeline it always finds a run.
"""

from __future__ import annotations

import re
from typing import NamedTuple


class TrimResult(NamedTuple):
    sequence: str
    trimmed: bool


def _anchor_regex(anchor_chars: str, min_run: int) -> re.Pattern[str]:
    return re.compile(f"[{anchor_chars}]{{{min_run},}}")


def trim_to_first_anchor_or_wipe(sequence: str | None, anchor_chars: str, min_run: int) -> TrimResult:
    if not sequence:
        return TrimResult("", False)
    match = _anchor_regex(anchor_chars, min_run).search(sequence)
    if match is None:
        return TrimResult("", True)
    start = match.start()
    return TrimResult(sequence[start:], start > 0)


def trim_to_last_anchor(sequence: str | None, anchor_chars: str, min_run: int) -> TrimResult:
    if not sequence:
        return TrimResult("", False)
    last = None
    for last in _anchor_regex(anchor_chars, min_run).finditer(sequence):
        pass
    if last is None:
        return TrimResult(sequence, False)
    end = last.end()
    return TrimResult(sequence[:end], end < len(sequence))
