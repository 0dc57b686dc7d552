"""Regex counting and run capping helpers."""

from __future__ import annotations

import re


def count_occurrences(text: str | None, pattern: str) -> int:
    """Return the number of non-overlapping matches of ``pattern`` in ``text``."""
    if not text:
        return 0
    return sum(1 for _ in re.finditer(pattern, text))


def contains(text: str | None, pattern: str) -> bool:
    if not text:
        return False
    return re.search(pattern, text) is not None


def cap_runs(text: str | None, min_len: int, cap_len: int, char: str = "N") -> tuple[str, int]:
    """Shorten every run of ``char`` of length >= ``min_len`` to ``cap_len`` copies.

    Returns the capped string and the number of runs that were replaced.
    """
    if not text:
        return "", 0
    pattern = f"{re.escape(char)}{{{min_len},}}"
    return re.subn(pattern, char * cap_len, text)
