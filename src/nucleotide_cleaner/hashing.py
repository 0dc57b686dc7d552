"""Content fingerprints for cleaned sequences."""

from __future__ import annotations

import hashlib


def fingerprint(sequence: str | None) -> str | None:
    """MD5 hex digest of ``sequence``, used as a dedup key. ``None`` when empty."""
    if not sequence:
        return None
    return hashlib.md5(sequence.encode("utf-8")).hexdigest()
