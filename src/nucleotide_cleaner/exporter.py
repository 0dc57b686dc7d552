"""Render and write cleaning results as JSON, JSONL or CSV."""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Iterable, List, Sequence

import pandas as pd

from .pipeline import ProcessingResult

RESULT_COLUMNS = [f.name for f in fields(ProcessingResult)]
FORMATS = ("json", "jsonl", "csv")


def results_to_rows(results: Iterable[ProcessingResult]) -> List[dict]:
    return [result.to_dict() for result in results]


def results_frame(results: Iterable[ProcessingResult]) -> pd.DataFrame:
    """One row per result, columns in record order even when there are no results."""
    return pd.DataFrame(results_to_rows(results), columns=RESULT_COLUMNS)


def render_results(results: Sequence[ProcessingResult], fmt: str) -> str:
    if fmt == "csv":
        return results_frame(results).to_csv(index=False)
    rows = results_to_rows(results)
    if fmt == "jsonl":
        return "".join(json.dumps(row, ensure_ascii=False) + "\n" for row in rows)
    if fmt == "json":
        return json.dumps(rows, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unknown output format: {fmt!r} (expected one of {', '.join(FORMATS)})")


def write_results(results: Sequence[ProcessingResult], path: Path, fmt: str) -> Path:
    text = render_results(results, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
