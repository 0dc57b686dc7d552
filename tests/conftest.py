"""Shared fixtures for the nucleotide-cleaner tests."""

from pathlib import Path

import pytest

from nucleotide_cleaner.config import DEFAULT_CONFIG


@pytest.fixture
def default_config():
    return DEFAULT_CONFIG

@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config to a temp file and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
