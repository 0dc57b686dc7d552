"""Nucleotide sequence cleaning and quality metrics."""

from importlib.metadata import PackageNotFoundError, version

from .config import DEFAULT_CONFIG, CleaningConfig, ConfigError
from .pipeline import ProcessingResult, process_one_sequence

try:
    __version__ = version("nucleotide-cleaner")
except PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"

__all__ = [
    "CleaningConfig",
    "ConfigError",
    "DEFAULT_CONFIG",
    "ProcessingResult",
    "__version__",
    "process_one_sequence",
]
