"""Cleaning configuration: defaults, validation and YAML loading."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

LOGGER = logging.getLogger(__name__)

INT_FIELDS = ("anchor_minrun", "nrun_cap_from", "nrun_cap_to")
CHAR_CLASS_FIELDS = ("anchor_chars", "anchor_strict", "iupac_rna", "iupac_dna")
REGEX_FIELDS = ("gap_regex", "natural_language_regex")


class ConfigError(ValueError):
    """Raised when a configuration value cannot drive the pipeline."""


@dataclass(slots=True, frozen=True)
class CleaningConfig:
    anchor_chars: str = "ACGTU"
    anchor_minrun: int = 8
    anchor_strict: str = "ACGTU"
    gap_regex: str = r"[-\.]"
    natural_language_regex: str = "UNMERGED"
    iupac_rna: str = "ACGTURYSWKMBDHVN"
    iupac_dna: str = "ACGTRYSWKMBDHVN"
    nrun_cap_from: int = 6
    nrun_cap_to: int = 5

    def __post_init__(self) -> None:
        for name in INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"`{name}` must be an integer, got {value!r}")
        if self.anchor_minrun < 1:
            raise ConfigError("`anchor_minrun` must be at least 1.")
        if self.nrun_cap_from < 1:
            raise ConfigError("`nrun_cap_from` must be at least 1.")
        if not 0 <= self.nrun_cap_to <= self.nrun_cap_from:
            raise ConfigError("`nrun_cap_to` must be between 0 and `nrun_cap_from`.")

        for name in CHAR_CLASS_FIELDS + REGEX_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigError(f"`{name}` must be a string, got {value!r}")
        for name in CHAR_CLASS_FIELDS:
            _check_char_class(name, getattr(self, name))
        for name in REGEX_FIELDS:
            _check_regex(name, getattr(self, name))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "CleaningConfig":
        """Build a config from loose key/value pairs, defaulting missing keys."""
        known = {f.name for f in fields(cls)}
        for key in values:
            if key not in known:
                LOGGER.debug("Ignoring unknown configuration key: %s", key)
        kwargs: dict[str, Any] = {}
        for name in known:
            value = values.get(name)
            if value is None:
                continue
            kwargs[name] = _coerce(name, value)
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _coerce(name: str, value: Any) -> Any:
    if not isinstance(value, (str, int, float)):
        raise ConfigError(
            f"`{name}` must be a single scalar value, got {type(value).__name__} {value!r}; "
            "quote patterns such as '[-\\.]'."
        )
    if name in INT_FIELDS:
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError as exc:
                raise ConfigError(f"`{name}` must be an integer, got {value!r}") from exc
        return value
    return str(value)


def _check_char_class(name: str, chars: str) -> None:
    if not chars:
        raise ConfigError(f"`{name}` must not be empty.")
    # "]" would close the class early and silently change its meaning.
    if "]" in chars.replace("\\]", ""):
        raise ConfigError(f"`{name}` contains an unescaped ']': {chars!r}")
    for pattern in (f"[{chars}]", f"[^{chars}]"):
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"`{name}` is not a valid character set: {chars!r} ({exc})") from exc


def _check_regex(name: str, pattern: str) -> None:
    if not pattern:
        raise ConfigError(f"`{name}` must not be empty.")
    try:
        re.compile(pattern)
    except re.error as exc:
        raise ConfigError(f"`{name}` is not a valid regular expression: {pattern!r} ({exc})") from exc


DEFAULT_CONFIG = CleaningConfig()


def parse_config_text(text: str) -> CleaningConfig:
    """Parse ``key: value`` YAML text into a validated config."""
    payload = yaml.safe_load(text) or {}
    if not isinstance(payload, dict):
        raise ConfigError("Configuration must be a mapping of `key: value` lines.")
    return CleaningConfig.from_mapping(payload)


def load_config(path: Path) -> CleaningConfig:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return parse_config_text(handle.read())


def load_config_or_default(path: Path | None) -> CleaningConfig:
    """Load ``path``, falling back to the built-in defaults if it cannot be read.

    Invalid values (bad bounds, patterns that do not compile) still raise
    :class:`ConfigError`.
    """
    if path is None:
        return DEFAULT_CONFIG
    try:
        return load_config(path)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        LOGGER.warning("Could not load config %s (%s), using built-in defaults.", path, exc)
        return DEFAULT_CONFIG
