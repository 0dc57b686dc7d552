import dataclasses
import logging
from pathlib import Path

import pytest

from nucleotide_cleaner.config import (
    DEFAULT_CONFIG,
    CleaningConfig,
    ConfigError,
    load_config,
    load_config_or_default,
    parse_config_text,
)
from nucleotide_cleaner.pipeline import process_one_sequence

REPO_CONFIG = Path(__file__).resolve().parents[1] / "config" / "config.yaml"


def test_defaults():
    assert DEFAULT_CONFIG.anchor_chars == "ACGTU"
    assert DEFAULT_CONFIG.anchor_minrun == 8
    assert DEFAULT_CONFIG.gap_regex == r"[-\.]"
    assert DEFAULT_CONFIG.natural_language_regex == "UNMERGED"
    assert DEFAULT_CONFIG.iupac_dna == "ACGTRYSWKMBDHVN"
    assert DEFAULT_CONFIG.iupac_rna == "ACGTURYSWKMBDHVN"
    assert DEFAULT_CONFIG.nrun_cap_from == 6
    assert DEFAULT_CONFIG.nrun_cap_to == 5


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.anchor_minrun = 4


def test_shipped_config_matches_defaults():
    assert load_config(REPO_CONFIG) == DEFAULT_CONFIG


def test_parse_yaml_subset():
    text = """
# comment line
anchor_chars: "ACGT"   # inline comment
anchor_minrun: 4
gap_regex: '[-]'
nrun_cap_from: 10
nrun_cap_to: 3
"""
    config = parse_config_text(text)
    assert config.anchor_chars == "ACGT"
    assert config.anchor_minrun == 4
    assert config.gap_regex == "[-]"
    assert config.nrun_cap_from == 10
    assert config.nrun_cap_to == 3
    assert config.iupac_dna == DEFAULT_CONFIG.iupac_dna


def test_null_and_missing_values_fall_back():
    config = parse_config_text("anchor_minrun: null\n")
    assert config == DEFAULT_CONFIG
    assert parse_config_text("") == DEFAULT_CONFIG


def test_numeric_strings_are_coerced():
    config = CleaningConfig.from_mapping({"anchor_minrun": "12", "nrun_cap_to": 4.0})
    assert config.anchor_minrun == 12
    assert config.nrun_cap_to == 4


def test_unknown_keys_are_ignored():
    config = CleaningConfig.from_mapping({"colour": "blue", "anchor_minrun": 9})
    assert config.anchor_minrun == 9


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"anchor_minrun": 0}, "anchor_minrun"),
        ({"nrun_cap_from": 0, "nrun_cap_to": 0}, "nrun_cap_from"),
        ({"nrun_cap_from": 3, "nrun_cap_to": 4}, "nrun_cap_to"),
        ({"nrun_cap_to": -1}, "nrun_cap_to"),
        ({"anchor_minrun": True}, "anchor_minrun"),
        ({"anchor_chars": ""}, "anchor_chars"),
        ({"anchor_chars": "AC]GT"}, "anchor_chars"),
        ({"iupac_dna": "Z-A"}, "iupac_dna"),
        ({"gap_regex": "[-"}, "gap_regex"),
        ({"natural_language_regex": "(UNMERGED"}, "natural_language_regex"),
    ],
)
def test_invalid_values_raise(overrides, message):
    with pytest.raises(ConfigError, match=message):
        dataclasses.replace(DEFAULT_CONFIG, **overrides)


def test_non_integer_string_raises():
    with pytest.raises(ConfigError, match="anchor_minrun"):
        CleaningConfig.from_mapping({"anchor_minrun": "eight"})


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_fallback_on_missing_file(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        config = load_config_or_default(tmp_path / "missing.yaml")
    assert config is DEFAULT_CONFIG
    assert "built-in defaults" in caplog.text


def test_fallback_on_unparseable_yaml(config_file):
    path = config_file("anchor_chars: [unclosed\n")
    assert load_config_or_default(path) is DEFAULT_CONFIG


def test_fallback_without_path():
    assert load_config_or_default(None) is DEFAULT_CONFIG


def test_bad_pattern_is_not_swallowed(config_file):
    path = config_file("gap_regex: '[-'\n")
    with pytest.raises(ConfigError):
        load_config_or_default(path)


def test_non_mapping_document_raises(config_file):
    path = config_file("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_package_import_builds_default_config():
    import nucleotide_cleaner

    assert nucleotide_cleaner.DEFAULT_CONFIG == CleaningConfig()
    assert nucleotide_cleaner.process_one_sequence("ACGTACGTACGT").sequence == "ACGTACGTACGT"


@pytest.mark.parametrize(
    "text, key",
    [
        ("gap_regex: [-\\.]\n", "gap_regex"),
        ("anchor_chars: [A, C, G, T]\n", "anchor_chars"),
        ("natural_language_regex: {marker: UNMERGED}\n", "natural_language_regex"),
        ("anchor_minrun: [8]\n", "anchor_minrun"),
    ],
)
def test_non_scalar_yaml_values_raise(text, key):
    with pytest.raises(ConfigError, match=key):
        parse_config_text(text)


def test_bare_list_gap_regex_is_not_a_fallback(config_file):
    path = config_file("gap_regex: [-\\.]\n")
    with pytest.raises(ConfigError, match="quote"):
        load_config_or_default(path)


def test_quoted_gap_regex_still_removes_gaps(config_file):
    config = load_config(config_file("gap_regex: '[-\\.]'\n"))
    assert process_one_sequence("ACGT-ACGT..ACGT", config).sequence == "ACGTACGTACGT"


def test_replace_with_non_string_pattern_raises():
    with pytest.raises(ConfigError, match="gap_regex"):
        dataclasses.replace(DEFAULT_CONFIG, gap_regex=["-", "."])
