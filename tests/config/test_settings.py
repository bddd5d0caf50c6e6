# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the configuration file loader."""

from pathlib import Path

import pytest

from arrowlang.config import (
    CONFIG_FILE_NAME,
    DEFAULT_SAMPLE,
    ConfigError,
    ToolConfig,
    find_config,
    load_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_defaults() -> None:
    config = ToolConfig()
    assert config.report_file == "report.json"
    assert config.indent == 2
    assert config.sample == DEFAULT_SAMPLE


def test_empty_file_is_default(tmp_path: Path) -> None:
    assert load_config(_write_config(tmp_path, "")) == ToolConfig()


def test_all_fields(tmp_path: Path) -> None:
    content = """\
report-file: out/analysis.json
indent: 4
sample: "x <- 1"
"""
    config = load_config(_write_config(tmp_path, content))
    assert config.report_file == "out/analysis.json"
    assert config.indent == 4
    assert config.sample == "x <- 1"


def test_find_config_without_file(tmp_path: Path) -> None:
    assert find_config(tmp_path) == ToolConfig()


def test_find_config_with_file(tmp_path: Path) -> None:
    _write_config(tmp_path, "indent: 0\n")
    assert find_config(tmp_path).indent == 0


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "indent: [unclosed\n"))


def test_not_a_mapping(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write_config(tmp_path, "- a\n- b\n"))


def test_unknown_key(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write_config(tmp_path, "colour: red\n"))


def test_negative_indent(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, "indent: -1\n"))


def test_empty_report_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, "report-file: ''\n"))
