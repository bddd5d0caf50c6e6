# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the optional arrowlang configuration file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from arrowlang.report.report import DEFAULT_REPORT_FILE

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".arrowlang.yaml"

DEFAULT_SAMPLE = "a <- 4\nb <- a * 3\nresult <- b + 2"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class ToolConfig(BaseModel):
    """Settings shared by the CLI and the web UI.

    Attributes:
        report_file: Default file name for exported reports.
        indent: JSON indentation used when exporting reports.
        sample: Sample program offered to new users.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    report_file: str = Field(alias="report-file", default=DEFAULT_REPORT_FILE, min_length=1)
    indent: int = Field(default=2, ge=0)
    sample: str = DEFAULT_SAMPLE


def load_config(path: Path) -> ToolConfig:
    """Load and validate the configuration file.

    An empty file is treated as the default configuration.

    Args:
        path: Path to the ``.arrowlang.yaml`` file.

    Returns:
        A validated ToolConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return ToolConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> ToolConfig:
    """Load ``.arrowlang.yaml`` from *directory*, or return defaults if absent.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return ToolConfig()
    return load_config(path)
