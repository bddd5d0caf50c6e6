# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration for arrowlang."""

from arrowlang.config.settings import (
    CONFIG_FILE_NAME,
    DEFAULT_SAMPLE,
    ConfigError,
    ToolConfig,
    find_config,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "DEFAULT_SAMPLE",
    "ToolConfig",
    "find_config",
    "load_config",
]
