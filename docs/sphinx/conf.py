# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the arrowlang API reference."""

import sys
from pathlib import Path

# Document the in-tree sources without requiring an installed package.
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

project = "arrowlang"
author = "arrowlang Contributors"
release = "0.1.0"

# Docstrings use the Google "Args:/Returns:/Raises:" layout.
extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
napoleon_google_docstring = True
napoleon_numpy_docstring = False
autodoc_member_order = "bysource"
autodoc_mock_imports = ["dash", "yachalk"]

html_theme = "alabaster"
