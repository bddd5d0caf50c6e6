# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax verdicts and style hints for arrowlang source."""

from arrowlang.validation.advice import EQUALS_ADVICE, MISSING_ARROW_ADVICE, NO_ADVICE, advise
from arrowlang.validation.checks import NO_ERRORS_MESSAGE, SyntaxVerdict, validate

__all__ = [
    "EQUALS_ADVICE",
    "MISSING_ARROW_ADVICE",
    "NO_ADVICE",
    "NO_ERRORS_MESSAGE",
    "SyntaxVerdict",
    "advise",
    "validate",
]
