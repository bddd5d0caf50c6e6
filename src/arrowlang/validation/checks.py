# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntax verdict for arrowlang statements.

Wraps the grammar validator into the ``ok``/``message`` pair shown to users.
"""

from __future__ import annotations

from dataclasses import dataclass

from arrowlang.parser.lexer import Token
from arrowlang.parser.parser import Invalid, parse

# ###############
# Public Interface
# ###############

NO_ERRORS_MESSAGE = "no syntactic errors"


@dataclass(frozen=True)
class SyntaxVerdict:
    """Result of validating one statement.

    Attributes:
        ok: True if the tokens form a valid statement.
        message: ``NO_ERRORS_MESSAGE`` on success, otherwise the first violation.
        position: Character offset of the violation, or None on success.
    """

    ok: bool
    message: str
    position: int | None = None


def validate(tokens: list[Token]) -> SyntaxVerdict:
    """Validate a token sequence and return the verdict shown to users."""
    outcome = parse(tokens)
    if isinstance(outcome, Invalid):
        return SyntaxVerdict(ok=False, message=outcome.message, position=outcome.position)
    return SyntaxVerdict(ok=True, message=NO_ERRORS_MESSAGE)
