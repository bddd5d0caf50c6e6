# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexer and grammar validator for arrowlang statements."""

from arrowlang.parser.lexer import Token, TokenType, drop_layout, tokenize
from arrowlang.parser.parser import Invalid, ParseError, ParseOutcome, Valid, parse

__all__ = [
    "Invalid",
    "ParseError",
    "ParseOutcome",
    "Token",
    "TokenType",
    "Valid",
    "drop_layout",
    "parse",
    "tokenize",
]
