# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for arrowlang statements.

Converts raw source text into a sequence of tokens for subsequent validation.
Unrecognized characters never abort the scan: each one becomes an ERROR token.
"""

import enum
import re
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the arrowlang lexer."""

    NUMBER = "NUMBER"
    ASSIGN = "ASSIGN"
    ID = "ID"
    OP = "OP"
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    NEWLINE = "NEWLINE"
    ERROR = "ERROR"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source span.

    Attributes:
        type: The kind of token.
        value: The exact source text of the token.
        start: 0-based character offset where the token starts.
        end: Offset one past the last character (``start + len(value)``).
    """

    type: TokenType
    value: str
    start: int
    end: int


def tokenize(source: str) -> list[Token]:
    """Tokenize arrowlang source text into a sequence of tokens.

    Spaces and tabs are consumed and not included in the output. Line breaks
    are kept as NEWLINE tokens; use :func:`drop_layout` to remove them.

    Args:
        source: The text to scan.

    Returns:
        A list of Token objects in source order. Empty for empty input.
    """
    return _Lexer(source).tokenize()


def drop_layout(tokens: list[Token]) -> list[Token]:
    """Return a new list without NEWLINE tokens, preserving order."""
    return [tok for tok in tokens if tok.type != TokenType.NEWLINE]


# ################
# Implementation
# ################

# Tried in order; the first rule matching at the current position wins.
# A ``None`` type marks layout that is consumed without emitting a token.
_RULES: tuple[tuple[TokenType | None, re.Pattern[str]], ...] = (
    (TokenType.NUMBER, re.compile(r"[0-9]+")),
    (TokenType.ASSIGN, re.compile(r"<+-*")),
    (TokenType.ID, re.compile(r"[A-Za-z_][A-Za-z0-9_]*")),
    (TokenType.OP, re.compile(r"[+\-*/]")),
    (TokenType.LPAREN, re.compile(r"\(")),
    (TokenType.RPAREN, re.compile(r"\)")),
    (TokenType.NEWLINE, re.compile(r"[\r\n]+")),
    (None, re.compile(r"[ \t]+")),
)


class _Lexer:
    """Internal scanner state."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all emitted tokens."""
        while self._pos < len(self._source):
            self._scan_token()
        return self._tokens

    def _scan_token(self) -> None:
        """Apply the first matching rule, or emit a one-character ERROR token."""
        start = self._pos
        for token_type, pattern in _RULES:
            m = pattern.match(self._source, start)
            if m is None:
                continue
            value = m.group()
            self._pos = m.end()
            if token_type is not None:
                self._tokens.append(Token(token_type, value, start, self._pos))
            return

        self._pos += 1
        self._tokens.append(Token(TokenType.ERROR, self._source[start], start, self._pos))
