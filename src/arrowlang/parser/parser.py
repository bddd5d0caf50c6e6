# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent validator for arrowlang statements.

Recognizes a single ``identifier <- expression`` statement:

    statement := ID ASSIGN expr EOF
    expr      := term (OP term)*
    term      := NUMBER | ID | LPAREN expr RPAREN

The parser only checks syntactic shape; nothing is evaluated. It stops at the
first violation and reports it with a character offset.
"""

from __future__ import annotations

from dataclasses import dataclass

from arrowlang.parser.lexer import Token, TokenType, drop_layout

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised inside the parser when the token stream violates the grammar.

    Attributes:
        message: Human-readable description of the violation.
        position: 0-based character offset the violation is reported at.
    """

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"Offset {position}: {message}")
        self.message = message
        self.position = position


@dataclass(frozen=True)
class Valid:
    """Outcome of a parse that found no violation."""


@dataclass(frozen=True)
class Invalid:
    """Outcome of a parse that stopped at a grammar violation.

    Attributes:
        message: Human-readable description of the first violation.
        position: 0-based character offset of the violation.
    """

    message: str
    position: int


ParseOutcome = Valid | Invalid


def parse(tokens: list[Token]) -> ParseOutcome:
    """Check whether a token sequence forms one valid statement.

    NEWLINE tokens are dropped before checking. An empty sequence is valid.

    Args:
        tokens: Tokens as produced by :func:`arrowlang.parser.lexer.tokenize`.

    Returns:
        :class:`Valid`, or :class:`Invalid` describing the first violation.
    """
    try:
        _Parser(tokens).parse()
    except ParseError as exc:
        return Invalid(message=exc.message, position=exc.position)
    return Valid()


# ################
# Implementation
# ################


class _Parser:
    """Recursive-descent parser over a filtered token list."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = drop_layout(tokens)
        self._pos = 0

    def parse(self) -> None:
        """Parse the full token stream, raising ParseError on the first violation."""
        if not self._tokens:
            return

        if self._match(TokenType.ID) is None:
            raise ParseError("must start with an identifier", 0)

        self._expect(TokenType.ASSIGN)
        self._parse_expr()

        tok = self._current()
        if tok is not None:
            raise ParseError("extra tokens after the expression", tok.start)

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token | None:
        """Return the current (un-consumed) token, or None at end of input."""
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _match(self, token_type: TokenType) -> Token | None:
        """Consume and return the current token if it has the given type."""
        tok = self._current()
        if tok is not None and tok.type == token_type:
            self._pos += 1
            return tok
        return None

    def _expect(self, token_type: TokenType) -> Token:
        """Consume the current token if it has the given type.

        Raises ParseError at the current token, or at offset 0 when the input
        is exhausted.
        """
        tok = self._match(token_type)
        if tok is None:
            current = self._current()
            position = current.start if current is not None else 0
            raise ParseError(f"expected {token_type.value}", position)
        return tok

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _parse_expr(self) -> None:
        """Parse ``term (OP term)*``; operators are chained left to right."""
        self._parse_term()
        while self._match(TokenType.OP) is not None:
            self._parse_term()

    def _parse_term(self) -> None:
        """Parse a NUMBER, an ID, or a parenthesized expression."""
        tok = self._current()
        if tok is None:
            raise ParseError("incomplete expression", 0)

        if tok.type in (TokenType.NUMBER, TokenType.ID):
            self._pos += 1
            return

        if tok.type == TokenType.LPAREN:
            self._pos += 1
            self._parse_expr()
            self._expect(TokenType.RPAREN)
            return

        raise ParseError("error in expression", tok.start)
