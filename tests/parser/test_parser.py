# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the arrowlang recursive-descent validator."""

import pytest

from arrowlang.parser.lexer import Token, TokenType, tokenize
from arrowlang.parser.parser import Invalid, ParseError, Valid, parse

# ###############
# Test Helpers
# ###############


def _parse(source: str) -> Valid | Invalid:
    return parse(tokenize(source))


# ###############
# Valid Statements
# ###############


class TestValid:
    @pytest.mark.parametrize(
        "source",
        [
            "a <- 4",
            "a <- b",
            "result <- b + 2",
            "a <- 1 + 2 * 3 - 4 / 5",
            "a <- (1 + 2)",
            "a <- ((b))",
            "a <- (1 + (2 * x)) / y",
            "a <-- 4",
            "a\n<-\n4",
            "x1<-y2*3",
        ],
    )
    def test_valid_statement(self, source: str) -> None:
        assert _parse(source) == Valid()

    def test_empty_sequence_is_valid(self) -> None:
        assert parse([]) == Valid()

    def test_whitespace_only_is_valid(self) -> None:
        assert _parse("  \n\t\n") == Valid()

    def test_already_filtered_tokens_accepted(self) -> None:
        tokens = [t for t in tokenize("a <- 4") if t.type != TokenType.NEWLINE]
        assert parse(tokens) == Valid()


# ###############
# Statement Head
# ###############


class TestStatementHead:
    def test_must_start_with_identifier(self) -> None:
        assert _parse("4 <- a") == Invalid("must start with an identifier", 0)

    def test_identifier_failure_reported_at_offset_zero(self) -> None:
        assert _parse("   <- a") == Invalid("must start with an identifier", 0)

    def test_missing_assign_points_at_current_token(self) -> None:
        assert _parse("a 4") == Invalid("expected ASSIGN", 2)

    def test_missing_assign_at_end_of_input(self) -> None:
        assert _parse("a") == Invalid("expected ASSIGN", 0)

    def test_equals_instead_of_arrow(self) -> None:
        assert _parse("a = 4") == Invalid("expected ASSIGN", 2)


# ###############
# Expressions
# ###############


class TestExpressions:
    def test_nothing_after_assign(self) -> None:
        assert _parse("a <- ") == Invalid("incomplete expression", 0)

    def test_trailing_operator(self) -> None:
        assert _parse("a <- 1 +") == Invalid("incomplete expression", 0)

    def test_unclosed_paren(self) -> None:
        assert _parse("a <- (1 + 2") == Invalid("expected RPAREN", 0)

    def test_wrong_token_where_rparen_expected(self) -> None:
        assert _parse("a <- (1 2)") == Invalid("expected RPAREN", 8)

    def test_extra_tokens(self) -> None:
        assert _parse("a <- 1 2") == Invalid("extra tokens after the expression", 7)

    def test_unmatched_closing_paren_is_extra_token(self) -> None:
        assert _parse("a <- 1)") == Invalid("extra tokens after the expression", 6)

    def test_operator_in_term_position(self) -> None:
        assert _parse("a <- * 2") == Invalid("error in expression", 5)

    def test_error_token_in_term_position(self) -> None:
        assert _parse("a <- #") == Invalid("error in expression", 5)

    def test_empty_parens(self) -> None:
        assert _parse("a <- ()") == Invalid("error in expression", 6)

    def test_second_statement_is_extra(self) -> None:
        assert _parse("a <- 4\nb <- 5") == Invalid("extra tokens after the expression", 7)

    def test_first_violation_wins(self) -> None:
        # Both the missing RPAREN and the trailing '#' are wrong; only the first is reported.
        assert _parse("a <- (1 # 2") == Invalid("expected RPAREN", 8)


# ###############
# Error Type
# ###############


class TestParseError:
    def test_attributes(self) -> None:
        exc = ParseError("expected ASSIGN", 3)
        assert exc.message == "expected ASSIGN"
        assert exc.position == 3
        assert "expected ASSIGN" in str(exc)

    def test_parse_never_raises(self) -> None:
        tokens = [Token(TokenType.RPAREN, ")", 0, 1)]
        assert isinstance(parse(tokens), Invalid)
