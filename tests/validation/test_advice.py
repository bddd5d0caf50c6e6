# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the style hints."""

import pytest

from arrowlang.validation.advice import EQUALS_ADVICE, MISSING_ARROW_ADVICE, NO_ADVICE, advise


def test_clean_code_has_default_message() -> None:
    assert advise("a <- 4") == ["no suggestions; code is clear"]


def test_equals_assignment_fires_both_in_order() -> None:
    """Missing arrow comes before the equals hint."""
    assert advise("a = 4") == [
        "use '<-' for assignment",
        "assignment with '=' detected, check if it should be '<-'",
    ]


def test_missing_arrow_only() -> None:
    assert advise("a 4") == [MISSING_ARROW_ADVICE]


def test_equals_with_arrow() -> None:
    assert advise("a <- b == c") == [EQUALS_ADVICE]


def test_empty_source_suggests_arrow() -> None:
    assert advise("") == [MISSING_ARROW_ADVICE]


def test_checks_are_purely_textual() -> None:
    """Text inside an unrecognized region still counts."""
    assert advise("# <- ") == [NO_ADVICE]


@pytest.mark.parametrize("source", ["", "a <- 4", "a = 4", "x <<- y"])
def test_never_empty_and_repeatable(source: str) -> None:
    first = advise(source)
    assert first
    assert advise(source) == first
