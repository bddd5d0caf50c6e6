# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Analysis reports and their JSON export format.

A report bundles the token stream, the syntax verdict and the style hints for
one piece of source text. The exported JSON uses the field names ``ok``,
``tokens`` and ``ia``; each token is ``{type, value, start, end}``. Downstream
consumers depend on these names.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from arrowlang.parser.lexer import Token, TokenType, tokenize
from arrowlang.validation.advice import advise
from arrowlang.validation.checks import NO_ERRORS_MESSAGE, validate

# ###############
# Public Interface
# ###############

DEFAULT_REPORT_FILE = "report.json"


class ReportError(Exception):
    """Raised when a report cannot be written, read, or decoded."""


@dataclass(frozen=True)
class AnalysisReport:
    """Snapshot of one analysis run.

    Attributes:
        ok: True if the source is a syntactically valid statement.
        tokens: The full token stream, NEWLINE and ERROR tokens included.
        advisories: Style hints, never empty.
        message: The verdict text shown to users. Not part of the export.
        position: Character offset of the syntax error, or None when valid.
            Not part of the export.
    """

    ok: bool
    tokens: tuple[Token, ...]
    advisories: tuple[str, ...]
    message: str
    position: int | None = None

    @property
    def summary(self) -> str:
        """Return the verdict text, with the error offset appended when invalid."""
        if self.position is None:
            return self.message
        return f"{self.message} (offset {self.position})"


def analyze(source: str) -> AnalysisReport:
    """Tokenize, validate and advise on *source* and bundle the results."""
    tokens = tokenize(source)
    verdict = validate(tokens)
    return AnalysisReport(
        ok=verdict.ok,
        tokens=tuple(tokens),
        advisories=tuple(advise(source)),
        message=verdict.message,
        position=verdict.position,
    )


def serialize(report: AnalysisReport, indent: int | None = 2) -> str:
    """Serialize a report to the JSON export format."""
    return json.dumps(report_to_dict(report), indent=indent)


def deserialize(data: str) -> AnalysisReport:
    """Rebuild a report from JSON produced by :func:`serialize`.

    The verdict message and error offset are not exported. The message is
    restored as ``NO_ERRORS_MESSAGE`` for valid reports and left empty
    otherwise; the offset is always None.

    Raises:
        ReportError: If *data* is not valid JSON or lacks required fields.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ReportError(f"Invalid report JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise ReportError("Report must be a JSON object")
    try:
        return _report_from_dict(obj)
    except (KeyError, TypeError, ValueError) as exc:
        raise ReportError(f"Malformed report: {exc!r}") from exc


def report_to_dict(report: AnalysisReport) -> dict[str, Any]:
    """Return the export representation of *report* as plain Python data."""
    return {
        "ok": report.ok,
        "tokens": [_token_to_dict(t) for t in report.tokens],
        "ia": list(report.advisories),
    }


def write_report(report: AnalysisReport, path: Path, indent: int | None = 2) -> None:
    """Write *report* to *path*, creating parent directories as needed.

    Raises:
        ReportError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize(report, indent=indent), encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Cannot write report '{path}': {exc}") from exc


def read_report(path: Path) -> AnalysisReport:
    """Read and deserialize a report from *path*.

    Raises:
        ReportError: If the file cannot be read or is malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Cannot read report '{path}': {exc}") from exc
    return deserialize(text)


# ################
# Implementation
# ################


def _token_to_dict(token: Token) -> dict[str, Any]:
    return {"type": token.type.value, "value": token.value, "start": token.start, "end": token.end}


def _token_from_dict(obj: dict[str, Any]) -> Token:
    return Token(
        type=TokenType(obj["type"]),
        value=str(obj["value"]),
        start=int(obj["start"]),
        end=int(obj["end"]),
    )


def _report_from_dict(obj: dict[str, Any]) -> AnalysisReport:
    ok, tokens, advisories = obj["ok"], obj["tokens"], obj["ia"]
    if not isinstance(ok, bool):
        raise ValueError("'ok' must be a boolean")
    if not isinstance(tokens, list):
        raise ValueError("'tokens' must be a list")
    if not isinstance(advisories, list) or not all(isinstance(a, str) for a in advisories):
        raise ValueError("'ia' must be a list of strings")
    return AnalysisReport(
        ok=ok,
        tokens=tuple(_token_from_dict(t) for t in tokens),
        advisories=tuple(advisories),
        message=NO_ERRORS_MESSAGE if ok else "",
    )
