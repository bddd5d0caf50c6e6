# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Analysis reports: assembly and JSON export."""

from arrowlang.report.report import (
    DEFAULT_REPORT_FILE,
    AnalysisReport,
    ReportError,
    analyze,
    deserialize,
    read_report,
    report_to_dict,
    serialize,
    write_report,
)

__all__ = [
    "AnalysisReport",
    "DEFAULT_REPORT_FILE",
    "ReportError",
    "analyze",
    "deserialize",
    "read_report",
    "report_to_dict",
    "serialize",
    "write_report",
]
