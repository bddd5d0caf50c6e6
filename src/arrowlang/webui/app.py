# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Dash-based web UI for interactively analyzing arrowlang statements."""

from __future__ import annotations

import json
from typing import Any

import dash
from dash import Input, Output, State, dcc, html
from dash.exceptions import PreventUpdate

from arrowlang.config.settings import ToolConfig
from arrowlang.parser.lexer import TokenType
from arrowlang.report.report import AnalysisReport, analyze, report_to_dict, serialize

# ###############
# Public Interface
# ###############

APP_TITLE = "arrowlang Playground"


def create_app(config: ToolConfig | None = None) -> dash.Dash:
    """Create and configure the arrowlang web UI application."""
    config = config or ToolConfig()
    app = dash.Dash(
        __name__,
        title=APP_TITLE,
    )
    app.layout = _build_layout()
    _register_callbacks(app, config)
    return app


def run_analysis(text: str | None) -> tuple[list[html.Div], list[html.Div], str, str, dict[str, Any]]:
    """Analyze editor text and build the panel contents.

    Returns:
        Token chips, suggestion rows, the verdict text (with the error offset
        when invalid), the pretty-printed report JSON, and the report data to
        keep for a later download.
    """
    report = analyze(_normalize(text or ""))
    return (
        _render_tokens(report),
        [html.Div(s, className="suggest") for s in report.advisories],
        report.summary,
        serialize(report),
        report_to_dict(report),
    )


def download_payload(data: dict[str, Any] | None, config: ToolConfig) -> dict[str, str]:
    """Build the ``dcc.Download`` payload for the last stored report.

    Raises:
        PreventUpdate: If no analysis has been run yet.
    """
    if data is None:
        raise PreventUpdate
    return {
        "content": json.dumps(data, indent=config.indent),
        "filename": config.report_file,
        "type": "application/json",
    }


# ################
# Implementation
# ################

_PANEL_STYLE = {"border": "1px solid #ccc", "padding": "0.5rem", "marginBottom": "1rem"}


def _normalize(text: str) -> str:
    """Replace non-breaking spaces pasted into the editor with plain spaces."""
    return text.replace("\u00a0", " ")


def _render_tokens(report: AnalysisReport) -> list[html.Div]:
    chips = []
    for tok in report.tokens:
        class_name = "token error" if tok.type == TokenType.ERROR else "token"
        chips.append(html.Div(f"{tok.type.value}:{tok.value}", className=class_name))
    return chips


def _build_layout() -> html.Div:
    """Build the application layout."""
    return html.Div(
        [
            html.H1(APP_TITLE),
            dcc.Textarea(id="editor", value="", style={"width": "100%", "height": "8rem"}),
            html.Div(
                [
                    html.Button("Run", id="run-btn"),
                    html.Button("Clear", id="clear-btn"),
                    html.Button("Sample", id="sample-btn"),
                    html.Button("Download report", id="download-btn"),
                ],
            ),
            html.H3("Tokens"),
            html.Div(id="tokens", style=_PANEL_STYLE),
            html.H3("Suggestions"),
            html.Div(id="suggestions", style=_PANEL_STYLE),
            html.H3("Result"),
            html.Div(id="result", style=_PANEL_STYLE),
            html.H3("Report"),
            html.Pre(id="report", style=_PANEL_STYLE),
            dcc.Store(id="last-report"),
            dcc.Download(id="download"),
        ],
        style={"fontFamily": "sans-serif", "padding": "2rem"},
    )


def _register_callbacks(app: dash.Dash, config: ToolConfig) -> None:
    @app.callback(
        Output("editor", "value"),
        Input("clear-btn", "n_clicks"),
        Input("sample-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def _fill_editor(_clear: int | None, _sample: int | None) -> str:
        if dash.ctx.triggered_id == "sample-btn":
            return config.sample
        return ""

    @app.callback(
        Output("tokens", "children"),
        Output("suggestions", "children"),
        Output("result", "children"),
        Output("report", "children"),
        Output("last-report", "data"),
        Input("run-btn", "n_clicks"),
        State("editor", "value"),
        prevent_initial_call=True,
    )
    def _run(_n_clicks: int | None, text: str | None) -> tuple[Any, ...]:
        return run_analysis(text)

    @app.callback(
        Output("download", "data"),
        Input("download-btn", "n_clicks"),
        State("last-report", "data"),
        prevent_initial_call=True,
    )
    def _download(_n_clicks: int | None, data: dict[str, Any] | None) -> dict[str, str]:
        return download_payload(data, config)
