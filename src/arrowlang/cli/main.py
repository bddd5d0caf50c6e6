# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the arrowlang command-line interface."""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from yachalk import chalk

from arrowlang.config.settings import ConfigError, ToolConfig, find_config, load_config
from arrowlang.parser.lexer import Token, tokenize
from arrowlang.report.report import ReportError, analyze, write_report

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the arrowlang CLI."""
    parser = argparse.ArgumentParser(
        prog="arrowlang",
        description="arrowlang: tokenize and check 'identifier <- expression' statements",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # tokens subcommand
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the token stream of a source file",
        description="Tokenize a source file and print one TYPE:value line per token.",
    )
    _add_source_argument(tokens_parser)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check a source file for syntax errors and style hints",
        description="Print the tokens, the syntax verdict and the style hints of a source file.",
    )
    _add_source_argument(check_parser)

    # report subcommand
    report_parser = subparsers.add_parser(
        "report",
        help="Write the JSON analysis report of a source file",
        description="Analyze a source file and export the result as a JSON report.",
    )
    _add_source_argument(report_parser)
    report_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: 'report-file' from the configuration, or report.json)",
    )
    _add_config_argument(report_parser)

    # sample subcommand
    sample_parser = subparsers.add_parser(
        "sample",
        help="Print the sample program",
        description="Print the configured sample program.",
    )
    _add_config_argument(sample_parser)

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the interactive playground",
        description="Launch a web-based UI for interactively analyzing statements.",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )
    _add_config_argument(serve_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_source_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        help="Source file to analyze ('-' reads from standard input)",
    )


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=None,
        help="Configuration file (default: .arrowlang.yaml in the current directory, if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "tokens":
        return _cmd_tokens(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "report":
        return _cmd_report(args)
    if args.command == "sample":
        return _cmd_sample(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _read_source(source: str) -> str | None:
    """Read the source text, printing an error and returning None on failure."""
    if source == "-":
        try:
            return sys.stdin.read()
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Error: cannot read standard input: {exc}", file=sys.stderr)
            return None

    path = Path(source)
    if not path.is_file():
        print(f"Error: source file '{path}' does not exist.", file=sys.stderr)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return None


def _load_config(args: argparse.Namespace) -> ToolConfig | None:
    """Load the configuration, printing an error and returning None on failure."""
    try:
        if args.config is not None:
            return load_config(Path(args.config))
        return find_config(Path.cwd())
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None


def _print_tokens(tokens: Sequence[Token]) -> None:
    for tok in tokens:
        print(f"{tok.type.value}:{tok.value!r}")


def _cmd_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens subcommand."""
    text = _read_source(args.source)
    if text is None:
        return 1

    _print_tokens(tokenize(text))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    text = _read_source(args.source)
    if text is None:
        return 1

    report = analyze(text)
    print("Tokens:")
    _print_tokens(report.tokens)

    print("\nResult:")
    if report.ok:
        print(chalk.green(report.message))
    else:
        print(chalk.red(f"Error: {report.summary}"))

    print("\nSuggestions:")
    for advisory in report.advisories:
        print(f"  - {advisory}")

    return 0 if report.ok else 1


def _cmd_report(args: argparse.Namespace) -> int:
    """Handle the report subcommand."""
    config = _load_config(args)
    if config is None:
        return 1

    text = _read_source(args.source)
    if text is None:
        return 1

    output = Path(args.output if args.output is not None else config.report_file)
    report = analyze(text)
    try:
        write_report(report, output, indent=config.indent)
    except ReportError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Report written: {output}")
    return 0


def _cmd_sample(args: argparse.Namespace) -> int:
    """Handle the sample subcommand."""
    config = _load_config(args)
    if config is None:
        return 1

    print(config.sample)
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    config = _load_config(args)
    if config is None:
        return 1

    from arrowlang.webui.app import create_app

    print(f"Serving playground at http://{args.host}:{args.port}/")
    app = create_app(config)
    app.run(host=args.host, port=args.port, debug=False)
    return 0
