#!/usr/bin/env python3
# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the arrowlang CI checks locally: format, lint, type check, tests, smoke run, build."""

import argparse
import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("format", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("types", ["uv", "run", "ty", "check", "src/"]),
    ("tests", ["uv", "run", "pytest", "--cov=arrowlang", "--cov-report=term-missing"]),
    ("smoke", ["uv", "run", "arrowlang", "sample"]),
    ("build", ["uv", "build"]),
]


def main() -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run arrowlang CI checks.")
    parser.add_argument(
        "--only",
        nargs="+",
        choices=[name for name, _ in STEPS],
        help="Run only the named steps (default: all)",
    )
    args = parser.parse_args()
    selected = [(name, cmd) for name, cmd in STEPS if args.only is None or name in args.only]

    results: list[tuple[str, int, float]] = []
    for name, cmd in selected:
        print(chalk.blue(f"\n>>> {name}: {' '.join(cmd)}"))
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_repo_root())
        results.append((name, proc.returncode, time.monotonic() - start))

    print(chalk.blue("\nSummary"))
    for name, returncode, elapsed in results:
        if returncode == 0:
            print(chalk.green(f"  PASS  {name} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {name} ({elapsed:.1f}s, exit {returncode})"))

    return 0 if all(rc == 0 for _, rc, _ in results) else 1


# ################
# Implementation
# ################


def _repo_root() -> pathlib.Path:
    return pathlib.Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main())
