#!/usr/bin/env python3
# Copyright 2026 na Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, tests, and build.

Pass ``--fast`` to skip the build step, or step names to run only those.
"""

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
    ("tests", ["uv", "run", "pytest", "--cov=na", "--cov-report=term-missing"]),
    ("build", ["uv", "build"]),
]


def main() -> int:
    """Run the selected CI steps and report results."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("steps", nargs="*", help="Steps to run (default: all)")
    parser.add_argument("--fast", action="store_true", help="Skip the build step")
    args = parser.parse_args()

    known = [name for name, _ in STEPS]
    unknown = [step for step in args.steps if step not in known]
    if unknown:
        parser.error(f"unknown step(s): {', '.join(unknown)}; choose from {', '.join(known)}")

    selected = [(name, cmd) for name, cmd in STEPS if not args.steps or name in args.steps]
    if args.fast:
        selected = [(name, cmd) for name, cmd in selected if name != "build"]

    results = [_run_step(name, cmd) for name, cmd in selected]
    return _report(results)


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(name.capitalize()))
    print(chalk.blue(_RULE))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=pathlib.Path(__file__).parent.parent)
    return name, proc.returncode == 0, time.monotonic() - start


def _report(results: list[tuple[str, bool, float]]) -> int:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_RULE))
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        print(color(f"  {'PASS' if passed else 'FAIL'}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


if __name__ == "__main__":
    sys.exit(main())
