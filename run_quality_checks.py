#!/usr/bin/env python
"""Run the checks a change must pass before it is merged.

Tool settings (line length, mypy strictness, coverage floor) live in
pyproject.toml; this script only decides which tools run and in what order.

Usage:
    python run_quality_checks.py                 # all gates
    python run_quality_checks.py --fix           # reformat, then check
    python run_quality_checks.py --only tests    # a single gate
"""

import argparse
import subprocess
import sys
from dataclasses import dataclass
from typing import Optional

PACKAGES = ["lifesim", "lifesim_gui"]
SOURCES = [*PACKAGES, "tests", "examples"]


@dataclass(frozen=True)
class Gate:
    key: str
    title: str
    check: list[str]
    fix: Optional[list[str]] = None


GATES = [
    Gate("format", "black", ["black", "--check", *SOURCES], ["black", *SOURCES]),
    Gate("imports", "isort", ["isort", "--check-only", *SOURCES], ["isort", *SOURCES]),
    Gate("lint", "pylint", ["pylint", *PACKAGES]),
    Gate("types", "mypy", ["mypy", *PACKAGES]),
    # Coverage floor comes from [tool.coverage.report] fail_under
    Gate("tests", "pytest", ["pytest", *(f"--cov={p}" for p in PACKAGES)]),
]


def run_gate(gate: Gate, fix: bool) -> bool:
    command = gate.fix if fix and gate.fix else gate.check
    print(f"\n== {gate.title}: {' '.join(command)}")
    try:
        result = subprocess.run(command, check=False)
    except FileNotFoundError:
        print(f"{gate.title} is not installed; pip install -e '.[test,dev]'")
        return False
    return result.returncode == 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Run formatting, lint, type and test gates")
    parser.add_argument("--fix", action="store_true", help="Rewrite files where a tool can")
    parser.add_argument(
        "--only",
        nargs="+",
        choices=[g.key for g in GATES],
        help="Run only these gates",
    )
    args = parser.parse_args()

    selected = [g for g in GATES if not args.only or g.key in args.only]
    failed = [g.title for g in selected if not run_gate(g, args.fix)]

    print()
    if failed:
        print(f"FAILED: {', '.join(failed)}")
        return 1
    print(f"OK: {len(selected)} gate(s) passed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
