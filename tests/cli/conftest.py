# topmark:header:start
#
#   project      : Doculint
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Doculint in a controlled working directory.

`run_cli_in()` changes the process working directory before invoking the Click
CLI, so that relative paths and ``dir/...`` patterns resolve against the test
project. Every helper passes ``--no-color`` so output can be compared verbatim.
"""

from __future__ import annotations

import os
import textwrap
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from doculint.cli.exit_codes import ExitCode
from doculint.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

GOOD_GO = """\
// Package good is fine.
package good

// Hello says hello.
func Hello() {}
"""

BAD_GO = """\
package bad

func Run(x int) {
\tif x == 5 {
\t}
}
"""

BAD_FINDINGS = [
    'pkg/bad: package "bad" has no comment associated with it in "bad.go"',
    'pkg/bad/bad.go:3:1: function "Run" has no comment associated with it',
    "pkg/bad/bad.go:4:10: literal found in conditional",
]


def write_go(root: Path, rel: str, code: str) -> Path:
    """Write a Go source file below ``root`` and return its path."""
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(code), encoding="utf-8")
    return path


@pytest.fixture
def go_project(isolation: Path) -> Path:
    """A project with one clean and one faulty package."""
    write_go(isolation, "pkg/good/good.go", GOOD_GO)
    write_go(isolation, "pkg/bad/bad.go", BAD_GO)
    return isolation


def run_cli_in(cwd: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory to run the command from.
        argv (Sequence[str]): Arguments after the global ``--no-color`` flag.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, ["--no-color", *argv])
    finally:
        os.chdir(previous)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    return CliRunner().invoke(cli, ["--no-color", *argv])


def output_lines(result: Result) -> list[str]:
    """Return the non-empty output lines of ``result``."""
    return [line for line in result.output.splitlines() if line.strip()]


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FINDINGS(result: Result) -> None:
    """Assert that the command reported diagnostics (code 3)."""
    assert result.exit_code == ExitCode.FINDINGS, result.output
