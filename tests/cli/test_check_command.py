# topmark:header:start
#
#   project      : Doculint
#   file         : test_check_command.py
#   file_relpath : tests/cli/test_check_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `doculint check`: output lines, filters and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from doculint.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    BAD_FINDINGS,
    assert_FINDINGS,
    assert_SUCCESS,
    output_lines,
    run_cli_in,
    write_go,
)

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_clean_package_exits_zero(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check", "pkg/good"])
    assert_SUCCESS(result)
    assert output_lines(result) == []


def test_findings_are_printed_one_per_line(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check", "./..."])
    assert_FINDINGS(result)
    assert output_lines(result) == BAD_FINDINGS


def test_default_paths_cover_the_whole_tree(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check"])
    assert_FINDINGS(result)
    assert output_lines(result) == BAD_FINDINGS


def test_jobs_do_not_change_output(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check", "--jobs", "4", "./..."])
    assert_FINDINGS(result)
    assert output_lines(result) == BAD_FINDINGS


def test_summary_mode(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check", "--summary", "./..."])
    assert_FINDINGS(result)
    lines = output_lines(result)
    assert lines[0] == "Summary:"
    assert "  packages    : 2" in lines
    assert "  diagnostics : 3" in lines
    assert not any(line.startswith("pkg/") for line in lines)


def test_verbose_adds_summary_and_config(go_project: Path) -> None:
    result = run_cli_in(go_project, ["-v", "check", "./..."])
    assert_FINDINGS(result)
    lines = output_lines(result)
    assert any(line.startswith("Using config: ") for line in lines)
    assert "  files       : 2" in lines


def test_exclude_option(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check", "--exclude", "pkg/bad/", "./..."])
    assert_SUCCESS(result)


def test_exclude_from_config(go_project: Path) -> None:
    (go_project / "doculint.toml").write_text(
        'root = true\nexclude = ["bad.go"]\n', encoding="utf-8"
    )
    assert_SUCCESS(run_cli_in(go_project, ["check", "./..."]))


def test_tests_filter(go_project: Path) -> None:
    write_go(go_project, "pkg/good/good_test.go", "package good\n\nfunc TestX() {}\n")

    with_tests = run_cli_in(go_project, ["check", "pkg/good"])
    without_tests = run_cli_in(go_project, ["check", "--no-tests", "pkg/good"])

    assert_FINDINGS(with_tests)
    assert output_lines(with_tests) == [
        'pkg/good/good_test.go:3:1: function "TestX" has no comment associated with it'
    ]
    assert_SUCCESS(without_tests)


def test_entry_package_override(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check", "--entry-package", "bad", "pkg/bad"])
    assert_FINDINGS(result)
    assert output_lines(result) == BAD_FINDINGS[1:]


def test_entry_package_exempts_main(isolation: Path) -> None:
    write_go(isolation, "cmd/app/main.go", "package main\n\nfunc init() {}\n\nfunc main() {}\n")
    assert_SUCCESS(run_cli_in(isolation, ["check", "cmd/app"]))


def test_bad_package_name(isolation: Path) -> None:
    write_go(isolation, "my_pkg/my_pkg.go", "// Package my_pkg is odd.\npackage my_pkg\n")
    result = run_cli_in(isolation, ["check", "my_pkg"])
    assert_FINDINGS(result)
    assert output_lines(result) == [
        'my_pkg: package "my_pkg" should not contain - or _ in name',
    ]


def test_no_go_files_warns_and_succeeds(isolation: Path) -> None:
    result = run_cli_in(isolation, ["check", "./..."])
    assert_SUCCESS(result)
    assert "no Go files matched" in result.output


def test_missing_path(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check", "nope"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "Error:" in result.output


def test_parse_error(go_project: Path) -> None:
    write_go(go_project, "pkg/broken/broken.go", "package broken\n\nfunc F( {\n")
    result = run_cli_in(go_project, ["check", "pkg/broken"])
    assert result.exit_code == ExitCode.PARSE_ERROR, result.output
    assert "pkg/broken/broken.go" in result.output


def test_invalid_config(go_project: Path) -> None:
    (go_project / "broken.toml").write_text("exclude = [\n", encoding="utf-8")
    result = run_cli_in(go_project, ["check", "--config", "broken.toml", "./..."])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_config_warnings_are_shown(go_project: Path) -> None:
    (go_project / "doculint.toml").write_text("root = true\njobs = \"many\"\n", encoding="utf-8")
    result = run_cli_in(go_project, ["check", "pkg/good"])
    assert_SUCCESS(result)
    assert "config: Expected int in" in result.output


def test_verbose_and_quiet_conflict(go_project: Path) -> None:
    result = run_cli_in(go_project, ["-v", "-q", "check"])
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def test_jobs_must_be_positive(go_project: Path) -> None:
    result = run_cli_in(go_project, ["check", "--jobs", "0"])
    assert result.exit_code != ExitCode.SUCCESS
