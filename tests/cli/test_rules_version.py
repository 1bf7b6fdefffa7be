# topmark:header:start
#
#   project      : Doculint
#   file         : test_rules_version.py
#   file_relpath : tests/cli/test_rules_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `doculint rules`, `doculint version` and the bare group."""

from __future__ import annotations

import json
from typing import Any

import pytest

from doculint.constants import DOCULINT_VERSION
from doculint.diagnostic.model import Rule
from tests.cli.conftest import assert_SUCCESS, output_lines, run_cli

pytestmark = pytest.mark.cli


def test_rules_text() -> None:
    result = run_cli(["rules"])
    assert_SUCCESS(result)
    lines = output_lines(result)
    assert lines[0].startswith("doculint: ")
    assert [line.split()[0] for line in lines[1:]] == [r.value for r in Rule]


def test_rules_json() -> None:
    result = run_cli(["rules", "--format", "json"])
    assert_SUCCESS(result)
    payload: dict[str, Any] = json.loads(result.output)
    assert payload["name"] == "doculint"
    assert [r["id"] for r in payload["rules"]] == [r.value for r in Rule]
    assert all(r["description"] for r in payload["rules"])


def test_rules_ndjson() -> None:
    result = run_cli(["rules", "--format", "ndjson"])
    assert_SUCCESS(result)
    assert len(output_lines(result)) == len(Rule)


def test_version_plain() -> None:
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == DOCULINT_VERSION


def test_version_json() -> None:
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {"version": DOCULINT_VERSION}


def test_no_subcommand_prints_hint_and_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "doculint check" in result.output
    assert "Commands:" in result.output
