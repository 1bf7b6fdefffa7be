# topmark:header:start
#
#   project      : Doculint
#   file         : test_diagnostic_log.py
#   file_relpath : tests/diagnostic/test_diagnostic_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for diagnostics and diagnostic logs."""

from __future__ import annotations

from doculint.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog, Rule
from doculint.syntax.nodes import Position


def test_report_keeps_order_and_scope() -> None:
    log = DiagnosticLog(scope="pkg/dir")
    log.report(Position("a.go", 3, 1), "first", rule=Rule.FUNCTION_COMMENT)
    log.report(None, "second", rule=Rule.PACKAGE_FILE)

    assert [d.message for d in log] == ["first", "second"]
    assert [d.location for d in log] == ["a.go:3:1", "pkg/dir"]
    assert len(log.findings()) == 2


def test_warnings_are_not_findings() -> None:
    log = DiagnosticLog()
    log.add_warning("w")

    assert log.findings() == []
    assert [d.level for d in log] == [DiagnosticLevel.WARNING]
    assert [d.location for d in log] == [""]


def test_extend_preserves_order() -> None:
    first = DiagnosticLog(scope="a")
    first.report(None, "one", rule=Rule.PACKAGE_FILE)
    merged = DiagnosticLog()
    merged.add_warning("zero")
    merged.extend(first)

    assert [d.message for d in merged] == ["zero", "one"]
    assert [d.scope for d in merged] == [None, "a"]


def test_freeze_and_thaw_round_trip_preserves_items() -> None:
    log = DiagnosticLog()
    log.add_warning("w")
    frozen = log.freeze()
    log.add_warning("later")

    assert len(frozen) == 1
    assert list(DiagnosticLog.from_iterable(frozen)) == list(frozen)


def test_rule_descriptions() -> None:
    assert all(rule.description for rule in Rule)
    assert Diagnostic(message="m").level is DiagnosticLevel.WARNING
