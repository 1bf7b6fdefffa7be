# topmark:header:start
#
#   project      : Doculint
#   file         : emitters.py
#   file_relpath : src/doculint/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render lint results for humans and machines.

Shaping (`diagnostic_to_dict`, `build_summary`) is kept free of console access so
it can be tested directly; the ``emit_*`` helpers write to the active
`ConsoleLike`.

Machine shapes:
    - JSON: one document ``{"meta": ..., "diagnostics": [...], "summary": ...}``
      (``diagnostics`` is omitted with ``--summary``).
    - NDJSON: one ``{"kind": "diagnostic", ...}`` object per line, followed by a
      single ``{"kind": "summary", ...}`` line.
"""

from __future__ import annotations

import json
from collections import Counter
from typing import TYPE_CHECKING, Any

from yachalk import chalk

from doculint.cli.cli_types import OutputFormat
from doculint.constants import DOCULINT_VERSION
from doculint.lint.analyzer import ANALYZER

if TYPE_CHECKING:
    from doculint.cli.console import ConsoleLike
    from doculint.diagnostic.model import Diagnostic
    from doculint.lint.runner import LintResult


def diagnostic_to_dict(diagnostic: Diagnostic) -> dict[str, Any]:
    """Return the machine representation of one diagnostic.

    File- and package-scoped diagnostics have ``line`` and ``column`` set to
    ``None`` and use their scope (the package directory) as ``file``.
    """
    pos = diagnostic.position
    return {
        "file": pos.filename if pos is not None else diagnostic.scope,
        "line": pos.line if pos is not None else None,
        "column": pos.column if pos is not None else None,
        "rule": diagnostic.rule.value if diagnostic.rule is not None else None,
        "level": diagnostic.level.value,
        "message": diagnostic.message,
    }


def build_summary(result: LintResult) -> dict[str, Any]:
    """Return aggregated counts for a lint run."""
    by_rule: Counter[str] = Counter(
        d.rule.value for d in result.diagnostics if d.rule is not None
    )
    return {
        "packages": len(result.units),
        "files": result.files_checked,
        "diagnostics": sum(by_rule.values()),
        "by_rule": dict(sorted(by_rule.items())),
    }


def build_meta() -> dict[str, str]:
    """Return the tool metadata attached to JSON output."""
    return {"tool": ANALYZER.name, "version": DOCULINT_VERSION}


def render_diagnostic(diagnostic: Diagnostic, *, color: bool) -> str:
    """Return ``location: message`` for one diagnostic, optionally colored."""
    location: str = diagnostic.location
    if not color:
        return f"{location}: {diagnostic.message}" if location else diagnostic.message
    styled_loc: str = chalk.bold(location)
    rule: str = f" {chalk.gray(f'[{diagnostic.rule.value}]')}" if diagnostic.rule else ""
    text: str = f"{styled_loc}: {diagnostic.level.color(diagnostic.message)}{rule}"
    return text if location else diagnostic.level.color(diagnostic.message)


def emit_human(
    console: ConsoleLike,
    result: LintResult,
    *,
    color: bool,
    summary_mode: bool,
    verbosity: int,
) -> None:
    """Print diagnostics one per line, then an optional summary."""
    if not summary_mode:
        for diagnostic in result.diagnostics:
            console.print(render_diagnostic(diagnostic, color=color))

    if summary_mode or verbosity > 0:
        summary: dict[str, Any] = build_summary(result)
        console.print()
        console.print(console.styled("Summary:", bold=True, underline=True))
        console.print(f"  packages    : {summary['packages']}")
        console.print(f"  files       : {summary['files']}")
        console.print(f"  diagnostics : {summary['diagnostics']}")
        width: int = max((len(k) for k in summary["by_rule"]), default=0)
        for rule, count in summary["by_rule"].items():
            line: str = f"    {rule:<{width}} : {count}"
            console.print(chalk.yellow(line) if color else line)


def serialize_machine(
    result: LintResult,
    *,
    fmt: OutputFormat,
    summary_mode: bool,
) -> list[str]:
    """Serialize a lint run as JSON (one string) or NDJSON (one string per line).

    Raises:
        ValueError: If ``fmt`` is not a machine format.
    """
    summary: dict[str, Any] = build_summary(result)
    if fmt == OutputFormat.JSON:
        doc: dict[str, Any] = {"meta": build_meta()}
        if not summary_mode:
            doc["diagnostics"] = [diagnostic_to_dict(d) for d in result.diagnostics]
        doc["summary"] = summary
        return [json.dumps(doc, indent=2)]
    if fmt == OutputFormat.NDJSON:
        lines: list[str] = []
        if not summary_mode:
            lines.extend(
                json.dumps({"kind": "diagnostic", **diagnostic_to_dict(d)})
                for d in result.diagnostics
            )
        lines.append(json.dumps({"kind": "summary", **summary}))
        return lines
    raise ValueError(f"Unsupported machine output format: {fmt!r}")


def emit_machine(
    console: ConsoleLike,
    result: LintResult,
    *,
    fmt: OutputFormat,
    summary_mode: bool,
) -> None:
    """Write machine output to the console."""
    for line in serialize_machine(result, fmt=fmt, summary_mode=summary_mode):
        console.print(line)
