# topmark:header:start
#
#   project      : Doculint
#   file         : rules.py
#   file_relpath : src/doculint/cli/commands/rules.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doculint `rules` command.

Lists the rule set name, its description and the rule identifiers that can
appear in diagnostics.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from doculint.cli.cli_types import EnumChoiceParam, OutputFormat
from doculint.cli.console import get_console
from doculint.lint.analyzer import ANALYZER

if TYPE_CHECKING:
    from doculint.cli.console import ConsoleLike


@click.command(
    name="rules",
    help="List the documentation rules checked by Doculint.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def rules_command(*, output_format: OutputFormat | None = None) -> None:
    """List the rules of the active rule set."""
    console: ConsoleLike = get_console()
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    entries: list[dict[str, str]] = [
        {"id": r.value, "description": r.description} for r in ANALYZER.rules
    ]
    if fmt == OutputFormat.JSON:
        doc = {"name": ANALYZER.name, "doc": ANALYZER.doc, "rules": entries}
        console.print(json.dumps(doc, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for entry in entries:
            console.print(json.dumps(entry))
        return

    console.print(console.styled(ANALYZER.name, bold=True) + f": {ANALYZER.doc}")
    console.print()
    width: int = max(len(r.value) for r in ANALYZER.rules)
    for r in ANALYZER.rules:
        console.print(f"  {console.styled(f'{r.value:<{width}}', fg='cyan')}  {r.description}")
