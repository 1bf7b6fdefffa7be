# topmark:header:start
#
#   project      : Doculint
#   file         : version.py
#   file_relpath : src/doculint/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doculint `version` command.

Prints the current Doculint version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from doculint.cli.cli_types import EnumChoiceParam, OutputFormat
from doculint.cli.cmd_common import get_effective_verbosity
from doculint.cli.console import get_console
from doculint.constants import DOCULINT_VERSION

if TYPE_CHECKING:
    from doculint.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Doculint.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Doculint.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine:
        console.print(json.dumps({"version": DOCULINT_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("Doculint version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DOCULINT_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCULINT_VERSION, bold=True))
