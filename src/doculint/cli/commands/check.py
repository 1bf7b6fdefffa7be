# topmark:header:start
#
#   project      : Doculint
#   file         : check.py
#   file_relpath : src/doculint/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doculint `check` command.

Lints Go packages and reports documentation problems, one diagnostic per line.

Examples:
  Lint every package below the working directory:

    $ doculint check ./...

  Lint one package, skipping tests, and emit NDJSON:

    $ doculint check --no-tests --format ndjson ./internal/server

Exit status is 0 when no rule reports a violation, 3 when diagnostics were
reported, and a sysexits-style code for usage, config, parse or I/O errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from doculint.cli.cli_types import EnumChoiceParam, OutputFormat
from doculint.cli.cmd_common import (
    build_config,
    build_file_list,
    build_units,
    get_effective_verbosity,
    lint_units,
)
from doculint.cli.console import get_console
from doculint.cli.emitters import emit_human, emit_machine
from doculint.cli.exit_codes import ExitCode
from doculint.cli.options import (
    common_config_options,
    common_file_and_filtering_options,
    common_rule_options,
)
from doculint.config.logging import get_logger
from doculint.constants import DEFAULT_CHECK_PATHS

if TYPE_CHECKING:
    from doculint.cli.console import ConsoleLike
    from doculint.config.logging import DoculintLogger
    from doculint.config.model import Config
    from doculint.lint.runner import LintResult

logger: DoculintLogger = get_logger(__name__)


@click.command(
    name="check",
    help="Lint Go packages for documentation problems.",
    epilog="""\
PATHS are Go files, directories, or DIR/... patterns (default: ./...).

Examples:

  doculint check ./...

  doculint check --format json cmd/server
""",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_file_and_filtering_options
@common_rule_options
@click.option(
    "--summary",
    "summary_mode",
    is_flag=True,
    help="Show counts instead of individual diagnostics.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def check_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    include_tests: bool | None,
    entry_package: str | None,
    jobs: int | None,
    summary_mode: bool,
    output_format: OutputFormat | None,
) -> None:
    """Lint the Go packages selected by ``paths``.

    Args:
        paths (tuple[str, ...]): Files, directories or ``dir/...`` patterns.
        no_config (bool): Skip discovery of local config files.
        config_paths (tuple[str, ...]): Extra config files merged after discovery.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns of files to skip.
        include_tests (bool | None): Override for ``include_tests``.
        entry_package (str | None): Override for ``entry_package``.
        jobs (int | None): Override for ``jobs``.
        summary_mode (bool): Print counts instead of individual diagnostics.
        output_format (OutputFormat | None): Output format (default: human text).
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    verbosity: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    color: bool = bool(ctx.obj.get("color_enabled", False)) and not fmt.is_machine

    config: Config = build_config(
        config_paths=config_paths,
        no_config=no_config,
        entry_package=entry_package,
        include_tests=include_tests,
        exclude_patterns=exclude_patterns,
        jobs=jobs,
    )
    if verbosity >= 0:
        for notice in config.diagnostics:
            console.warn(f"config: {notice.message}")
    if verbosity > 0:
        for cfg_file in config.config_files:
            console.print(console.styled(f"Using config: {cfg_file}", dim=True))

    files = build_file_list(paths or DEFAULT_CHECK_PATHS, config)
    if not files:
        if verbosity >= 0 and not fmt.is_machine:
            console.warn("doculint: no Go files matched the given paths")
        logger.info("No files to lint")

    units = build_units(files, config)
    result: LintResult = lint_units(units, config)

    if fmt.is_machine:
        emit_machine(console, result, fmt=fmt, summary_mode=summary_mode)
    else:
        emit_human(
            console,
            result,
            color=color,
            summary_mode=summary_mode,
            verbosity=verbosity,
        )

    if result.has_findings():
        ctx.exit(ExitCode.FINDINGS)
