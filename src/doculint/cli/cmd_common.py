# topmark:header:start
#
#   project      : Doculint
#   file         : cmd_common.py
#   file_relpath : src/doculint/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

These helpers translate front-end failures (config, file discovery, parsing)
into `DoculintError` subclasses carrying the matching exit code. They avoid
output policy; commands decide what to print.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from doculint.cli.errors import (
    DoculintConfigError,
    DoculintFileNotFoundError,
    DoculintInternalError,
    DoculintIOError,
    DoculintParseError,
)
from doculint.config.io import ConfigLoadError
from doculint.config.logging import get_logger
from doculint.config.model import MutableConfig
from doculint.file_resolver import resolve_file_list
from doculint.lint.errors import DoculintContractError
from doculint.lint.runner import run_units
from doculint.syntax.errors import GoSyntaxError
from doculint.syntax.units import load_units

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    import click

    from doculint.config.logging import DoculintLogger
    from doculint.config.model import Config
    from doculint.lint.runner import LintResult
    from doculint.syntax.nodes import CompilationUnit

logger: DoculintLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the context (0 if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def build_config(
    *,
    config_paths: Iterable[str],
    no_config: bool,
    entry_package: str | None = None,
    include_tests: bool | None = None,
    exclude_patterns: Iterable[str] = (),
    jobs: int | None = None,
) -> Config:
    """Load, merge and freeze the effective configuration.

    Raises:
        DoculintConfigError: If a config file cannot be read or parsed.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            anchor=Path.cwd(),
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigLoadError as e:
        raise DoculintConfigError(str(e)) from e

    draft = draft.apply_overrides(
        entry_package=entry_package,
        include_tests=include_tests,
        exclude_patterns=exclude_patterns,
        jobs=jobs,
    )
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


def build_file_list(paths: Sequence[str], config: Config) -> list[Path]:
    """Resolve positional paths into Go files.

    Raises:
        DoculintFileNotFoundError: If an input path does not exist.
    """
    try:
        return resolve_file_list(paths, config)
    except FileNotFoundError as e:
        raise DoculintFileNotFoundError(str(e)) from e


def build_units(files: Sequence[Path], config: Config) -> list[CompilationUnit]:
    """Parse files into compilation units.

    Raises:
        DoculintParseError: If a file does not parse.
        DoculintIOError: If a file cannot be read.
    """
    try:
        return load_units(files, entry_package=config.entry_package)
    except GoSyntaxError as e:
        raise DoculintParseError(str(e)) from e
    except OSError as e:
        logger.error("Cannot read %s: %s", getattr(e, "filename", "?"), e)
        raise DoculintIOError(f"Cannot read {getattr(e, 'filename', None) or 'file'}: {e}") from e


def lint_units(units: Sequence[CompilationUnit], config: Config) -> LintResult:
    """Run the rule set over ``units``.

    Raises:
        DoculintInternalError: If the rule engine reports a contract violation.
    """
    try:
        return run_units(units, config)
    except DoculintContractError as e:
        logger.exception("Rule engine contract violation")
        raise DoculintInternalError(str(e)) from e
