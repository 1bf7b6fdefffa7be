# topmark:header:start
#
#   project      : Doculint
#   file         : units.py
#   file_relpath : src/doculint/syntax/units.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Group parsed files into compilation units.

A compilation unit is one package: the files of one directory that share the
same ``package`` clause. External test packages (``package foo_test``) thus
form their own unit next to ``foo``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from doculint.config.logging import get_logger
from doculint.syntax.golang import parse_file
from doculint.syntax.nodes import CompilationUnit

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from doculint.config.logging import DoculintLogger
    from doculint.syntax.nodes import SourceFile

logger: DoculintLogger = get_logger(__name__)


def group_units(files: Iterable[SourceFile], *, entry_package: str) -> list[CompilationUnit]:
    """Group already parsed files by (directory, package name).

    Args:
        files (Iterable[SourceFile]): Parsed files, in any order.
        entry_package (str): Package name that marks the program-entry package.

    Returns:
        list[CompilationUnit]: Units sorted by directory and package name; files
            within a unit are sorted by path.
    """
    grouped: dict[tuple[Path, str], list[SourceFile]] = {}
    for source_file in files:
        key = (source_file.path.parent, source_file.package.name)
        grouped.setdefault(key, []).append(source_file)

    units: list[CompilationUnit] = []
    for (directory, package), members in sorted(grouped.items(), key=lambda kv: kv[0]):
        members.sort(key=lambda f: f.path)
        units.append(
            CompilationUnit(
                package=package,
                directory=directory,
                files=tuple(members),
                is_entry=package == entry_package,
            )
        )
        logger.debug("Compilation unit %s (%s): %d file(s)", package, directory, len(members))
    return units


def load_units(paths: Iterable[Path], *, entry_package: str) -> list[CompilationUnit]:
    """Parse ``paths`` and group them into compilation units.

    Args:
        paths (Iterable[Path]): Go source files.
        entry_package (str): Package name that marks the program-entry package.

    Returns:
        list[CompilationUnit]: The compilation units.

    Raises:
        GoSyntaxError: If a file does not parse.
        OSError: If a file cannot be read.
    """
    return group_units((parse_file(p) for p in paths), entry_package=entry_package)
