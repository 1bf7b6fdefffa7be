# topmark:header:start
#
#   project      : Doculint
#   file         : analyzer.py
#   file_relpath : src/doculint/lint/analyzer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``doculint`` rule set and its per-unit entry point.

`ANALYZER` bundles a name, a one-line description and `run_unit`, the function
that applies every rule to one compilation unit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from doculint.config.logging import get_logger
from doculint.diagnostic.model import Rule
from doculint.lint.auditor import TreeAuditor
from doculint.lint.naming import validate_package_name

if TYPE_CHECKING:
    from collections.abc import Callable

    from doculint.config.logging import DoculintLogger
    from doculint.config.model import Config
    from doculint.diagnostic.model import DiagnosticLog
    from doculint.syntax.nodes import CompilationUnit

logger: DoculintLogger = get_logger(__name__)


@dataclass(frozen=True)
class Analyzer:
    """A named rule set.

    Attributes:
        name (str): Identifier of the rule set.
        doc (str): One-line description.
        rules (tuple[Rule, ...]): Rules reported by this rule set.
        run (Callable[[CompilationUnit, Config, DiagnosticLog], None]): Applies the
            rules to one compilation unit.
    """

    name: str
    doc: str
    rules: tuple[Rule, ...]
    run: Callable[[CompilationUnit, Config, DiagnosticLog], None]


def run_unit(unit: CompilationUnit, config: Config, sink: DiagnosticLog) -> None:
    """Apply all documentation rules to one compilation unit.

    Validates the package name, audits every file, then finalizes the
    cross-file package checks.

    Args:
        unit (CompilationUnit): The package to check.
        config (Config): Active configuration (exemption names).
        sink (DiagnosticLog): Receives the diagnostics of this unit.
    """
    logger.info("Checking package %s (%d file(s))", unit.package, len(unit.files))

    message: str | None = validate_package_name(unit.package)
    if message is not None:
        sink.report(None, message, rule=Rule.PACKAGE_NAME)

    auditor = TreeAuditor(
        unit.package,
        sink=sink,
        is_entry=unit.is_entry,
        entry_function=config.entry_function,
        initializer_function=config.initializer_function,
    )
    for source_file in unit.files:
        auditor.audit_file(source_file)
    auditor.finalize()


ANALYZER: Analyzer = Analyzer(
    name="doculint",
    doc=(
        "checks for proper function, type, package, constant, and string and numeric "
        "literal documentation"
    ),
    rules=tuple(Rule),
    run=run_unit,
)
