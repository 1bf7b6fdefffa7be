# topmark:header:start
#
#   project      : Doculint
#   file         : runner.py
#   file_relpath : src/doculint/lint/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the rule set over many compilation units.

Units are independent: each one is audited into its own `DiagnosticLog`, so
they may run on worker threads without locking. Results are merged in unit
order, keeping the output deterministic whatever the number of jobs.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from doculint.config.logging import get_logger
from doculint.diagnostic.model import DiagnosticLog
from doculint.lint.analyzer import ANALYZER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from doculint.config.logging import DoculintLogger
    from doculint.config.model import Config
    from doculint.diagnostic.model import Diagnostic
    from doculint.lint.analyzer import Analyzer
    from doculint.syntax.nodes import CompilationUnit

logger: DoculintLogger = get_logger(__name__)


@dataclass
class LintResult:
    """Outcome of a lint run.

    Attributes:
        units (list[CompilationUnit]): The audited units, in order.
        logs (list[DiagnosticLog]): One log per unit, aligned with ``units``.
    """

    units: list[CompilationUnit] = field(default_factory=lambda: [])
    logs: list[DiagnosticLog] = field(default_factory=lambda: [])

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Return all diagnostics, unit by unit."""
        return [d for log in self.logs for d in log]

    @property
    def files_checked(self) -> int:
        """Return the number of audited files."""
        return sum(len(unit.files) for unit in self.units)

    def has_findings(self) -> bool:
        """Return True if any rule reported a violation."""
        return any(log.findings() for log in self.logs)


def _run_one(unit: CompilationUnit, config: Config, analyzer: Analyzer) -> DiagnosticLog:
    sink = DiagnosticLog(scope=str(unit.directory))
    analyzer.run(unit, config, sink)
    logger.debug("Package %s: %d diagnostic(s)", unit.package, len(sink))
    return sink


def run_units(
    units: Sequence[CompilationUnit],
    config: Config,
    *,
    analyzer: Analyzer = ANALYZER,
) -> LintResult:
    """Apply ``analyzer`` to every unit.

    Args:
        units (Sequence[CompilationUnit]): Units to audit.
        config (Config): Active configuration; ``config.jobs > 1`` audits units
            on a thread pool.
        analyzer (Analyzer): The rule set to run.

    Returns:
        LintResult: Per-unit diagnostics in unit order.
    """
    jobs: int = max(1, config.jobs)
    if jobs == 1 or len(units) <= 1:
        logs: list[DiagnosticLog] = [_run_one(unit, config, analyzer) for unit in units]
    else:
        logger.debug("Auditing %d unit(s) with %d worker(s)", len(units), jobs)
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            logs = list(pool.map(lambda u: _run_one(u, config, analyzer), units))
    return LintResult(units=list(units), logs=logs)
