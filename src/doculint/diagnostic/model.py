# topmark:header:start
#
#   project      : Doculint
#   file         : model.py
#   file_relpath : src/doculint/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for Doculint.

Lint rules report their findings as `Diagnostic` values; configuration loading
uses the same type for informational notices and warnings. Every diagnostic is
immutable once created and is handed to a `DiagnosticLog`, which acts as the
sink for one compilation unit (or one configuration load).

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Rule: identifiers of the documentation rules.
    * Diagnostic: immutable payload (position, message, rule, level).
    * DiagnosticLog: mutable, append-only collection.
    * FrozenDiagnosticLog: immutable snapshot container for frozen objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from doculint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from doculint.config.logging import DoculintLogger
    from doculint.syntax.nodes import Position


logger: DoculintLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics.
    Lint findings and configuration notices are reported as ``WARNING``; the
    ``level`` field of machine output uses these values.
    for notices produced while loading configuration.
    """

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Returns:
            Callable[[str], str]: The color function for human-readable output.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


class Rule(str, Enum):
    """Documentation rules enforced by the ``doculint`` rule set."""

    PACKAGE_NAME = "package-name"
    PACKAGE_COMMENT = "package-comment"
    PACKAGE_FILE = "package-file"
    FUNCTION_COMMENT = "function-comment"
    LITERAL_IN_CONDITIONAL = "literal-in-conditional"
    CONSTANT_COMMENT = "constant-comment"
    TYPE_COMMENT = "type-comment"

    @property
    def description(self) -> str:
        """Return a one-line description of the rule."""
        return _RULE_DESCRIPTIONS[self]


_RULE_DESCRIPTIONS: dict[Rule, str] = {
    Rule.PACKAGE_NAME: "package names are lowercase and contain no - or _",
    Rule.PACKAGE_COMMENT: "the file named after the package carries a 'Package <name>' comment",
    Rule.PACKAGE_FILE: "every package has a file named after it",
    Rule.FUNCTION_COMMENT: "functions have a comment starting with their name",
    Rule.LITERAL_IN_CONDITIONAL: "conditionals do not compare against bare literals",
    Rule.CONSTANT_COMMENT: "constants (and constant blocks) have a comment starting with their name",
    Rule.TYPE_COMMENT: "types (and type blocks) have a comment starting with their name",
}


@dataclass(frozen=True)
class Diagnostic:
    """Immutable diagnostic tied to a source position.

    Attributes:
        message (str): Human-readable description of the violation.
        position (Position | None): Where the violation was found; ``None`` for
            file-scoped and package-scoped findings.
        rule (Rule | None): The rule that produced this diagnostic (``None`` for
            configuration notices).
        level (DiagnosticLevel): Severity.
        scope (str | None): Location label for diagnostics without a position
            (usually the package directory).
    """

    message: str
    position: Position | None = None
    rule: Rule | None = None
    level: DiagnosticLevel = DiagnosticLevel.WARNING
    scope: str | None = None

    @property
    def location(self) -> str:
        """Return ``file:line:col`` for positioned diagnostics, else the scope label."""
        if self.position is not None:
            return str(self.position)
        return self.scope or ""




@dataclass
class DiagnosticLog:
    """Mutable, append-only collection of diagnostics.

    One log is the sink of exactly one compilation unit (or of one configuration
    load); logs are merged afterwards with `extend`. ``scope`` is copied into
    every position-less diagnostic reported through `report`.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])
    scope: str | None = None

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics.

        Args:
            diagnostics: Existing diagnostics (e.g., from a frozen snapshot).

        Returns:
            A new DiagnosticLog containing the provided diagnostics.
        """
        return cls(items=list(diagnostics))

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace(
            "Adding [%s]: %s %r", diagnostic.level.value, diagnostic.location, diagnostic.message
        )

    def report(self, position: Position | None, message: str, *, rule: Rule) -> None:
        """Report a rule violation.

        Args:
            position: Source position of the offending node, or ``None`` for
                file-scoped and package-scoped violations.
            message: The violation message.
            rule: The rule that was violated.
        """
        self._add(Diagnostic(message=message, position=position, rule=rule, scope=self.scope))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` notice (no position, no rule)."""
        self._add(Diagnostic(message=message, level=DiagnosticLevel.WARNING, scope=self.scope))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append diagnostics collected elsewhere, preserving their order."""
        for diagnostic in diagnostics:
            self._add(diagnostic)

    def findings(self) -> list[Diagnostic]:
        """Return the diagnostics produced by lint rules (those with a rule id)."""
        return [d for d in self.items if d.rule is not None]

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart to `DiagnosticLog`, stored on frozen objects such as `Config`."""

    items: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of contained diagnostics."""
        return len(self.items)
