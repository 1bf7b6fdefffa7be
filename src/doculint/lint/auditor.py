# topmark:header:start
#
#   project      : Doculint
#   file         : auditor.py
#   file_relpath : src/doculint/lint/auditor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree auditor: the documentation rules applied to one compilation unit.

A `TreeAuditor` is created per compilation unit. `TreeAuditor.audit_file` is
called once for every file of the unit (in any order), then
`TreeAuditor.finalize` once, to report packages that never showed a file
named after them.

Rules per node kind:
    * function declarations need a comment starting with the function name
      (except the entry function of the entry package and initializers);
    * ``if`` conditions must not compare a bare literal;
    * ``const`` and ``type`` groups need a comment on the block, and each
      specification a comment starting with its name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from doculint.config.logging import get_logger
from doculint.diagnostic.model import Rule
from doculint.lint.errors import DoculintContractError
from doculint.syntax.nodes import (
    BasicLit,
    BinaryExpr,
    DeclGroup,
    FuncDecl,
    IfStmt,
    NodeKind,
    TypeSpec,
    ValueSpec,
    inspect,
)

if TYPE_CHECKING:
    from doculint.config.logging import DoculintLogger
    from doculint.diagnostic.model import DiagnosticLog
    from doculint.syntax.nodes import Node, SourceFile

logger: DoculintLogger = get_logger(__name__)

DEFAULT_ENTRY_FUNCTION: Final[str] = "main"
DEFAULT_INITIALIZER_FUNCTION: Final[str] = "init"


class DeclShape(Enum):
    """Where a declaration group expects its doc comments."""

    SINGLETON_DECL = "singleton"
    PARENTHESIZED_BLOCK = "block"

    @classmethod
    def of(cls, group: DeclGroup) -> DeclShape:
        """Classify ``group``."""
        return cls.PARENTHESIZED_BLOCK if group.is_block else cls.SINGLETON_DECL


def resolve_doc_comment(spec: ValueSpec | TypeSpec, group: DeclGroup) -> str | None:
    """Return the doc comment text that applies to ``spec``.

    Inside a parenthesized block each specification carries its own comment;
    a singleton declaration has its comment attached to the ``const``/``type``
    keyword instead.

    Args:
        spec (ValueSpec | TypeSpec): The specification.
        group (DeclGroup): The declaration group enclosing ``spec``.

    Returns:
        str | None: The comment text, or ``None`` if there is no comment.
    """
    doc = spec.doc if DeclShape.of(group) is DeclShape.PARENTHESIZED_BLOCK else group.doc
    return doc.text() if doc is not None else None


@dataclass
class PackageDocState:
    """Per-package flag: was a file named after the package seen?

    Owned by one `TreeAuditor`, so it lives exactly as long as the audit of
    one compilation unit.
    """

    has_named_doc_file: dict[str, bool] = field(default_factory=lambda: {})

    def observe(self, package: str) -> None:
        """Register ``package`` (flag ``False``) unless already known."""
        self.has_named_doc_file.setdefault(package, False)

    def mark(self, package: str) -> None:
        """Record that a file named after ``package`` was found."""
        self.has_named_doc_file[package] = True

    def missing(self) -> list[str]:
        """Return packages without a file named after them."""
        return [pkg for pkg, found in self.has_named_doc_file.items() if not found]


class TreeAuditor:
    """Applies the documentation rules to the files of one compilation unit.

    Args:
        package (str): The package identifier of the unit.
        sink (DiagnosticLog): Receives the diagnostics.
        is_entry (bool): Whether the unit is the program-entry package.
        entry_function (str): Name of the program-entry function.
        initializer_function (str): Name of automatic package initializers.
    """

    def __init__(
        self,
        package: str,
        *,
        sink: DiagnosticLog,
        is_entry: bool = False,
        entry_function: str = DEFAULT_ENTRY_FUNCTION,
        initializer_function: str = DEFAULT_INITIALIZER_FUNCTION,
    ) -> None:
        self.package = package
        self.is_entry = is_entry
        self.entry_function = entry_function
        self.initializer_function = initializer_function
        self.state = PackageDocState()
        self._sink = sink
        self._finalized = False

    # --- Per-file pass ---

    def audit_file(self, source_file: SourceFile) -> None:
        """Check the package comment of ``source_file`` and walk its tree."""
        if self._finalized:
            raise DoculintContractError("audit_file() called after finalize()")
        logger.debug("Auditing %s (package %s)", source_file.path, self.package)

        if not self.is_entry:
            self._check_package_doc(source_file)

        inspect(source_file, self._visit)

    def _check_package_doc(self, source_file: SourceFile) -> None:
        pkg: str = self.package
        self.state.observe(pkg)

        if source_file.simple_name != pkg:
            return

        self.state.mark(pkg)

        if source_file.doc is None:
            self._sink.report(
                None,
                f'package "{pkg}" has no comment associated with it in "{pkg}.go"',
                rule=Rule.PACKAGE_COMMENT,
            )
            return

        expected_prefix: str = f"Package {pkg}"
        if not source_file.doc.text().strip().startswith(expected_prefix):
            self._sink.report(
                None,
                f'comment for package "{pkg}" should begin with "{expected_prefix}"',
                rule=Rule.PACKAGE_COMMENT,
            )

    def _visit(self, node: Node) -> bool:
        match node.kind:
            case NodeKind.FUNCTION_DECL:
                assert isinstance(node, FuncDecl)
                self._check_function(node)
            case NodeKind.CONDITIONAL_STMT:
                assert isinstance(node, IfStmt)
                self._check_conditional(node)
            case NodeKind.CONST_GROUP:
                assert isinstance(node, DeclGroup)
                self._check_const_group(node)
            case NodeKind.TYPE_GROUP:
                assert isinstance(node, DeclGroup)
                self._check_type_group(node)
        return True

    # --- Rules ---

    def _is_exempt(self, func: FuncDecl) -> bool:
        if self.is_entry and func.name == self.entry_function:
            return True
        return func.name == self.initializer_function

    def _check_function(self, func: FuncDecl) -> None:
        if self._is_exempt(func):
            logger.trace("Skipping doc check for %s at %s", func.name, func.pos)
            return

        if func.doc is None:
            self._sink.report(
                func.pos,
                f'function "{func.name}" has no comment associated with it',
                rule=Rule.FUNCTION_COMMENT,
            )
            return

        if not func.doc.text().strip().startswith(func.name):
            self._sink.report(
                func.pos,
                f'comment for function "{func.name}" should begin with "{func.name}"',
                rule=Rule.FUNCTION_COMMENT,
            )

    def _check_conditional(self, stmt: IfStmt) -> None:
        cond: Node = stmt.condition
        if not isinstance(cond, BinaryExpr):
            return
        # Only the two immediate operands; nested comparisons are not inspected.
        for operand in (cond.left, cond.right):
            if isinstance(operand, BasicLit):
                self._sink.report(
                    operand.pos,
                    "literal found in conditional",
                    rule=Rule.LITERAL_IN_CONDITIONAL,
                )

    def _check_const_group(self, group: DeclGroup) -> None:
        if DeclShape.of(group) is DeclShape.PARENTHESIZED_BLOCK and group.doc is None:
            self._sink.report(
                group.pos,
                "constant block has no comment associated with it",
                rule=Rule.CONSTANT_COMMENT,
            )

        for spec in group.specs:
            if not isinstance(spec, ValueSpec):
                continue
            if not spec.names:
                raise DoculintContractError(f"constant specification without names at {spec.pos}")

            if len(spec.names) > 1:
                names: str = ", ".join(ident.name for ident in spec.names)
                self._sink.report(
                    spec.pos,
                    f'constants "{names}" should be separated and each have a comment '
                    "associated with them",
                    rule=Rule.CONSTANT_COMMENT,
                )
                continue

            self._check_spec_doc(spec, spec.names[0].name, group, "constant", Rule.CONSTANT_COMMENT)

    def _check_type_group(self, group: DeclGroup) -> None:
        if DeclShape.of(group) is DeclShape.PARENTHESIZED_BLOCK and group.doc is None:
            self._sink.report(
                group.pos,
                "type block has no comment associated with it",
                rule=Rule.TYPE_COMMENT,
            )

        for spec in group.specs:
            if isinstance(spec, TypeSpec):
                self._check_spec_doc(spec, spec.name.name, group, "type", Rule.TYPE_COMMENT)

    def _check_spec_doc(
        self,
        spec: ValueSpec | TypeSpec,
        name: str,
        group: DeclGroup,
        noun: str,
        rule: Rule,
    ) -> None:
        text: str | None = resolve_doc_comment(spec, group)
        if text is None:
            self._sink.report(
                spec.pos, f'{noun} "{name}" has no comment associated with it', rule=rule
            )
            return

        if not text.strip().startswith(name):
            self._sink.report(
                spec.pos, f'comment for {noun} "{name}" should begin with "{name}"', rule=rule
            )

    # --- Finalization ---

    def finalize(self) -> None:
        """Report packages for which no file named after the package was seen.

        Must be called once, after `audit_file` ran for every file of the unit.
        """
        if self._finalized:
            raise DoculintContractError("finalize() called twice")
        self._finalized = True

        for pkg in self.state.missing():
            self._sink.report(
                None,
                f'package "{pkg}" has no file with the same name containing package comment',
                rule=Rule.PACKAGE_FILE,
            )
