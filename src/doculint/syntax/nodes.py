# topmark:header:start
#
#   project      : Doculint
#   file         : nodes.py
#   file_relpath : src/doculint/syntax/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Position-annotated syntax tree consumed by the lint rules.

The model covers the parts of a Go source file the documentation rules look at
(function declarations, ``if`` statements, binary expressions, literals and
``const``/``type`` declaration groups). Everything else is represented by the
generic `Node` so that traversal still reaches nested declarations.

All nodes are frozen dataclasses: the tree is read-only once built.

Traversal:
    `inspect` walks a tree in pre-order, like Go's ``ast.Inspect``. The visitor
    returns ``False`` to skip a node's children.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

# `//` directly followed by a tool directive, e.g. `//go:generate` or `//nolint:all`.
_DIRECTIVE_RE: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]+:[a-z0-9]")
_DIRECTIVE_KEYWORDS: Final[tuple[str, ...]] = ("line ", "extern ", "export ")


class NodeKind(Enum):
    """Closed set of node kinds the auditor dispatches on."""

    FUNCTION_DECL = "function_decl"
    CONDITIONAL_STMT = "conditional_stmt"
    CONST_GROUP = "const_group"
    TYPE_GROUP = "type_group"
    OTHER = "other"


class DeclToken(Enum):
    """Keyword introducing a declaration group."""

    CONST = "const"
    TYPE = "type"
    VAR = "var"
    IMPORT = "import"


class LiteralKind(Enum):
    """Kinds of basic literals."""

    INT = "int"
    FLOAT = "float"
    IMAG = "imag"
    CHAR = "char"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class Position:
    """A source location.

    Attributes:
        filename (str): Path of the source file as given to the parser.
        line (int): 1-based line number.
        column (int): 1-based column, counted in bytes.
    """

    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"


def _is_directive(text: str) -> bool:
    if text.startswith(_DIRECTIVE_KEYWORDS):
        return True
    return _DIRECTIVE_RE.match(text) is not None


@dataclass(frozen=True, slots=True)
class CommentGroup:
    """A sequence of comments with no other tokens and no blank lines between them.

    Attributes:
        comments (tuple[str, ...]): Raw comment tokens, including their ``//`` or
            ``/* */`` markers.
    """

    comments: tuple[str, ...]

    def text(self) -> str:
        """Return the comment text without markers.

        Comment markers are removed (along with the first space of a ``//``
        comment), tool directives such as ``//go:generate`` are dropped,
        trailing whitespace is stripped from every line, and leading and
        trailing blank lines are removed. Runs of blank lines collapse to one.
        """
        lines: list[str] = []
        for comment in self.comments:
            if comment.startswith("//"):
                body = comment[2:]
                if body.startswith(" "):
                    body = body[1:]
                elif _is_directive(body):
                    continue
            elif comment.startswith("/*"):
                body = comment[2:-2]
            else:
                body = comment
            lines.extend(line.rstrip() for line in body.split("\n"))

        out: list[str] = []
        for line in lines:
            if line == "" and (not out or out[-1] == ""):
                continue
            out.append(line)
        while out and out[-1] == "":
            out.pop()
        return "\n".join(out)


@dataclass(frozen=True, kw_only=True)
class Node:
    """Generic syntax node.

    Attributes:
        pos (Position): Start position of the node.
        node_type (str): The parser's name for the node (e.g. ``block``).
        children (tuple[Node, ...]): Child nodes in source order.
    """

    pos: Position
    node_type: str = ""
    children: tuple[Node, ...] = ()

    @property
    def kind(self) -> NodeKind:
        """Return the dispatch kind of this node."""
        return NodeKind.OTHER

    def iter_children(self) -> Iterator[Node]:
        """Yield the direct children of this node in source order."""
        yield from self.children


@dataclass(frozen=True, kw_only=True)
class Ident(Node):
    """An identifier (including the predeclared ``true``, ``false``, ``nil`` and ``iota``)."""

    name: str
    node_type: str = "identifier"


@dataclass(frozen=True, kw_only=True)
class BasicLit(Node):
    """A number, rune or string literal."""

    literal_kind: LiteralKind
    value: str
    node_type: str = "literal"


@dataclass(frozen=True, kw_only=True)
class BinaryExpr(Node):
    """A binary expression ``left <operator> right``."""

    left: Node
    operator: str
    right: Node
    node_type: str = "binary_expression"

    def iter_children(self) -> Iterator[Node]:
        """Yield the left operand, then the right operand."""
        yield self.left
        yield self.right


@dataclass(frozen=True, kw_only=True)
class IfStmt(Node):
    """An ``if`` statement.

    ``children`` holds the initializer, the body and the ``else`` branch
    (in that order, where present).
    """

    condition: Node
    node_type: str = "if_statement"

    @property
    def kind(self) -> NodeKind:
        """Return `NodeKind.CONDITIONAL_STMT`."""
        return NodeKind.CONDITIONAL_STMT

    def iter_children(self) -> Iterator[Node]:
        """Yield the condition followed by the remaining children."""
        yield self.condition
        yield from self.children


@dataclass(frozen=True, kw_only=True)
class FuncDecl(Node):
    """A function or method declaration; ``children`` holds its signature and body."""

    name: str
    doc: CommentGroup | None = None
    node_type: str = "function_declaration"

    @property
    def kind(self) -> NodeKind:
        """Return `NodeKind.FUNCTION_DECL`."""
        return NodeKind.FUNCTION_DECL


@dataclass(frozen=True, kw_only=True)
class ValueSpec(Node):
    """One specification of a ``const`` (or ``var``) group: ``a, b T = x, y``.

    ``pos`` is the position of the first name; ``children`` holds the values.
    """

    names: tuple[Ident, ...]
    doc: CommentGroup | None = None
    node_type: str = "const_spec"

    def iter_children(self) -> Iterator[Node]:
        """Yield the names, then the values."""
        yield from self.names
        yield from self.children


@dataclass(frozen=True, kw_only=True)
class TypeSpec(Node):
    """One specification of a ``type`` group (a type definition or an alias)."""

    name: Ident
    doc: CommentGroup | None = None
    node_type: str = "type_spec"

    def iter_children(self) -> Iterator[Node]:
        """Yield the name, then the type expression."""
        yield self.name
        yield from self.children


@dataclass(frozen=True, kw_only=True)
class DeclGroup(Node):
    """A ``const``, ``type``, ``var`` or ``import`` declaration.

    Attributes:
        token (DeclToken): The introducing keyword.
        lparen (Position | None): Position of ``(`` for parenthesized blocks,
            ``None`` for a singleton declaration.
        doc (CommentGroup | None): Comment attached to the keyword.
        specs (tuple[Node, ...]): The specifications, in source order.
    """

    token: DeclToken
    lparen: Position | None = None
    doc: CommentGroup | None = None
    specs: tuple[Node, ...] = ()
    node_type: str = "declaration"

    @property
    def kind(self) -> NodeKind:
        """Return the group kind for ``const`` and ``type`` groups, else `NodeKind.OTHER`."""
        if self.token is DeclToken.CONST:
            return NodeKind.CONST_GROUP
        if self.token is DeclToken.TYPE:
            return NodeKind.TYPE_GROUP
        return NodeKind.OTHER

    @property
    def is_block(self) -> bool:
        """Return True if the specifications are enclosed in parentheses."""
        return self.lparen is not None

    def iter_children(self) -> Iterator[Node]:
        """Yield the specifications."""
        yield from self.specs


@dataclass(frozen=True, kw_only=True)
class SourceFile(Node):
    """A parsed source file.

    Attributes:
        path (Path): Path of the file.
        package (Ident): Name in the file's ``package`` clause.
        doc (CommentGroup | None): Package doc comment (the comment group
            directly above the ``package`` clause).
        decls (tuple[Node, ...]): Top-level declarations and statements.
    """

    path: Path
    package: Ident
    doc: CommentGroup | None = None
    decls: tuple[Node, ...] = ()
    node_type: str = "source_file"

    @property
    def simple_name(self) -> str:
        """Return the file name without directory and extension."""
        return self.path.stem

    def iter_children(self) -> Iterator[Node]:
        """Yield the package name, then the declarations."""
        yield self.package
        yield from self.decls


@dataclass(frozen=True)
class CompilationUnit:
    """One package's complete set of source files, analyzed together.

    Attributes:
        package (str): The package identifier.
        directory (Path): Directory holding the files.
        files (tuple[SourceFile, ...]): The parsed files, in path order.
        is_entry (bool): Whether this is the program-entry package.
    """

    package: str
    directory: Path
    files: tuple[SourceFile, ...] = field(default_factory=tuple)
    is_entry: bool = False


def inspect(node: Node, visit: Callable[[Node], bool]) -> None:
    """Traverse ``node`` and its descendants in pre-order.

    Args:
        node (Node): Root of the traversal.
        visit (Callable[[Node], bool]): Called for every node; when it returns
            ``False`` the node's children are skipped.
    """
    stack: list[Node] = [node]
    while stack:
        current: Node = stack.pop()
        if not visit(current):
            continue
        # Reverse so that children are visited in source order.
        stack.extend(reversed(list(current.iter_children())))
