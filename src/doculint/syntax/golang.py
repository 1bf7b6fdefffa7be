# topmark:header:start
#
#   project      : Doculint
#   file         : golang.py
#   file_relpath : src/doculint/syntax/golang.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree-sitter powered Go front-end.

Parses Go source with ``tree-sitter-go`` and converts the concrete syntax tree
into the immutable node model of `doculint.syntax.nodes`.

Doc comments:
    Tree-sitter keeps comments as ordinary sibling nodes, so attachment is
    recomputed here. A comment group documents the node that follows it when

    * its last comment ends on the line right above the node,
    * its comments sit on consecutive lines (no blank line in between), and
    * it does not start on the line of the preceding token (that would be a
      trailing line comment of the previous statement).
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import TYPE_CHECKING, Final

import tree_sitter_go
from tree_sitter import Language, Parser

from doculint.config.logging import get_logger
from doculint.syntax.errors import GoSyntaxError
from doculint.syntax.nodes import (
    BasicLit,
    BinaryExpr,
    CommentGroup,
    DeclGroup,
    DeclToken,
    FuncDecl,
    Ident,
    IfStmt,
    LiteralKind,
    Node,
    Position,
    SourceFile,
    TypeSpec,
    ValueSpec,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from tree_sitter import Node as TSNode

    from doculint.config.logging import DoculintLogger

logger: DoculintLogger = get_logger(__name__)

GO_LANGUAGE: Final[Language] = Language(tree_sitter_go.language())

_LITERAL_KINDS: Final[dict[str, LiteralKind]] = {
    "int_literal": LiteralKind.INT,
    "float_literal": LiteralKind.FLOAT,
    "imaginary_literal": LiteralKind.IMAG,
    "rune_literal": LiteralKind.CHAR,
    "interpreted_string_literal": LiteralKind.STRING,
    "raw_string_literal": LiteralKind.STRING,
}

# `true`, `false`, `nil` and `iota` are predeclared identifiers, not literals.
_IDENT_TYPES: Final[frozenset[str]] = frozenset(
    {
        "identifier",
        "field_identifier",
        "type_identifier",
        "package_identifier",
        "label_name",
        "blank_identifier",
        "true",
        "false",
        "nil",
        "iota",
    }
)

_DECL_TOKENS: Final[dict[str, DeclToken]] = {
    "const_declaration": DeclToken.CONST,
    "type_declaration": DeclToken.TYPE,
    "var_declaration": DeclToken.VAR,
    "import_declaration": DeclToken.IMPORT,
}

_VALUE_SPEC_TYPES: Final[frozenset[str]] = frozenset({"const_spec", "var_spec"})
_TYPE_SPEC_TYPES: Final[frozenset[str]] = frozenset({"type_spec", "type_alias"})
_SPEC_TYPES: Final[frozenset[str]] = _VALUE_SPEC_TYPES | _TYPE_SPEC_TYPES | {"import_spec"}
_SPEC_LIST_TYPES: Final[frozenset[str]] = frozenset(
    {"const_spec_list", "var_spec_list", "type_spec_list", "import_spec_list"}
)

_TERMINATORS: Final[frozenset[str]] = frozenset({"\n", ";", "\x00"})

_local = threading.local()


def get_parser() -> Parser:
    """Return this thread's Go parser, creating it on first use.

    Tree-sitter parsers are not safe to share between threads.
    """
    parser: Parser | None = getattr(_local, "parser", None)
    if parser is None:
        parser = Parser(GO_LANGUAGE)
        _local.parser = parser
        logger.debug("Created tree-sitter Go parser for thread %s", threading.get_ident())
    return parser


def _same(a: TSNode | None, b: TSNode | None) -> bool:
    if a is None or b is None:
        return False
    return a.type == b.type and a.start_byte == b.start_byte and a.end_byte == b.end_byte


def _first_error(node: TSNode) -> TSNode | None:
    stack: list[TSNode] = [node]
    while stack:
        current: TSNode = stack.pop()
        if current.is_error or current.is_missing:
            return current
        if current.has_error:
            stack.extend(reversed(current.children))
    return None


class _TreeBuilder:
    """Converts one tree-sitter tree into the doculint node model."""

    def __init__(self, source: bytes, path: Path) -> None:
        self._source = source
        self._path = path
        self._filename = str(path)
        self._handlers: dict[str, Callable[[TSNode], Node]] = {
            "function_declaration": self._function,
            "method_declaration": self._function,
            "if_statement": self._if_statement,
            "binary_expression": self._binary_expression,
        }
        for decl_type in _DECL_TOKENS:
            self._handlers[decl_type] = self._decl_group

    def pos(self, node: TSNode) -> Position:
        row, column = node.start_point[0], node.start_point[1]
        return Position(self._filename, row + 1, column + 1)

    def text(self, node: TSNode) -> str:
        return self._source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def ident(self, node: TSNode) -> Ident:
        return Ident(pos=self.pos(node), node_type=node.type, name=self.text(node))

    # --- Doc comments ---

    @staticmethod
    def _prev(node: TSNode) -> TSNode | None:
        sibling: TSNode | None = node.prev_sibling
        while sibling is not None and sibling.type in _TERMINATORS:
            sibling = sibling.prev_sibling
        if sibling is None and node.parent is not None and node.parent.type == "statement_list":
            return _TreeBuilder._prev(node.parent)
        return sibling

    def doc_for(self, node: TSNode) -> CommentGroup | None:
        """Return the comment group documenting ``node``, if any."""
        collected: list[TSNode] = []
        expected_end: int = node.start_point[0] - 1
        sibling: TSNode | None = self._prev(node)
        while sibling is not None and sibling.type == "comment":
            end_row: int = sibling.end_point[0]
            if collected:
                if end_row < expected_end:
                    break
            elif end_row != expected_end:
                break
            collected.append(sibling)
            expected_end = sibling.start_point[0] - 1
            sibling = self._prev(sibling)

        if not collected:
            return None

        # Skip back over older comments of the same run to find the preceding token.
        while sibling is not None and sibling.type == "comment":
            sibling = self._prev(sibling)

        collected.reverse()
        if sibling is not None:
            boundary: int = sibling.end_point[0]
            while collected and collected[0].start_point[0] == boundary:
                boundary = collected[0].end_point[0]
                collected.pop(0)
            if not collected:
                return None

        return CommentGroup(tuple(self.text(c) for c in collected))

    # --- Conversion ---

    def convert(self, node: TSNode) -> Node | None:
        """Convert ``node`` and its subtree; comments convert to ``None``."""
        if node.type == "comment":
            return None
        if node.type in _IDENT_TYPES:
            return self.ident(node)
        literal_kind: LiteralKind | None = _LITERAL_KINDS.get(node.type)
        if literal_kind is not None:
            return BasicLit(
                pos=self.pos(node),
                node_type=node.type,
                literal_kind=literal_kind,
                value=self.text(node),
            )
        handler: Callable[[TSNode], Node] | None = self._handlers.get(node.type)
        if handler is not None:
            return handler(node)
        return Node(pos=self.pos(node), node_type=node.type, children=self.children(node))

    def children(self, node: TSNode, *, skip: tuple[TSNode | None, ...] = ()) -> tuple[Node, ...]:
        out: list[Node] = []
        for child in node.named_children:
            if any(_same(child, s) for s in skip):
                continue
            converted: Node | None = self.convert(child)
            if converted is not None:
                out.append(converted)
        return tuple(out)

    def _function(self, node: TSNode) -> Node:
        name_node: TSNode | None = node.child_by_field_name("name")
        if name_node is None:
            raise GoSyntaxError(self._path, "function declaration without a name", self.pos(node))
        return FuncDecl(
            pos=self.pos(node),
            node_type=node.type,
            name=self.text(name_node),
            doc=self.doc_for(node),
            children=self.children(node, skip=(name_node,)),
        )

    def _if_statement(self, node: TSNode) -> Node:
        condition: TSNode | None = node.child_by_field_name("condition")
        if condition is None:
            raise GoSyntaxError(self._path, "if statement without a condition", self.pos(node))
        converted: Node | None = self.convert(condition)
        assert converted is not None
        return IfStmt(
            pos=self.pos(node),
            condition=converted,
            children=self.children(node, skip=(condition,)),
        )

    def _binary_expression(self, node: TSNode) -> Node:
        left: TSNode | None = node.child_by_field_name("left")
        right: TSNode | None = node.child_by_field_name("right")
        operator: TSNode | None = node.child_by_field_name("operator")
        if left is None or right is None:
            raise GoSyntaxError(self._path, "incomplete binary expression", self.pos(node))
        left_node: Node | None = self.convert(left)
        right_node: Node | None = self.convert(right)
        assert left_node is not None and right_node is not None
        return BinaryExpr(
            pos=self.pos(node),
            left=left_node,
            operator=self.text(operator) if operator is not None else "",
            right=right_node,
        )

    def _decl_group(self, node: TSNode) -> Node:
        lparen: Position | None = None
        specs: list[Node] = []
        for child in node.children:
            if child.type == "(":
                lparen = self.pos(child)
            elif child.type in _SPEC_LIST_TYPES:
                for grandchild in child.children:
                    if grandchild.type == "(":
                        lparen = self.pos(grandchild)
                    elif grandchild.type in _SPEC_TYPES:
                        specs.append(self._spec(grandchild))
            elif child.type in _SPEC_TYPES:
                specs.append(self._spec(child))
        return DeclGroup(
            pos=self.pos(node),
            node_type=node.type,
            token=_DECL_TOKENS[node.type],
            lparen=lparen,
            doc=self.doc_for(node),
            specs=tuple(specs),
        )

    def _spec(self, node: TSNode) -> Node:
        if node.type in _VALUE_SPEC_TYPES:
            name_nodes: list[TSNode] = [
                n for n in node.children_by_field_name("name") if n.type == "identifier"
            ]
            names: tuple[Ident, ...] = tuple(self.ident(n) for n in name_nodes)
            return ValueSpec(
                pos=names[0].pos if names else self.pos(node),
                node_type=node.type,
                names=names,
                doc=self.doc_for(node),
                children=self.children(node, skip=tuple(name_nodes)),
            )
        if node.type in _TYPE_SPEC_TYPES:
            name_node: TSNode | None = node.child_by_field_name("name")
            if name_node is None:
                raise GoSyntaxError(self._path, "type specification without a name", self.pos(node))
            return TypeSpec(
                pos=self.pos(node),
                node_type=node.type,
                name=self.ident(name_node),
                doc=self.doc_for(node),
                children=self.children(node, skip=(name_node,)),
            )
        return Node(pos=self.pos(node), node_type=node.type, children=self.children(node))

    def source_file(self, root: TSNode) -> SourceFile:
        clause: TSNode | None = next(
            (c for c in root.named_children if c.type == "package_clause"), None
        )
        if clause is None:
            raise GoSyntaxError(self._path, "expected 'package' clause")
        name_node: TSNode | None = next(
            (c for c in clause.named_children if c.type == "package_identifier"), None
        )
        if name_node is None:
            raise GoSyntaxError(self._path, "package clause without a name", self.pos(clause))
        return SourceFile(
            pos=self.pos(root),
            path=self._path,
            package=self.ident(name_node),
            doc=self.doc_for(clause),
            decls=self.children(root, skip=(clause,)),
        )


def parse_source(source: bytes, path: Path | str) -> SourceFile:
    """Parse Go source text into a `SourceFile`.

    Args:
        source (bytes): UTF-8 encoded Go source.
        path (Path | str): Path reported in positions; also provides the file's simple name.

    Returns:
        SourceFile: The converted tree.

    Raises:
        GoSyntaxError: If the source has syntax errors or lacks a package clause.
    """
    path = Path(path)
    tree = get_parser().parse(source)
    builder = _TreeBuilder(source, path)
    root: TSNode = tree.root_node
    if root.has_error:
        bad: TSNode | None = _first_error(root)
        position: Position | None = builder.pos(bad) if bad is not None else None
        raise GoSyntaxError(path, "syntax error", position)
    source_file: SourceFile = builder.source_file(root)
    logger.trace("Parsed %s (package %s)", path, source_file.package.name)
    return source_file


def parse_file(path: Path) -> SourceFile:
    """Read and parse a Go source file.

    Args:
        path (Path): The file to parse.

    Returns:
        SourceFile: The converted tree.

    Raises:
        GoSyntaxError: If the file does not parse.
        OSError: If the file cannot be read.
    """
    logger.debug("Parsing %s", path)
    return parse_source(path.read_bytes(), path)
