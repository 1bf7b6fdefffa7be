# topmark:header:start
#
#   project      : Doculint
#   file         : test_golang_parser.py
#   file_relpath : tests/syntax/test_golang_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the tree-sitter Go front-end.

These parse real Go snippets and check the converted node model, with an
emphasis on doc comment attachment.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from doculint.syntax.errors import GoSyntaxError
from doculint.syntax.golang import parse_file, parse_source
from doculint.syntax.nodes import (
    BasicLit,
    BinaryExpr,
    DeclGroup,
    FuncDecl,
    Ident,
    IfStmt,
    LiteralKind,
    Node,
    SourceFile,
    TypeSpec,
    ValueSpec,
    inspect,
)

pytestmark = pytest.mark.integration


def parse(code: str, path: str = "mypkg.go") -> SourceFile:
    return parse_source(textwrap.dedent(code).lstrip("\n").encode("utf-8"), path)


def collect(tree: Node, cls: type[Node]) -> list[Node]:
    found: list[Node] = []

    def visit(node: Node) -> bool:
        if isinstance(node, cls):
            found.append(node)
        return True

    inspect(tree, visit)
    return found


def only_decl(tree: SourceFile) -> DeclGroup:
    groups = [d for d in tree.decls if isinstance(d, DeclGroup)]
    assert len(groups) == 1
    return groups[0]


# --- Package clause ---


def test_package_clause_and_doc() -> None:
    tree = parse(
        """
        // Package mypkg does things.
        //
        // More text.
        package mypkg
        """
    )
    assert tree.package.name == "mypkg"
    assert tree.simple_name == "mypkg"
    assert tree.doc is not None
    assert tree.doc.text() == "Package mypkg does things.\n\nMore text."


def test_comment_separated_by_blank_line_is_not_doc() -> None:
    tree = parse(
        """
        // Copyright notice.

        package mypkg
        """
    )
    assert tree.doc is None


def test_block_comment_package_doc() -> None:
    tree = parse(
        """
        /*
        Package mypkg does things.
        */
        package mypkg
        """
    )
    assert tree.doc is not None
    assert tree.doc.text().strip() == "Package mypkg does things."


def test_missing_package_clause_raises() -> None:
    with pytest.raises(GoSyntaxError, match="package"):
        parse("func F() {}\n")


def test_syntax_error_raises_with_position() -> None:
    with pytest.raises(GoSyntaxError) as excinfo:
        parse(
            """
            package mypkg

            func F( {
            """
        )
    assert excinfo.value.position is not None
    assert excinfo.value.position.filename == "mypkg.go"


# --- Functions ---


def test_function_doc_attachment() -> None:
    tree = parse(
        """
        package mypkg

        // Foo does foo.
        func Foo() {}

        // Detached.

        func Bar() {}

        var x = 1 // trailing
        func Baz() {}
        """
    )
    funcs = [d for d in tree.decls if isinstance(d, FuncDecl)]
    assert [f.name for f in funcs] == ["Foo", "Bar", "Baz"]
    assert funcs[0].doc is not None and funcs[0].doc.text() == "Foo does foo."
    assert funcs[1].doc is None
    assert funcs[2].doc is None
    assert (funcs[0].pos.line, funcs[0].pos.column) == (4, 1)


def test_method_declaration() -> None:
    tree = parse(
        """
        package mypkg

        // Run runs.
        func (s *Server) Run() error { return nil }
        """
    )
    (method,) = [d for d in tree.decls if isinstance(d, FuncDecl)]
    assert method.name == "Run"
    assert method.node_type == "method_declaration"
    assert method.doc is not None


def test_directive_only_comment_gives_empty_text() -> None:
    tree = parse(
        """
        package mypkg

        //go:noinline
        func Foo() {}
        """
    )
    (f,) = [d for d in tree.decls if isinstance(d, FuncDecl)]
    assert f.doc is not None
    assert f.doc.text() == ""


# --- Conditionals and literals ---


def test_if_condition_operands() -> None:
    tree = parse(
        """
        package mypkg

        func F(x int, s string, ok bool) {
        \tif x == 5 {
        \t}
        \tif s != "a" {
        \t} else if ok == true {
        \t}
        \tif 1.5 < 2i {
        \t}
        }
        """
    )
    ifs = [n for n in collect(tree, IfStmt) if isinstance(n, IfStmt)]
    assert len(ifs) == 4
    conds = [i.condition for i in ifs]
    assert all(isinstance(c, BinaryExpr) for c in conds)
    first, second, third, fourth = (c for c in conds if isinstance(c, BinaryExpr))

    assert isinstance(first.left, Ident)
    assert isinstance(first.right, BasicLit) and first.right.literal_kind is LiteralKind.INT
    assert (first.right.pos.line, first.right.pos.column) == (4, 10)
    assert isinstance(second.right, BasicLit)
    assert second.right.literal_kind is LiteralKind.STRING
    assert isinstance(third.right, Ident) and third.right.name == "true"
    assert isinstance(fourth.left, BasicLit) and fourth.left.literal_kind is LiteralKind.FLOAT
    assert isinstance(fourth.right, BasicLit) and fourth.right.literal_kind is LiteralKind.IMAG


def test_if_with_initializer_keeps_condition() -> None:
    tree = parse(
        """
        package mypkg

        func F() {
        \tif v := g(); v > 'a' {
        \t}
        }
        """
    )
    (stmt,) = [n for n in collect(tree, IfStmt) if isinstance(n, IfStmt)]
    assert isinstance(stmt.condition, BinaryExpr)
    assert isinstance(stmt.condition.right, BasicLit)
    assert stmt.condition.right.literal_kind is LiteralKind.CHAR


# --- Constants and types ---


def test_const_block() -> None:
    tree = parse(
        """
        package mypkg

        // Colors.
        const (
        \t// Red is red.
        \tRed = iota
        \tGreen, Blue = 1, 2
        )
        """
    )
    group = only_decl(tree)
    assert group.is_block
    assert group.doc is not None and group.doc.text() == "Colors."
    specs = [s for s in group.specs if isinstance(s, ValueSpec)]
    assert [[n.name for n in s.names] for s in specs] == [["Red"], ["Green", "Blue"]]
    assert specs[0].doc is not None and specs[0].doc.text() == "Red is red."
    assert specs[1].doc is None
    assert (specs[1].pos.line, specs[1].pos.column) == (7, 2)


def test_singleton_const_doc_is_on_keyword() -> None:
    tree = parse(
        """
        package mypkg

        // Max is the limit.
        const Max = 10
        """
    )
    group = only_decl(tree)
    assert not group.is_block
    assert group.doc is not None and group.doc.text() == "Max is the limit."


def test_type_declarations() -> None:
    tree = parse(
        """
        package mypkg

        // Types.
        type (
        \t// A is a.
        \tA struct{}
        \tB = int
        )
        """
    )
    group = only_decl(tree)
    assert group.is_block
    specs = [s for s in group.specs if isinstance(s, TypeSpec)]
    assert [s.name.name for s in specs] == ["A", "B"]
    assert specs[0].doc is not None and specs[0].doc.text() == "A is a."
    assert specs[1].doc is None


def test_parse_file_reads_from_disk(tmp_path: Path) -> None:
    path = tmp_path / "util.go"
    path.write_text("package util\n", encoding="utf-8")
    tree = parse_file(path)
    assert tree.path == path
    assert tree.package.name == "util"
