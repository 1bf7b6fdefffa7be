# topmark:header:start
#
#   project      : Doculint
#   file         : test_go_file_resolver.py
#   file_relpath : tests/resolver/test_go_file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for Go-style path expansion and file filtering."""

from __future__ import annotations

from pathlib import Path

import pytest

from doculint.file_resolver import expand_go_path, resolve_file_list
from tests.conftest import make_config


@pytest.fixture
def tree(isolation: Path) -> Path:
    """Create a small Go module layout in the working directory."""
    for rel in (
        "main.go",
        "main_test.go",
        "README.md",
        "pkg/util/util.go",
        "pkg/util/util_test.go",
        "pkg/util/gen/types.pb.go",
        "vendor/dep/dep.go",
        "testdata/sample.go",
        ".hidden/x.go",
        "_scratch/y.go",
    ):
        path = isolation / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("package x\n", encoding="utf-8")
    return isolation


def names(files: list[Path]) -> list[str]:
    return [p.as_posix() for p in files]


def test_directory_selects_direct_go_files(tree: Path) -> None:
    files, explicit = expand_go_path(".")
    assert not explicit
    assert names(files) == ["main.go", "main_test.go"]


def test_recursive_pattern_skips_special_directories(tree: Path) -> None:
    files = resolve_file_list(["./..."], make_config())
    assert names(files) == [
        "main.go",
        "main_test.go",
        "pkg/util/gen/types.pb.go",
        "pkg/util/util.go",
        "pkg/util/util_test.go",
    ]


def test_sub_directory_pattern(tree: Path) -> None:
    files = resolve_file_list(["pkg/..."], make_config())
    assert names(files) == [
        "pkg/util/gen/types.pb.go",
        "pkg/util/util.go",
        "pkg/util/util_test.go",
    ]


def test_tests_filter(tree: Path) -> None:
    files = resolve_file_list(["./..."], make_config(include_tests=False))
    assert not any(name.endswith("_test.go") for name in names(files))


def test_explicit_test_file_is_kept(tree: Path) -> None:
    files = resolve_file_list(["main_test.go"], make_config(include_tests=False))
    assert names(files) == ["main_test.go"]


def test_exclude_patterns(tree: Path) -> None:
    config = make_config(exclude_patterns=["gen/", "*_test.go"])
    files = resolve_file_list(["./..."], config)
    assert names(files) == ["main.go", "pkg/util/util.go"]


def test_duplicates_are_removed(tree: Path) -> None:
    files = resolve_file_list(["pkg/util", "pkg/util/util.go", "pkg/..."], make_config())
    assert names(files).count("pkg/util/util.go") == 1


def test_explicit_vendor_directory_is_honored(tree: Path) -> None:
    files = resolve_file_list(["vendor/dep"], make_config())
    assert names(files) == ["vendor/dep/dep.go"]


def test_missing_path_raises(tree: Path) -> None:
    with pytest.raises(FileNotFoundError):
        resolve_file_list(["nope.go"], make_config())
    with pytest.raises(FileNotFoundError):
        resolve_file_list(["nope/..."], make_config())


def test_directory_without_go_files(tree: Path) -> None:
    (tree / "empty").mkdir()
    assert resolve_file_list(["empty"], make_config()) == []
