# topmark:header:start
#
#   project      : Doculint
#   file         : file_resolver.py
#   file_relpath : src/doculint/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input Go files for Doculint based on config and paths.

Paths follow the conventions of the Go tool:

* ``foo.go`` is taken as-is (even a ``_test.go`` file named explicitly);
* ``dir`` selects the ``.go`` files directly inside ``dir``;
* ``dir/...`` (and a bare ``...``) selects ``.go`` files in ``dir`` and all its
  subdirectories, skipping ``vendor``, ``testdata`` and directories whose name
  starts with ``.`` or ``_``.

Exclude patterns use gitignore syntax and are matched against paths relative to
the working directory. The result is a deterministic, sorted list of files.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from doculint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from doculint.config.logging import DoculintLogger
    from doculint.config.model import Config

logger: DoculintLogger = get_logger(__name__)

GO_SUFFIX: Final[str] = ".go"
TEST_SUFFIX: Final[str] = "_test.go"
RECURSIVE_MARKER: Final[str] = "..."
SKIPPED_DIR_NAMES: Final[frozenset[str]] = frozenset({"vendor", "testdata"})


def _is_skipped_dir(path: Path) -> bool:
    name: str = path.name
    return name in SKIPPED_DIR_NAMES or name.startswith((".", "_"))


def _is_go_file(path: Path) -> bool:
    return path.suffix == GO_SUFFIX and path.is_file()


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _walk_go_files(root: Path) -> Iterator[Path]:
    """Yield ``.go`` files below ``root``, pruning skipped directories."""
    stack: list[Path] = [root]
    while stack:
        current: Path = stack.pop()
        for entry in sorted(current.iterdir()):
            if entry.is_dir():
                if _is_skipped_dir(entry):
                    logger.trace("Skipping directory %s", entry)
                    continue
                stack.append(entry)
            elif _is_go_file(entry):
                yield entry


def expand_go_path(arg: str) -> tuple[list[Path], bool]:
    """Expand one positional argument into candidate files.

    Args:
        arg (str): A file, a directory or a ``dir/...`` pattern.

    Returns:
        tuple[list[Path], bool]: The candidate files and whether they were named
            explicitly (explicit files are never filtered as tests).

    Raises:
        FileNotFoundError: If the file or directory does not exist.
    """
    if arg == RECURSIVE_MARKER or arg.endswith("/" + RECURSIVE_MARKER):
        base = Path(arg[: -len(RECURSIVE_MARKER)] or ".")
        if not base.is_dir():
            raise FileNotFoundError(f"No such directory: {base}")
        return list(_walk_go_files(base)), False

    path = Path(arg)
    if path.is_dir():
        return sorted(p for p in path.iterdir() if _is_go_file(p)), False
    if path.is_file():
        if path.suffix != GO_SUFFIX:
            logger.warning("Not a Go source file: %s", path)
        return [path], True
    raise FileNotFoundError(f"No such file or directory: {path}")


def resolve_file_list(paths: Iterable[str], config: Config) -> list[Path]:
    """Return the Go files to lint.

    The resolver implements these semantics:
      1. **Candidate set**: expand each positional path Go-style.
      2. **Test filter**: drop ``_test.go`` files found by expansion unless
         ``config.include_tests`` is set.
      3. **Exclude subtraction**: remove files matching ``config.exclude_patterns``.
      4. Return a **sorted**, de-duplicated list.

    Args:
        paths (Iterable[str]): Positional arguments from the command line.
        config (Config): Configuration values influencing path collection and filters.

    Returns:
        list[Path]: Sorted list of files selected for linting.

    Raises:
        FileNotFoundError: If an input path does not exist.
    """
    workspace_root: Path = Path.cwd()
    candidates: set[Path] = set()

    for arg in paths:
        expanded, explicit = expand_go_path(arg)
        if not explicit and not config.include_tests:
            expanded = [p for p in expanded if not p.name.endswith(TEST_SUFFIX)]
        if not expanded:
            logger.info("No Go files matched: %s", arg)
        candidates.update(expanded)

    if config.exclude_patterns:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(config.exclude_patterns))
        before: int = len(candidates)
        candidates = {
            p for p in candidates if not spec.match_file(_rel_for_match(p, workspace_root))
        }
        logger.debug("Excluded %d file(s) by pattern", before - len(candidates))

    files: list[Path] = sorted(candidates)
    logger.trace("Files to lint: %d -- %s", len(files), files)
    return files
