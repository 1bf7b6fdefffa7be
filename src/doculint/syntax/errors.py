# topmark:header:start
#
#   project      : Doculint
#   file         : errors.py
#   file_relpath : src/doculint/syntax/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while building syntax trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from doculint.syntax.nodes import Position


class GoSyntaxError(ValueError):
    """A source file could not be parsed into a valid tree.

    Attributes:
        path (Path): The offending file.
        position (Position | None): First error location, when known.
    """

    def __init__(self, path: Path, message: str, position: Position | None = None) -> None:
        self.path = path
        self.position = position
        location: str = str(position) if position is not None else str(path)
        super().__init__(f"{location}: {message}")
