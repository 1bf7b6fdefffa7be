# topmark:header:start
#
#   project      : Doculint
#   file         : __init__.py
#   file_relpath : src/doculint/syntax/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax trees for the lint rules.

- `doculint.syntax.nodes`: the immutable, position-annotated node model.
- `doculint.syntax.golang`: builds that model from Go source via tree-sitter.
- `doculint.syntax.units`: groups parsed files into compilation units.
"""

from __future__ import annotations
