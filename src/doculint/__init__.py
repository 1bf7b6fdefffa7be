# topmark:header:start
#
#   project      : Doculint
#   file         : __init__.py
#   file_relpath : src/doculint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doculint package.

Doculint is a documentation linter for Go source trees. It parses Go files,
groups them into packages, and reports missing or malformed doc comments,
package naming problems and conditionals compared against bare literals.
"""

from __future__ import annotations
