# topmark:header:start
#
#   project      : Doculint
#   file         : __init__.py
#   file_relpath : src/doculint/lint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The documentation rule engine.

This package only consumes syntax trees and emits diagnostics: parsing, file
discovery and output formatting live elsewhere.
"""

from __future__ import annotations

from doculint.lint.analyzer import ANALYZER, Analyzer, run_unit
from doculint.lint.auditor import DeclShape, PackageDocState, TreeAuditor, resolve_doc_comment
from doculint.lint.errors import DoculintContractError
from doculint.lint.naming import validate_package_name
from doculint.lint.runner import LintResult, run_units

__all__ = [
    "ANALYZER",
    "Analyzer",
    "DeclShape",
    "DoculintContractError",
    "LintResult",
    "PackageDocState",
    "TreeAuditor",
    "resolve_doc_comment",
    "run_unit",
    "run_units",
    "validate_package_name",
]
