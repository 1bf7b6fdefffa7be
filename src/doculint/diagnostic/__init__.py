# topmark:header:start
#
#   project      : Doculint
#   file         : __init__.py
#   file_relpath : src/doculint/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Rule violations and configuration notices are immutable `Diagnostic` instances.
    - During a run, diagnostics are accumulated in a mutable `DiagnosticLog`
      (one per compilation unit).
    - Frozen snapshots (e.g. `Config`) store diagnostics as a `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from doculint.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
    Rule,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "FrozenDiagnosticLog",
    "Rule",
]
