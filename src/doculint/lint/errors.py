# topmark:header:start
#
#   project      : Doculint
#   file         : errors.py
#   file_relpath : src/doculint/lint/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the lint engine."""

from __future__ import annotations


class DoculintContractError(RuntimeError):
    """The syntax tree handed to the auditor is invalid (e.g. a specification without names).

    This signals a bug in the tree supplier, not a documentation problem, and is
    never reported as a diagnostic.
    """
