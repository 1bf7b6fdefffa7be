# topmark:header:start
#
#   project      : Doculint
#   file         : __init__.py
#   file_relpath : src/doculint/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doculint subcommands (``check``, ``rules``, ``version``)."""

from __future__ import annotations
