# topmark:header:start
#
#   project      : Doculint
#   file         : __init__.py
#   file_relpath : src/doculint/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for Doculint."""

from __future__ import annotations
