# topmark:header:start
#
#   project      : Doculint
#   file         : constants.py
#   file_relpath : src/doculint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Doculint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCULINT_VERSION: str = get_version("doculint")

DEFAULT_CHECK_PATHS: tuple[str, ...] = ("./...",)
