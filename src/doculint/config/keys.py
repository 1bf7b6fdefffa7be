# topmark:header:start
#
#   project      : Doculint
#   file         : keys.py
#   file_relpath : src/doculint/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for Doculint configuration.

Keys appear at the top level of ``doculint.toml`` and under
``[tool.doculint]`` in ``pyproject.toml``. Renaming a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by Doculint configuration."""

    TOOL_SECTION: Final[str] = "doculint"

    KEY_ROOT: Final[str] = "root"

    KEY_ENTRY_PACKAGE: Final[str] = "entry_package"
    KEY_ENTRY_FUNCTION: Final[str] = "entry_function"
    KEY_INITIALIZER_FUNCTION: Final[str] = "initializer_function"

    KEY_INCLUDE_TESTS: Final[str] = "include_tests"
    KEY_EXCLUDE: Final[str] = "exclude"

    KEY_JOBS: Final[str] = "jobs"
