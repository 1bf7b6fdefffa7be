# topmark:header:start
#
#   project      : Doculint
#   file         : __init__.py
#   file_relpath : src/doculint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for Doculint.

- `doculint.config.model`: `Config` (frozen) and `MutableConfig` (draft), layered
  from defaults, ``doculint.toml`` / ``[tool.doculint]`` and CLI overrides.
- `doculint.config.io`: TOML loading via `tomlkit` and checked getters.
- `doculint.config.logging`: the TRACE-capable logger used by every module.

Submodules are imported explicitly (``from doculint.config.model import Config``)
so that importing the logger never pulls in the rest of the package.
"""

from __future__ import annotations
