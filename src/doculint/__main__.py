# topmark:header:start
#
#   project      : Doculint
#   file         : __main__.py
#   file_relpath : src/doculint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Doculint via ``python -m doculint``.

It delegates directly to :func:`doculint.cli.main.cli`, the same entry point as
the ``doculint`` console script.

Examples:
    Lint every package below the working directory::

        python -m doculint check ./...
"""

from __future__ import annotations

from doculint.cli.main import cli

if __name__ == "__main__":
    cli()
