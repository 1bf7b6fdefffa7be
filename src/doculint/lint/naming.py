# topmark:header:start
#
#   project      : Doculint
#   file         : naming.py
#   file_relpath : src/doculint/lint/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Package naming conventions (see https://go.dev/blog/package-names)."""

from __future__ import annotations

from typing import Final

SEPARATOR_CHARACTERS: Final[str] = "-_"


def validate_package_name(name: str) -> str | None:
    """Check a package identifier against the naming conventions.

    Rules are evaluated in order and the first failing one is reported:

    1. the name must not contain ``-`` or ``_``;
    2. the name must be all lowercase.

    Args:
        name (str): The package identifier.

    Returns:
        str | None: The violation message, or ``None`` if the name is fine.
    """
    if any(c in name for c in SEPARATOR_CHARACTERS):
        return f'package "{name}" should not contain - or _ in name'

    if name != name.lower():
        return f'package "{name}" should be all lowercase'

    return None
