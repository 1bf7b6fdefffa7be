# topmark:header:start
#
#   project      : Doculint
#   file         : io.py
#   file_relpath : src/doculint/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and read TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain ``dict`` structures. The
``*_checked`` getters record a warning in a `DiagnosticLog` (and log it) when a
key is present with the wrong type; the value is then ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from doculint.config.keys import Toml
from doculint.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from doculint.config.logging import DoculintLogger
    from doculint.diagnostic.model import DiagnosticLog

TomlTable = dict[str, Any]

logger: DoculintLogger = get_logger(__name__)


class ConfigLoadError(ValueError):
    """A configuration file exists but cannot be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot load configuration from {path}: {reason}")


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path: Path to a TOML document (``doculint.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content as plain Python values.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigLoadError(path, str(e)) from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigLoadError(path, str(e)) from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Doculint table of a parsed config file.

    ``pyproject.toml`` files contribute their ``[tool.doculint]`` table (or
    nothing when it is absent); any other file is used as a whole.
    """
    if path.name != "pyproject.toml":
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(Toml.TOOL_SECTION) if isinstance(tool, dict) else None
    return cast("TomlTable", table) if isinstance(table, dict) else None


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return an optional string value, warning when present but not ``str``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected string in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected string in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return an optional boolean value, warning when present but not ``bool``."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.add_warning(f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_int_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> int | None:
    """Return an optional int value, warning when present but not ``int``.

    Notes:
        ``bool`` is rejected even though it is a subclass of ``int``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
        return None
    return value


def get_string_list_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Return a list of strings, dropping (and warning about) non-string entries.

    Returns:
        list[str] | None: The strings, or ``None`` if the key is missing or not a list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        diagnostics.add_warning(f"Expected list in {loc}, got {type(value).__name__}: {value!r}")
        return None

    out: list[str] = []
    for v in cast("list[Any]", value):
        if isinstance(v, str):
            out.append(v)
        else:
            logger.warning("Ignoring non-string entry in %s: %r", loc, v)
            diagnostics.add_warning(f"Ignoring non-string entry in {loc}: {v!r}")
    return out
