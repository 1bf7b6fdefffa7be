# topmark:header:start
#
#   project      : Doculint
#   file         : model.py
#   file_relpath : src/doculint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for Doculint.

Two types:
    * `MutableConfig` is a draft used while layering defaults, discovered config
      files, explicit ``--config`` files and CLI overrides. Unset values are
      ``None`` so that merging keeps the lower layer.
    * `Config` is the frozen, fully resolved result handed to the lint engine.

Use `Config.thaw` → edit → `MutableConfig.freeze` for safe updates.

Merge order (lowest → highest precedence):
    1) built-in defaults
    2) project configs discovered upward, root-most first; within one directory
       ``pyproject.toml`` is merged first, then ``doculint.toml``
    3) extra config files passed explicitly (in the order provided)
    4) CLI overrides
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Final

from doculint.config.io import (
    ConfigLoadError,
    extract_tool_table,
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    get_string_list_value_checked,
    get_string_value_or_none_checked,
    load_toml_dict,
)
from doculint.config.keys import Toml
from doculint.config.logging import get_logger
from doculint.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog
from doculint.lint.auditor import DEFAULT_ENTRY_FUNCTION, DEFAULT_INITIALIZER_FUNCTION

if TYPE_CHECKING:
    from collections.abc import Iterable

    from doculint.config.io import TomlTable
    from doculint.config.logging import DoculintLogger

logger: DoculintLogger = get_logger(__name__)

CONFIG_FILE_NAMES: Final[tuple[str, ...]] = ("pyproject.toml", "doculint.toml")

DEFAULT_ENTRY_PACKAGE: Final[str] = "main"


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        entry_package (str): Package name of the program-entry package (exempt from
            package comment rules).
        entry_function (str): Name of the program-entry function in that package.
        initializer_function (str): Name of automatic package initializers.
        include_tests (bool): Whether ``_test.go`` files are checked.
        exclude_patterns (tuple[str, ...]): Gitignore-style patterns of files to skip.
        jobs (int): Number of compilation units audited concurrently.
        config_files (tuple[Path, ...]): Config files merged into this config.
        diagnostics (FrozenDiagnosticLog): Warnings collected while loading.
    """

    entry_package: str = DEFAULT_ENTRY_PACKAGE
    entry_function: str = DEFAULT_ENTRY_FUNCTION
    initializer_function: str = DEFAULT_INITIALIZER_FUNCTION
    include_tests: bool = True
    exclude_patterns: tuple[str, ...] = ()
    jobs: int = 1
    config_files: tuple[Path, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in defaults."""
        return MutableConfig.from_defaults().freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this config."""
        return MutableConfig(
            entry_package=self.entry_package,
            entry_function=self.entry_function,
            initializer_function=self.initializer_function,
            include_tests=self.include_tests,
            exclude_patterns=list(self.exclude_patterns),
            jobs=self.jobs,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )


@dataclass
class MutableConfig:
    """Mutable configuration draft; ``None`` means "not set in this layer"."""

    entry_package: str | None = None
    entry_function: str | None = None
    initializer_function: str | None = None
    include_tests: bool | None = None
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    jobs: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ------------------------------- Building -------------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft holding the built-in defaults."""
        return cls(
            entry_package=DEFAULT_ENTRY_PACKAGE,
            entry_function=DEFAULT_ENTRY_FUNCTION,
            initializer_function=DEFAULT_INITIALIZER_FUNCTION,
            include_tests=True,
            jobs=1,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, config_file: Path | None = None) -> MutableConfig:
        """Create a draft from a parsed Doculint TOML table.

        Args:
            data (TomlTable): The Doculint table (top level of ``doculint.toml`` or
                ``[tool.doculint]``).
            config_file (Path | None): The file the table came from, for messages.

        Returns:
            MutableConfig: The draft; ill-typed values are ignored with a warning.
        """
        diagnostics = DiagnosticLog()
        where: str = str(config_file) if config_file is not None else "<config>"

        draft = cls(
            entry_package=get_string_value_or_none_checked(
                data, Toml.KEY_ENTRY_PACKAGE, where=where, diagnostics=diagnostics
            ),
            entry_function=get_string_value_or_none_checked(
                data, Toml.KEY_ENTRY_FUNCTION, where=where, diagnostics=diagnostics
            ),
            initializer_function=get_string_value_or_none_checked(
                data, Toml.KEY_INITIALIZER_FUNCTION, where=where, diagnostics=diagnostics
            ),
            include_tests=get_bool_value_or_none_checked(
                data, Toml.KEY_INCLUDE_TESTS, where=where, diagnostics=diagnostics
            ),
            exclude_patterns=get_string_list_value_checked(
                data, Toml.KEY_EXCLUDE, where=where, diagnostics=diagnostics
            )
            or [],
            jobs=get_int_value_or_none_checked(
                data, Toml.KEY_JOBS, where=where, diagnostics=diagnostics
            ),
            config_files=[config_file] if config_file is not None else [],
            diagnostics=diagnostics,
        )
        if draft.jobs is not None and draft.jobs < 1:
            draft.diagnostics.add_warning(f"Ignoring {where}.{Toml.KEY_JOBS} = {draft.jobs}")
            draft.jobs = None
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a draft from ``doculint.toml`` or the ``[tool.doculint]`` table of ``pyproject.toml``.

        Args:
            path (Path): The config file.

        Returns:
            MutableConfig | None: The draft, or ``None`` for a ``pyproject.toml``
                without a ``[tool.doculint]`` table.

        Raises:
            ConfigLoadError: If the file cannot be read or parsed.
        """
        logger.debug("Loading config from %s", path)
        table: TomlTable | None = extract_tool_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("No [tool.%s] table in %s", Toml.TOOL_SECTION, path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    @staticmethod
    def discover_local_config_files(start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are ordered root-most first, nearest last; within a directory
        ``pyproject.toml`` comes before ``doculint.toml``. A config with
        ``root = true`` stops the upward walk after its directory. Only
        ``pyproject.toml`` files with a ``[tool.doculint]`` table count; an
        unparseable ``pyproject.toml`` is skipped, an unparseable
        ``doculint.toml`` is kept so that loading it raises.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            stop_here = False
            entries: list[Path] = []
            for name in CONFIG_FILE_NAMES:
                candidate: Path = cur / name
                if not candidate.is_file():
                    continue
                try:
                    table: TomlTable | None = extract_tool_table(
                        candidate, load_toml_dict(candidate)
                    )
                except ConfigLoadError as e:
                    if name == "pyproject.toml":
                        # Owned by other tools; only doculint.toml must parse.
                        logger.warning("Skipping unreadable %s: %s", candidate, e)
                        continue
                    # Raised when the file is actually loaded.
                    logger.debug("Keeping unreadable %s for loading: %s", candidate, e)
                    entries.append(candidate)
                    continue
                if table is None:
                    continue
                entries.append(candidate)
                logger.debug("Discovered config file: %s", candidate)
                if table.get(Toml.KEY_ROOT) is True:
                    stop_here = True

            if entries:
                per_dir.append(entries)

            parent: Path = cur.parent
            if parent == cur or stop_here:
                break
            cur = parent

        ordered: list[Path] = []
        for entries in reversed(per_dir):
            ordered.extend(entries)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Where upward discovery starts (CWD if ``None``).
            extra_config_files (Iterable[Path] | None): Files merged after discovery.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableConfig: The merged draft.

        Raises:
            ConfigLoadError: If a config file cannot be read or parsed.
        """
        draft: MutableConfig = cls.from_defaults()

        layers: list[Path] = []
        if not no_config:
            layers.extend(cls.discover_local_config_files(anchor or Path.cwd()))
        layers.extend(Path(p) for p in extra_config_files or ())

        for path in layers:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Exclude patterns accumulate; diagnostics and config files are concatenated.
        """
        diagnostics = DiagnosticLog.from_iterable(self.diagnostics)
        diagnostics.extend(other.diagnostics)
        return MutableConfig(
            entry_package=other.entry_package
            if other.entry_package is not None
            else self.entry_package,
            entry_function=other.entry_function
            if other.entry_function is not None
            else self.entry_function,
            initializer_function=other.initializer_function
            if other.initializer_function is not None
            else self.initializer_function,
            include_tests=other.include_tests
            if other.include_tests is not None
            else self.include_tests,
            exclude_patterns=self.exclude_patterns + other.exclude_patterns,
            jobs=other.jobs if other.jobs is not None else self.jobs,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_overrides(
        self,
        *,
        entry_package: str | None = None,
        include_tests: bool | None = None,
        exclude_patterns: Iterable[str] = (),
        jobs: int | None = None,
    ) -> MutableConfig:
        """Return a new draft with CLI overrides applied on top of this one."""
        return self.merge_with(
            MutableConfig(
                entry_package=entry_package,
                include_tests=include_tests,
                exclude_patterns=list(exclude_patterns),
                jobs=jobs,
            )
        )

    def freeze(self) -> Config:
        """Resolve unset values to defaults and return an immutable `Config`."""
        return replace(
            Config(),
            entry_package=self.entry_package or DEFAULT_ENTRY_PACKAGE,
            entry_function=self.entry_function or DEFAULT_ENTRY_FUNCTION,
            initializer_function=self.initializer_function or DEFAULT_INITIALIZER_FUNCTION,
            include_tests=True if self.include_tests is None else self.include_tests,
            exclude_patterns=tuple(self.exclude_patterns),
            jobs=self.jobs or 1,
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )
