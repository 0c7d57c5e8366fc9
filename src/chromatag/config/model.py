# topmark:header:start
#
#   project      : Chromatag
#   file         : model.py
#   file_relpath : src/chromatag/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for Chromatag.

Two classes cooperate:

- `MutableConfig`: a builder used while discovering and merging configuration
  layers. Every field is optional (``None`` = "not set by this layer") so that
  merging can be last-wins per field.
- `Config`: the frozen runtime snapshot produced by `MutableConfig.freeze`,
  with every unset field resolved to its default.

Layered merging with clear precedence is provided by `MutableConfig.load_merged()`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from chromatag.config.io.getters import (
    get_bool_value_or_none_checked,
    get_enum_value_checked,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
)
from chromatag.config.io.guards import get_table_value
from chromatag.config.io.loaders import (
    extract_pyproject_table,
    load_defaults_dict,
    load_toml_dict,
)
from chromatag.config.keys import Toml
from chromatag.config.logging import get_logger
from chromatag.config.types import Backend
from chromatag.constants import (
    DEFAULT_MAX_NESTING_DEPTH,
    LOCAL_TOML_CONFIG_NAME,
    PYPROJECT_TOML_NAME,
)
from chromatag.diagnostic.model import Diagnostic, DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chromatag.config.io.types import TomlTable
    from chromatag.config.logging import ChromatagLogger
    from chromatag.config.types import ArgsLike

logger: ChromatagLogger = get_logger(__name__)

#: Marker recorded in `config_files` when CLI/API overrides were applied.
CLI_OVERRIDE_STR: str = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------
@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for Chromatag.

    Attributes:
        backend (Backend): Sequence renderer strategy.
        max_nesting_depth (int): Maximum number of simultaneously open tags (>= 1).
        strip_mode (bool): Strip tags instead of rendering them.
        placeholders (bool): Treat ``{...}`` placeholders as opaque text.
        term (str | None): Terminfo entry for the capability backend; None = ``$TERM``.
        config_files (tuple[Path | str, ...]): Sources merged into this config.
        diagnostics (tuple[Diagnostic, ...]): Problems found while loading.
    """

    backend: Backend = Backend.DIRECT
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH
    strip_mode: bool = False
    placeholders: bool = False
    term: str | None = None
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Convert this immutable Config into a TOML-serializable dict."""
        return {
            Toml.SECTION_RENDER: {
                Toml.KEY_BACKEND: self.backend.value,
                Toml.KEY_MAX_NESTING_DEPTH: self.max_nesting_depth,
                Toml.KEY_STRIP_MODE: self.strip_mode,
                Toml.KEY_PLACEHOLDERS: self.placeholders,
            },
            Toml.SECTION_CAPABILITY: {
                Toml.KEY_TERM: self.term or "",
            },
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            backend=self.backend,
            max_nesting_depth=self.max_nesting_depth,
            strip_mode=self.strip_mode,
            placeholders=self.placeholders,
            term=self.term,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields set to ``None`` are inherited from earlier layers on merge and fall
    back to the `Config` defaults on `freeze`.
    """

    backend: Backend | None = None
    max_nesting_depth: int | None = None
    strip_mode: bool | None = None
    placeholders: bool | None = None
    term: str | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable Config."""
        return Config(
            backend=self.backend if self.backend is not None else Backend.DIRECT,
            max_nesting_depth=(
                self.max_nesting_depth
                if self.max_nesting_depth is not None
                else DEFAULT_MAX_NESTING_DEPTH
            ),
            strip_mode=bool(self.strip_mode),
            placeholders=bool(self.placeholders),
            term=self.term or None,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=None)

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        config_file: Path | None = None,
    ) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Invalid values are recorded as warnings in the draft's diagnostics and
        left unset, so the defaults apply.

        Args:
            data (TomlTable): The parsed TOML data (already unwrapped from
                ``[tool.chromatag]`` for ``pyproject.toml``).
            config_file (Path | None): Optional path to the source TOML file.

        Returns:
            MutableConfig: The resulting MutableConfig instance.
        """
        draft: MutableConfig = cls()
        if config_file is not None:
            draft.config_files = [config_file]
        source: str = str(config_file) if config_file else "defaults"
        diagnostics: DiagnosticLog = draft.diagnostics

        render_tbl: TomlTable = get_table_value(data, Toml.SECTION_RENDER)
        logger.trace("TOML [render]: %s", render_tbl)
        capability_tbl: TomlTable = get_table_value(data, Toml.SECTION_CAPABILITY)
        logger.trace("TOML [capability]: %s", capability_tbl)

        render_where = f"{source}: [{Toml.SECTION_RENDER}]"
        draft.backend = get_enum_value_checked(
            render_tbl,
            Toml.KEY_BACKEND,
            Backend,
            where=render_where,
            diagnostics=diagnostics,
            logger=logger,
        )
        draft.max_nesting_depth = get_int_value_or_none_checked(
            render_tbl,
            Toml.KEY_MAX_NESTING_DEPTH,
            where=render_where,
            diagnostics=diagnostics,
            logger=logger,
            minimum=1,
        )
        draft.strip_mode = get_bool_value_or_none_checked(
            render_tbl,
            Toml.KEY_STRIP_MODE,
            where=render_where,
            diagnostics=diagnostics,
            logger=logger,
        )
        draft.placeholders = get_bool_value_or_none_checked(
            render_tbl,
            Toml.KEY_PLACEHOLDERS,
            where=render_where,
            diagnostics=diagnostics,
            logger=logger,
        )
        draft.term = get_string_value_or_none_checked(
            capability_tbl,
            Toml.KEY_TERM,
            where=f"{source}: [{Toml.SECTION_CAPABILITY}]",
            diagnostics=diagnostics,
            logger=logger,
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``chromatag.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.chromatag]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The draft, or None when a ``pyproject.toml``
                has no ``[tool.chromatag]`` section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            toml_data = extract_pyproject_table(toml_data)
            if not toml_data:
                logger.debug("No [tool.chromatag] section in %s", path)
                return None

        return cls.from_toml_dict(toml_data, config_file=path)

    @classmethod
    def discover_user_config_file(cls) -> Path | None:
        """Return the user-scoped config path if it exists.

        Looks under XDG config (``$XDG_CONFIG_HOME/chromatag/chromatag.toml``),
        defaulting ``$XDG_CONFIG_HOME`` to ``~/.config``.
        """
        xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
        base: Path = Path(xdg) if xdg else Path.home() / ".config"
        path: Path = base / "chromatag" / LOCAL_TOML_CONFIG_NAME
        return path if path.is_file() else None

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return the project config files present in ``start``.

        ``pyproject.toml`` comes first and ``chromatag.toml`` second, so the
        dedicated file wins on merge.
        """
        return [
            candidate
            for candidate in (start / PYPROJECT_TOML_NAME, start / LOCAL_TOML_CONFIG_NAME)
            if candidate.is_file()
        ]

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Merge order (lowest to highest precedence):
            1) Built-in defaults
            2) User config (XDG)
            3) ``pyproject.toml`` then ``chromatag.toml`` in ``start`` (default: CWD)
            4) Extra config files passed explicitly via ``--config`` (in the order provided)

        CLI overrides are applied afterwards by the caller with `apply_args`.

        Args:
            start (Path | None): Directory searched for project config files.
            extra_config_files (Iterable[Path] | None): Explicit additional config files.
            no_config (bool): If True, skip user and project discovery.

        Returns:
            MutableConfig: A mutable configuration draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        discovered: list[Path] = []
        if not no_config:
            user_cfg_path: Path | None = cls.discover_user_config_file()
            if user_cfg_path is not None:
                discovered.append(user_cfg_path)
            discovered.extend(cls.discover_local_config_files(start or Path.cwd()))

        for cfg_path in [*discovered, *(Path(p) for p in extra_config_files or ())]:
            layer: MutableConfig | None = cls.from_toml_file(cfg_path)
            if layer is not None:
                draft = draft.merge_with(layer)

        logger.debug("Merged config sources: %s", draft.config_files)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        diagnostics = DiagnosticLog.from_iterable(self.diagnostics)
        diagnostics.extend(other.diagnostics)
        return MutableConfig(
            backend=other.backend if other.backend is not None else self.backend,
            max_nesting_depth=other.max_nesting_depth
            if other.max_nesting_depth is not None
            else self.max_nesting_depth,
            strip_mode=other.strip_mode if other.strip_mode is not None else self.strip_mode,
            placeholders=other.placeholders
            if other.placeholders is not None
            else self.placeholders,
            term=other.term if other.term is not None else self.term,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Update fields from an arguments mapping (CLI or API).

        Recognized keys mirror the TOML keys (``backend``, ``max_nesting_depth``,
        ``strip_mode``, ``placeholders``, ``term``). ``None`` values are ignored.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This instance, updated in place.
        """
        logger.debug("Applying arguments to MutableConfig: %s", args)
        overrides = MutableConfig()
        where = CLI_OVERRIDE_STR
        overrides.backend = get_enum_value_checked(
            args,
            Toml.KEY_BACKEND,
            Backend,
            where=where,
            diagnostics=overrides.diagnostics,
            logger=logger,
        )
        overrides.max_nesting_depth = get_int_value_or_none_checked(
            args,
            Toml.KEY_MAX_NESTING_DEPTH,
            where=where,
            diagnostics=overrides.diagnostics,
            logger=logger,
            minimum=1,
        )
        overrides.strip_mode = get_bool_value_or_none_checked(
            args,
            Toml.KEY_STRIP_MODE,
            where=where,
            diagnostics=overrides.diagnostics,
            logger=logger,
        )
        overrides.placeholders = get_bool_value_or_none_checked(
            args,
            Toml.KEY_PLACEHOLDERS,
            where=where,
            diagnostics=overrides.diagnostics,
            logger=logger,
        )
        overrides.term = get_string_value_or_none_checked(
            args,
            Toml.KEY_TERM,
            where=where,
            diagnostics=overrides.diagnostics,
            logger=logger,
        )
        overrides.config_files = [CLI_OVERRIDE_STR]

        merged = self.merge_with(overrides)
        self.backend = merged.backend
        self.max_nesting_depth = merged.max_nesting_depth
        self.strip_mode = merged.strip_mode
        self.placeholders = merged.placeholders
        self.term = merged.term
        self.config_files = merged.config_files
        self.diagnostics = merged.diagnostics
        return self


def default_config() -> Config:
    """Return the frozen runtime defaults (no file discovery)."""
    return MutableConfig.from_defaults().freeze()
