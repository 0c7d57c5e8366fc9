# topmark:header:start
#
#   project      : Chromatag
#   file         : loaders.py
#   file_relpath : src/chromatag/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading Chromatag configuration from:
- the packaged default TOML resource, and
- on-disk TOML files (``chromatag.toml`` / ``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from chromatag.config.io.guards import get_table_value
from chromatag.config.io.render import to_toml
from chromatag.config.keys import Toml
from chromatag.config.logging import get_logger
from chromatag.constants import (
    DEFAULT_MAX_NESTING_DEPTH,
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    PYPROJECT_TOOL_SECTION,
    TOPMARK_END_MARKER,
)

if TYPE_CHECKING:
    from pathlib import Path

    from chromatag.config.logging import ChromatagLogger

    from .types import TomlTable

logger: ChromatagLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return Chromatag's **runtime defaults** as a Python dict.

    This function performs no I/O. The bundled ``chromatag-default.toml`` is an
    annotated template for human-facing output; runtime defaults live in code.

    Returns:
        A new TOML-table-compatible dict containing the runtime defaults.
    """
    return {
        Toml.SECTION_RENDER: {
            Toml.KEY_BACKEND: "direct",
            Toml.KEY_MAX_NESTING_DEPTH: DEFAULT_MAX_NESTING_DEPTH,
            Toml.KEY_STRIP_MODE: False,
            Toml.KEY_PLACEHOLDERS: False,
        },
        Toml.SECTION_CAPABILITY: {
            Toml.KEY_TERM: "",
        },
    }


def load_default_config_template_toml_text() -> tuple[str, Exception | None]:
    """Load the bundled default TOML config *template* as text.

    The header block is stripped so the output starts at the template content.
    If the packaged template cannot be read, a document generated from
    `load_defaults_dict` is returned together with the exception.

    Returns:
        A tuple ``(toml_text, error)``.
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    err: Exception | None = None

    try:
        toml_text: str = resource.read_text(encoding="utf8")
        lines: list[str] = toml_text.splitlines(keepends=True)
        for i, line in enumerate(lines):
            if line.strip() == f"# {TOPMARK_END_MARKER}":
                toml_text = "".join(lines[i + 1 :]).lstrip("\n")
                break
    except OSError as exc:
        err = exc
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        notice: str = (
            f"# NOTE: The packaged template '{DEFAULT_TOML_CONFIG_NAME}' could not be read.\n"
            f"# Reason: {exc}\n\n"
        )
        toml_text = f"{notice}{to_toml(load_defaults_dict())}"

    return toml_text, err


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``chromatag.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_pyproject_table(data: TomlTable) -> TomlTable:
    """Return the ``[tool.chromatag]`` table of a parsed ``pyproject.toml``.

    Args:
        data (TomlTable): The whole parsed ``pyproject.toml``.

    Returns:
        TomlTable: The tool table, or an empty dict when absent.
    """
    return get_table_value(get_table_value(data, Toml.SECTION_TOOL), PYPROJECT_TOOL_SECTION)
