# topmark:header:start
#
#   project      : Chromatag
#   file         : constants.py
#   file_relpath : src/chromatag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CHROMATAG_VERSION: str = get_version("chromatag")

# Name of the bundled default config inside the package `chromatag.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "chromatag.config"
DEFAULT_TOML_CONFIG_NAME: str = "chromatag-default.toml"

# Config file names consulted during discovery:
LOCAL_TOML_CONFIG_NAME: str = "chromatag.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "chromatag"

TOPMARK_END_MARKER: str = "topmark:header:end"

# Markers wrapping TOML output of `chromatag config`:
TOML_BLOCK_START: str = "# === BEGIN[TOML] ==="
TOML_BLOCK_END: str = "# === END[TOML] ==="

#: Default bound on the number of simultaneously open tags.
DEFAULT_MAX_NESTING_DEPTH: int = 64
