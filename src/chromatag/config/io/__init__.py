# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : src/chromatag/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for Chromatag configuration.

Submodules:
    - `loaders`: read the packaged defaults and on-disk TOML files.
    - `getters`: checked value getters recording diagnostics.
    - `guards`: type guards for parsed TOML values.
    - `render`: serialize tables to TOML text.
"""

from __future__ import annotations

from chromatag.config.io.loaders import (
    extract_pyproject_table,
    load_default_config_template_toml_text,
    load_defaults_dict,
    load_toml_dict,
)
from chromatag.config.io.render import to_toml

__all__ = [
    "extract_pyproject_table",
    "load_default_config_template_toml_text",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
