# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : src/chromatag/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Chromatag.

Defines the `Config` snapshot and its `MutableConfig` builder, TOML loading with
layered discovery (defaults, user file, project files, explicit files, CLI
overrides) and the Chromatag logging setup.
"""

from __future__ import annotations

from chromatag.config.model import Config, MutableConfig, default_config
from chromatag.config.types import Backend

__all__ = [
    "Backend",
    "Config",
    "MutableConfig",
    "default_config",
]
