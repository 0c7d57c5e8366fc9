# topmark:header:start
#
#   project      : Chromatag
#   file         : keys.py
#   file_relpath : src/chromatag/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for Chromatag configuration.

Keys defined here are the external configuration API as it appears in
``chromatag.toml`` and in ``[tool.chromatag]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by Chromatag configuration.

    The ordering of constants mirrors ``chromatag-default.toml``.
    """

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_BACKEND: Final[str] = "backend"
    KEY_MAX_NESTING_DEPTH: Final[str] = "max_nesting_depth"
    KEY_STRIP_MODE: Final[str] = "strip_mode"
    KEY_PLACEHOLDERS: Final[str] = "placeholders"

    # [capability]
    SECTION_CAPABILITY: Final[str] = "capability"

    KEY_TERM: Final[str] = "term"

    # pyproject.toml
    SECTION_TOOL: Final[str] = "tool"
