# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : src/chromatag/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag CLI package.

This package groups all Click command definitions and supporting utilities
for the Chromatag command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        chromatag = "chromatag.cli.main:cli"

All subcommands live in `chromatag.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
# Do NOT import .main or commands at module import time
