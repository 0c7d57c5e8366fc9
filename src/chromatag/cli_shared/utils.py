# topmark:header:start
#
#   project      : Chromatag
#   file         : utils.py
#   file_relpath : src/chromatag/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output-format helpers shared by CLI commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for listing commands.

    Attributes:
        TEXT: Human-readable text (may be colorized).
        JSON: Machine-readable JSON (never colorized).
    """

    TEXT = "text"
    JSON = "json"
