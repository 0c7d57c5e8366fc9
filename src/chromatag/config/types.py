# topmark:header:start
#
#   project      : Chromatag
#   file         : types.py
#   file_relpath : src/chromatag/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API argument dicts.
    - `Backend`: the sequence renderer strategy.

Keep side effects out of this module so low-level modules can import it.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# Generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]


class Backend(str, Enum):
    """Available strategies for producing control sequences."""

    DIRECT = "direct"
    CAPABILITY = "capability"
