# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : src/chromatag/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag: render HTML-like style tags into minimal terminal control sequences.

Example:
    >>> import chromatag
    >>> chromatag.render("<bold>hi</>")
    '\\x1b[1mhi\\x1b[22m'
    >>> chromatag.untagged("<red>a << b</>")
    'a < b'
"""

from __future__ import annotations

from chromatag.config import Backend, Config, MutableConfig
from chromatag.errors import (
    AmbiguousBracket,
    ChromatagError,
    InvalidColorValue,
    MarkupError,
    MaxNestingDepthExceeded,
    MismatchedClose,
    Span,
    UnknownTag,
    UnmatchedClose,
    UnterminatedPlaceholder,
    UnterminatedTag,
)
from chromatag.style.driver import StyleDriver, cformat, cprint, render, untagged
from chromatag.style.model import (
    ActiveStyleSet,
    Attribute,
    BaseColor,
    Category,
    Color,
    ColorSlot,
    Intensity,
    NamedColor,
    PaletteColor,
    RgbColor,
    StyleKind,
    TextStyle,
)

__all__ = [
    "ActiveStyleSet",
    "AmbiguousBracket",
    "Attribute",
    "Backend",
    "BaseColor",
    "Category",
    "ChromatagError",
    "Color",
    "ColorSlot",
    "Config",
    "Intensity",
    "InvalidColorValue",
    "MarkupError",
    "MaxNestingDepthExceeded",
    "MismatchedClose",
    "MutableConfig",
    "NamedColor",
    "PaletteColor",
    "RgbColor",
    "Span",
    "StyleDriver",
    "StyleKind",
    "TextStyle",
    "UnknownTag",
    "UnmatchedClose",
    "UnterminatedPlaceholder",
    "UnterminatedTag",
    "cformat",
    "cprint",
    "render",
    "untagged",
]
