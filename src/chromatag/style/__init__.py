# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : src/chromatag/style/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tagged-string styling engine.

Pipeline (each stage only depends on the ones before it):

    model -> resolver -> lexer -> engine -> renderers -> driver
"""

from __future__ import annotations

from chromatag.style.driver import StyleDriver, cformat, cprint, render, untagged

__all__ = [
    "StyleDriver",
    "cformat",
    "cprint",
    "render",
    "untagged",
]
