# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : src/chromatag/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading configuration."""

from __future__ import annotations

from chromatag.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
]
