# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : src/chromatag/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag CLI subcommands.

Each module defines one Click command (or group) that is registered on the
root `cli` group in `chromatag.cli.main`.
"""
