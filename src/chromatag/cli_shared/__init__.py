# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : src/chromatag/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by CLI front ends (exit codes, color, console API)."""
