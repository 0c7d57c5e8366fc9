# topmark:header:start
#
#   project      : Chromatag
#   file         : __init__.py
#   file_relpath : tests/style/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
