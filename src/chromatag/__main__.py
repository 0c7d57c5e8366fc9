# topmark:header:start
#
#   project      : Chromatag
#   file         : __main__.py
#   file_relpath : src/chromatag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m chromatag``."""

from chromatag.cli.main import cli

if __name__ == "__main__":
    cli()
