# topmark:header:start
#
#   project      : Chromatag
#   file         : io.py
#   file_relpath : src/chromatag/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers for Chromatag commands.

Commands accept tagged strings as positional TEXT arguments. When no TEXT is
given, or a TEXT is ``-``, the text is read from STDIN instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chromatag.cli.errors import ChromatagIOError, ChromatagUsageError
from chromatag.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chromatag.config.logging import ChromatagLogger

logger: ChromatagLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def read_stdin_text() -> str:
    """Read all of STDIN, dropping a single trailing newline.

    Raises:
        ChromatagUsageError: If STDIN is an interactive terminal.
        ChromatagIOError: If STDIN cannot be read.
    """
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        raise ChromatagUsageError("No TEXT given and STDIN is a terminal.")
    try:
        data: str = stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ChromatagIOError(f"Cannot read STDIN: {exc}") from exc
    logger.debug("Read %d characters from STDIN", len(data))
    return data[:-1] if data.endswith("\n") else data


def collect_texts(texts: Iterable[str]) -> list[str]:
    """Return the inputs to process, replacing ``-`` (or nothing) by STDIN content.

    STDIN is read at most once, even if ``-`` is given several times.
    """
    items: list[str] = list(texts) or [STDIN_MARKER]
    stdin_text: str | None = None
    out: list[str] = []
    for item in items:
        if item == STDIN_MARKER:
            if stdin_text is None:
                stdin_text = read_stdin_text()
            out.append(stdin_text)
        else:
            out.append(item)
    return out
