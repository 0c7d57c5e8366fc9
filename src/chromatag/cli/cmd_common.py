# topmark:header:start
#
#   project      : Chromatag
#   file         : cmd_common.py
#   file_relpath : src/chromatag/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by Chromatag commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chromatag.cli.errors import ChromatagMarkupError
from chromatag.config.logging import get_logger
from chromatag.errors import MarkupError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    import click

    from chromatag.cli_shared.console_api import ConsoleLike
    from chromatag.config.logging import ChromatagLogger

logger: ChromatagLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context by the `cli` group."""
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the resolved verbosity level (a logging level, WARNING by default)."""
    return int(ctx.obj.get("verbosity_level", logging.WARNING))


def is_quiet(ctx: click.Context) -> bool:
    """True when ``-q`` was given."""
    return get_effective_verbosity(ctx) >= logging.ERROR


def markup_cli_error(exc: MarkupError) -> ChromatagMarkupError:
    """Wrap a library markup error into a CLI error showing the caret excerpt."""
    return ChromatagMarkupError(exc.excerpt())


def transform_all(texts: Iterable[str], fn: Callable[[str], str]) -> list[str]:
    """Apply ``fn`` to every input before any output is produced.

    Raises:
        ChromatagMarkupError: On the first malformed input.
    """
    out: list[str] = []
    for text in texts:
        try:
            out.append(fn(text))
        except MarkupError as exc:
            raise markup_cli_error(exc) from exc
    return out
