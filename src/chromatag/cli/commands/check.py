# topmark:header:start
#
#   project      : Chromatag
#   file         : check.py
#   file_relpath : src/chromatag/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag `check` command.

Validates the markup of each TEXT argument (or STDIN) without producing
output text. Every input is checked; each failure is reported with a caret
excerpt on stderr and the command exits with ``ExitCode.MARKUP_ERROR``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chromatag.cli.cmd_common import get_console, is_quiet
from chromatag.cli.config_resolver import resolve_config_from_click
from chromatag.cli.io import collect_texts
from chromatag.cli.options import common_config_options
from chromatag.cli_shared.exit_codes import ExitCode
from chromatag.config.logging import get_logger
from chromatag.errors import MarkupError
from chromatag.style.driver import StyleDriver

if TYPE_CHECKING:
    from chromatag.config.logging import ChromatagLogger

logger: ChromatagLogger = get_logger(__name__)


@click.command(
    name="check",
    help="Validate the markup of TEXT (STDIN when TEXT is '-' or absent).",
)
@click.argument("texts", nargs=-1, metavar="[TEXT...]")
@common_config_options
@click.option(
    "--max-depth",
    "max_nesting_depth",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of simultaneously open tags.",
)
@click.option(
    "--placeholders/--no-placeholders",
    "placeholders",
    default=None,
    help="Treat {...} format placeholders as opaque text.",
)
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    texts: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    max_nesting_depth: int | None,
    placeholders: bool | None,
) -> None:
    """Validate tagged text.

    Prints ``ok`` for each valid input (unless ``-q``) and an excerpt with a
    caret marker for each invalid one.
    """
    console = get_console(ctx)
    config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        max_nesting_depth=max_nesting_depth,
        placeholders=placeholders,
    ).freeze()
    driver = StyleDriver(config)

    inputs: list[str] = collect_texts(texts)
    n_failed = 0
    for index, text in enumerate(inputs, start=1):
        label = f"[{index}] " if len(inputs) > 1 else ""
        try:
            driver.strip(text)
        except MarkupError as exc:
            n_failed += 1
            console.error(f"{label}{exc.excerpt()}")
            continue
        if not is_quiet(ctx):
            console.print(f"{label}{console.styled('ok', fg='green')}")

    if n_failed:
        logger.info("%d of %d input(s) failed validation", n_failed, len(inputs))
        ctx.exit(ExitCode.MARKUP_ERROR)
