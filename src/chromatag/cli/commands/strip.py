# topmark:header:start
#
#   project      : Chromatag
#   file         : strip.py
#   file_relpath : src/chromatag/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag `strip` command.

Prints the literal text of each TEXT argument (or STDIN). Markup is validated
exactly as for rendering; escapes (``<<``, ``>>``) collapse to single brackets.
"""

from __future__ import annotations

import click

from chromatag.cli.cmd_common import get_console, transform_all
from chromatag.cli.config_resolver import resolve_config_from_click
from chromatag.cli.io import collect_texts
from chromatag.cli.options import common_config_options
from chromatag.style.driver import StyleDriver


@click.command(
    name="strip",
    help="Remove tags from TEXT and print the literal text (STDIN when TEXT is '-' or absent).",
)
@click.argument("texts", nargs=-1, metavar="[TEXT...]")
@common_config_options
@click.option(
    "--placeholders/--no-placeholders",
    "placeholders",
    default=None,
    help="Treat {...} format placeholders as opaque text.",
)
@click.pass_context
def strip_command(
    ctx: click.Context,
    *,
    texts: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    placeholders: bool | None,
) -> None:
    """Strip tags from text."""
    console = get_console(ctx)
    config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        placeholders=placeholders,
    ).freeze()

    driver = StyleDriver(config)
    for line in transform_all(collect_texts(texts), driver.strip):
        console.print(line)
