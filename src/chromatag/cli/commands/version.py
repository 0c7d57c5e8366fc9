# topmark:header:start
#
#   project      : Chromatag
#   file         : version.py
#   file_relpath : src/chromatag/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag `version` command.

Prints the current Chromatag version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging

import click

from chromatag.cli.cli_types import EnumChoiceParam
from chromatag.cli.cmd_common import get_console, get_effective_verbosity
from chromatag.cli_shared.utils import OutputFormat
from chromatag.constants import CHROMATAG_VERSION


@click.command(
    name="version",
    help="Show the current version of Chromatag.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Chromatag.

    Args:
        ctx (click.Context): Click context holding the console.
        output_format (OutputFormat | None): ``text`` (default) or ``json``.
    """
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": CHROMATAG_VERSION}))
    elif get_effective_verbosity(ctx) < logging.WARNING:
        console.print(console.styled("Chromatag version:", bold=True, underline=True))
        console.print(f"    {console.styled(CHROMATAG_VERSION, bold=True)}")
    else:
        console.print(console.styled(CHROMATAG_VERSION, bold=True))
