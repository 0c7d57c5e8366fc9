# topmark:header:start
#
#   project      : Chromatag
#   file         : main.py
#   file_relpath : src/chromatag/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Chromatag CLI.

Group-level options (verbosity and color) are initialized once and placed into
``ctx.obj``; subcommands read the console and color state from there.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from chromatag.cli.commands.check import check_command
from chromatag.cli.commands.config import config_command
from chromatag.cli.commands.render import render_command
from chromatag.cli.commands.strip import strip_command
from chromatag.cli.commands.tags import tags_command
from chromatag.cli.commands.version import version_command
from chromatag.cli.console import ClickConsole
from chromatag.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from chromatag.cli_shared.color import ColorMode, resolve_color_mode
from chromatag.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from chromatag.cli_shared.console_api import ConsoleLike
    from chromatag.config.logging import ChromatagLogger

logger: ChromatagLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    level_cli: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Internal logging: the environment wins, then -v; silent otherwise
    level_env: int | None = resolve_env_log_level()
    log_level: int | None = level_env
    if log_level is None and level_cli < logging.WARNING:
        log_level = level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Chromatag: render tagged strings into terminal styling.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Chromatag CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'chromatag render \"<bold>TEXT</>\"' to render tagged text.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(strip_command)

cli.add_command(check_command)

cli.add_command(tags_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
