# topmark:header:start
#
#   project      : Chromatag
#   file         : options.py
#   file_relpath : src/chromatag/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based Chromatag CLI.

This module centralizes reusable options (verbosity, color, config, rendering)
and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from chromatag.cli.cli_types import EnumChoiceParam
from chromatag.cli.errors import ChromatagUsageError
from chromatag.cli_shared.color import ColorMode
from chromatag.config.logging import TRACE_LEVEL
from chromatag.config.types import Backend

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        ChromatagUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ChromatagUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config`` options.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore user and project config files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_render_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply rendering options (backend, depth limit, strip mode, placeholders).

    All options default to ``None`` so that unset flags keep the configured value.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--backend",
        "backend",
        type=EnumChoiceParam(Backend),
        default=None,
        help=f"Sequence backend ({', '.join(b.value for b in Backend)}).",
    )(f)
    f = click.option(
        "--max-depth",
        "max_nesting_depth",
        type=click.IntRange(min=1),
        default=None,
        help="Maximum number of simultaneously open tags.",
    )(f)
    f = click.option(
        "--strip/--no-strip",
        "strip_mode",
        default=None,
        help="Remove tags instead of rendering them (markup is still validated).",
    )(f)
    f = click.option(
        "--placeholders/--no-placeholders",
        "placeholders",
        default=None,
        help="Treat {...} format placeholders as opaque text.",
    )(f)
    f = click.option(
        "--term",
        "term",
        default=None,
        metavar="NAME",
        help="Terminfo entry used by the capability backend (default: $TERM).",
    )(f)
    return f
