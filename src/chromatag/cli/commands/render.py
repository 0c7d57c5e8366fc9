# topmark:header:start
#
#   project      : Chromatag
#   file         : render.py
#   file_relpath : src/chromatag/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag `render` command.

Renders each TEXT argument (or STDIN) and prints the result, one per line.
When color is disabled (``--color never``, ``NO_COLOR``, or a non-TTY stdout in
auto mode), the command switches to strip mode: tags are validated and removed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chromatag.cli.cmd_common import get_console, transform_all
from chromatag.cli.config_resolver import resolve_config_from_click
from chromatag.cli.io import collect_texts
from chromatag.cli.options import common_config_options, common_render_options
from chromatag.config.logging import get_logger
from chromatag.style.driver import StyleDriver

if TYPE_CHECKING:
    from chromatag.config.logging import ChromatagLogger
    from chromatag.config.model import Config, MutableConfig
    from chromatag.config.types import Backend

logger: ChromatagLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Render tagged TEXT into terminal control sequences (STDIN when TEXT is '-' or absent).",
)
@click.argument("texts", nargs=-1, metavar="[TEXT...]")
@common_config_options
@common_render_options
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    texts: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    backend: Backend | None,
    max_nesting_depth: int | None,
    strip_mode: bool | None,
    placeholders: bool | None,
    term: str | None,
) -> None:
    """Render tagged text.

    Args:
        ctx (click.Context): Click context holding the console and color state.
        texts (tuple[str, ...]): Tagged input strings.
        no_config (bool): Skip config discovery.
        config_paths (tuple[str, ...]): Extra config files.
        backend (Backend | None): Sequence backend override.
        max_nesting_depth (int | None): Nesting limit override.
        strip_mode (bool | None): Strip mode override.
        placeholders (bool | None): Placeholder mode override.
        term (str | None): Terminfo entry override.
    """
    console = get_console(ctx)
    draft: MutableConfig = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        backend=backend,
        max_nesting_depth=max_nesting_depth,
        strip_mode=strip_mode,
        placeholders=placeholders,
        term=term,
    )
    if not ctx.obj.get("color_enabled", False):
        logger.debug("Color disabled; rendering in strip mode")
        draft.strip_mode = True
    config: Config = draft.freeze()

    driver = StyleDriver(config)
    for line in transform_all(collect_texts(texts), driver.process):
        console.print(line)
