# topmark:header:start
#
#   project      : Chromatag
#   file         : config.py
#   file_relpath : src/chromatag/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag `config` command group.

Provides subcommands for inspecting Chromatag configuration:

  * ``chromatag config dump``: show the effective merged configuration.
  * ``chromatag config defaults``: show the annotated default configuration.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from chromatag.cli.cmd_common import get_console, get_effective_verbosity
from chromatag.cli.config_resolver import resolve_config_from_click
from chromatag.cli.emitters import emit_toml_block, render_config_diagnostics
from chromatag.cli.options import common_config_options, common_render_options
from chromatag.config.io import load_default_config_template_toml_text, to_toml
from chromatag.config.logging import get_logger

if TYPE_CHECKING:
    from chromatag.config.logging import ChromatagLogger
    from chromatag.config.model import Config
    from chromatag.config.types import Backend

logger: ChromatagLogger = get_logger(__name__)


@click.group(
    name="config",
    help="Inspect Chromatag configuration.",
)
def config_command() -> None:
    """Group for configuration-related subcommands.

    This group itself performs no action; use ``dump`` or ``defaults``.
    """


@config_command.command(
    name="dump",
    help=(
        "Dump the final merged configuration (defaults, config files, CLI overrides) as TOML."
    ),
)
@common_config_options
@common_render_options
@click.pass_context
def config_dump_command(
    ctx: click.Context,
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    backend: Backend | None,
    max_nesting_depth: int | None,
    strip_mode: bool | None,
    placeholders: bool | None,
    term: str | None,
) -> None:
    """Dump the effective configuration.

    Builds the configuration from defaults, discovered and explicit config
    files, and CLI overrides, then prints it as TOML between BEGIN/END markers.
    Loading problems are summarized as comment lines above the block.
    """
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = resolve_config_from_click(
        no_config=no_config,
        config_paths=config_paths,
        backend=backend,
        max_nesting_depth=max_nesting_depth,
        strip_mode=strip_mode,
        placeholders=placeholders,
        term=term,
    ).freeze()
    logger.trace("Config after merging CLI and discovered config: %s", config)

    render_config_diagnostics(console=console, config=config, verbosity_level=vlevel)
    if vlevel < logging.WARNING:
        console.print(f"# Config files processed: {len(config.config_files)}")
        for i, source in enumerate(config.config_files, start=1):
            console.print(f"#   {i}: {source}")

    emit_toml_block(
        console=console,
        title="Chromatag Config Dump (TOML):",
        toml_text=to_toml(config.to_toml_dict()),
        verbosity_level=vlevel,
    )


@config_command.command(
    name="defaults",
    help="Display the annotated default Chromatag configuration file.",
)
@click.pass_context
def config_defaults_command(ctx: click.Context) -> None:
    """Print the packaged, commented default configuration template."""
    console = get_console(ctx)
    toml_text, err = load_default_config_template_toml_text()
    if err is not None:
        console.warn(f"Falling back to synthesized default config: {err}")

    emit_toml_block(
        console=console,
        title="Default Chromatag Configuration (TOML):",
        toml_text=toml_text,
        verbosity_level=get_effective_verbosity(ctx),
    )
