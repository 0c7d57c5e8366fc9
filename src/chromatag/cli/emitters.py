# topmark:header:start
#
#   project      : Chromatag
#   file         : emitters.py
#   file_relpath : src/chromatag/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Human-facing emitters shared by the `config` commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chromatag.constants import TOML_BLOCK_END, TOML_BLOCK_START
from chromatag.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from chromatag.cli_shared.console_api import ConsoleLike
    from chromatag.config.model import Config


def emit_toml_block(
    *,
    console: ConsoleLike,
    title: str,
    toml_text: str,
    verbosity_level: int,
) -> None:
    """Emit a TOML snippet between BEGIN/END markers.

    Args:
        console: Console instance for printing styled output.
        title: Title line shown above the block when ``-v`` was given.
        toml_text: The TOML content to render.
        verbosity_level: Effective verbosity (a logging level).
    """
    if verbosity_level < logging.WARNING:
        console.print(console.styled(title, bold=True, underline=True))
    console.print(console.styled(TOML_BLOCK_START, fg="cyan", dim=True))
    console.print(console.styled(toml_text.rstrip("\n"), fg="cyan"))
    console.print(console.styled(TOML_BLOCK_END, fg="cyan", dim=True))


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" + ("s" if count != 1 else "")


def render_config_diagnostics(
    *,
    console: ConsoleLike,
    config: Config,
    verbosity_level: int,
) -> None:
    """Render config-level diagnostics as TOML comment lines.

    Behavior:
        - If there are no diagnostics, do nothing.
        - Without ``-v``, emit a single triage line with a hint to use ``-v``.
        - With ``-v``, emit the triage line and then one line per diagnostic.

    Args:
        console: Console used for printing.
        config: Effective frozen configuration holding the diagnostics.
        verbosity_level: Effective verbosity (a logging level).
    """
    diags = config.diagnostics
    if not diags:
        return

    n_err = sum(1 for d in diags if d.level == DiagnosticLevel.ERROR)
    n_warn = sum(1 for d in diags if d.level == DiagnosticLevel.WARNING)
    n_info = len(diags) - n_err - n_warn

    parts: list[str] = []
    if n_err:
        parts.append(_plural(n_err, "error"))
    if n_warn:
        parts.append(_plural(n_warn, "warning"))
    # Only mention info when there are no higher-severity diagnostics.
    if n_info and not parts:
        parts.append(_plural(n_info, "info"))
    triage = ", ".join(parts)

    if verbosity_level >= logging.WARNING:
        console.print(
            console.styled(f"# Config diagnostics: {triage} (use '-v' to view details)", fg="blue")
        )
        return

    console.print(console.styled(f"# Config diagnostics: {triage}", fg="blue", bold=True))
    for d in diags:
        line = f"#   {d}"
        console.print(d.level.color(line) if console.enable_color else line)
