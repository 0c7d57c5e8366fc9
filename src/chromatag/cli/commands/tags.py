# topmark:header:start
#
#   project      : Chromatag
#   file         : tags.py
#   file_relpath : src/chromatag/cli/commands/tags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chromatag `tags` command.

Lists every recognized tag name grouped by meaning, followed by the
parametrized tag forms (palette, true color and ``fg:``/``bg:`` specifiers).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from chromatag.cli.cli_types import EnumChoiceParam
from chromatag.cli.cmd_common import get_console
from chromatag.cli_shared.utils import OutputFormat
from chromatag.style.driver import StyleDriver
from chromatag.style.resolver import TAG_FORMS, TAG_TABLE

if TYPE_CHECKING:
    from chromatag.style.model import Attribute


def group_tag_names() -> dict[Attribute, list[str]]:
    """Group the fixed tag names by the attribute they resolve to.

    Returns:
        dict[Attribute, list[str]]: Names per attribute, in table order.
    """
    groups: dict[Attribute, list[str]] = {}
    for name, attribute in TAG_TABLE.items():
        groups.setdefault(attribute, []).append(name)
    return groups


@click.command(
    name="tags",
    help="List all recognized tag names and forms.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.pass_context
def tags_command(ctx: click.Context, *, output_format: OutputFormat | None = None) -> None:
    """List recognized tags.

    Args:
        ctx (click.Context): Click context holding the console and color state.
        output_format (OutputFormat | None): ``text`` (default) or ``json``.
    """
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    groups = group_tag_names()

    if fmt == OutputFormat.JSON:
        payload: dict[str, Any] = {
            "tags": [
                {"names": names, "meaning": attribute.describe()}
                for attribute, names in groups.items()
            ],
            "forms": [{"form": f.form, "meaning": f.meaning} for f in TAG_FORMS],
        }
        console.print(json.dumps(payload, indent=2))
        return

    color_enabled: bool = bool(ctx.obj.get("color_enabled", False))
    driver = StyleDriver()

    console.print(console.styled("Tag names:", bold=True, underline=True))
    width = max(len(", ".join(names)) for names in groups.values())
    for attribute, names in groups.items():
        meaning = attribute.describe()
        if color_enabled:
            meaning = driver.render(f"<{names[0]}>{meaning}</>")
        console.print(f"  {', '.join(names):<{width}}  {meaning}")

    console.print()
    console.print(console.styled("Tag forms:", bold=True, underline=True))
    form_width = max(len(f.form) for f in TAG_FORMS)
    for form in TAG_FORMS:
        console.print(f"  {form.form:<{form_width}}  {form.meaning}")
    console.print()
    console.print("Combine tokens with commas (<bold,red>); close with </name> or </>.")
