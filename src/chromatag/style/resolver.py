# topmark:header:start
#
#   project      : Chromatag
#   file         : resolver.py
#   file_relpath : src/chromatag/style/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag resolver: map tag bodies to style attributes.

A tag body is a comma separated list of tokens (``<bold,red>``). Each token is
resolved independently:

1. Static lookup in `TAG_TABLE`, which holds every long name, alias and
   single-letter shortcut (``strong``, ``bright-red``, ``bg-blue``, ``u``, ``R!``).
2. Palette and RGB forms: digits-only (``<214>``), ``p(n)``/``pal(n)``/``palette(n)``
   and their uppercase background variants, ``rgb(r,g,b)``/``RGB(r,g,b)``, ``#RRGGBB``.
3. Slot specifiers ``fg:``/``f:``/``bg:``/``b:`` followed by any lowercase color form.

Commas inside parentheses do not split tokens, so ``<rgb(1,2,3),bold>`` has two
tokens. A failing token fails the whole tag.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from chromatag.config.logging import get_logger
from chromatag.errors import InvalidColorValue, UnknownTag
from chromatag.style.model import (
    BaseColor,
    ColorSlot,
    Intensity,
    NamedColor,
    PaletteColor,
    RgbColor,
    StyleKind,
    TextStyle,
    bg,
    fg,
)

if TYPE_CHECKING:
    from chromatag.config.logging import ChromatagLogger
    from chromatag.errors import Span
    from chromatag.style.model import Attribute, Color, ColorValue

logger: ChromatagLogger = get_logger(__name__)


_SHORTCUT_LETTERS: Final[dict[BaseColor, str]] = {
    BaseColor.BLACK: "k",
    BaseColor.RED: "r",
    BaseColor.GREEN: "g",
    BaseColor.YELLOW: "y",
    BaseColor.BLUE: "b",
    BaseColor.MAGENTA: "m",
    BaseColor.CYAN: "c",
    BaseColor.WHITE: "w",
}

_STYLE_NAMES: Final[dict[str, StyleKind]] = {
    "bold": StyleKind.BOLD,
    "strong": StyleKind.BOLD,
    "em": StyleKind.BOLD,
    "s": StyleKind.BOLD,
    "dim": StyleKind.DIM,
    "underline": StyleKind.UNDERLINE,
    "u": StyleKind.UNDERLINE,
    "italic": StyleKind.ITALIC,
    "italics": StyleKind.ITALIC,
    "i": StyleKind.ITALIC,
    "blink": StyleKind.BLINK,
    "strike": StyleKind.STRIKE,
    "reverse": StyleKind.REVERSE,
    "rev": StyleKind.REVERSE,
    "conceal": StyleKind.CONCEAL,
    "hide": StyleKind.CONCEAL,
}

_FG_SPECIFIERS: Final[frozenset[str]] = frozenset({"fg", "f"})
_BG_SPECIFIERS: Final[frozenset[str]] = frozenset({"bg", "b"})

_PALETTE_FUNCTIONS: Final[dict[str, ColorSlot]] = {
    "p": ColorSlot.FOREGROUND,
    "pal": ColorSlot.FOREGROUND,
    "palette": ColorSlot.FOREGROUND,
    "P": ColorSlot.BACKGROUND,
    "PAL": ColorSlot.BACKGROUND,
    "PALETTE": ColorSlot.BACKGROUND,
}
_RGB_FUNCTIONS: Final[dict[str, ColorSlot]] = {
    "rgb": ColorSlot.FOREGROUND,
    "RGB": ColorSlot.BACKGROUND,
}

_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]+")
_HEX_RE: Final[re.Pattern[str]] = re.compile(r"#[0-9A-Fa-f]{6}")
_FUNCTION_RE: Final[re.Pattern[str]] = re.compile(r"(?P<name>[A-Za-z]+)\s*\((?P<args>.*)", re.DOTALL)


def _lowercase_color_names() -> dict[str, NamedColor]:
    """Build the lowercase (foreground style) names of the 16 named colors."""
    names: dict[str, NamedColor] = {}
    for base, letter in _SHORTCUT_LETTERS.items():
        long_name = base.name.lower()
        normal = NamedColor(base)
        bright = NamedColor(base, Intensity.BRIGHT)
        names[letter] = normal
        names[long_name] = normal
        names[f"{letter}!"] = bright
        names[f"{long_name}!"] = bright
        names[f"bright-{long_name}"] = bright
    return names


def _build_tag_table() -> dict[str, Attribute]:
    table: dict[str, Attribute] = {}
    for name, kind in _STYLE_NAMES.items():
        table[name] = TextStyle(kind)

    for name, color in _COLOR_NAMES.items():
        table[name] = fg(color)

    for base, letter in _SHORTCUT_LETTERS.items():
        long_name = base.name.lower()
        normal = bg(NamedColor(base))
        bright = bg(NamedColor(base, Intensity.BRIGHT))
        for name in (letter.upper(), long_name.upper(), f"bg-{long_name}"):
            table[name] = normal
        for name in (
            f"{letter.upper()}!",
            f"{long_name.upper()}!",
            f"BRIGHT-{long_name.upper()}",
            f"bg-{long_name}!",
            f"bg-bright-{long_name}",
        ):
            table[name] = bright
    return table


_COLOR_NAMES: Final[dict[str, NamedColor]] = _lowercase_color_names()

#: Every fixed tag name, alias and shortcut, built once at import.
TAG_TABLE: Final[dict[str, Attribute]] = _build_tag_table()


@dataclass(frozen=True, slots=True)
class TagForm:
    """A parametrized tag form, listed by `chromatag tags`."""

    form: str
    meaning: str


TAG_FORMS: Final[tuple[TagForm, ...]] = (
    TagForm("<n>", "fg palette color n (0-255)"),
    TagForm("p(n) | pal(n) | palette(n)", "fg palette color n (0-255)"),
    TagForm("P(n) | PAL(n) | PALETTE(n)", "bg palette color n (0-255)"),
    TagForm("rgb(r,g,b) | #RRGGBB", "fg true color"),
    TagForm("RGB(r,g,b)", "bg true color"),
    TagForm("fg:<color> | f:<color>", "fg color given in lowercase form"),
    TagForm("bg:<color> | b:<color>", "bg color given in lowercase form"),
)


def split_tokens(body: str) -> list[str]:
    """Split a tag body on commas at parenthesis depth zero.

    Args:
        body (str): The raw tag body.

    Returns:
        list[str]: Whitespace-stripped tokens (possibly empty strings).
    """
    tokens: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in body:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth = max(0, depth - 1)
        elif ch == "," and depth == 0:
            tokens.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    tokens.append("".join(current).strip())
    return tokens


def resolve_tag(body: str, span: Span | None = None) -> tuple[Attribute, ...]:
    """Resolve a full tag body into its ordered attributes.

    Args:
        body (str): The text between ``<`` and ``>`` (without a leading ``/``).
        span (Span | None): Location of the tag, attached to raised errors.

    Returns:
        tuple[Attribute, ...]: Non-empty tuple of attributes in token order.

    Raises:
        UnknownTag: On an empty body, an empty token or an unresolvable token.
        InvalidColorValue: On a malformed or out-of-range color value.
    """
    if not body.strip():
        raise UnknownTag("", span=span)
    attributes = tuple(resolve_token(token, span) for token in split_tokens(body))
    logger.trace("resolved <%s> to %s", body, [a.describe() for a in attributes])
    return attributes


def resolve_token(token: str, span: Span | None = None) -> Attribute:
    """Resolve a single, already stripped token.

    Args:
        token (str): A token such as ``"bold"``, ``"R!"`` or ``"bg:p(12)"``.
        span (Span | None): Location attached to raised errors.

    Returns:
        Attribute: The resolved attribute.
    """
    if not token:
        raise UnknownTag("", span=span)

    attribute = TAG_TABLE.get(token)
    if attribute is not None:
        return attribute

    if token.isascii() and _DIGITS_RE.fullmatch(token):
        return fg(_palette(token, token, span))

    if token.startswith("#"):
        return fg(_hex(token, token, span))

    match = _FUNCTION_RE.fullmatch(token)
    if match is not None:
        return _resolve_function(match.group("name"), match.group("args"), token, span)

    if ":" in token:
        specifier, _, rest = token.partition(":")
        specifier = specifier.strip()
        if specifier in _FG_SPECIFIERS:
            return fg(_lowercase_color(rest.strip(), token, span))
        if specifier in _BG_SPECIFIERS:
            return bg(_lowercase_color(rest.strip(), token, span))

    raise UnknownTag(token, span=span)


def _resolve_function(name: str, args: str, token: str, span: Span | None) -> Color:
    if name in _PALETTE_FUNCTIONS:
        slot = _PALETTE_FUNCTIONS[name]
        value: ColorValue = _palette(_call_args(args, token, span), token, span)
    elif name in _RGB_FUNCTIONS:
        slot = _RGB_FUNCTIONS[name]
        value = _rgb(_call_args(args, token, span), token, span)
    else:
        raise UnknownTag(token, span=span)
    return fg(value) if slot is ColorSlot.FOREGROUND else bg(value)


def _call_args(args: str, token: str, span: Span | None) -> str:
    args = args.rstrip()
    if not args.endswith(")"):
        raise InvalidColorValue(token, span=span)
    return args[:-1]


def _component(text: str, token: str, span: Span | None) -> int:
    text = text.strip()
    if not (text.isascii() and _DIGITS_RE.fullmatch(text)):
        raise InvalidColorValue(token, span=span)
    value = int(text)
    if value > 255:
        raise InvalidColorValue(token, span=span)
    return value


def _palette(text: str, token: str, span: Span | None) -> PaletteColor:
    return PaletteColor(_component(text, token, span))


def _rgb(text: str, token: str, span: Span | None) -> RgbColor:
    parts = text.split(",")
    if len(parts) != 3:
        raise InvalidColorValue(token, span=span)
    r, g, b = (_component(part, token, span) for part in parts)
    return RgbColor(r, g, b)


def _hex(text: str, token: str, span: Span | None) -> RgbColor:
    if not _HEX_RE.fullmatch(text):
        raise InvalidColorValue(token, span=span)
    return RgbColor(int(text[1:3], 16), int(text[3:5], 16), int(text[5:7], 16))


def _lowercase_color(text: str, token: str, span: Span | None) -> ColorValue:
    """Resolve the color after a slot specifier (lowercase forms only)."""
    named = _COLOR_NAMES.get(text)
    if named is not None:
        return named
    if text.isascii() and _DIGITS_RE.fullmatch(text):
        return _palette(text, token, span)
    if text.startswith("#"):
        return _hex(text, token, span)
    match = _FUNCTION_RE.fullmatch(text)
    if match is not None:
        name = match.group("name")
        if name in ("p", "pal", "palette"):
            return _palette(_call_args(match.group("args"), token, span), token, span)
        if name == "rgb":
            return _rgb(_call_args(match.group("args"), token, span), token, span)
    raise UnknownTag(token, span=span)
