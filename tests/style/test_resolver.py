# topmark:header:start
#
#   project      : Chromatag
#   file         : test_resolver.py
#   file_relpath : tests/style/test_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for tag name, alias, shortcut and parametrized color resolution."""

from __future__ import annotations

import pytest

from chromatag.errors import InvalidColorValue, Span, UnknownTag
from chromatag.style.model import (
    Attribute,
    BaseColor,
    Intensity,
    NamedColor,
    PaletteColor,
    RgbColor,
    StyleKind,
    TextStyle,
    bg,
    fg,
)
from chromatag.style.resolver import TAG_FORMS, TAG_TABLE, resolve_tag, resolve_token, split_tokens
from tests.conftest import parametrize

RED = NamedColor(BaseColor.RED)
BRIGHT_RED = NamedColor(BaseColor.RED, Intensity.BRIGHT)


@parametrize(
    "token, expected",
    [
        # styles and aliases
        ("bold", TextStyle(StyleKind.BOLD)),
        ("strong", TextStyle(StyleKind.BOLD)),
        ("em", TextStyle(StyleKind.BOLD)),
        ("s", TextStyle(StyleKind.BOLD)),
        ("dim", TextStyle(StyleKind.DIM)),
        ("u", TextStyle(StyleKind.UNDERLINE)),
        ("underline", TextStyle(StyleKind.UNDERLINE)),
        ("i", TextStyle(StyleKind.ITALIC)),
        ("italics", TextStyle(StyleKind.ITALIC)),
        ("blink", TextStyle(StyleKind.BLINK)),
        ("strike", TextStyle(StyleKind.STRIKE)),
        ("rev", TextStyle(StyleKind.REVERSE)),
        ("hide", TextStyle(StyleKind.CONCEAL)),
        # foreground names and shortcuts
        ("r", fg(RED)),
        ("red", fg(RED)),
        ("k", fg(NamedColor(BaseColor.BLACK))),
        ("b", fg(NamedColor(BaseColor.BLUE))),
        ("r!", fg(BRIGHT_RED)),
        ("red!", fg(BRIGHT_RED)),
        ("bright-red", fg(BRIGHT_RED)),
        # background names and shortcuts
        ("R", bg(RED)),
        ("RED", bg(RED)),
        ("bg-red", bg(RED)),
        ("R!", bg(BRIGHT_RED)),
        ("RED!", bg(BRIGHT_RED)),
        ("BRIGHT-RED", bg(BRIGHT_RED)),
        ("bg-red!", bg(BRIGHT_RED)),
        ("bg-bright-red", bg(BRIGHT_RED)),
        # slot specifiers
        ("fg:red", fg(RED)),
        ("f:r!", fg(BRIGHT_RED)),
        ("bg:blue", bg(NamedColor(BaseColor.BLUE))),
        ("b:y", bg(NamedColor(BaseColor.YELLOW))),
        ("bg:214", bg(PaletteColor(214))),
        ("bg:#000000", bg(RgbColor(0, 0, 0))),
        ("bg:rgb(1,2,3)", bg(RgbColor(1, 2, 3))),
        ("fg:p(7)", fg(PaletteColor(7))),
        # palette and true color
        ("0", fg(PaletteColor(0))),
        ("214", fg(PaletteColor(214))),
        ("255", fg(PaletteColor(255))),
        ("p(12)", fg(PaletteColor(12))),
        ("pal(12)", fg(PaletteColor(12))),
        ("palette( 12 )", fg(PaletteColor(12))),
        ("P(12)", bg(PaletteColor(12))),
        ("PALETTE(12)", bg(PaletteColor(12))),
        ("rgb(255, 128, 0)", fg(RgbColor(255, 128, 0))),
        ("RGB(1,2,3)", bg(RgbColor(1, 2, 3))),
        ("#ff8000", fg(RgbColor(255, 128, 0))),
        ("#FF8000", fg(RgbColor(255, 128, 0))),
    ],
)
def test_resolve_token(token: str, expected: Attribute) -> None:
    """Every supported spelling resolves to the expected attribute."""
    assert resolve_token(token) == expected


@parametrize(
    "token",
    ["256", "999", "p(256)", "P(-1)", "rgb(1,2)", "rgb(1,2,3,4)", "rgb(1,2,300)",
     "rgb(a,b,c)", "rgb(1,2,3", "#12345", "#1234567", "#gg0000", "bg:#12", "fg:999"],
)
def test_invalid_color_values(token: str) -> None:
    """Malformed or out-of-range color values fail with `InvalidColorValue`."""
    with pytest.raises(InvalidColorValue) as exc_info:
        resolve_token(token)
    assert exc_info.value.token == token


@parametrize(
    "token",
    ["not-a-color", "Bold", "x", "foo(1)", "zz:red", "bg:R", "fg:BLUE", "bright-RED", "rgb"],
)
def test_unknown_tokens(token: str) -> None:
    """Unknown names fail with `UnknownTag` naming the token."""
    with pytest.raises(UnknownTag) as exc_info:
        resolve_token(token)
    assert exc_info.value.name == token


def test_resolve_tag_combines_tokens_in_order() -> None:
    """Comma separated tokens resolve independently, whitespace ignored."""
    assert resolve_tag(" bold , red ") == (TextStyle(StyleKind.BOLD), fg(RED))


def test_resolve_tag_keeps_commas_inside_parentheses() -> None:
    """Commas inside function arguments do not split tokens."""
    assert split_tokens("rgb(1,2,3),bold") == ["rgb(1,2,3)", "bold"]
    assert resolve_tag("rgb(1,2,3),W") == (fg(RgbColor(1, 2, 3)), bg(NamedColor(BaseColor.WHITE)))


@parametrize("body", ["", "   ", "bold,", ",red", "bold,,red"])
def test_empty_tag_or_token_is_unknown(body: str) -> None:
    """Empty bodies and empty tokens fail with `UnknownTag("")`."""
    with pytest.raises(UnknownTag) as exc_info:
        resolve_tag(body)
    assert exc_info.value.name == ""


def test_partial_failure_fails_whole_tag() -> None:
    """One bad token fails the tag; the error carries the tag span."""
    span = Span(3, 15)
    with pytest.raises(UnknownTag) as exc_info:
        resolve_tag("bold,nope", span)
    assert exc_info.value.name == "nope"
    assert exc_info.value.span == span


def test_tag_table_covers_all_colors() -> None:
    """Each base color has fg and bg, normal and bright spellings."""
    for base in BaseColor:
        name = base.name.lower()
        assert TAG_TABLE[name] == fg(NamedColor(base))
        assert TAG_TABLE[f"{name}!"] == fg(NamedColor(base, Intensity.BRIGHT))
        assert TAG_TABLE[name.upper()] == bg(NamedColor(base))
        assert TAG_TABLE[f"bg-bright-{name}"] == bg(NamedColor(base, Intensity.BRIGHT))


def test_tag_forms_are_listed() -> None:
    """The parametrized forms shown by `chromatag tags` are documented."""
    forms = " ".join(form.form for form in TAG_FORMS)
    for needle in ("p(n)", "P(n)", "rgb(r,g,b)", "#RRGGBB", "RGB(r,g,b)", "fg:", "bg:"):
        assert needle in forms
