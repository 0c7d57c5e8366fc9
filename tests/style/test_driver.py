# topmark:header:start
#
#   project      : Chromatag
#   file         : test_driver.py
#   file_relpath : tests/style/test_driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end rendering tests through `StyleDriver` with the direct backend."""

from __future__ import annotations

import io

import pytest

from chromatag.config.types import Backend
from chromatag.errors import (
    AmbiguousBracket,
    InvalidColorValue,
    MarkupError,
    MaxNestingDepthExceeded,
    MismatchedClose,
    Span,
    UnknownTag,
    UnmatchedClose,
    UnterminatedTag,
)
from chromatag.style.driver import StyleDriver, cformat, cprint, make_renderer, render, untagged
from chromatag.style.renderers import CapabilityRenderer, DirectRenderer
from tests.conftest import make_config, make_driver, parametrize


@parametrize(
    "text, expected",
    [
        ("", ""),
        ("plain", "plain"),
        ("<bold>hi</>", "\x1b[1mhi\x1b[22m"),
        ("<green>X</green>", "\x1b[32mX\x1b[39m"),
        ("<red>a<blue>b</>c</>", "\x1b[31ma\x1b[34mb\x1b[31mc\x1b[39m"),
        ("<bold><blue>X</blue>Y</bold>", "\x1b[34m\x1b[1mX\x1b[39mY\x1b[22m"),
        ("<bg:blue,u>x</>", "\x1b[44m\x1b[4mx\x1b[49m\x1b[24m"),
        ("<214>x", "\x1b[38;5;214mx\x1b[39m"),
        ("<#ff8000>x", "\x1b[38;2;255;128;0mx\x1b[39m"),
        ("<bold></>", ""),
        ("<bold>", ""),
        ("a << b >> c", "a < b > c"),
        ("<bold><dim>x</dim>y</>", "\x1b[1m\x1b[2mx\x1b[22m\x1b[1my\x1b[22m"),
    ],
)
def test_render(text: str, expected: str) -> None:
    """Rendered output holds the minimal sequences around the literal text."""
    assert render(text) == expected


def test_worked_example() -> None:
    """Consecutive tags collapse and every category changes once per value."""
    text = "<bold><bold> A <bold,blue> B </> C </></>"
    assert render(text) == "\x1b[1m A \x1b[34m B \x1b[39m C \x1b[22m"


def test_redundant_nesting_emits_once() -> None:
    """Triple bold sets and resets bold exactly once."""
    out = render("<bold><bold>A<bold>B</></></>")
    assert out == "\x1b[1mAB\x1b[22m"
    assert out.count("\x1b[1m") == 1
    assert out.count("\x1b[22m") == 1


def test_shorthand_equivalence() -> None:
    """Explicit and shorthand closes render identically."""
    assert render("<green>X</green>") == render("<green>X</>")
    assert render("<strong>X</bold>") == render("<bold>X</>")


def test_unclosed_tags_auto_close() -> None:
    """Tags left open are closed at the end of input."""
    assert render("<bold><italic>Z") == render("<bold><italic>Z</></>")
    assert render("<bold><italic>Z").endswith("\x1b[22m\x1b[23m")


@parametrize(
    "text, error",
    [
        ("<green>X</blue>", MismatchedClose),
        ("<not-a-color>X</>", UnknownTag),
        ("<>", UnknownTag),
        ("x</>", UnmatchedClose),
        ("<bold", UnterminatedTag),
        ("a > b", AmbiguousBracket),
        ("<256>x", InvalidColorValue),
    ],
)
def test_markup_errors(text: str, error: type[MarkupError]) -> None:
    """Malformed markup raises the matching error; no partial output."""
    with pytest.raises(error):
        render(text)


def test_unknown_tag_names_the_token() -> None:
    """The error carries the unknown name and the tag location."""
    with pytest.raises(UnknownTag) as exc_info:
        render("<not-a-color>X</>")
    assert exc_info.value.name == "not-a-color"
    assert exc_info.value.span == Span(0, 13)


def test_error_excerpt_points_at_tag() -> None:
    """Errors carry the source so a caret excerpt can be rendered."""
    with pytest.raises(MarkupError) as exc_info:
        render("ab <nope> cd")
    exc = exc_info.value
    assert exc.source == "ab <nope> cd"
    assert exc.excerpt() == "Unknown tag: 'nope'\n1 | ab <nope> cd\n" + " " * 7 + "^" * 6


def test_error_excerpt_on_later_line() -> None:
    """The excerpt shows the offending line only."""
    with pytest.raises(MarkupError) as exc_info:
        render("first\nsec > ond")
    lines = exc_info.value.excerpt().splitlines()
    assert lines[1] == "2 | sec > ond"
    assert lines[2] == " " * 8 + "^"


def test_max_nesting_depth() -> None:
    """The configured depth bounds the number of open tags."""
    driver = make_driver(max_nesting_depth=2)
    assert driver.render("<b><u>x") == "\x1b[34m\x1b[4mx\x1b[39m\x1b[24m"
    with pytest.raises(MaxNestingDepthExceeded):
        driver.render("<b><u><i>x")


def test_strip() -> None:
    """Stripping keeps the literal text and still validates."""
    assert untagged("<red>a << b</>") == "a < b"
    assert untagged("<bold,rgb(1,2,3)>x</> y") == "x y"
    with pytest.raises(MismatchedClose):
        untagged("<green>X</blue>")


def test_process_follows_strip_mode() -> None:
    """`process()` renders or strips depending on the config."""
    assert make_driver(strip_mode=True).process("<bold>x</>") == "x"
    assert make_driver(strip_mode=False).process("<bold>x</>") == "\x1b[1mx\x1b[22m"


def test_placeholders_from_config() -> None:
    """Placeholder mode can come from the config or the call."""
    driver = make_driver(placeholders=True)
    assert driver.render("<b>{:>3}</>") == "\x1b[34m{:>3}\x1b[39m"
    with pytest.raises(AmbiguousBracket):
        driver.render("<b>{:>3}</>", placeholders=False)


def test_make_renderer_follows_backend() -> None:
    """The backend selects the renderer."""
    assert isinstance(make_renderer(make_config()), DirectRenderer)
    assert isinstance(make_renderer(make_config(backend=Backend.CAPABILITY)), CapabilityRenderer)


def test_driver_is_reusable() -> None:
    """No state leaks between calls, even after an error."""
    driver = StyleDriver()
    with pytest.raises(UnterminatedTag):
        driver.render("<bold>x<u")
    assert driver.render("y") == "y"


def test_cformat_substitutes_after_rendering() -> None:
    """Substituted values are never scanned for tags."""
    assert cformat("<red>{}</>", "<b>") == "\x1b[31m<b>\x1b[39m"
    assert cformat("<bold>{:>4}</>", 7) == "\x1b[1m   7\x1b[22m"
    assert cformat("{{<bold>{name}</>}}", name="x") == "{\x1b[1mx\x1b[22m}"


def test_cprint_writes_to_file() -> None:
    """`cprint` prints the formatted text with the given line ending."""
    buf = io.StringIO()
    cprint("<u>{}</>", "x", file=buf, end="")
    assert buf.getvalue() == "\x1b[4mx\x1b[24m"
