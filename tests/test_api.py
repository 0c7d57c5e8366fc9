# topmark:header:start
#
#   project      : Chromatag
#   file         : test_api.py
#   file_relpath : tests/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public names exported by the `chromatag` package."""

from __future__ import annotations

import pytest

import chromatag


def test_all_names_resolve() -> None:
    """Every name in `__all__` is importable from the package."""
    for name in chromatag.__all__:
        assert getattr(chromatag, name) is not None


def test_errors_share_a_base() -> None:
    """Markup errors derive from `MarkupError` and `ChromatagError`."""
    for name in (
        "AmbiguousBracket",
        "InvalidColorValue",
        "MaxNestingDepthExceeded",
        "MismatchedClose",
        "UnknownTag",
        "UnmatchedClose",
        "UnterminatedPlaceholder",
        "UnterminatedTag",
    ):
        cls = getattr(chromatag, name)
        assert issubclass(cls, chromatag.MarkupError)
        assert issubclass(cls, chromatag.ChromatagError)


def test_module_level_helpers() -> None:
    """`render` and `untagged` use the default direct driver."""
    assert chromatag.render("<bold>hi</>") == "\x1b[1mhi\x1b[22m"
    assert chromatag.untagged("<red>a << b</>") == "a < b"
    assert chromatag.cformat("<red>{}</>", "<b>") == "\x1b[31m<b>\x1b[39m"


def test_module_level_errors() -> None:
    """Malformed markup raises from the helpers."""
    with pytest.raises(chromatag.UnknownTag):
        chromatag.render("<nope>x</>")
    with pytest.raises(chromatag.UnmatchedClose):
        chromatag.untagged("x</>")


def test_driver_with_config() -> None:
    """A driver built from a config honors it."""
    draft = chromatag.MutableConfig.from_defaults()
    draft.strip_mode = True
    driver = chromatag.StyleDriver(draft.freeze())
    assert driver.process("<bold>x</>") == "x"
    assert driver.config.backend is chromatag.Backend.DIRECT
