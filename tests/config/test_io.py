# topmark:header:start
#
#   project      : Chromatag
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML helpers in `chromatag.config.io`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from chromatag.config.io import (
    extract_pyproject_table,
    load_default_config_template_toml_text,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from chromatag.constants import TOPMARK_END_MARKER

if TYPE_CHECKING:
    from pathlib import Path


def test_template_matches_runtime_defaults() -> None:
    """The annotated template carries exactly the runtime defaults."""
    text, err = load_default_config_template_toml_text()
    assert err is None
    assert TOPMARK_END_MARKER not in text
    assert text.startswith("# Chromatag configuration")
    assert tomlkit.parse(text).unwrap() == load_defaults_dict()


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """Unreadable files load as an empty table."""
    assert load_toml_dict(tmp_path / "absent.toml") == {}


def test_extract_pyproject_table() -> None:
    """Only ``[tool.chromatag]`` is returned."""
    data = {"tool": {"chromatag": {"render": {"strip_mode": True}}, "other": {"x": 1}}}
    assert extract_pyproject_table(data) == {"render": {"strip_mode": True}}
    assert extract_pyproject_table({"project": {"name": "x"}}) == {}


def test_to_toml_drops_none() -> None:
    """TOML has no null; `None` entries are left out."""
    text = to_toml({"render": {"backend": "direct", "strip_mode": None}})
    assert tomlkit.parse(text).unwrap() == {"render": {"backend": "direct"}}
