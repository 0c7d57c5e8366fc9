# topmark:header:start
#
#   project      : Chromatag
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Config`/`MutableConfig`: defaults, TOML loading, merging and overrides."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from chromatag.config import Backend, Config, MutableConfig, default_config
from chromatag.config.io import to_toml
from chromatag.config.model import CLI_OVERRIDE_STR
from chromatag.constants import DEFAULT_MAX_NESTING_DEPTH

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """Runtime defaults match the documented values."""
    config: Config = default_config()
    assert config.backend is Backend.DIRECT
    assert config.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH == 64
    assert config.strip_mode is False
    assert config.placeholders is False
    assert config.term is None
    assert config.diagnostics == ()


def test_empty_draft_freezes_to_defaults() -> None:
    """Unset fields fall back to the `Config` defaults."""
    assert MutableConfig().freeze() == Config()


def test_thaw_freeze_round_trip() -> None:
    """Thawing and freezing again yields an equal config."""
    config = MutableConfig.from_toml_dict({"render": {"backend": "capability"}}).freeze()
    assert config.thaw().freeze() == config


def test_from_toml_dict() -> None:
    """Valid values are read from both tables."""
    draft = MutableConfig.from_toml_dict(
        {
            "render": {
                "backend": "Capability",
                "max_nesting_depth": 8,
                "strip_mode": True,
                "placeholders": True,
            },
            "capability": {"term": "xterm-256color"},
        }
    )
    config = draft.freeze()
    assert config.backend is Backend.CAPABILITY
    assert config.max_nesting_depth == 8
    assert config.strip_mode is True
    assert config.placeholders is True
    assert config.term == "xterm-256color"
    assert not draft.diagnostics.has_warning()


def test_invalid_values_warn_and_fall_back() -> None:
    """Wrong types, unknown backends and depth < 1 become warnings."""
    draft = MutableConfig.from_toml_dict(
        {
            "render": {
                "backend": "ansi",
                "max_nesting_depth": 0,
                "strip_mode": "yes",
                "placeholders": 1,
            },
            "capability": {"term": 42},
        }
    )
    assert len(draft.diagnostics) == 5
    assert draft.diagnostics.has_warning()
    assert not draft.diagnostics.has_error()
    messages = [d.message for d in draft.diagnostics]
    assert any("defaults: [render].backend" in m and "ansi" in m for m in messages)
    assert any("max_nesting_depth must be >= 1" in m for m in messages)

    config = draft.freeze()
    assert config.backend is Backend.DIRECT
    assert config.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH
    assert config.strip_mode is False
    assert config.term is None
    assert len(config.diagnostics) == 5


def test_bool_is_not_an_int() -> None:
    """``true`` is not a nesting depth."""
    draft = MutableConfig.from_toml_dict({"render": {"max_nesting_depth": True}})
    assert draft.max_nesting_depth is None
    assert draft.diagnostics.has_warning()


def test_merge_last_wins() -> None:
    """Values set in the later layer override the earlier one."""
    base = MutableConfig.from_toml_dict({"render": {"backend": "capability", "strip_mode": True}})
    top = MutableConfig.from_toml_dict({"render": {"backend": "direct"}})
    merged = base.merge_with(top).freeze()
    assert merged.backend is Backend.DIRECT
    assert merged.strip_mode is True


def test_apply_args_overrides_and_records_source() -> None:
    """CLI/API overrides win; ``None`` leaves values alone."""
    draft = MutableConfig.from_defaults()
    draft.apply_args({"backend": Backend.CAPABILITY, "max_nesting_depth": None, "term": "vt100"})
    config = draft.freeze()
    assert config.backend is Backend.CAPABILITY
    assert config.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH
    assert config.term == "vt100"
    assert config.config_files[-1] == CLI_OVERRIDE_STR


def test_from_toml_file(tmp_path: Path) -> None:
    """A dedicated config file is read and recorded as a source."""
    path = tmp_path / "chromatag.toml"
    path.write_text('[render]\nmax_nesting_depth = 3\n', encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.max_nesting_depth == 3
    assert draft.config_files == [path]


def test_pyproject_requires_tool_section(tmp_path: Path) -> None:
    """``pyproject.toml`` only counts with a ``[tool.chromatag]`` table."""
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(path) is None

    path.write_text('[tool.chromatag.render]\nstrip_mode = true\n', encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.strip_mode is True


def test_malformed_file_is_ignored(tmp_path: Path) -> None:
    """A file that is not TOML contributes nothing."""
    path = tmp_path / "chromatag.toml"
    path.write_text("[render\nbackend = ", encoding="utf-8")
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    assert draft.freeze().backend is Backend.DIRECT


def test_load_merged_precedence(tmp_path: Path) -> None:
    """User < pyproject.toml < chromatag.toml < explicit files."""
    xdg = tmp_path / "xdg"
    (xdg / "chromatag").mkdir(parents=True, exist_ok=True)
    (xdg / "chromatag" / "chromatag.toml").write_text(
        '[render]\nmax_nesting_depth = 10\nstrip_mode = true\n', encoding="utf-8"
    )
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_text(
        '[tool.chromatag.render]\nmax_nesting_depth = 20\nbackend = "capability"\n',
        encoding="utf-8",
    )
    (project / "chromatag.toml").write_text(
        '[render]\nmax_nesting_depth = 30\n', encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text('[capability]\nterm = "vt100"\n', encoding="utf-8")

    config = MutableConfig.load_merged(start=project, extra_config_files=[extra]).freeze()
    assert config.max_nesting_depth == 30
    assert config.backend is Backend.CAPABILITY
    assert config.strip_mode is True
    assert config.term == "vt100"
    assert [p.name for p in config.config_files] == [  # type: ignore[union-attr]
        "chromatag.toml",
        "pyproject.toml",
        "chromatag.toml",
        "extra.toml",
    ]

    isolated = MutableConfig.load_merged(
        start=project, extra_config_files=[extra], no_config=True
    ).freeze()
    assert isolated.max_nesting_depth == DEFAULT_MAX_NESTING_DEPTH
    assert isolated.term == "vt100"


def test_to_toml_dict_round_trip() -> None:
    """The TOML dump parses back to the same values."""
    config = MutableConfig.from_toml_dict(
        {"render": {"backend": "capability", "max_nesting_depth": 5}}
    ).freeze()
    parsed = tomlkit.parse(to_toml(config.to_toml_dict())).unwrap()
    assert parsed == {
        "render": {
            "backend": "capability",
            "max_nesting_depth": 5,
            "strip_mode": False,
            "placeholders": False,
        },
        "capability": {"term": ""},
    }
