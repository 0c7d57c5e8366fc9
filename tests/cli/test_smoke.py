# topmark:header:start
#
#   project      : Chromatag
#   file         : test_smoke.py
#   file_relpath : tests/cli/test_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI smoke tests for Chromatag.

Provides minimal coverage that the CLI entry point is callable and that
`--help` and `version` commands succeed.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from chromatag.constants import CHROMATAG_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_cli_entry() -> None:
    """It should show usage information when `--help` is passed."""
    result: Result = run_cli(["--help"])

    assert_SUCCESS(result)

    assert "Usage" in result.output
    for command in ("render", "strip", "check", "tags", "config", "version"):
        assert command in result.output


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    """Without a subcommand, a hint and the help text are shown."""
    result: Result = run_cli([])

    assert_SUCCESS(result)

    assert result.output.startswith("Hint:")
    assert "Usage" in result.output


@mark_cli
def test_version() -> None:
    """It should print the bare version string."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)

    assert result.output == f"{CHROMATAG_VERSION}\n"


@mark_cli
def test_version_json() -> None:
    """JSON output is a single object."""
    result: Result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)

    assert json.loads(result.output) == {"version": CHROMATAG_VERSION}


@mark_cli
def test_verbose_and_quiet_conflict() -> None:
    """``-v`` and ``-q`` together are a usage error."""
    result: Result = run_cli(["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
