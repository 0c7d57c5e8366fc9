# topmark:header:start
#
#   project      : Chromatag
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running Chromatag in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so project config files (``chromatag.toml``,
``pyproject.toml``) created by a test are discovered the way an end user running
from the project root would see them.

Note:
    `result.output` holds stdout and stderr together, which is what error
    assertions use. Assertions on rendered text pass ``--color always`` because
    the runner's stdout is not a terminal and auto mode would strip the tags.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from chromatag.cli.main import cli
from chromatag.cli_shared.exit_codes import ExitCode
from chromatag.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reattach test logging after each CLI run replaced the handlers."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["render", "<b>x</>"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text, obj={})
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on config files; pass
    ``--no-config`` to commands that would otherwise discover them.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text, obj={})


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def assert_MARKUP_ERROR(result: Result) -> None:
    """Assert that the command exited with MARKUP_ERROR (code 65)."""
    assert result.exit_code == ExitCode.MARKUP_ERROR, result.output
