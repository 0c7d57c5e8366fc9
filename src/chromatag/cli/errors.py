# topmark:header:start
#
#   project      : Chromatag
#   file         : errors.py
#   file_relpath : src/chromatag/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Chromatag CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from chromatag.cli_shared.exit_codes import ExitCode


class ChromatagCliError(click.ClickException):
    """Base class for all Chromatag CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        obj = getattr(ctx, "obj", None) if ctx is not None else None
        console = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(self.format_message(), fg="bright_red"))


class ChromatagUsageError(ChromatagCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ChromatagMarkupError(ChromatagCliError):
    """Error for malformed tagged input."""

    exit_code = ExitCode.MARKUP_ERROR


class ChromatagIOError(ChromatagCliError):
    """Error for I/O errors reading input."""

    exit_code = ExitCode.IO_ERROR
