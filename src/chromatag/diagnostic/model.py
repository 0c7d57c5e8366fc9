# topmark:header:start
#
#   project      : Chromatag
#   file         : model.py
#   file_relpath : src/chromatag/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic types collected while loading configuration.

Configuration problems never raise: they are recorded here (and logged) so
that the CLI can show them and continue with defaults.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticLog: mutable collection with helpers for adding diagnostics.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from chromatag.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from chromatag.config.logging import ChromatagLogger


logger: ChromatagLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str

    def __str__(self) -> str:
        return f"[{self.level.value}] {self.message}"


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics.

    Iterating yields the diagnostics in insertion order.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics."""
        return cls(items=list(diagnostics))

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic to the diagnostic log.

        Args:
            message: The diagnostic message.
        """
        self._add(Diagnostic(DiagnosticLevel.ERROR, message))

    def extend(self, other: Iterable[Diagnostic]) -> None:
        """Append all diagnostics of ``other`` in order."""
        for diagnostic in other:
            self._add(diagnostic)

    def has_warning(self) -> bool:
        """Return True if the DiagnosticLog contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the DiagnosticLog contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)
