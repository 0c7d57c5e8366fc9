# topmark:header:start
#
#   project      : Chromatag
#   file         : errors.py
#   file_relpath : src/chromatag/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library error hierarchy for Chromatag.

Every markup problem raises a subclass of `MarkupError`. Errors are fatal for
the whole input: the engine never returns partial output.

Each `MarkupError` carries the character `span` of the offending construct and
the full `source` text, so front ends can call `MarkupError.excerpt()` to show
the offending line with a caret marker underneath.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` character range into the input string."""

    start: int
    end: int

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


class ChromatagError(Exception):
    """Base class for all Chromatag library errors."""


class MarkupError(ChromatagError):
    """Base class for malformed markup.

    Attributes:
        message (str): Human readable description.
        span (Span | None): Location of the offending construct, if known.
        source (str | None): The full input text, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        span: Span | None = None,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.span: Span | None = span
        self.source: str | None = source

    def with_source(self, source: str) -> MarkupError:
        """Attach the input text when the raising component did not know it."""
        if self.source is None:
            self.source = source
        return self

    def __str__(self) -> str:
        if self.span is None:
            return self.message
        return f"{self.message} (at {self.span})"

    def excerpt(self) -> str:
        """Render the offending source line with a caret marker under the span.

        Returns:
            str: A two-line excerpt, or the bare message when the location is
                unknown.
        """
        if self.span is None or self.source is None:
            return self.message

        text = self.source
        start = min(self.span.start, len(text))
        line_start = text.rfind("\n", 0, start) + 1
        line_end = text.find("\n", start)
        if line_end == -1:
            line_end = len(text)
        line_no = text.count("\n", 0, start) + 1

        width = max(1, min(self.span.end, line_end) - start)
        column = start - line_start
        prefix = f"{line_no} | "
        marker = " " * (len(prefix) + column) + "^" * width
        return f"{self.message}\n{prefix}{text[line_start:line_end]}\n{marker}"


class UnterminatedTag(MarkupError):
    """A ``<`` without a matching ``>`` before the end of input."""

    def __init__(self, *, span: Span | None = None, source: str | None = None) -> None:
        super().__init__("Unterminated tag", span=span, source=source)


class AmbiguousBracket(MarkupError):
    """A stray ``>`` or a ``<`` inside a tag body."""

    def __init__(
        self, char: str, *, span: Span | None = None, source: str | None = None
    ) -> None:
        hint = "double it to write it literally" if char == ">" else "tags cannot nest"
        super().__init__(f"Ambiguous {char!r} ({hint})", span=span, source=source)
        self.char: str = char


class UnknownTag(MarkupError):
    """A tag token that does not name any style."""

    def __init__(
        self, name: str, *, span: Span | None = None, source: str | None = None
    ) -> None:
        label = repr(name) if name else "empty tag"
        super().__init__(f"Unknown tag: {label}", span=span, source=source)
        self.name: str = name


class InvalidColorValue(MarkupError):
    """A palette, RGB or hex color with malformed or out-of-range values."""

    def __init__(
        self, token: str, *, span: Span | None = None, source: str | None = None
    ) -> None:
        super().__init__(f"Invalid color value: {token!r}", span=span, source=source)
        self.token: str = token


class UnmatchedClose(MarkupError):
    """A closing tag with no open tag left to close."""

    def __init__(
        self, found: str, *, span: Span | None = None, source: str | None = None
    ) -> None:
        super().__init__(f"No open tag to close: {found!r}", span=span, source=source)
        self.found: str = found


class MismatchedClose(MarkupError):
    """An explicit closing tag that does not match the most recent open tag."""

    def __init__(
        self,
        expected: str,
        found: str,
        *,
        span: Span | None = None,
        source: str | None = None,
    ) -> None:
        super().__init__(
            f"Mismatched close tag: expected {expected!r}, found {found!r}",
            span=span,
            source=source,
        )
        self.expected: str = expected
        self.found: str = found


class MaxNestingDepthExceeded(MarkupError):
    """Opening a tag would exceed the configured nesting limit."""

    def __init__(
        self, limit: int, *, span: Span | None = None, source: str | None = None
    ) -> None:
        super().__init__(f"Maximum nesting depth exceeded ({limit})", span=span, source=source)
        self.limit: int = limit


class UnterminatedPlaceholder(MarkupError):
    """A ``{`` placeholder without a closing ``}``."""

    def __init__(self, *, span: Span | None = None, source: str | None = None) -> None:
        super().__init__("Unterminated placeholder", span=span, source=source)
