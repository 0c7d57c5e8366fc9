# topmark:header:start
#
#   project      : Chromatag
#   file         : lexer.py
#   file_relpath : src/chromatag/style/lexer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag lexer: split a tagged string into literal, escape and tag segments.

Markup rules:
    - ``<body>`` opens a tag, ``</body>`` closes one, ``</>`` closes the last one.
    - ``<<`` and ``>>`` are literal ``<`` and ``>``.
    - A lone ``>`` and a ``<`` inside a tag body are errors.

In placeholder mode, ``{...}`` runs are copied verbatim into literals and never
scanned for tags (so ``{:>8}`` is safe); ``{{`` and ``}}`` stay literal text.

`TagLexer` is lazy and restartable: every iteration scans from the beginning.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from chromatag.config.logging import get_logger
from chromatag.errors import AmbiguousBracket, Span, UnterminatedPlaceholder, UnterminatedTag

if TYPE_CHECKING:
    from collections.abc import Iterator

    from chromatag.config.logging import ChromatagLogger

logger: ChromatagLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Literal:
    """Plain text (placeholders included verbatim)."""

    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class EscapedBracket:
    """A doubled bracket standing for the single bracket ``char``."""

    char: str
    span: Span


@dataclass(frozen=True, slots=True)
class OpenTag:
    """An opening tag; ``body`` is the text between the brackets."""

    body: str
    span: Span


@dataclass(frozen=True, slots=True)
class CloseTag:
    """A closing tag; ``body`` follows the slash and is blank for ``</>``."""

    body: str
    span: Span

    @property
    def is_shorthand(self) -> bool:
        return not self.body.strip()


Segment = Union[Literal, EscapedBracket, OpenTag, CloseTag]

_TAG_SPECIALS: Final[re.Pattern[str]] = re.compile(r"[<>]")
_PLACEHOLDER_SPECIALS: Final[re.Pattern[str]] = re.compile(r"[<>{}]")
_BRACES: Final[re.Pattern[str]] = re.compile(r"[{}]")


class TagLexer:
    """Iterable segment stream over a tagged string.

    Args:
        text (str): The input string.
        placeholders (bool): Treat ``{...}`` runs as opaque literals.

    Raises (while iterating):
        UnterminatedTag: A ``<`` has no closing ``>``.
        AmbiguousBracket: A lone ``>`` or a ``<`` inside a tag body.
        UnterminatedPlaceholder: A ``{`` has no closing ``}`` (placeholder mode).
    """

    def __init__(self, text: str, *, placeholders: bool = False) -> None:
        self.text: str = text
        self.placeholders: bool = placeholders

    def __repr__(self) -> str:
        return f"TagLexer({self.text!r}, placeholders={self.placeholders})"

    def __iter__(self) -> Iterator[Segment]:
        text = self.text
        n = len(text)
        specials = _PLACEHOLDER_SPECIALS if self.placeholders else _TAG_SPECIALS
        pos = 0
        literal_start = 0

        while True:
            match = specials.search(text, pos)
            if match is None:
                break
            pos = match.start()
            ch = text[pos]
            nxt = text[pos + 1] if pos + 1 < n else ""

            if ch in "{}":
                if nxt == ch:
                    pos += 2
                elif ch == "{":
                    pos = self._placeholder_end(pos) + 1
                else:
                    # A lone "}" is left for str.format to judge
                    pos += 1
                continue

            if literal_start < pos:
                yield Literal(text[literal_start:pos], Span(literal_start, pos))

            if nxt == ch:
                yield EscapedBracket(ch, Span(pos, pos + 2))
                pos += 2
            elif ch == ">":
                raise AmbiguousBracket(">", span=Span(pos, pos + 1), source=text)
            else:
                end = self._tag_end(pos)
                body = text[pos + 1 : end]
                span = Span(pos, end + 1)
                if body.startswith("/"):
                    yield CloseTag(body[1:], span)
                else:
                    yield OpenTag(body, span)
                pos = end + 1
            literal_start = pos

        if literal_start < n:
            yield Literal(text[literal_start:], Span(literal_start, n))

    def _tag_end(self, start: int) -> int:
        """Return the index of the ``>`` closing the tag opened at ``start``."""
        match = _TAG_SPECIALS.search(self.text, start + 1)
        if match is None:
            raise UnterminatedTag(span=Span(start, start + 1), source=self.text)
        if match.group() == "<":
            at = match.start()
            raise AmbiguousBracket("<", span=Span(at, at + 1), source=self.text)
        return match.start()

    def _placeholder_end(self, start: int) -> int:
        """Return the index of the ``}`` closing the placeholder opened at ``start``.

        One level of nested fields (``{:{width}}``) is accepted, as ``str.format`` does.
        """
        depth = 0
        pos = start
        while True:
            match = _BRACES.search(self.text, pos)
            if match is None:
                raise UnterminatedPlaceholder(span=Span(start, start + 1), source=self.text)
            pos = match.start()
            depth += 1 if match.group() == "{" else -1
            if depth == 0:
                return pos
            pos += 1
