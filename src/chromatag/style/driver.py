# topmark:header:start
#
#   project      : Chromatag
#   file         : driver.py
#   file_relpath : src/chromatag/style/driver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Driver: run lexer, resolver, stack and renderer over one input string.

`StyleDriver` is the orchestration seam. It walks the segments of a
`TagLexer`, resolves tags, keeps a fresh `StyleStack` per call and, at each
text boundary, renders the diff between what was last emitted and the current
style state. Consecutive tags with no text in between are therefore emitted as
one transition.

Stripping runs the same validation but discards transitions.

Module-level helpers (`render`, `untagged`, `cformat`, `cprint`) use a shared
driver built from the runtime defaults.
"""

from __future__ import annotations

import functools
import sys
from typing import TYPE_CHECKING, Any, TextIO

from chromatag.config.logging import get_logger
from chromatag.config.model import default_config
from chromatag.config.types import Backend
from chromatag.errors import MarkupError
from chromatag.style.engine import StyleStack, diff
from chromatag.style.lexer import CloseTag, EscapedBracket, OpenTag, TagLexer
from chromatag.style.model import EMPTY_STYLE_SET
from chromatag.style.renderers import CapabilityRenderer, DirectRenderer
from chromatag.style.resolver import resolve_tag

if TYPE_CHECKING:
    from chromatag.config.logging import ChromatagLogger
    from chromatag.config.model import Config
    from chromatag.style.model import ActiveStyleSet
    from chromatag.style.renderers import Renderer

logger: ChromatagLogger = get_logger(__name__)


def make_renderer(config: Config) -> Renderer:
    """Return the renderer selected by ``config.backend``."""
    if config.backend is Backend.CAPABILITY:
        return CapabilityRenderer(term=config.term)
    return DirectRenderer()


class StyleDriver:
    """Render or strip tagged strings according to a `Config`.

    Args:
        config (Config | None): Runtime configuration; defaults to `default_config()`.
        renderer (Renderer | None): Explicit renderer; defaults to the one
            selected by ``config.backend``.
    """

    def __init__(self, config: Config | None = None, renderer: Renderer | None = None) -> None:
        self.config: Config = config if config is not None else default_config()
        self.renderer: Renderer = renderer if renderer is not None else make_renderer(self.config)

    def __repr__(self) -> str:
        return f"StyleDriver(backend={self.config.backend.value}, renderer={self.renderer!r})"

    def render(self, text: str, *, placeholders: bool | None = None) -> str:
        """Return ``text`` with tags replaced by control sequences.

        Args:
            text (str): Tagged input.
            placeholders (bool | None): Override ``config.placeholders``.

        Returns:
            str: The rendered string.

        Raises:
            MarkupError: On malformed markup; no partial output is produced.
        """
        return self._run(text, emit=True, placeholders=placeholders)

    def strip(self, text: str, *, placeholders: bool | None = None) -> str:
        """Return the literal text of ``text``, validating the markup on the way."""
        return self._run(text, emit=False, placeholders=placeholders)

    def process(self, text: str) -> str:
        """Render or strip depending on ``config.strip_mode``."""
        if self.config.strip_mode:
            return self.strip(text)
        return self.render(text)

    def _run(self, text: str, *, emit: bool, placeholders: bool | None) -> str:
        if placeholders is None:
            placeholders = self.config.placeholders
        stack = StyleStack(self.config.max_nesting_depth)
        emitted: ActiveStyleSet = EMPTY_STYLE_SET
        out: list[str] = []

        try:
            for segment in TagLexer(text, placeholders=placeholders):
                if isinstance(segment, OpenTag):
                    stack.open(resolve_tag(segment.body, segment.span), segment.body, segment.span)
                    continue
                if isinstance(segment, CloseTag):
                    attributes = (
                        None if segment.is_shorthand else resolve_tag(segment.body, segment.span)
                    )
                    stack.close(attributes, segment.body, segment.span)
                    continue

                if emit:
                    emitted = self._emit_transition(emitted, stack.active, out)
                out.append(segment.char if isinstance(segment, EscapedBracket) else segment.text)

            stack.close_all()
            if emit:
                self._emit_transition(emitted, stack.active, out)
        except MarkupError as exc:
            exc.with_source(text)
            logger.debug("markup error: %s", exc)
            raise

        return "".join(out)

    def _emit_transition(
        self, emitted: ActiveStyleSet, active: ActiveStyleSet, out: list[str]
    ) -> ActiveStyleSet:
        transition = diff(emitted, active)
        if transition:
            out.append(self.renderer.render(transition))
        return transition.state


@functools.lru_cache(maxsize=1)
def _default_driver() -> StyleDriver:
    return StyleDriver(default_config())


def render(text: str) -> str:
    """Render ``text`` with the default (direct ANSI) driver."""
    return _default_driver().render(text)


def untagged(text: str) -> str:
    """Return the literal text of ``text``; malformed markup raises like `render`."""
    return _default_driver().strip(text)


def cformat(fmt: str, *args: Any, **kwargs: Any) -> str:
    """Render the tags of ``fmt`` and then apply ``str.format``.

    Placeholders are opaque to the tag lexer and substituted values are never
    scanned for tags, so ``cformat("<red>{}</>", "<b>")`` keeps ``<b>`` verbatim.
    """
    return _default_driver().render(fmt, placeholders=True).format(*args, **kwargs)


def cprint(
    fmt: str,
    *args: Any,
    file: TextIO | None = None,
    end: str = "\n",
    **kwargs: Any,
) -> None:
    """Print `cformat` output to ``file`` (default: ``sys.stdout``)."""
    print(cformat(fmt, *args, **kwargs), file=file if file is not None else sys.stdout, end=end)
