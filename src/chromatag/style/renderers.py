# topmark:header:start
#
#   project      : Chromatag
#   file         : renderers.py
#   file_relpath : src/chromatag/style/renderers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sequence renderers: turn a `Transition` into terminal control sequences.

Two strategies implement the `Renderer` protocol:

- `DirectRenderer` writes ANSI SGR sequences (``ESC[<code>m``) and is stateless.
- `CapabilityRenderer` asks a terminal capability database for the sequences
  (``setaf``, ``bold``, ``sgr0``, ...) through a `CapabilitySource`, caching the
  results in a `CapabilityCache`.

Both emit changes in canonical category order (fg, bg, bold, dim, underline,
italic, blink, strike, reverse, conceal).
"""

from __future__ import annotations

import os
import sys
import threading
from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from chromatag.config.logging import get_logger
from chromatag.style.model import (
    Category,
    Color,
    ColorSlot,
    NamedColor,
    PaletteColor,
    RgbColor,
    StyleKind,
    TextStyle,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from chromatag.config.logging import ChromatagLogger
    from chromatag.style.engine import Transition
    from chromatag.style.model import Attribute

logger: ChromatagLogger = get_logger(__name__)


@runtime_checkable
class Renderer(Protocol):
    """Anything that turns a transition into a control-sequence string."""

    def render(self, transition: Transition) -> str: ...


# ---------------------------------------------------------------------------
# Direct ANSI SGR
# ---------------------------------------------------------------------------

ESC: Final[str] = "\x1b"

SGR_FG_BASE: Final[int] = 30
SGR_FG_SET: Final[int] = 38
SGR_FG_DEFAULT: Final[int] = 39
SGR_BG_BASE: Final[int] = 40
SGR_BG_SET: Final[int] = 48
SGR_BG_DEFAULT: Final[int] = 49
SGR_FG_BRIGHT_BASE: Final[int] = 90
SGR_BG_BRIGHT_BASE: Final[int] = 100

#: (set, reset) SGR codes per text style. Bold and dim share reset 22.
SGR_STYLE_CODES: Final[dict[StyleKind, tuple[int, int]]] = {
    StyleKind.BOLD: (1, 22),
    StyleKind.DIM: (2, 22),
    StyleKind.ITALIC: (3, 23),
    StyleKind.UNDERLINE: (4, 24),
    StyleKind.BLINK: (5, 25),
    StyleKind.REVERSE: (7, 27),
    StyleKind.CONCEAL: (8, 28),
    StyleKind.STRIKE: (9, 29),
}

_INTENSITY: Final[frozenset[Category]] = frozenset({Category.BOLD, Category.DIM})


def sgr(code: str | int) -> str:
    """Wrap a single SGR parameter string into a control sequence."""
    return f"{ESC}[{code}m"


def sgr_set_code(attribute: Attribute) -> str:
    """Return the SGR parameter that activates ``attribute``."""
    if isinstance(attribute, TextStyle):
        return str(SGR_STYLE_CODES[attribute.kind][0])

    foreground = attribute.slot is ColorSlot.FOREGROUND
    value = attribute.value
    if isinstance(value, NamedColor):
        if value.index < 8:
            base = SGR_FG_BASE if foreground else SGR_BG_BASE
        else:
            base = SGR_FG_BRIGHT_BASE if foreground else SGR_BG_BRIGHT_BASE
        return str(base + int(value.base))
    selector = SGR_FG_SET if foreground else SGR_BG_SET
    if isinstance(value, PaletteColor):
        return f"{selector};5;{value.index}"
    return f"{selector};2;{value.r};{value.g};{value.b}"


def sgr_reset_code(category: Category) -> str:
    """Return the SGR parameter that returns ``category`` to its default."""
    if category is Category.FOREGROUND:
        return str(SGR_FG_DEFAULT)
    if category is Category.BACKGROUND:
        return str(SGR_BG_DEFAULT)
    return str(SGR_STYLE_CODES[StyleKind(category.value)][1])


class DirectRenderer:
    """Render transitions as raw ANSI SGR sequences, one sequence per code.

    SGR 22 turns off both bold and dim. When one of them is cleared while the
    other stays active, the survivor's set code is re-emitted after the reset.
    """

    def render(self, transition: Transition) -> str:
        applied = {attribute.category: attribute for attribute in transition.apply}
        cleared = set(transition.clear)
        intensity_reset = bool(cleared & _INTENSITY)

        codes: list[str] = []
        for category in Category:
            if intensity_reset and category in _INTENSITY:
                if category is Category.BOLD:
                    codes.append(sgr_reset_code(Category.BOLD))
                survivor = transition.state.get(category)
                if survivor is not None:
                    codes.append(sgr_set_code(survivor))
                continue
            if category in applied:
                codes.append(sgr_set_code(applied[category]))
            elif category in cleared:
                codes.append(sgr_reset_code(category))

        logger.trace("direct codes: %s", codes)
        return "".join(sgr(code) for code in codes)


# ---------------------------------------------------------------------------
# Capability database
# ---------------------------------------------------------------------------


@runtime_checkable
class CapabilitySource(Protocol):
    """Terminal capability database collaborator.

    ``lookup`` returns the raw template of a string capability (or ``None`` when
    the terminal lacks it); ``expand`` instantiates a template with parameters.
    """

    def lookup(self, name: str) -> str | None: ...

    def expand(self, template: str, *params: int) -> str: ...


# Name of the terminfo entry handed to ``curses.setupterm`` in this process.
_terminfo_entry: str | None = None
_terminfo_lock = threading.Lock()


class CursesCapabilitySource:
    """`CapabilitySource` backed by the standard library terminfo bindings.

    ``curses.setupterm`` runs lazily on first lookup. When no terminfo entry can
    be loaded, every lookup returns ``None`` and a single warning is logged.

    Terminfo state is process-global, so only one terminfo entry can be used per
    process. A source for a different entry than the one already loaded is
    rejected: it logs a warning and behaves as if no entry were available.

    Args:
        term (str | None): Terminfo entry name; ``None`` uses ``$TERM``.
    """

    def __init__(self, term: str | None = None) -> None:
        self.term: str | None = term or None
        self._ready: bool | None = None
        self._lock = threading.Lock()

    def _setup(self) -> bool:
        if self._ready is not None:
            return self._ready
        with self._lock:
            if self._ready is None:
                self._ready = self._load()
        return self._ready

    def _load(self) -> bool:
        try:
            import curses
        except ImportError:
            logger.warning("terminfo bindings unavailable; capability output disabled")
            return False
        try:
            stream = sys.__stdout__
            fd = stream.fileno() if stream is not None else -1
        except (OSError, ValueError):
            fd = -1
        global _terminfo_entry
        entry = self.term or os.environ.get("TERM", "")
        with _terminfo_lock:
            if _terminfo_entry is not None:
                if _terminfo_entry != entry:
                    logger.warning(
                        "terminfo already loaded for %r; %r rejected, capability output disabled",
                        _terminfo_entry,
                        entry,
                    )
                    return False
                return True
            try:
                curses.setupterm(self.term, fd)
            except (curses.error, OSError, ValueError) as exc:
                logger.warning(
                    "no terminfo entry for %r (%s); capability output disabled",
                    self.term or "$TERM",
                    exc,
                )
                return False
            _terminfo_entry = entry
        logger.debug("terminfo loaded for %r", self.term or "$TERM")
        return True

    def lookup(self, name: str) -> str | None:
        if not self._setup():
            return None
        import curses

        raw = curses.tigetstr(name)
        return raw.decode("latin-1") if raw else None

    def expand(self, template: str, *params: int) -> str:
        import curses

        return curses.tparm(template.encode("latin-1"), *params).decode("latin-1")


class CapabilityCache:
    """Lock-guarded cache of capability templates and expanded sequences.

    Templates are looked up at most once per capability name; expanded
    sequences are stored per attribute (or per fixed capability name). Cache
    hits are read without taking the lock; misses populate under it.

    Args:
        source (CapabilitySource): The capability database to consult.
    """

    def __init__(self, source: CapabilitySource) -> None:
        self.source: CapabilitySource = source
        self._templates: dict[str, str | None] = {}
        self._sequences: dict[object, str] = {}
        self._lock = threading.Lock()

    def template(self, name: str) -> str | None:
        """Return the raw template for capability ``name`` (cached)."""
        try:
            return self._templates[name]
        except KeyError:
            pass
        with self._lock:
            if name not in self._templates:
                self._templates[name] = self.source.lookup(name)
                logger.trace("capability %s looked up", name)
            return self._templates[name]

    def sequence(self, key: object, compute: Callable[[], str]) -> str:
        """Return the cached sequence for ``key``, computing it on a miss."""
        try:
            return self._sequences[key]
        except KeyError:
            pass
        with self._lock:
            if key in self._sequences:
                return self._sequences[key]
        # ``compute`` takes the lock again through ``template``
        value = compute()
        with self._lock:
            return self._sequences.setdefault(key, value)

    def clear(self) -> None:
        with self._lock:
            self._templates.clear()
            self._sequences.clear()


_shared_caches: dict[str | None, CapabilityCache] = {}
_shared_lock = threading.Lock()


def get_shared_capability_cache(term: str | None = None) -> CapabilityCache:
    """Return the process-wide cache for terminfo entry ``term`` (created lazily).

    Args:
        term (str | None): Terminfo entry name; ``None`` means ``$TERM``.

    Returns:
        CapabilityCache: A cache backed by `CursesCapabilitySource`.
    """
    key = term or None
    with _shared_lock:
        cache = _shared_caches.get(key)
        if cache is None:
            cache = CapabilityCache(CursesCapabilitySource(key))
            _shared_caches[key] = cache
        return cache


CAP_CLEAR: Final[str] = "sgr0"
CAP_NO_UNDERLINE: Final[str] = "rmul"
CAP_NO_ITALICS: Final[str] = "ritm"

#: Terminfo capability for each text style that has one.
STYLE_CAPABILITIES: Final[dict[StyleKind, str]] = {
    StyleKind.BOLD: "bold",
    StyleKind.DIM: "dim",
    StyleKind.UNDERLINE: "smul",
    StyleKind.ITALIC: "sitm",
    StyleKind.BLINK: "blink",
    StyleKind.REVERSE: "rev",
}

#: Clearing any of these categories requires a full reset (``sgr0``).
RESET_CATEGORIES: Final[frozenset[Category]] = frozenset(
    {
        Category.FOREGROUND,
        Category.BACKGROUND,
        Category.BOLD,
        Category.DIM,
        Category.BLINK,
        Category.REVERSE,
    }
)

_EXIT_CAPABILITIES: Final[dict[Category, str]] = {
    Category.UNDERLINE: CAP_NO_UNDERLINE,
    Category.ITALIC: CAP_NO_ITALICS,
}


class CapabilityRenderer:
    """Render transitions through a terminal capability database.

    Strike, conceal and RGB colors have no portable capability; they are
    omitted (logged at DEBUG) rather than failing the render.

    Args:
        cache (CapabilityCache | None): Cache to use; defaults to the shared
            cache for ``term``.
        term (str | None): Terminfo entry name used when ``cache`` is omitted.
    """

    def __init__(self, cache: CapabilityCache | None = None, *, term: str | None = None) -> None:
        self.cache: CapabilityCache = (
            cache if cache is not None else get_shared_capability_cache(term)
        )

    def render(self, transition: Transition) -> str:
        if any(category in RESET_CATEGORIES for category in transition.clear):
            parts = [self._fixed(CAP_CLEAR)]
            parts.extend(self._attribute(attribute) for attribute in transition.state.values())
            return "".join(parts)

        parts = []
        applied = {attribute.category: attribute for attribute in transition.apply}
        cleared = set(transition.clear)
        for category in Category:
            if category in applied:
                parts.append(self._attribute(applied[category]))
            elif category in cleared and category in _EXIT_CAPABILITIES:
                parts.append(self._fixed(_EXIT_CAPABILITIES[category]))
        return "".join(parts)

    def _fixed(self, name: str) -> str:
        def compute() -> str:
            template = self.cache.template(name)
            return self.cache.source.expand(template) if template else ""

        return self.cache.sequence(name, compute)

    def _attribute(self, attribute: Attribute) -> str:
        return self.cache.sequence(attribute, lambda: self._expand_attribute(attribute))

    def _expand_attribute(self, attribute: Attribute) -> str:
        if isinstance(attribute, TextStyle):
            name = STYLE_CAPABILITIES.get(attribute.kind)
            if name is None:
                logger.debug("no capability for %s; omitted", attribute.describe())
                return ""
            template = self.cache.template(name)
            return self.cache.source.expand(template) if template else ""

        return self._expand_color(attribute)

    def _expand_color(self, color: Color) -> str:
        value = color.value
        if isinstance(value, RgbColor):
            logger.debug("no capability for %s; omitted", color.describe())
            return ""
        template = self.cache.template("setaf" if color.slot is ColorSlot.FOREGROUND else "setab")
        if not template:
            return ""
        return self.cache.source.expand(template, value.index)
