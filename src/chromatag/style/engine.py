# topmark:header:start
#
#   project      : Chromatag
#   file         : engine.py
#   file_relpath : src/chromatag/style/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Nesting and diff engine.

`StyleStack` tracks open tags. Each `TagNode` remembers, for every category the
tag touches, the value that category had *before* the tag was opened; closing the
tag restores exactly those values. Nested tags of the same category therefore
revert to the outer value rather than to the terminal default.

`diff` compares two `ActiveStyleSet` snapshots and produces the `Transition` a
renderer turns into control sequences. The driver only diffs at text boundaries,
so a run of consecutive tags collapses into a single transition.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from chromatag.config.logging import get_logger
from chromatag.constants import DEFAULT_MAX_NESTING_DEPTH
from chromatag.errors import MaxNestingDepthExceeded, MismatchedClose, UnmatchedClose
from chromatag.style.model import (
    EMPTY_STYLE_SET,
    ActiveStyleSet,
    Attribute,
    Category,
    attributes_by_category,
)

if TYPE_CHECKING:
    from chromatag.config.logging import ChromatagLogger
    from chromatag.errors import Span

logger: ChromatagLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TagNode:
    """One open tag on the stack.

    Attributes:
        saved (dict[Category, Attribute | None]): Values of the touched categories
            before the tag was opened (``None`` means unset).
        attributes (dict[Category, Attribute]): The tag's resolved attributes,
            used to validate an explicit close.
        source (str): Raw tag body, for error messages.
        span (Span | None): Location of the opening tag.
    """

    saved: dict[Category, Attribute | None]
    attributes: dict[Category, Attribute]
    source: str
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class Transition:
    """Style changes between two text boundaries.

    Attributes:
        apply (tuple[Attribute, ...]): Attributes whose value changed, in category order.
        clear (tuple[Category, ...]): Categories that became unset, in category order.
        state (ActiveStyleSet): The style state after the transition.
    """

    apply: tuple[Attribute, ...] = ()
    clear: tuple[Category, ...] = ()
    state: ActiveStyleSet = field(default=EMPTY_STYLE_SET)

    def __bool__(self) -> bool:
        return bool(self.apply or self.clear)


def diff(old: ActiveStyleSet, new: ActiveStyleSet) -> Transition:
    """Compute the transition from ``old`` to ``new``.

    Args:
        old (ActiveStyleSet): State already realized on the terminal.
        new (ActiveStyleSet): Desired state.

    Returns:
        Transition: Changed attributes and cleared categories. An attribute equal
            to the already-active one produces nothing.
    """
    apply: list[Attribute] = []
    clear: list[Category] = []
    for category in Category:
        before = old.get(category)
        after = new.get(category)
        if before == after:
            continue
        if after is None:
            clear.append(category)
        else:
            apply.append(after)
    return Transition(tuple(apply), tuple(clear), new)


class StyleStack:
    """Explicit stack of open tags with a bounded depth.

    Args:
        max_depth (int): Maximum number of simultaneously open tags.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_NESTING_DEPTH) -> None:
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self.max_depth: int = max_depth
        self._nodes: list[TagNode] = []
        self._active: ActiveStyleSet = EMPTY_STYLE_SET

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def active(self) -> ActiveStyleSet:
        """The style state implied by the currently open tags."""
        return self._active

    def open(
        self,
        attributes: tuple[Attribute, ...],
        source: str,
        span: Span | None = None,
    ) -> None:
        """Push a tag and apply its attributes.

        Raises:
            MaxNestingDepthExceeded: If the push would exceed ``max_depth``.
        """
        if len(self._nodes) >= self.max_depth:
            raise MaxNestingDepthExceeded(self.max_depth, span=span)

        mapping = attributes_by_category(attributes)
        saved = {category: self._active.get(category) for category in mapping}
        active = self._active
        for category, attribute in mapping.items():
            active = active.with_value(category, attribute)

        self._nodes.append(TagNode(saved=saved, attributes=mapping, source=source, span=span))
        self._active = active
        logger.trace("open <%s> depth=%d", source, len(self._nodes))

    def close(
        self,
        attributes: tuple[Attribute, ...] | None,
        source: str = "",
        span: Span | None = None,
    ) -> TagNode:
        """Pop the top tag and restore the values it had saved.

        Args:
            attributes (tuple[Attribute, ...] | None): Resolved attributes of an
                explicit closing tag, or ``None`` for the shorthand ``</>``.
            source (str): Raw closing tag body, for error messages.
            span (Span | None): Location of the closing tag.

        Returns:
            TagNode: The node that was closed.

        Raises:
            UnmatchedClose: If no tag is open.
            MismatchedClose: If an explicit close does not match the top tag.
        """
        if not self._nodes:
            raise UnmatchedClose(source or "/", span=span)

        top = self._nodes[-1]
        if attributes is not None and attributes_by_category(attributes) != top.attributes:
            raise MismatchedClose(top.source, source, span=span)

        self._nodes.pop()
        active = self._active
        for category, previous in top.saved.items():
            active = active.with_value(category, previous)
        self._active = active
        logger.trace("close <%s> depth=%d", top.source, len(self._nodes))
        return top

    def close_all(self) -> None:
        """Close every open tag in LIFO order (implicit close at end of input)."""
        while self._nodes:
            self.close(None)
