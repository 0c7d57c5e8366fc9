# topmark:header:start
#
#   project      : Chromatag
#   file         : model.py
#   file_relpath : src/chromatag/style/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style model: the closed set of attributes a tag can set.

An *attribute* is one atomic style unit. Every attribute belongs to exactly one
`Category`; at most one attribute per category is active at any point of a
rendered string.

Key types:
    - `TextStyle`: a boolean text attribute (bold, underline, ...).
    - `Color`: a foreground or background color whose value is a
      `NamedColor` (the 16 base colors), a `PaletteColor` (256-color
      palette index) or an `RgbColor` (24-bit true color).
    - `ActiveStyleSet`: immutable mapping of categories to their active attribute.

All attribute types are frozen dataclasses, so equality is structural and they
can be used as dictionary keys (the capability renderer caches on them).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Union


class BaseColor(IntEnum):
    """The eight base terminal hues, valued by their ANSI color index."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


class Intensity(Enum):
    """Intensity of a base color."""

    NORMAL = "normal"
    BRIGHT = "bright"


class ColorSlot(Enum):
    """Which color of a cell a `Color` attribute addresses."""

    FOREGROUND = "foreground"
    BACKGROUND = "background"


class StyleKind(Enum):
    """Text style kinds. ``BOLD`` is also reachable as ``strong``/``em``."""

    BOLD = "bold"
    DIM = "dim"
    UNDERLINE = "underline"
    ITALIC = "italic"
    BLINK = "blink"
    STRIKE = "strike"
    REVERSE = "reverse"
    CONCEAL = "conceal"


class Category(Enum):
    """Independent style categories.

    Member order is the canonical emission order used by the renderers.
    """

    FOREGROUND = "foreground"
    BACKGROUND = "background"
    BOLD = "bold"
    DIM = "dim"
    UNDERLINE = "underline"
    ITALIC = "italic"
    BLINK = "blink"
    STRIKE = "strike"
    REVERSE = "reverse"
    CONCEAL = "conceal"


@dataclass(frozen=True, slots=True)
class NamedColor:
    """One of the 16 named terminal colors."""

    base: BaseColor
    intensity: Intensity = Intensity.NORMAL

    @property
    def index(self) -> int:
        """Return the 0-15 color number (bright colors are 8-15)."""
        return int(self.base) + (8 if self.intensity is Intensity.BRIGHT else 0)

    def describe(self) -> str:
        name = self.base.name.lower()
        return f"bright {name}" if self.intensity is Intensity.BRIGHT else name


@dataclass(frozen=True, slots=True)
class PaletteColor:
    """A color of the 256-color palette."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 255:
            raise ValueError(f"Palette index out of range (0-255): {self.index}")

    def describe(self) -> str:
        return f"palette {self.index}"


@dataclass(frozen=True, slots=True)
class RgbColor:
    """A 24-bit true color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 255:
                raise ValueError(f"RGB component out of range (0-255): {component}")

    def describe(self) -> str:
        return f"rgb({self.r},{self.g},{self.b})"


ColorValue = Union[NamedColor, PaletteColor, RgbColor]


@dataclass(frozen=True, slots=True)
class Color:
    """A foreground or background color attribute."""

    slot: ColorSlot
    value: ColorValue

    @property
    def category(self) -> Category:
        return Category.FOREGROUND if self.slot is ColorSlot.FOREGROUND else Category.BACKGROUND

    def describe(self) -> str:
        prefix = "fg" if self.slot is ColorSlot.FOREGROUND else "bg"
        return f"{prefix} {self.value.describe()}"


@dataclass(frozen=True, slots=True)
class TextStyle:
    """A text style attribute such as bold or underline."""

    kind: StyleKind

    @property
    def category(self) -> Category:
        return Category(self.kind.value)

    def describe(self) -> str:
        return self.kind.value


Attribute = Union[Color, TextStyle]


def fg(value: ColorValue) -> Color:
    """Shorthand for a foreground `Color`."""
    return Color(ColorSlot.FOREGROUND, value)


def bg(value: ColorValue) -> Color:
    """Shorthand for a background `Color`."""
    return Color(ColorSlot.BACKGROUND, value)


def attributes_by_category(attributes: tuple[Attribute, ...]) -> dict[Category, Attribute]:
    """Collapse an ordered attribute tuple into a category mapping (last one wins)."""
    out: dict[Category, Attribute] = {}
    for attribute in attributes:
        out[attribute.category] = attribute
    return out


class ActiveStyleSet(Mapping[Category, Attribute]):
    """Immutable mapping from `Category` to the attribute active in that category.

    A missing category means "unset" (terminal default). Derive modified sets with
    `with_value`; the receiver is never mutated.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[Category, Attribute] | None = None) -> None:
        self._values: Mapping[Category, Attribute] = MappingProxyType(dict(values or {}))

    def __getitem__(self, key: Category) -> Attribute:
        return self._values[key]

    def __iter__(self) -> Iterator[Category]:
        # Canonical category order, independent of insertion order
        return (c for c in Category if c in self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{c.value}={a.describe()!r}" for c, a in self.items())
        return f"ActiveStyleSet({inner})"

    def with_value(self, category: Category, attribute: Attribute | None) -> ActiveStyleSet:
        """Return a copy where ``category`` holds ``attribute`` (``None`` unsets it)."""
        values = dict(self._values)
        if attribute is None:
            values.pop(category, None)
        else:
            values[category] = attribute
        return ActiveStyleSet(values)

    @property
    def is_pristine(self) -> bool:
        """True when no style is active."""
        return not self._values


EMPTY_STYLE_SET: ActiveStyleSet = ActiveStyleSet()
