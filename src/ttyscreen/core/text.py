"""Styled single-line text: an ordered sequence of literal text and style directives."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Iterator, Union

from ttyscreen.core.color import ColorLike, StyleColor


class StyleKind(Enum):
    """The fixed set of style directives."""
    INVERSE = "inverse"
    RESET = "reset"
    COLOR = "color"


@dataclass(frozen=True, slots=True)
class Style:
    """
    A zero-width style directive embedded in a TextLine.

    Only COLOR directives carry colors; INVERSE and RESET always hold the
    defaults so that equality stays structural.
    """
    kind: StyleKind
    fg: StyleColor = StyleColor.DEFAULT
    bg: StyleColor = StyleColor.DEFAULT

    INVERSE: ClassVar["Style"]
    RESET: ClassVar["Style"]

    @classmethod
    def color(cls, fg: ColorLike, bg: ColorLike = StyleColor.DEFAULT) -> Style:
        """Create a color directive, validating both color names."""
        return cls(StyleKind.COLOR, StyleColor.parse(fg), StyleColor.parse(bg))

    @classmethod
    def parse(cls, name: str) -> Style:
        """
        Parse a directive name.

        Accepts "inverse", "reset", a single color ("cyan", background
        defaulted) or a foreground_background pair ("red_blue").
        """
        name = name.lower()
        if name == "inverse":
            return cls.INVERSE
        if name == "reset":
            return cls.RESET
        if "_" in name:
            fg, bg = name.split("_", 1)
            return cls.color(fg, bg)
        return cls.color(name)


Style.INVERSE = Style(StyleKind.INVERSE)
Style.RESET = Style(StyleKind.RESET)

Component = Union[str, Style]


@dataclass(frozen=True)
class TextLine:
    """
    Immutable sequence of components rendered left to right.

    Equality is structural over the component tuple, so concatenation is
    associative in terms of the flattened sequence.
    """
    components: tuple[Component, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.components, str):
            raise TypeError("TextLine components must be a sequence, not a bare str")
        object.__setattr__(self, "components", tuple(self.components))
        for component in self.components:
            if not isinstance(component, (str, Style)):
                raise TypeError(
                    f"TextLine components must be str or Style, got {type(component).__name__}"
                )

    @classmethod
    def of(cls, *components: Union[Component, TextLine]) -> TextLine:
        """Build a line from components; a lone TextLine is returned as-is."""
        return cls.from_components(components)

    @classmethod
    def from_components(cls, components: Iterable[Union[Component, TextLine]]) -> TextLine:
        """
        Build a line from literal strings and style directives.

        A single existing TextLine is returned unchanged (same instance).
        Otherwise a new line is constructed; nested TextLines are flattened.
        """
        items = list(components)
        if len(items) == 1 and isinstance(items[0], TextLine):
            return items[0]

        flat: list[Component] = []
        for item in items:
            if isinstance(item, TextLine):
                flat.extend(item.components)
            else:
                flat.append(item)
        return cls(tuple(flat))

    def concat(self, other: TextLine) -> TextLine:
        """Return a new line with other's components appended."""
        return TextLine(self.components + other.components)

    def __add__(self, other: object) -> TextLine:
        if isinstance(other, TextLine):
            return self.concat(other)
        if isinstance(other, (str, Style)):
            return TextLine(self.components + (other,))
        return NotImplemented

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)

    def __len__(self) -> int:
        return len(self.components)

    @property
    def plain_text(self) -> str:
        """Literal text with all style directives dropped."""
        return "".join(c for c in self.components if isinstance(c, str))

    @property
    def width(self) -> int:
        """Visible width, counting every character as one column."""
        return len(self.plain_text)

    def truncate_to_width(self, width: int) -> TextLine:
        """
        Cut literal text so the line occupies at most width columns.

        Style directives are kept even past the cut, since they take no
        space. Text past the cut becomes empty strings rather than being
        removed. Every character counts as width 1.
        """
        if width < 0:
            raise ValueError(f"width must be >= 0, got {width}")

        remaining = width
        truncated: list[Component] = []
        for component in self.components:
            if isinstance(component, str):
                component = component[:remaining]
                remaining = max(remaining - len(component), 0)
            truncated.append(component)
        return TextLine(tuple(truncated))
