"""Named colors for foreground and background styling."""

from __future__ import annotations

from enum import Enum
from typing import Union

from ttyscreen.core.constants import COLOR_CODES
from ttyscreen.core.errors import UnknownColor


class StyleColor(Enum):
    """The eight standard terminal colors plus the terminal default."""
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: ColorLike) -> StyleColor:
        """Resolve a color from an enum member or its (case-insensitive) name."""
        if isinstance(value, StyleColor):
            return value
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise UnknownColor(value)

    @property
    def fg_code(self) -> int:
        """SGR foreground code (30-39)."""
        return COLOR_CODES[self.value][0]

    @property
    def bg_code(self) -> int:
        """SGR background code (40-49)."""
        return COLOR_CODES[self.value][1]


ColorLike = Union[StyleColor, str]
