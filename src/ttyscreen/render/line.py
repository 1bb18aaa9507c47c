"""Render a TextLine into the byte stream written to the terminal."""

from __future__ import annotations

import re
from typing import Iterator, Optional

from ttyscreen.core.constants import TAB_WIDTH
from ttyscreen.core.text import Style, TextLine
from ttyscreen.render import ansi

# A run of non-tab characters on the current line, followed by a tab
_TAB_RUN = re.compile(r"([^\t\n]*)\t")


def expand_tabs(text: str, tab_width: int = TAB_WIDTH) -> str:
    """
    Replace each tab with spaces up to the next tab stop.

    Columns restart after a newline. Text after the last tab is untouched.
    """
    if tab_width <= 0:
        raise ValueError(f"tab_width must be > 0, got {tab_width}")

    def pad(match: re.Match[str]) -> str:
        run = match.group(1)
        return run + " " * (tab_width - len(run) % tab_width)

    return _TAB_RUN.sub(pad, text)


def expand_line_tabs(line: TextLine, tab_width: int = TAB_WIDTH) -> TextLine:
    """Expand tabs in every literal component, leaving styles in place."""
    return TextLine(tuple(
        expand_tabs(c, tab_width) if isinstance(c, str) else c
        for c in line.components
    ))


def iter_line_bytes(line: TextLine) -> Iterator[bytes]:
    """Yield the escape/text chunks for each component, in order. Tabs are emitted as-is."""
    for component in line.components:
        match component:
            case str():
                yield component.encode("utf-8")
            case Style():
                yield ansi.style(component)


def render_line(
    line: TextLine,
    tab_width: int = TAB_WIDTH,
    width: Optional[int] = None,
) -> bytes:
    """
    Render a full line: clear it, return to column 0, then emit components.

    Tabs are expanded before the line is cut to width (when given).
    """
    line = expand_line_tabs(line, tab_width)
    if width is not None:
        line = line.truncate_to_width(width)
    return ansi.clear_line() + b"\r" + b"".join(iter_line_bytes(line))
