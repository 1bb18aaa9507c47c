"""Escape sequence generation and line rendering."""

from ttyscreen.render import ansi
from ttyscreen.render.line import expand_line_tabs, expand_tabs, render_line

__all__ = ["ansi", "expand_tabs", "expand_line_tabs", "render_line"]
