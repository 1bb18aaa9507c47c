"""Terminal device access and raw-mode screen sessions."""

from ttyscreen.term.screen import Screen, ScreenState
from ttyscreen.term.tty import TerminalHandle, TerminalSize

__all__ = ["Screen", "ScreenState", "TerminalHandle", "TerminalSize"]
