"""Raw-mode screen session over the controlling terminal."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum, auto
from typing import Callable, ClassVar, Iterator, Optional, TypeVar, Union

from ttyscreen.config import ScreenConfig
from ttyscreen.core.errors import NotATTY, ScreenInUse
from ttyscreen.core.text import Component, TextLine
from ttyscreen.render import ansi
from ttyscreen.render.line import render_line
from ttyscreen.term.tty import TerminalHandle, TerminalSize

logger = logging.getLogger("ttyscreen")

T = TypeVar("T")


class ScreenState(Enum):
    """Terminal mode as seen by the screen."""
    UNINITIALIZED = auto()
    RAW = auto()
    RESTORED = auto()


class Screen:
    """
    Owns a terminal handle and the mode it had before the session started.

    Use as a context manager so the original mode is always restored:

        with Screen.enter_session() as screen:
            screen.write_line(TextLine.of(Style.INVERSE, "hello"))

    Only one live Screen may own a given terminal device at a time.
    """

    _live_devices: ClassVar[set[str]] = set()

    def __init__(self, tty: TerminalHandle, config: Optional[ScreenConfig] = None) -> None:
        self._check_available(tty.path)
        self.tty = tty
        self.config = config or ScreenConfig()
        self.state = ScreenState.UNINITIALIZED
        self._ended = False
        # Captured once, before any mode change
        self._original_mode = tty.run_mode_command("-g")
        Screen._live_devices.add(tty.path)

    @staticmethod
    def _check_available(path: str) -> None:
        if path in Screen._live_devices:
            raise ScreenInUse(f"{path} is already owned by a live Screen")

    @classmethod
    def enter_session(
        cls,
        config: Optional[ScreenConfig] = None,
        tty: Optional[TerminalHandle] = None,
    ) -> Screen:
        """
        Open the terminal, save its mode and switch it to raw mode.

        If anything fails after the mode was saved, the original mode is
        restored before the error propagates.
        """
        config = config or ScreenConfig()
        # Checked before any handle is opened or closed
        cls._check_available(tty.path if tty is not None else config.tty_path)
        opened = tty is None
        if opened:
            tty = TerminalHandle.open(config.tty_path, config.stty)
        try:
            screen = cls(tty, config)
        except BaseException:
            if opened:
                tty.close()
            raise

        try:
            screen.configure_tty()
            if screen.height == 0:
                raise NotATTY(f"{tty.path} reports zero rows")
        except BaseException:
            screen.end_session()
            raise
        logger.debug("Entered screen session on %s", tty.path)
        return screen

    def end_session(self) -> None:
        """Restore the original mode and finish the line. Runs only once."""
        if self._ended:
            return
        self._ended = True
        try:
            self.restore_tty()
            self.newline()
        finally:
            Screen._live_devices.discard(self.tty.path)
            self.tty.close()
            logger.debug("Ended screen session on %s", self.tty.path)

    def __enter__(self) -> Screen:
        return self

    def __exit__(self, *args) -> None:
        self.end_session()

    @property
    def original_mode(self) -> str:
        """The opaque mode token captured at session start."""
        return self._original_mode

    def configure_tty(self) -> None:
        """Apply raw mode: keystrokes arrive immediately and are not echoed."""
        self.tty.run_mode_command(self.config.raw_mode)
        self.state = ScreenState.RAW

    def restore_tty(self) -> None:
        """Put the terminal back into the mode captured at session start."""
        self.tty.run_mode_command(self._original_mode)
        self.state = ScreenState.RESTORED

    @contextmanager
    def suspended(self) -> Iterator[None]:
        """
        Temporarily hand the terminal back in its original mode.

        Raw mode is reapplied afterwards. If the body raises, the terminal
        is left in the original mode and the error propagates.
        """
        self.restore_tty()
        try:
            yield
        except BaseException:
            self.restore_tty()
            raise
        self.configure_tty()

    def suspend(self, action: Callable[[], T]) -> T:
        """Run action with the original terminal mode in effect."""
        with self.suspended():
            return action()

    @contextmanager
    def hidden_cursor(self) -> Iterator[None]:
        """Hide the cursor for the duration of the block."""
        self.write_bytes(ansi.hide_cursor())
        try:
            yield
        finally:
            self.write_bytes(ansi.show_cursor())

    def with_hidden_cursor(self, action: Callable[[], T]) -> T:
        """Run action with the cursor hidden; it is always shown again."""
        with self.hidden_cursor():
            return action()

    @property
    def size(self) -> TerminalSize:
        return self.tty.window_size()

    @property
    def height(self) -> int:
        return self.size.rows

    @property
    def width(self) -> int:
        return self.size.cols

    def clear(self) -> None:
        self.write_bytes(ansi.clear_screen())

    def cursor_up(self, lines: int) -> None:
        self.write_bytes(ansi.cursor_up(lines))

    def newline(self) -> None:
        self.write_bytes(b"\n")

    def write_line(self, text: Union[TextLine, Component], truncate: bool = True) -> None:
        """
        Replace the current line with text.

        Tabs are expanded first, then (unless truncate is False) the line
        is cut to the terminal width.
        """
        if not isinstance(text, TextLine):
            text = TextLine.of(text)
        width = self.width if truncate else None
        self.write_bytes(render_line(text, self.config.tab_width, width))

    def write_bytes(self, data: bytes) -> None:
        self.tty.write_bytes(data)

    def __repr__(self) -> str:
        return f"<Screen {self.tty.path} {self.state.name.lower()}>"
