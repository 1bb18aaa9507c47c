"""Interactive demo: echo each keypress back as a styled line."""

from __future__ import annotations

import logging
from typing import Optional

from ttyscreen.config import ScreenConfig
from ttyscreen.core.text import Style, TextLine
from ttyscreen.term.screen import Screen
from ttyscreen.term.tty import TerminalHandle

logger = logging.getLogger("ttyscreen")

# Raw mode delivers these as plain bytes instead of signals
QUIT_KEYS = {b"\x03", b"\x04", b"q"}


def describe_key(data: bytes) -> TextLine:
    """Build the line shown for a keypress (or escape sequence/paste burst)."""
    return TextLine.of(
        Style.INVERSE, " key ", Style.RESET,
        " ", Style.color("cyan"), repr(data), Style.RESET,
        "\t", f"{len(data)} byte(s)",
    )


class DemoLoop:
    """
    Minimal read-render loop over a screen session.

    Reads whatever input is available, renders a description of it on
    the current line, and stops on Ctrl-C, Ctrl-D or q.
    """

    def __init__(
        self,
        config: Optional[ScreenConfig] = None,
        tty: Optional[TerminalHandle] = None,
    ) -> None:
        self.config = config or ScreenConfig.from_env()
        self.tty = tty
        self.running = False
        self.keys_seen = 0

    def run(self) -> None:
        """Main application loop."""
        self.running = True
        with Screen.enter_session(self.config, self.tty) as screen:
            screen.write_line(TextLine.of(Style.color("green"), "Press keys; q to quit", Style.RESET))
            screen.newline()
            with screen.hidden_cursor():
                while self.running:
                    self._handle_input(screen)

    def _handle_input(self, screen: Screen) -> None:
        data = screen.tty.read_available()
        logger.debug("Read %r", data)
        if data in QUIT_KEYS:
            self.running = False
            return
        self.keys_seen += 1
        screen.write_line(describe_key(data))


def run_demo(
    config: Optional[ScreenConfig] = None,
    tty: Optional[TerminalHandle] = None,
) -> int:
    """Run the demo and return the number of keypresses handled."""
    loop = DemoLoop(config, tty)
    loop.run()
    return loop.keys_seen
