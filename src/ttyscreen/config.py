"""Runtime settings for opening and driving the terminal."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from ttyscreen.core.constants import TAB_WIDTH


@dataclass(frozen=True)
class ScreenConfig:
    """
    Where the terminal lives and how to switch its modes.

    tty_path is opened directly rather than using stdin/stdout, so the UI
    keeps working when those are redirected.
    """
    tty_path: str = "/dev/tty"
    stty: str = "stty"
    # raw: no line discipline processing, -echo: typed characters are not
    # echoed back, -icanon: no line buffering
    raw_mode: str = "raw -echo -icanon"
    tab_width: int = TAB_WIDTH

    @classmethod
    def from_env(cls) -> "ScreenConfig":
        """Defaults, overridden by TTYSCREEN_TTY / TTYSCREEN_STTY when set."""
        config = cls()
        if tty_path := os.environ.get("TTYSCREEN_TTY"):
            config = replace(config, tty_path=tty_path)
        if stty := os.environ.get("TTYSCREEN_STTY"):
            config = replace(config, stty=stty)
        return config
