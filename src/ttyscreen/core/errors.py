"""Error kinds raised by the screen subsystem."""

from __future__ import annotations

from typing import Optional


class ScreenError(RuntimeError):
    """Base class for all terminal/screen failures."""


class NoTTY(ScreenError):
    """No controlling terminal device could be opened."""

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = path
        message = f"No controlling terminal available at {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class NotATTY(ScreenError):
    """The terminal reported zero rows, so it is not a usable TTY."""


class ModeCommandFailed(ScreenError):
    """The terminal mode-control command exited non-zero."""

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed: {' '.join(command)!r} (exit {returncode})"
        if stderr:
            message += f": {stderr}"
        super().__init__(message)


class UnknownColor(ScreenError, ValueError):
    """A color name outside the fixed palette was requested."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown color: {name!r}")


class ScreenInUse(ScreenError):
    """Another live Screen already owns the terminal device."""
