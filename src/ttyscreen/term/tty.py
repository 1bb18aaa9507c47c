"""Low-level access to the controlling terminal device (POSIX only)."""

from __future__ import annotations

import logging
import os
import select
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence, Union

from ttyscreen.core.errors import ModeCommandFailed, NoTTY

logger = logging.getLogger("ttyscreen")


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class TerminalHandle:
    """
    Owns the file descriptor of the terminal device.

    Reads use os.read() to bypass Python's I/O buffering, so bytes that
    arrive together (escape sequences, pastes) can be drained in one go.
    """

    def __init__(self, fd: int, path: str = "/dev/tty", stty: str = "stty") -> None:
        self.fd = fd
        self.path = path
        self.stty = stty
        self.closed = False

    @classmethod
    def open(cls, path: str = "/dev/tty", stty: str = "stty") -> TerminalHandle:
        """Open the terminal device for reading and writing."""
        try:
            fd = os.open(path, os.O_RDWR | os.O_NOCTTY)
        except OSError as err:
            raise NoTTY(path, err.strerror) from err
        if not os.isatty(fd):
            os.close(fd)
            raise NoTTY(path, "not a terminal device")
        logger.debug("Opened terminal %s (fd=%d)", path, fd)
        return cls(fd, path, stty)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            os.close(self.fd)

    def __enter__(self) -> TerminalHandle:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def read_byte(self) -> bytes:
        """Block until a single byte is available and return it."""
        data = os.read(self.fd, 1)
        if not data:
            raise EOFError(f"Terminal {self.path} closed")
        return data

    def read_available(self) -> bytes:
        """
        Read one byte (blocking), then everything else already buffered.

        Lets callers tell a single keypress apart from a multi-byte escape
        sequence or a paste burst.
        """
        data = self.read_byte()
        while self._has_input():
            chunk = os.read(self.fd, 1024)
            if not chunk:
                break
            data += chunk
        return data

    def write_bytes(self, data: bytes) -> None:
        """Write all of data to the terminal, blocking until done."""
        view = memoryview(data)
        while view:
            written = os.write(self.fd, view)
            view = view[written:]

    def window_size(self) -> TerminalSize:
        """Current dimensions; (0, 0) when the device cannot report a size."""
        try:
            size = os.get_terminal_size(self.fd)
        except OSError as err:
            logger.debug("Window size query failed on %s: %s", self.path, err)
            return TerminalSize(0, 0)
        return TerminalSize(size.lines, size.columns)

    def run_mode_command(self, args: Union[str, Sequence[str]]) -> str:
        """
        Run the mode-control utility with this terminal as its stdin.

        Returns its stdout with trailing whitespace removed. Raises
        ModeCommandFailed on a non-zero exit.
        """
        if isinstance(args, str):
            args = shlex.split(args)
        command = [*shlex.split(self.stty), *args]
        logger.debug("Running mode command: %s", command)
        result = subprocess.run(
            command,
            stdin=self.fd,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip()
            raise ModeCommandFailed(command, result.returncode, stderr)
        return result.stdout.decode(errors="replace").rstrip()

    def _has_input(self, timeout: float = 0.0) -> bool:
        """Check if input is available within timeout."""
        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"fd={self.fd}"
        return f"<TerminalHandle {self.path} {state}>"

