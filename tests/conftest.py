"""Pytest fixtures: an in-memory stand-in for the terminal device."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import pytest

from ttyscreen.core.errors import ModeCommandFailed
from ttyscreen.term.screen import Screen
from ttyscreen.term.tty import TerminalSize

ORIGINAL_MODE = "500:5:bf:8a3b:3:1c:7f:15:4:0:1:0:11:13:1a:0:12:f:17:16:0:0:0"


class FakeTerminal:
    """
    Records every byte written and every mode command issued.

    Mode commands listed in fail_on raise ModeCommandFailed, like a
    non-zero exit of the real utility.
    """

    def __init__(
        self,
        rows: int = 24,
        cols: int = 80,
        path: str = "/dev/fake-tty",
        fail_on: Sequence[str] = (),
        keys: Sequence[bytes] = (),
    ) -> None:
        self.size = TerminalSize(rows, cols)
        self.path = path
        self.fail_on = set(fail_on)
        self.keys = list(keys)
        self.written = bytearray()
        self.mode_commands: list[str] = []
        self.closed = False

    def run_mode_command(self, args: Union[str, Sequence[str]]) -> str:
        if not isinstance(args, str):
            args = " ".join(args)
        self.mode_commands.append(args)
        if args in self.fail_on:
            raise ModeCommandFailed(["stty", *args.split()], 1)
        return ORIGINAL_MODE if args == "-g" else ""

    def window_size(self) -> TerminalSize:
        return self.size

    def write_bytes(self, data: bytes) -> None:
        self.written += data

    def read_byte(self) -> bytes:
        return self.read_available()[:1]

    def read_available(self) -> bytes:
        if not self.keys:
            raise EOFError("no more input")
        return self.keys.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_tty() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def make_tty():
    """Factory for FakeTerminal with custom size, failures or keys."""
    def factory(**kwargs) -> FakeTerminal:
        return FakeTerminal(**kwargs)
    return factory


@pytest.fixture(autouse=True)
def _release_screens():
    """Make sure a failing test never leaves a device marked as owned."""
    yield
    Screen._live_devices.clear()


@pytest.fixture
def pty_pair():
    """
    A pseudo-terminal (master, slave) pair.

    Skips when the platform has no ptys or no stty on PATH.
    """
    import os
    import shutil

    if shutil.which("stty") is None:
        pytest.skip("stty not available")
    try:
        master, slave = os.openpty()
    except (AttributeError, OSError) as err:
        pytest.skip(f"pseudo-terminals not available: {err}")
    yield master, slave
    for fd in (master, slave):
        try:
            os.close(fd)
        except OSError:
            pass
