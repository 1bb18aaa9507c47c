"""Tests running the real stty against a pseudo-terminal."""

import fcntl
import os
import struct
import termios

import pytest

from ttyscreen.core.errors import NotATTY, ScreenInUse
from ttyscreen.term.screen import Screen, ScreenState
from ttyscreen.term.tty import TerminalHandle, TerminalSize


def set_size(fd: int, rows: int, cols: int) -> None:
    fcntl.ioctl(fd, termios.TIOCSWINSZ, struct.pack("HHHH", rows, cols, 0, 0))


def handle_for(slave: int) -> TerminalHandle:
    """A handle on its own descriptor, so closing it leaves the slave usable."""
    return TerminalHandle(os.dup(slave), path=os.ttyname(slave))


class TestTerminalHandleOnPty:
    """TerminalHandle against a real terminal device."""

    def test_open_by_path(self, pty_pair):
        _, slave = pty_pair
        with TerminalHandle.open(os.ttyname(slave)) as handle:
            assert os.isatty(handle.fd)
        assert handle.closed

    def test_window_size(self, pty_pair):
        _, slave = pty_pair
        set_size(slave, 24, 80)
        with handle_for(slave) as handle:
            assert handle.window_size() == TerminalSize(24, 80)

    def test_mode_command_reads_this_terminal(self, pty_pair):
        _, slave = pty_pair
        with handle_for(slave) as handle:
            token = handle.run_mode_command("-g")
            assert token
            assert token == token.strip()
            handle.run_mode_command("-echo")
            assert not termios.tcgetattr(slave)[3] & termios.ECHO
            handle.run_mode_command(token)
            assert termios.tcgetattr(slave)[3] & termios.ECHO


class TestScreenOnPty:
    """Full sessions with the real mode-control utility."""

    def test_round_trip_restores_attributes(self, pty_pair):
        _, slave = pty_pair
        set_size(slave, 24, 80)
        before = termios.tcgetattr(slave)

        screen = Screen.enter_session(tty=handle_for(slave))
        raw = termios.tcgetattr(slave)
        assert not raw[3] & termios.ECHO
        assert not raw[3] & termios.ICANON
        assert screen.width == 80

        screen.end_session()
        assert screen.state is ScreenState.RESTORED
        assert termios.tcgetattr(slave) == before

    def test_zero_size_restores_before_raising(self, pty_pair):
        _, slave = pty_pair
        set_size(slave, 0, 0)
        before = termios.tcgetattr(slave)
        handle = handle_for(slave)

        with pytest.raises(NotATTY):
            Screen.enter_session(tty=handle)
        assert termios.tcgetattr(slave) == before
        assert handle.closed

    def test_refused_second_session_keeps_first_alive(self, pty_pair):
        _, slave = pty_pair
        set_size(slave, 24, 80)
        before = termios.tcgetattr(slave)
        handle = handle_for(slave)

        first = Screen.enter_session(tty=handle)
        with pytest.raises(ScreenInUse):
            Screen.enter_session(tty=handle)
        assert not handle.closed

        first.end_session()
        assert termios.tcgetattr(slave) == before
        assert handle.closed
