"""Tests for the CLI application and demo loop."""

import logging

from typer.testing import CliRunner

from ttyscreen.cli import demo
from ttyscreen.cli.app import configure_logging, create_app, palette_lines
from ttyscreen.config import ScreenConfig
from ttyscreen.core.color import StyleColor
from ttyscreen.core.text import Style

runner = CliRunner()


class TestCommands:
    """Typer commands."""

    def test_help(self):
        result = runner.invoke(create_app(), ["--help"])
        assert result.exit_code == 0
        assert "demo" in result.output
        assert "palette" in result.output

    def test_size_without_terminal(self, tmp_path):
        result = runner.invoke(create_app(), ["size", "--tty", str(tmp_path / "missing")])
        assert result.exit_code == 1
        assert "No controlling terminal" in result.output

    def test_demo_without_terminal(self, tmp_path):
        result = runner.invoke(create_app(), ["demo", "--tty", str(tmp_path / "missing")])
        assert result.exit_code == 1

    def test_palette_lines(self):
        lines = palette_lines()
        assert len(lines) == len(StyleColor)
        assert lines[1].components[0] == Style.color("red")
        assert lines[1].plain_text.startswith("red")

    def test_verbose_logging(self):
        configure_logging(True)
        assert logging.getLogger("ttyscreen").level == logging.DEBUG
        configure_logging(False)
        assert logging.getLogger("ttyscreen").level == logging.WARNING


class TestConfig:
    """Environment overrides."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TTYSCREEN_TTY", raising=False)
        monkeypatch.delenv("TTYSCREEN_STTY", raising=False)
        config = ScreenConfig.from_env()
        assert config == ScreenConfig()
        assert config.tty_path == "/dev/tty"
        assert config.tab_width == 8

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("TTYSCREEN_TTY", "/dev/pts/9")
        monkeypatch.setenv("TTYSCREEN_STTY", "/bin/stty")
        config = ScreenConfig.from_env()
        assert config.tty_path == "/dev/pts/9"
        assert config.stty == "/bin/stty"


class TestDemoLoop:
    """The read-render loop over a fake terminal."""

    def test_echoes_keys_until_quit(self, make_tty):
        tty = make_tty(keys=[b"a", b"\x1b[A", b"q"])
        count = demo.run_demo(ScreenConfig(), tty=tty)
        assert count == 2
        output = bytes(tty.written)
        assert b"'a'" in output
        assert b"\\x1b[A" in output
        assert output.endswith(b"\x1b[?25h\n")

    def test_ctrl_c_quits(self, make_tty):
        tty = make_tty(keys=[b"\x03"])
        assert demo.run_demo(ScreenConfig(), tty=tty) == 0

    def test_describe_key(self):
        line = demo.describe_key(b"x")
        assert line.components[0] is Style.INVERSE
        assert "b'x'" in line.plain_text
