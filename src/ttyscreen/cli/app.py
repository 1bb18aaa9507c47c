"""Typer CLI application."""

import logging
from dataclasses import replace
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ttyscreen.config import ScreenConfig
from ttyscreen.core.color import StyleColor
from ttyscreen.core.errors import ScreenError
from ttyscreen.core.text import Style, TextLine


def configure_logging(verbose: bool) -> None:
    """Send ttyscreen debug records to stderr through rich."""
    logger = logging.getLogger("ttyscreen")
    if verbose and not logger.handlers:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def palette_lines() -> list[TextLine]:
    """One sample line per foreground color, over the default background."""
    return [
        TextLine.of(Style.color(color), f"{color.value:<8}", Style.RESET,
                    "\t", Style.color("default", color), "  sample  ", Style.RESET)
        for color in StyleColor
    ]


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ttyscreen",
        help="Raw-mode terminal screen: read keystrokes, write styled lines.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def root(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log terminal mode changes")] = False,
    ) -> None:
        configure_logging(verbose)

    @app.command()
    def demo(
        tty: Annotated[Optional[str], typer.Option("--tty", help="Terminal device to open")] = None,
    ) -> None:
        """Echo each keypress back as a styled line. Press q to quit."""
        from ttyscreen.cli.demo import run_demo

        config = _config(tty)
        try:
            count = run_demo(config)
        except ScreenError as err:
            console.print(f"[red]{err}[/]")
            raise typer.Exit(1)
        console.print(f"[dim]{count} keypress(es) handled[/]")

    @app.command()
    def palette(
        tty: Annotated[Optional[str], typer.Option("--tty", help="Terminal device to open")] = None,
    ) -> None:
        """Write one line per named color through a screen session."""
        from ttyscreen.term.screen import Screen

        try:
            with Screen.enter_session(_config(tty)) as screen:
                for line in palette_lines():
                    screen.write_line(line)
                    screen.newline()
        except ScreenError as err:
            console.print(f"[red]{err}[/]")
            raise typer.Exit(1)

    @app.command()
    def size(
        tty: Annotated[Optional[str], typer.Option("--tty", help="Terminal device to open")] = None,
    ) -> None:
        """Show the terminal dimensions."""
        from ttyscreen.term.tty import TerminalHandle

        config = _config(tty)
        try:
            with TerminalHandle.open(config.tty_path, config.stty) as handle:
                dims = handle.window_size()
        except ScreenError as err:
            console.print(f"[red]{err}[/]")
            raise typer.Exit(1)
        console.print(f"[bold]Rows:[/] {dims.rows}")
        console.print(f"[bold]Cols:[/] {dims.cols}")

    return app


def _config(tty: Optional[str]) -> ScreenConfig:
    config = ScreenConfig.from_env()
    if tty:
        config = replace(config, tty_path=tty)
    return config
