"""Shared constants for escape sequence generation."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["

# Named colors: (foreground SGR, background SGR)
COLOR_CODES: dict[str, tuple[int, int]] = {
    "black": (30, 40),
    "red": (31, 41),
    "green": (32, 42),
    "yellow": (33, 43),
    "blue": (34, 44),
    "magenta": (35, 45),
    "cyan": (36, 46),
    "white": (37, 47),
    "default": (39, 49),
}

TAB_WIDTH = 8
