"""ANSI terminal output: cursor movement, colours and text modes."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

ESC = "\033"
NORMAL_TEXT = ESC + "[0m"
BOLD_TEXT = ESC + "[1m"
ITALIC_TEXT = ESC + "[3m"
BLINK_TEXT = ESC + "[5m"
REVERSE_TEXT = ESC + "[7m"
HOME_CURSOR = ESC + "[f"
SHOW_CURSOR = ESC + "[?25h"
HIDE_CURSOR = ESC + "[?25l"
CLEAR_SCREEN = ESC + "[2J"
RESET_COLORS = ESC + "[0;39;49m"

BOX_ENABLE = ESC + "(0"
BOX_DISABLE = ESC + "(B"
BOX_VLINE = 0x78
BOX_HLINE = 0x71
BOX_UPLEFT = 0x6C
BOX_UPRIGHT = 0x6B
BOX_DWNLEFT = 0x6D
BOX_DWNRIGHT = 0x6A
BOX_CROSS = 0x6E
BOX_TLEFT = 0x74
BOX_TRIGHT = 0x75
BOX_TUP = 0x77
BOX_TDOWN = 0x76
BOX_DIAMOND = 0x60
BOX_BLOCK = 0x61
BOX_DOT = 0x7E

SCRSTARTX = 3
SCRENDX = 75
SCRSTARTY = 1
SCRENDY = 23

MINX = 1
MINY = 1
MAXX = 80
MAXY = 24


class Color(IntEnum):
    """Terminal colours in ANSI order; the upper eight are the bright variants."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BROWN = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTRED = 9
    LIGHTGREEN = 10
    YELLOW = 11
    LIGHTBLUE = 12
    LIGHTMAGENTA = 13
    LIGHTCYAN = 14
    WHITE = 15


def goto_sequence(x: int, y: int) -> str:
    """Return the escape sequence that moves the cursor to (x, y), clamped to the screen."""
    x = min(max(x, 0), MAXX - 1)
    y = min(max(y, 0), MAXY)
    return f"{HOME_CURSOR}{ESC}[{y}B{ESC}[{x}C"


def color_sequence(fg: int, bg: int) -> str:
    """Return the escape sequence selecting foreground ``fg`` and background ``bg``.

    Bright foreground colours are rendered as bold plus the base colour.
    """
    fg = int(fg)
    bg = int(bg)
    intensity = 0
    if fg > Color.LIGHTGRAY:
        intensity = 1
        fg -= 8
    return f"{ESC}[{intensity};{fg + 30};{bg + 40}m"


class Screen:
    """Writes terminal control sequences and text to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)

    def home_cursor(self) -> None:
        self.write(HOME_CURSOR)

    def show_cursor(self) -> None:
        self.write(SHOW_CURSOR)

    def hide_cursor(self) -> None:
        self.write(HIDE_CURSOR)

    def clear(self) -> None:
        self.home_cursor()
        self.write(CLEAR_SCREEN)

    def update(self) -> None:
        """Flush pending output to the terminal."""
        self.stream.flush()

    def set_normal(self) -> None:
        self.write(NORMAL_TEXT)

    def set_bold(self) -> None:
        self.write(BOLD_TEXT)

    def set_blink(self) -> None:
        self.write(BLINK_TEXT)

    def set_reverse(self) -> None:
        self.write(REVERSE_TEXT)

    def box_enable(self) -> None:
        self.write(BOX_ENABLE)

    def box_disable(self) -> None:
        self.write(BOX_DISABLE)

    def init(self, draw_borders: bool = False) -> None:
        """Clear the screen, home the cursor and hide it.

        Borders are not drawn; the flag is accepted for compatibility.
        """
        self.clear()
        self.home_cursor()
        self.hide_cursor()

    def destroy(self) -> None:
        """Reset colours and modes, clear the screen and show the cursor."""
        self.write(RESET_COLORS)
        self.set_normal()
        self.clear()
        self.home_cursor()
        self.show_cursor()

    def gotoxy(self, x: int, y: int) -> None:
        self.write(goto_sequence(x, y))

    def set_color(self, fg: int, bg: int) -> None:
        self.write(color_sequence(fg, bg))