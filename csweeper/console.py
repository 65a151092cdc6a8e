"""ANSI terminal output helpers: cursor movement, colours, clearing and pausing."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from enum import IntEnum
from typing import TextIO

ESC = "\x1b"


class Color(IntEnum):
    """Common colours mapped to their 256-colour ANSI palette indices."""

    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    LIGHT_GRAY = 7
    DARK_GRAY = 8
    WHITE = 15
    DARK_GREEN = 28


def goto_sequence(x: int, y: int) -> str:
    """Escape sequence moving the cursor to column ``x``, row ``y`` (1-based)."""
    return f"{ESC}[{int(y)};{int(x)}f"


def foreground_sequence(color: int) -> str:
    """Escape sequence selecting a 256-colour foreground."""
    return f"{ESC}[38;5;{int(color)}m"


def background_sequence(color: int) -> str:
    """Escape sequence selecting a 256-colour background."""
    return f"{ESC}[48;5;{int(color)}m"


_RESET_POSITION = f"{ESC}[H"
_DEFAULT_FOREGROUND = f"{ESC}[39m"
_DEFAULT_BACKGROUND = f"{ESC}[49m"
_CLEAR_SCREEN = f"{ESC}[2J{ESC}[1;1H"


class Console:
    """A text stream that understands the terminal operations the game needs."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def goto(self, x: int, y: int) -> None:
        self.write(goto_sequence(x, y))

    def reset_position(self) -> None:
        self.write(_RESET_POSITION)

    def set_foreground(self, color: int) -> None:
        self.write(foreground_sequence(color))

    def set_background(self, color: int) -> None:
        self.write(background_sequence(color))

    def reset_foreground(self) -> None:
        self.write(_DEFAULT_FOREGROUND)

    def reset_background(self) -> None:
        self.write(_DEFAULT_BACKGROUND)

    def reset_colors(self) -> None:
        self.write(_DEFAULT_FOREGROUND + _DEFAULT_BACKGROUND)

    def clear(self) -> None:
        """Clear the screen and move the cursor to the top-left corner."""
        if os.name == "nt" and self.stream is sys.stdout:
            self.flush()
            subprocess.run(["cmd", "/c", "cls"], check=False)
        else:
            self.write(_CLEAR_SCREEN)

    def write(self, text: str) -> None:
        self.stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)