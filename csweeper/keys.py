"""Keyboard input: non-blocking key reading and integer prompts."""

from __future__ import annotations

import os
import re
import select
import sys
from contextlib import contextmanager
from enum import IntEnum
from typing import Iterator, TextIO

try:
    import termios
except ImportError:  # pragma: no cover - platform dependent
    termios = None


class Key(IntEnum):
    """Special key codes; ordinary keys are reported by their byte value."""

    NONE = 0
    ENTER = 10
    ESCAPE = 256
    LEFT = 257
    RIGHT = 258
    UP = 259
    DOWN = 260


_ESC = 27
_ANSI_ARROWS = {
    ord("A"): Key.UP,
    ord("B"): Key.DOWN,
    ord("C"): Key.RIGHT,
    ord("D"): Key.LEFT,
}
_SCAN_ARROWS = {
    72: Key.UP,
    80: Key.DOWN,
    75: Key.LEFT,
    77: Key.RIGHT,
}
_SCAN_PREFIXES = (0, 224)


def _as_key(code: int) -> int:
    try:
        return Key(code)
    except ValueError:
        return code


def parse_key(data: bytes) -> int:
    """Translate the bytes of a single key press into a key code."""
    if not data:
        return Key.NONE
    first = data[0]
    if first == _ESC:
        if len(data) == 1:
            return Key.ESCAPE
        if data[1] == ord("[") and len(data) > 2:
            return _ANSI_ARROWS.get(data[2], Key.NONE)
        return Key.NONE
    if first in _SCAN_PREFIXES and len(data) > 1:
        return _SCAN_ARROWS.get(data[1], Key.NONE)
    if first == ord("\r"):
        return Key.ENTER
    return _as_key(first)


class KeyReader:
    """Reads single key presses without blocking.

    Used as a context manager, it switches a terminal to non-canonical,
    non-echoing mode and restores the previous settings on exit.
    """

    def __init__(self, fd: int | None = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._saved = None
        self._active = False

    def __enter__(self) -> "KeyReader":
        if termios is not None and os.isatty(self.fd):
            self._saved = termios.tcgetattr(self.fd)
            self._apply_raw()
            self._active = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._restore()
        self._active = False

    def _apply_raw(self) -> None:
        if self._saved is None:
            return
        attrs = termios.tcgetattr(self.fd)
        attrs[3] &= ~(termios.ICANON | termios.ECHO)
        termios.tcsetattr(self.fd, termios.TCSANOW, attrs)

    def _restore(self) -> None:
        if self._saved is not None:
            termios.tcsetattr(self.fd, termios.TCSANOW, self._saved)

    @contextmanager
    def suspended(self) -> Iterator["KeyReader"]:
        """Temporarily return the terminal to line mode, e.g. to read a number."""
        self._restore()
        try:
            yield self
        finally:
            if self._active:
                self._apply_raw()

    def _ready(self) -> bool:
        readable, _, _ = select.select([self.fd], [], [], 0)
        return bool(readable)

    def _read_byte(self) -> bytes:
        try:
            return os.read(self.fd, 1)
        except OSError:
            return b""

    def get_key(self) -> int:
        """Return the pending key press, or ``Key.NONE`` if there is none."""
        if os.name == "nt":
            return self._get_key_windows()
        if not self._ready():
            return Key.NONE
        first = self._read_byte()
        if not first:
            return Key.NONE
        if first[0] != _ESC:
            return parse_key(first)
        if not self._ready():
            return Key.ESCAPE
        second = self._read_byte()
        if second != b"[":
            return Key.NONE
        return parse_key(first + second + self._read_byte())

    @staticmethod
    def _get_key_windows() -> int:
        import msvcrt

        if not msvcrt.kbhit():
            return Key.NONE
        first = msvcrt.getch()
        if first and first[0] in _SCAN_PREFIXES:
            return parse_key(first + msvcrt.getch())
        return parse_key(first)


_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")
INPUT_ERROR_MSG = "Input error!\n"
INT_ERROR_MSG = "Invalid number, try again.\n"


def read_int(prompt: str, infile: TextIO | None = None, outfile: TextIO | None = None) -> int:
    """Prompt until a line starting with an integer is entered and return it.

    Raises EOFError when the input runs out.
    """
    infile = sys.stdin if infile is None else infile
    outfile = sys.stdout if outfile is None else outfile
    while True:
        outfile.write(prompt)
        outfile.flush()
        line = infile.readline()
        if not line:
            outfile.write(INPUT_ERROR_MSG)
            outfile.flush()
            raise EOFError("no more input")
        match = _INT_PATTERN.match(line)
        if match:
            return int(match.group(1))
        outfile.write(INT_ERROR_MSG)