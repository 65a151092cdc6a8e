"""The playing screen: drawing the field and GUI, handling keys, win and loss."""

from __future__ import annotations

import math
import random
import time
from enum import Enum
from typing import Callable

from .board import Board, Position
from .console import Color, Console
from .keys import Key, KeyReader
from .templates import Template

MINE_COLORS = (
    Color.LIGHT_GRAY,
    Color.BLUE,
    Color.GREEN,
    Color.RED,
    Color.CYAN,
    Color.YELLOW,
    Color.MAGENTA,
    Color.LIGHT_GRAY,
    Color.DARK_GRAY,
)
CURSOR_COLOR = Color.DARK_GREEN
MAX_SECONDS = 9999
_IDLE_DELAY = 0.01

_MOVES = {
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
}
_REFRESH_KEYS = (ord("r"), ord("R"))
_FLAG_KEYS = (ord("f"), ord("F"))


class TextAlign(Enum):
    """How text is placed relative to its anchor column."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


def text_start(text: str, x: int, alignment: TextAlign) -> int:
    """Column where ``text`` starts when anchored at column ``x``.

    RIGHT text starts at ``x``, LEFT text ends just before ``x``,
    CENTER text is centred on ``x``.
    """
    if alignment is TextAlign.RIGHT:
        return x
    if alignment is TextAlign.LEFT:
        return x - len(text)
    return math.trunc(x - len(text) / 2.0 + 0.5)


def draw_text(console: Console, text: str, x: int, y: int, alignment: TextAlign) -> None:
    """Write ``text`` aligned around column ``x`` on row ``y``; skip it if it would start off-screen."""
    start = text_start(text, x, alignment)
    if start <= 0:
        return
    console.goto(start, y)
    console.write(text)


class Game:
    """One round of minesweeper on a freshly generated board."""

    def __init__(
        self,
        width: int,
        height: int,
        bomb_amount: int,
        console: Console | None = None,
        keys=None,
        template: Template | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.bomb_amount = bomb_amount
        self.console = console if console is not None else Console()
        self.keys = keys if keys is not None else KeyReader()
        self.template = template
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else time.time
        self.board = Board(width, height)
        self.board.generate(bomb_amount, self.rng)
        self.blessing: Position | None = self.board.find_blessing(self.rng)
        self.cursor: Position = self.blessing if self.blessing is not None else (0, 0)
        self.seconds = 0
        self.running = True
        self.won = False
        self.lost = False

    @property
    def _center_x(self) -> int:
        return int(self.width * 3 / 2.0 + 1)

    def draw_cell(self, x: int, y: int, highlight: int = 0) -> None:
        """Draw one cell; ``highlight`` colours its brackets (0 for none)."""
        console = self.console
        console.goto(x * 3 + 1, y + 1)
        if highlight:
            console.set_background(highlight)
            console.set_foreground(Color.WHITE)
            console.write("[ ]")
            console.reset_colors()
        else:
            console.reset_colors()
            console.write("[ ]")

        console.goto(x * 3 + 2, y + 1)
        cell = self.board.cell(x, y)
        if cell.is_mined:
            if cell.has_bomb:
                console.write("X")
            else:
                console.set_foreground(MINE_COLORS[cell.bomb_amount])
                console.write(str(cell.bomb_amount))
        elif cell.is_flagged:
            console.set_background(Color.RED)
            console.set_foreground(Color.WHITE)
            console.write("F")
        elif self.blessing == (x, y):
            console.set_foreground(Color.GREEN)
            console.write("X")
        else:
            console.write(" ")
        console.reset_colors()

    def draw_board(self) -> None:
        """Draw every cell from the top-left corner."""
        self.console.reset_position()
        for y in range(self.height):
            for x in range(self.width):
                self.draw_cell(x, y)
            self.console.write("\n")

    def draw_gui(self) -> None:
        """Draw the flag counter, the timer and the template name below the board."""
        console = self.console
        console.goto(1, self.height + 1)
        blank = " " * (self.width * 3) + "\n"
        console.write(blank * 2)
        console.reset_colors()

        flags = f"{self.board.flags_placed}/{self.bomb_amount} mines"
        draw_text(console, flags, 1, self.height + 1, TextAlign.RIGHT)
        draw_text(console, f"{self.seconds:04d}", self.width * 3 + 1, self.height + 1, TextAlign.LEFT)

        if self.template is not None:
            console.set_foreground(self.template.fg_color)
            console.set_background(self.template.bg_color)
            name = self.template.name
        else:
            name = "Custom"
        draw_text(console, name, self._center_x, self.height + 2, TextAlign.CENTER)
        console.reset_colors()

    def handle_key(self, key: int) -> None:
        """Apply one key press to the game and redraw what changed."""
        if key == Key.ESCAPE:
            self.running = False
            return

        old_cursor = self.cursor

        if key in _REFRESH_KEYS:
            self.console.clear()
            self.draw_board()
            self.draw_cell(*self.cursor, CURSOR_COLOR)
            self.draw_gui()

        if key in _FLAG_KEYS:
            self.board.toggle_flag(*self.cursor)
            self.draw_cell(*self.cursor, CURSOR_COLOR)
            self.draw_gui()

        if key != Key.NONE:
            dx, dy = _MOVES.get(key, (0, 0))
            x, y = self.cursor
            self.cursor = (
                min(max(x + dx, 0), self.width - 1),
                min(max(y + dy, 0), self.height - 1),
            )

        if key == Key.ENTER:
            self._mine()

        if self.cursor != old_cursor:
            self.draw_cell(*old_cursor)
            self.draw_cell(*self.cursor, CURSOR_COLOR)

    def _mine(self) -> None:
        x, y = self.cursor
        cell = self.board.cell(x, y)
        if cell.has_bomb:
            self._game_over()
        elif cell.is_mined:
            self._show(self.board.sweep(x, y))
        elif not cell.is_flagged:
            self._show(self.board.reveal(x, y))

        self.draw_cell(x, y, CURSOR_COLOR)
        if not self.lost and self.board.is_cleared:
            self._win()

    def _show(self, positions: list[Position]) -> None:
        for x, y in positions:
            self.draw_cell(x, y)
        if self.board.exploded and not self.lost:
            self._game_over()

    def _paint_bombs(self, text: str, foreground: int, background: int) -> None:
        for x, y in self.board.bombs():
            self.console.goto(x * 3 + 1, y + 1)
            self.console.set_foreground(foreground)
            self.console.set_background(background)
            self.console.write(text)

    def _game_over(self) -> None:
        console = self.console
        self._paint_bombs("[X]", Color.WHITE, Color.RED)
        console.reset_colors()
        console.set_foreground(Color.YELLOW)
        draw_text(console, "Better luck next time!", self._center_x, self.height + 3, TextAlign.CENTER)
        console.reset_colors()
        console.flush()
        console.sleep(4)
        self.lost = True
        self.running = False

    def _win(self) -> None:
        console = self.console
        self.board.flags_placed = self.bomb_amount
        self.draw_gui()

        console.set_foreground(Color.BLUE)
        draw_text(console, "YOU WON!", self._center_x, self.height + 3, TextAlign.CENTER)
        console.set_foreground(Color.GREEN)
        draw_text(console, "good job!", self._center_x, self.height + 4, TextAlign.CENTER)

        for iteration in range(10):
            if iteration % 2 == 0:
                self._paint_bombs("[!]", Color.BLUE, Color.YELLOW)
            else:
                self._paint_bombs("[!]", Color.YELLOW, Color.BLUE)
            console.flush()
            console.sleep(0.5)

        console.reset_colors()
        console.sleep(2)
        self.won = True
        self.running = False

    def run(self) -> "Game":
        """Play until the game is won, lost or left with Escape."""
        start = self.clock()
        last_update: int | None = None
        self.running = True

        self.draw_board()
        self.draw_cell(*self.cursor, CURSOR_COLOR)

        while self.running:
            self.seconds = min(int(self.clock() - start), MAX_SECONDS)
            key = self.keys.get_key()
            if key == Key.ESCAPE:
                break
            self.handle_key(key)

            if last_update != self.seconds:
                last_update = self.seconds
                self.draw_gui()

            self.console.goto(1, self.height + 3)
            self.console.flush()
            if key == Key.NONE:
                self.console.sleep(_IDLE_DELAY)

        self.running = False
        return self


def _start(game: Game) -> Game:
    game.console.clear()
    game.console.reset_colors()
    return game.run()


def start_custom_game(
    width: int,
    height: int,
    bomb_amount: int,
    console: Console | None = None,
    keys=None,
) -> Game:
    """Play a game with the given dimensions and no template."""
    return _start(Game(width, height, bomb_amount, console, keys))


def start_template_game(template: Template, console: Console | None = None, keys=None) -> Game:
    """Play a game using a template's dimensions and name."""
    game = Game(
        template.width,
        template.height,
        template.bomb_amount,
        console,
        keys,
        template=template,
    )
    return _start(game)