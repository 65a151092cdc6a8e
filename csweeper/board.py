"""The minefield: cells, bomb placement, revealing and sweeping."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterator

Position = tuple[int, int]


@dataclass
class Cell:
    """One square of the field."""

    has_bomb: bool = False
    is_flagged: bool = False
    is_mined: bool = False
    bomb_amount: int = 0


class Board:
    """A rectangular minefield addressed by ``(x, y)`` with the origin top-left."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        self.rows = [[Cell() for _ in range(width)] for _ in range(height)]
        self.bomb_count = 0
        self.flags_placed = 0
        self.correct_guesses = 0
        self.exploded = False

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the board")

    def cell(self, x: int, y: int) -> Cell:
        self._check(x, y)
        return self.rows[y][x]

    def _area(self, x: int, y: int) -> Iterator[Position]:
        for ny in range(max(0, y - 1), min(self.height, y + 2)):
            for nx in range(max(0, x - 1), min(self.width, x + 2)):
                yield nx, ny

    def neighbours(self, x: int, y: int) -> Iterator[Position]:
        """Positions surrounding ``(x, y)`` on the board, row by row."""
        self._check(x, y)
        return ((nx, ny) for nx, ny in self._area(x, y) if (nx, ny) != (x, y))

    def place_bombs(self, positions) -> None:
        """Put bombs on the given positions and update every count around them.

        A bomb also counts towards its own cell's ``bomb_amount``.
        """
        for x, y in positions:
            cell = self.cell(x, y)
            if cell.has_bomb:
                raise ValueError(f"position ({x}, {y}) already holds a bomb")
            cell.has_bomb = True
            self.bomb_count += 1
            for nx, ny in self._area(x, y):
                self.rows[ny][nx].bomb_amount += 1

    def generate(self, bomb_amount: int, rng: random.Random | None = None) -> list[Position]:
        """Scatter ``bomb_amount`` bombs at random and return their positions."""
        total = self.width * self.height
        if not 0 <= bomb_amount <= total:
            raise ValueError(f"bomb amount must be between 0 and {total}")
        rng = rng if rng is not None else random.Random()
        indices = list(range(total))
        for i in range(total - 1):
            j = rng.randrange(total)
            indices[i], indices[j] = indices[j], indices[i]
        positions = [(index % self.width, index // self.width) for index in indices[:bomb_amount]]
        self.place_bombs(positions)
        return positions

    def find_blessing(self, rng: random.Random | None = None) -> Position | None:
        """Pick a random cell with no bombs around it, or None if there is none."""
        rng = rng if rng is not None else random.Random()
        eligible = [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, cell in enumerate(row)
            if cell.bomb_amount == 0
        ]
        if not eligible:
            return None
        rng.shuffle(eligible)
        return eligible[0]

    def toggle_flag(self, x: int, y: int) -> bool:
        """Flip the flag on a covered cell and return whether it is now flagged."""
        cell = self.cell(x, y)
        if not cell.is_mined:
            cell.is_flagged = not cell.is_flagged
            self.flags_placed += 1 if cell.is_flagged else -1
        return cell.is_flagged

    def reveal(self, x: int, y: int) -> list[Position]:
        """Uncover a cell, spreading through cells with no bombs around them.

        Returns the newly uncovered positions. Uncovering a bomb sets ``exploded``.
        """
        self._check(x, y)
        revealed: list[Position] = []
        pending = [(x, y)]
        while pending:
            cx, cy = pending.pop()
            cell = self.rows[cy][cx]
            if cell.is_mined:
                continue
            cell.is_mined = True
            cell.is_flagged = False
            revealed.append((cx, cy))
            if cell.has_bomb:
                self.exploded = True
            else:
                self.correct_guesses += 1
            if cell.bomb_amount == 0:
                pending.extend(reversed(list(self.neighbours(cx, cy))))
        return revealed

    def sweep(self, x: int, y: int) -> list[Position]:
        """Uncover the unflagged neighbours of an uncovered cell whose flags match its count."""
        cell = self.cell(x, y)
        if not cell.is_mined:
            return []
        flags = sum(self.rows[ny][nx].is_flagged for nx, ny in self._area(x, y))
        if flags != cell.bomb_amount:
            return []
        revealed: list[Position] = []
        for nx, ny in list(self.neighbours(x, y)):
            if not self.rows[ny][nx].is_flagged:
                revealed.extend(self.reveal(nx, ny))
        return revealed

    def bombs(self) -> list[Position]:
        """Positions of every bomb, row by row."""
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, cell in enumerate(row)
            if cell.has_bomb
        ]

    @property
    def is_cleared(self) -> bool:
        """True once every cell without a bomb has been uncovered."""
        return self.correct_guesses == self.width * self.height - self.bomb_count