"""Named board presets."""

from __future__ import annotations

from dataclasses import dataclass

from .console import Color

NAME_LIMIT = 29


@dataclass(frozen=True)
class Template:
    """A preset board size and bomb count, with the colours its name is drawn in."""

    name: str
    width: int
    height: int
    bomb_amount: int
    fg_color: int = 0
    bg_color: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name[:NAME_LIMIT])


def default_templates() -> tuple[Template, ...]:
    """The built-in presets, from easiest to hardest."""
    return (
        Template("Easy", 10, 10, 10, Color.BLUE, 0),
        Template("Medium", 16, 16, 40, Color.GREEN, 0),
        Template("Hard", 30, 16, 99, Color.YELLOW, 0),
        Template("Expert", 36, 20, 165, Color.RED, 0),
        Template("Master", 36, 30, 252, Color.WHITE, Color.RED),
    )