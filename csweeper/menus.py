"""Title art and the menu screens."""

from __future__ import annotations

from typing import Iterable

from .console import Color, Console
from .templates import Template

TITLE = (
    "   ______                                       \n"
    "  / ____/_____      _____  ___  ____  ___  _____\n"
    " / /   / ___/ | /| / / _ \\/ _ \\/ __ \\/ _ \\/ ___/\n"
    "/ /___(__  )| |/ |/ /  __/  __/ /_/ /  __/ /    \n"
    "\\____/____/ |__/|__/\\___/\\___/ .___/\\___/_/     \n"
    "                            /_/                 \n"
)
VERSION_LINE = "v 1.0\n"


def print_title(console: Console) -> None:
    """Write the game's title art."""
    console.write(TITLE)


def _header(console: Console) -> None:
    console.clear()
    console.set_foreground(Color.MAGENTA)
    print_title(console)
    console.set_foreground(Color.YELLOW)
    console.write(VERSION_LINE)


def main_menu(console: Console) -> None:
    """Show the main menu options."""
    _header(console)
    console.reset_foreground()
    console.write("\n\n")
    console.write("Would you like to select a template or play a custom game?\n")

    for number, label, color in (
        (1, "Select a Template (Easy, Hard, Master)", Color.YELLOW),
        (2, "Play a Custom Game", Color.YELLOW),
        (3, "Exit", Color.RED),
    ):
        console.reset_foreground()
        console.write(f"| {number}. ")
        console.set_foreground(color)
        console.write(f"{label}\n")

    console.reset_colors()
    console.write("\n")


def template_menu(console: Console, templates: Iterable[Template]) -> None:
    """List the templates, each name in its own colours."""
    _header(console)
    console.reset_foreground()
    console.write("\n\n")
    console.write("Select a template: \n")
    for number, template in enumerate(templates, 1):
        console.write(f"| {number}. ")
        if template.fg_color != 0:
            console.set_foreground(template.fg_color)
        if template.bg_color != 0:
            console.set_background(template.bg_color)
        console.write(template.name)
        console.reset_colors()
        console.write(
            f" - ({template.width} x {template.height}), {template.bomb_amount} bombs\n"
        )
    console.write("\n")


def custom_menu(console: Console) -> None:
    """Show the header for setting up a custom game."""
    _header(console)
    console.reset_colors()
    console.write("\n\n")