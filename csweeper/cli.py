"""The menu-driven front end: choose a template or a custom game and play."""

from __future__ import annotations

import argparse
from typing import Iterable, TextIO

from .console import Color, Console
from .game import start_custom_game, start_template_game
from .keys import KeyReader, read_int
from .menus import custom_menu, main_menu, template_menu
from .templates import Template, default_templates

MIN_WIDTH = 10
MAX_WIDTH = 60
MIN_HEIGHT = 10
MAX_HEIGHT = 40

_RESIZE_HINT = (
    "Depending on your terminal's size, it is possible the game doesn't fit properly "
    "on the screen. If this does happen, try to resize and press R to refresh the screen"
)


def prompt_in_range(
    prompt: str,
    label: str,
    low: int,
    high: int,
    infile: TextIO | None = None,
    console: Console | None = None,
) -> int:
    """Ask for an integer until one within ``low``..``high`` is given."""
    console = console if console is not None else Console()
    while True:
        value = read_int(prompt, infile, console.stream)
        if low <= value <= high:
            return value
        console.write(f"Invalid {label}! (Accepted range: {low}-{high})\n")


def run_app(
    templates: Iterable[Template] | None = None,
    infile: TextIO | None = None,
    console: Console | None = None,
    keys=None,
) -> None:
    """Run the menu loop until the player exits or input runs out."""
    templates = tuple(default_templates() if templates is None else templates)
    console = console if console is not None else Console()
    keys = keys if keys is not None else KeyReader()

    def ask(prompt: str) -> int:
        with keys.suspended():
            return read_int(prompt, infile, console.stream)

    def ask_range(prompt: str, label: str, low: int, high: int) -> int:
        with keys.suspended():
            return prompt_in_range(prompt, label, low, high, infile, console)

    console.clear()
    try:
        while True:
            main_menu(console)
            option = ask("> ")

            if option == 1:
                template_menu(console, templates)
                choice = ask("> ")
                if not 1 <= choice <= len(templates):
                    console.write("The template doesn't exist...")
                    console.flush()
                    console.sleep(2)
                    continue
                console.set_foreground(Color.BLUE)
                console.write(_RESIZE_HINT)
                console.flush()
                console.sleep(3.5)
                start_template_game(templates[choice - 1], console, keys)

            elif option == 2:
                custom_menu(console)
                width = ask_range("| Input the game width: ", "width", MIN_WIDTH, MAX_WIDTH)
                height = ask_range("| Input the game height: ", "height", MIN_HEIGHT, MAX_HEIGHT)
                bombs = ask_range(
                    "| Input the bomb amount: ", "bomb amount", 1, width * height - 1
                )
                start_custom_game(width, height, bombs, console, keys)

            elif option == 3:
                break
    except EOFError:
        pass
    finally:
        console.reset_colors()
        console.flush()


def main(argv=None) -> int:
    """Start the game in the current terminal."""
    parser = argparse.ArgumentParser(
        prog="csweeper", description="Play minesweeper in the terminal."
    )
    parser.parse_args(argv)
    console = Console()
    try:
        with KeyReader() as keys:
            run_app(default_templates(), console=console, keys=keys)
    except KeyboardInterrupt:
        console.reset_colors()
        console.flush()
    return 0