import io
from contextlib import nullcontext
from unittest import mock

import pytest

from csweeper.cli import MAX_WIDTH, MIN_WIDTH, main, prompt_in_range, run_app
from csweeper.console import Console
from csweeper.keys import Key
from csweeper.templates import default_templates


class ScriptedKeys:
    def __init__(self, keys=()):
        self._keys = list(keys)

    def get_key(self):
        return self._keys.pop(0) if self._keys else Key.ESCAPE

    def suspended(self):
        return nullcontext(self)


def run(text):
    stream = io.StringIO()
    run_app(default_templates(), io.StringIO(text), Console(stream), ScriptedKeys())
    return stream.getvalue()


def test_prompt_in_range_repeats_until_valid():
    stream = io.StringIO()
    value = prompt_in_range(
        "w: ", "width", MIN_WIDTH, MAX_WIDTH, io.StringIO("5\nabc\n12\n"), Console(stream)
    )
    assert value == 12
    out = stream.getvalue()
    assert f"Invalid width! (Accepted range: {MIN_WIDTH}-{MAX_WIDTH})\n" in out
    assert "Invalid number, try again.\n" in out


def test_prompt_in_range_eof():
    with pytest.raises(EOFError):
        prompt_in_range("w: ", "width", 1, 2, io.StringIO(""), Console(io.StringIO()))


def test_exit_option():
    out = run("3\n")
    assert "Exit" in out
    assert out.endswith("\x1b[39m\x1b[49m")


def test_end_of_input_leaves_menu():
    out = run("")
    assert "Input error!" in out


@mock.patch("time.sleep")
def test_unknown_template(_sleep):
    out = run("1\n9\n3\n")
    assert "The template doesn't exist..." in out


@mock.patch("time.sleep")
def test_template_game(_sleep):
    out = run("1\n1\n3\n")
    assert "R to refresh the screen" in out
    assert "Easy" in out


@mock.patch("time.sleep")
def test_custom_game_validates_input(_sleep):
    out = run("2\n5\n10\n10\n0\n1\n3\n")
    assert "Invalid width!" in out
    assert "Invalid bomb amount!" in out
    assert "Invalid height!" not in out
    assert "| Input the bomb amount: " in out


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0