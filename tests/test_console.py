import io
import time
from unittest import mock

import pytest

from csweeper.console import (
    Color,
    Console,
    background_sequence,
    foreground_sequence,
    goto_sequence,
)


@pytest.fixture
def console():
    return Console(io.StringIO())


def test_color_values_match_palette(console):
    console.set_foreground(Color.RED)
    console.set_foreground(Color.WHITE)
    console.set_background(Color.DARK_GREEN)
    assert console.stream.getvalue() == (
        "\x1b[38;5;1m" "\x1b[38;5;15m" "\x1b[48;5;28m"
    )


def test_goto_sequence_puts_row_first():
    assert goto_sequence(3, 7) == "\x1b[7;3f"


def test_colour_sequences():
    assert foreground_sequence(Color.BLUE) == "\x1b[38;5;4m"
    assert background_sequence(Color.RED) == "\x1b[48;5;1m"


def test_goto_writes_sequence(console):
    console.goto(5, 2)
    assert console.stream.getvalue() == goto_sequence(5, 2)


def test_set_colours_write_sequences(console):
    console.set_foreground(Color.GREEN)
    console.set_background(Color.YELLOW)
    assert console.stream.getvalue() == foreground_sequence(2) + background_sequence(3)


def test_reset_colors_resets_both(console):
    console.reset_colors()
    assert console.stream.getvalue() == "\x1b[39m\x1b[49m"


def test_individual_resets(console):
    console.reset_foreground()
    console.reset_background()
    assert console.stream.getvalue() == "\x1b[39m\x1b[49m"


def test_reset_position(console):
    console.reset_position()
    assert console.stream.getvalue() == "\x1b[H"


def test_clear_writes_clear_sequence(console):
    console.clear()
    assert console.stream.getvalue() == "\x1b[2J\x1b[1;1H"


def test_write_appends_text(console):
    console.write("abc")
    console.write("def")
    assert console.stream.getvalue() == "abcdef"


def test_flush_reaches_stream():
    stream = mock.Mock()
    Console(stream).flush()
    assert stream.flush.call_count == 1


def test_sleep_waits_without_writing(console):
    start = time.monotonic()
    console.sleep(0.05)
    elapsed = time.monotonic() - start
    assert elapsed >= 0.04
    assert console.stream.getvalue() == ""