import io
import os

import pytest

from csweeper.keys import Key, KeyReader, parse_key, read_int


def test_enter_is_newline_code():
    assert Key.ENTER == 10
    assert parse_key(b"\n") == Key.ENTER


def test_escape_alone():
    assert parse_key(b"\x1b") == Key.ESCAPE


def test_escape_is_above_byte_range():
    assert parse_key(b"\x1b") == 256
    assert parse_key(b"~") == 126


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x1b[A", Key.UP),
        (b"\x1b[B", Key.DOWN),
        (b"\x1b[C", Key.RIGHT),
        (b"\x1b[D", Key.LEFT),
        (b"\x1b[Z", Key.NONE),
        (b"\x1bO", Key.NONE),
        (b"\xe0H", Key.UP),
        (b"\x00P", Key.DOWN),
        (b"\xe0K", Key.LEFT),
        (b"\xe0M", Key.RIGHT),
        (b"\r", Key.ENTER),
        (b"", Key.NONE),
    ],
)
def test_parse_special_keys(data, expected):
    assert parse_key(data) == expected


@pytest.mark.parametrize("char", ["r", "R", "f", "F", "q"])
def test_parse_plain_keys_return_ordinal(char):
    assert parse_key(char.encode()) == ord(char)


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    os.close(read_fd)
    os.close(write_fd)


def test_reader_without_input_returns_none(pipe):
    read_fd, _ = pipe
    assert KeyReader(read_fd).get_key() == Key.NONE


def test_reader_reads_arrow_sequence(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"\x1b[B")
    assert KeyReader(read_fd).get_key() == Key.DOWN


def test_reader_reads_lone_escape(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"\x1b")
    assert KeyReader(read_fd).get_key() == Key.ESCAPE


def test_reader_reads_keys_in_order(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"f\n")
    with KeyReader(read_fd) as reader:
        keys = [reader.get_key(), reader.get_key(), reader.get_key()]
    assert keys == [ord("f"), Key.ENTER, Key.NONE]


def test_suspended_yields_reader(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"x")
    with KeyReader(read_fd) as reader:
        with reader.suspended() as inner:
            assert inner is reader
        assert reader.get_key() == ord("x")


def test_read_int_parses_number():
    out = io.StringIO()
    assert read_int("> ", io.StringIO("42\n"), out) == 42
    assert out.getvalue() == "> "


def test_read_int_retries_on_invalid():
    out = io.StringIO()
    assert read_int("> ", io.StringIO("abc\n\n3\n"), out) == 3
    assert out.getvalue().count("Invalid number, try again.\n") == 2


def test_read_int_accepts_leading_space_sign_and_trailing_text():
    assert read_int("", io.StringIO("  -7xyz\n"), io.StringIO()) == -7


def test_read_int_raises_on_end_of_input():
    out = io.StringIO()
    with pytest.raises(EOFError):
        read_int("> ", io.StringIO(""), out)
    assert out.getvalue().endswith("Input error!\n")