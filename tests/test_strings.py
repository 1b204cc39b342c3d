import io

import pytest

from minish.strings import (
    LONG_MAX,
    LONG_MIN,
    atoi,
    itoa,
    put_line,
    put_number,
    put_string,
    read_lines,
    split,
    strjoin,
    strnstr,
    strtol,
    strtrim,
    substr,
    tokenize,
)


@pytest.mark.parametrize("n", [0, 7, -7, 12345, -2147483648, 2147483647])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n
    assert atoi(" \t\n" + str(n) + "rest") == n


def test_atoi_plus_sign_and_no_digits():
    assert atoi("+15") == atoi("15")
    assert atoi("abc") == 0
    assert atoi("- 5") == 0


@pytest.mark.parametrize("n", [0, 1, 255, 4096, 123456789])
@pytest.mark.parametrize("base,spec", [(16, "x"), (8, "o"), (2, "b"), (10, "d")])
def test_strtol_round_trip(n, base, spec):
    text = format(n, spec)
    assert strtol(text, base) == (n, len(text))
    assert strtol("-" + text, base)[0] == -n


def test_strtol_base_zero_prefixes():
    assert strtol("0x1f", 0)[0] == 0x1F
    assert strtol("0X1F", 16)[0] == 0x1F
    assert strtol("017", 0)[0] == 0o17
    assert strtol("42", 0)[0] == 42


def test_strtol_end_index_stops_at_invalid_digit():
    value, end = strtol("  12z", 10)
    assert value == 12
    assert end == 4


def test_strtol_clamps_overflow():
    assert strtol(str(LONG_MAX) + "0")[0] == LONG_MAX
    assert strtol("-" + str(LONG_MAX) + "0")[0] == LONG_MIN
    assert strtol(str(LONG_MAX))[0] == LONG_MAX


@pytest.mark.parametrize("base", [1, 37, -2])
def test_strtol_rejects_bad_base(base):
    with pytest.raises(ValueError):
        strtol("10", base)


@pytest.mark.parametrize("n", [0, -1, 9, -2147483648, 2147483647])
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n
    assert atoi(itoa(n)) == n


def test_split_drops_empty_words():
    assert split(",,a,,b,", ",") == ["a", "b"]
    assert split("", ",") == []
    assert ",".join(split("x,y,z", ",")) == "x,y,z"


def test_strtrim():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("  a  ", "") == "  a  "
    assert strtrim("aaa", "a") == ""


def test_strnstr():
    assert strnstr("hello world", "world", 11) == 6
    assert strnstr("hello world", "world", 10) is None
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "d", 3) is None


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 3, 100) == "lo"
    assert substr("hello", 10, 2) == ""
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("ab", "cd") == "abcd"
    assert strjoin("", "") == ""


def test_tokenize():
    assert list(tokenize("  a b\tc  ", " \t")) == ["a", "b", "c"]
    assert list(tokenize("", " ")) == []
    assert list(tokenize("abc", "")) == ["abc"]


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 1024])
def test_read_lines_reassembles_text(chunk_size):
    text = "first\nsecond line\n\nlast"
    lines = list(read_lines(io.StringIO(text), chunk_size))
    assert "".join(lines) == text
    assert lines == text.splitlines(keepends=True)


def test_read_lines_binary_stream():
    data = b"one\ntwo\n"
    assert list(read_lines(io.BytesIO(data), 3)) == data.splitlines(keepends=True)


def test_read_lines_empty_and_bad_chunk():
    assert list(read_lines(io.StringIO(""))) == []
    with pytest.raises(ValueError):
        list(read_lines(io.StringIO("x"), 0))


def test_put_functions_write_to_stream():
    out = io.StringIO()
    put_string("abc", out)
    put_line("def", out)
    put_number(-2147483648, out)
    assert out.getvalue() == "abcdef\n-2147483648"