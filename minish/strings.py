"""String helpers: number conversion, slicing, splitting, line reading and output."""

from __future__ import annotations

import sys
from typing import IO, AnyStr, Iterator, List, Optional, Tuple

from minish.chars import is_alpha, is_digit, is_space, to_lower

LONG_MAX = 2**63 - 1
LONG_MIN = -(2**63)


def _skip_spaces(s: str, pos: int = 0) -> int:
    while pos < len(s) and is_space(s[pos]):
        pos += 1
    return pos


def _read_sign(s: str, pos: int) -> Tuple[int, int]:
    sign = -1 if s.startswith("-", pos) else 1
    if pos < len(s) and s[pos] in "+-":
        pos += 1
    return sign, pos


def atoi(s: str) -> int:
    """Parse a leading decimal integer, after optional whitespace and sign.

    Parsing stops at the first non-digit; a string with no digits gives 0.
    """
    sign, pos = _read_sign(s, _skip_spaces(s))
    n = 0
    while pos < len(s) and is_digit(s[pos]):
        n = n * 10 + ord(s[pos]) - ord("0")
        pos += 1
    return n * sign


def _digit_value(ch: str, base: int) -> int:
    if is_digit(ch):
        value = ord(ch) - ord("0")
    elif is_alpha(ch):
        value = ord(to_lower(ch)) - ord("a") + 10
    else:
        return -1
    return value if value < base else -1


def _determine_base(s: str, pos: int, base: int) -> Tuple[int, int]:
    if base in (0, 16) and s.startswith(("0x", "0X"), pos):
        return 16, pos + 2
    if base == 0 and s.startswith("0", pos):
        return 8, pos + 1
    if base == 0:
        return 10, pos
    return base, pos


def strtol(s: str, base: int = 10) -> Tuple[int, int]:
    """Parse a leading integer in ``base`` and return ``(value, end_index)``.

    Base 0 picks hexadecimal for a ``0x`` prefix, octal for a leading ``0``
    and decimal otherwise.  Values beyond the signed 64-bit range are clamped
    to LONG_MAX or LONG_MIN.  Raises ValueError for a base outside 2..36.
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"base must be 0 or between 2 and 36, got {base}")
    sign, pos = _read_sign(s, _skip_spaces(s))
    base, pos = _determine_base(s, pos, base)
    n = 0
    while pos < len(s):
        digit = _digit_value(s[pos], base)
        if digit < 0:
            break
        pos += 1
        if n > (LONG_MAX - digit) // base:
            return (LONG_MAX if sign == 1 else LONG_MIN), pos
        n = n * base + digit
    return n * sign, pos


def itoa(n: int) -> str:
    """Decimal representation of ``n``."""
    return str(n)


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    return [word for word in s.split(sep) if word]


def strtrim(s: str, chars: str) -> str:
    """Remove every leading and trailing character found in ``chars``."""
    return s.strip(chars) if chars else s


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at 0; no match gives None.
    """
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; "" past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def tokenize(s: str, delims: str) -> Iterator[str]:
    """Yield the non-empty runs of ``s`` between characters of ``delims``."""
    token: List[str] = []
    for ch in s:
        if ch in delims:
            if token:
                yield "".join(token)
                token = []
        else:
            token.append(ch)
    if token:
        yield "".join(token)


def read_lines(stream: IO[AnyStr], chunk_size: int = 1024) -> Iterator[AnyStr]:
    """Yield lines from ``stream``, read ``chunk_size`` at a time.

    Each line keeps its newline; a final line without one is yielded as is.
    Works on text and binary streams alike.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    remainder = None
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        remainder = chunk if remainder is None else remainder + chunk
        newline = "\n" if isinstance(remainder, str) else b"\n"
        while True:
            index = remainder.find(newline)
            if index < 0:
                break
            yield remainder[: index + 1]
            remainder = remainder[index + 1 :]
    if remainder:
        yield remainder


def put_string(s: str, stream: Optional[IO[str]] = None) -> None:
    """Write ``s`` to ``stream`` (standard output by default)."""
    (stream if stream is not None else sys.stdout).write(s)


def put_line(s: str, stream: Optional[IO[str]] = None) -> None:
    """Write ``s`` followed by a newline."""
    put_string(s + "\n", stream)


def put_number(n: int, stream: Optional[IO[str]] = None) -> None:
    """Write the decimal form of ``n``."""
    put_string(str(n), stream)