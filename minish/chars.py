"""Character classification and case conversion in the plain ASCII sense.

Every function accepts either a one-character string or an integer code.
The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Callable, Iterable, Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the decimal digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return code == ord(" ") or ord("\t") <= code <= ord("\r")


def is_xdigit(c: CharLike) -> bool:
    """True for hexadecimal digits in either case."""
    code = _code(c)
    return is_digit(code) or ord("A") <= code <= ord("F") or ord("a") <= code <= ord("f")


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def all_chars(s: str, predicate: Callable[[str], bool]) -> bool:
    """True when every character of ``s`` satisfies ``predicate`` (so also for "")."""
    return all(predicate(ch) for ch in s)


def count_if(items: Iterable[str], predicate: Callable[[str], bool]) -> int:
    """Count the items for which ``predicate`` holds."""
    return sum(1 for item in items if predicate(item))