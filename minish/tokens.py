"""Splitting an input line into shell tokens and checking their syntax."""

from __future__ import annotations

from typing import List, Optional, Sequence

from minish.chars import is_space

_OPERATOR_CHARS = ">|<"
_QUOTES = "'\""


class ShellSyntaxError(Exception):
    """A token sequence that cannot form a command line."""

    def __init__(self, token: str, message: Optional[str] = None) -> None:
        self.token = token
        super().__init__(message or f"syntax error near token `{token}'")


class UnclosedQuoteError(ShellSyntaxError):
    """A quote that is opened but never closed."""

    def __init__(self, quote: str) -> None:
        super().__init__(quote, f"unexpected EOF for `{quote}'")


def token_end(s: str, start: int) -> int:
    """Return the index one past the end of the token that starts at ``start``."""
    if start >= len(s) or s[start] == " ":
        return start
    if s.startswith(("<<", ">>"), start):
        return start + 2
    if s[start] in _OPERATOR_CHARS:
        return start + 1
    end = start
    quote = ""
    while end < len(s):
        ch = s[end]
        if not quote and (is_space(ch) or ch in _OPERATOR_CHARS):
            break
        if ch in _QUOTES and not quote:
            quote = ch
        elif ch == quote:
            quote = ""
        end += 1
    return end


def next_token(s: str) -> Optional[str]:
    """Return the first token of ``s`` after leading whitespace, or None."""
    start = 0
    while start < len(s) and is_space(s[start]):
        start += 1
    end = token_end(s, start)
    if start == end:
        return None
    return s[start:end]


def check_quotes(s: str) -> None:
    """Raise UnclosedQuoteError if ``s`` leaves a quote open."""
    quote = ""
    for ch in s:
        if ch in _QUOTES and not quote:
            quote = ch
        elif ch == quote:
            quote = ""
    if quote:
        raise UnclosedQuoteError(quote)


def extract_tokens(s: str) -> List[str]:
    """Split ``s`` into words, quoted strings and redirection/pipe operators.

    Raises UnclosedQuoteError when a quote is left open.  A line holding
    nothing but whitespace yields an empty list.
    """
    check_quotes(s)
    tokens: List[str] = []
    pos = 0
    while pos < len(s):
        word = next_token(s[pos:])
        if word is None:
            return []
        tokens.append(word)
        pos += len(word)
        while pos < len(s) and is_space(s[pos]):
            pos += 1
    return tokens


def is_heredoc(token: str) -> bool:
    """True for the here-document operator."""
    return token == "<<"


def is_input_redirection(token: str) -> bool:
    """True for input redirections, here-documents included."""
    return token in ("<<", "<")


def is_output_redirection(token: str) -> bool:
    """True for output redirections, truncating or appending."""
    return token in (">>", ">")


def is_redirection(token: str) -> bool:
    """True for any redirection operator."""
    return is_input_redirection(token) or is_output_redirection(token)


def is_pipe(token: str) -> bool:
    """True for the pipe operator."""
    return token == "|"


def validate_tokens(tokens: Sequence[str]) -> Sequence[str]:
    """Check the operator placement in ``tokens`` and return them unchanged.

    Raises ShellSyntaxError naming the offending token: a leading pipe, an
    operator at the end or before a pipe, or two redirections in a row.
    """
    if not tokens:
        return tokens
    if is_pipe(tokens[0]):
        raise ShellSyntaxError(tokens[0])
    for index, token in enumerate(tokens):
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        operator_misplaced = (is_redirection(token) or is_pipe(token)) and (
            following is None or is_pipe(following)
        )
        double_redirection = (
            is_redirection(token) and following is not None and is_redirection(following)
        )
        if operator_misplaced or double_redirection:
            raise ShellSyntaxError(following if following is not None else token)
    return tokens