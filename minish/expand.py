"""Variable and quote expansion of command arguments and redirection targets."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence, Tuple

from minish.chars import is_space
from minish.commands import Command, Redirection
from minish.env import Environment
from minish.tokens import is_heredoc

_QUOTES = "'\""
_VAR_STOP = "\"';()[]{}+-*/="


class AmbiguousRedirectError(ValueError):
    """A redirection target that expands to nothing or to several words."""

    def __init__(self, target: str) -> None:
        self.target = target
        super().__init__(f"{target}: ambiguous redirect")


def _var_end(rest: str, quote: str) -> Tuple[int, str]:
    """Length of the next part of ``rest`` and the quote still open after it."""
    end = 0
    if not quote and rest[0] in _QUOTES:
        quote = rest[0]
        end = 1
    is_var = rest[0] == "$"
    while end < len(rest) and (rest[end] not in _QUOTES or quote):
        ch = rest[end]
        if ch == quote or (is_var and (is_space(ch) or ch in _VAR_STOP)):
            break
        if quote != "'" and ch == "$" and end != 0:
            return end, quote
        end += 1
    if not is_var and quote and end < len(rest) and rest[end] == quote:
        quote = ""
        end += 1
    return end, quote


def split_vars(token: str) -> List[str]:
    """Split ``token`` into quoted runs, plain runs and ``$name`` references.

    The parts joined together give back ``token``.  Inside double quotes a
    variable reference starts a new part; inside single quotes it does not.
    """
    parts: List[str] = []
    quote = ""
    pos = 0
    while pos < len(token):
        length, quote = _var_end(token[pos:], quote)
        if length == 0:
            return []
        parts.append(token[pos : pos + length])
        pos += length
    return parts


def var_value(env: Environment, last_status: int, key: str) -> str:
    """The value ``$key`` expands to; ``?`` gives the last status.

    An unset variable gives "".  Raises ValueError for an empty name.
    """
    if not key:
        raise ValueError("empty variable name")
    if key == "?":
        return str(last_status)
    value = env.get(key)
    return value if value is not None else ""


def strip_quotes(s: str) -> str:
    """Remove the surrounding quotes of the kind that appears last in ``s``."""
    single = s.rfind("'")
    double = s.rfind('"')
    if double >= 0 and (single < 0 or double > single or s == "\"'"):
        return s.strip('"')
    if single >= 0 and (double < 0 or single > double):
        return s.strip("'")
    return s


def expand_part(env: Environment, last_status: int, part: str) -> str:
    """Expand one part produced by split_vars."""
    if part.startswith("$"):
        return var_value(env, last_status, part[1:])
    return strip_quotes(part)


def expand_token(env: Environment, last_status: int, token: str) -> str:
    """Expand the variables and remove the quotes of ``token``.

    Raises ValueError for an empty token or a bare ``$`` reference.
    """
    parts = split_vars(token)
    if not parts:
        raise ValueError("nothing to expand")
    return "".join(expand_part(env, last_status, part) for part in parts)


def check_redirect_target(old_target: str, new_target: str) -> str:
    """Return ``new_target`` if it is a single non-empty word.

    Raises AmbiguousRedirectError naming ``old_target`` otherwise.
    """
    if new_target and " " not in new_target:
        return new_target
    raise AmbiguousRedirectError(old_target)


def expand_redirections(
    env: Environment, last_status: int, redirections: Sequence[Redirection]
) -> List[Redirection]:
    """Expanded copies of ``redirections``; here-document delimiters stay as written."""
    expanded: List[Redirection] = []
    for redir in redirections:
        if is_heredoc(redir.type):
            expanded.append(replace(redir))
            continue
        target = check_redirect_target(
            redir.target, expand_token(env, last_status, redir.target)
        )
        expanded.append(replace(redir, target=target))
    return expanded


def expand_arguments(env: Environment, last_status: int, arguments: Sequence[str]) -> List[str]:
    """Expanded copies of ``arguments``."""
    return [expand_token(env, last_status, argument) for argument in arguments]


def expand_commands(
    env: Environment, last_status: int, commands: Sequence[Command]
) -> List[Command]:
    """Expanded copies of ``commands``; the originals are left untouched."""
    return [
        replace(
            command,
            redirections=expand_redirections(env, last_status, command.redirections),
            arguments=expand_arguments(env, last_status, command.arguments),
        )
        for command in commands
    ]