"""Grouping a validated token list into commands with arguments and redirections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from minish.tokens import is_pipe, is_redirection


@dataclass
class Redirection:
    """A redirection operator together with its target word."""

    type: str
    target: str


@dataclass
class Command:
    """One simple command of a pipeline."""

    arguments: List[str] = field(default_factory=list)
    redirections: List[Redirection] = field(default_factory=list)
    input_fd: int = -1
    output_fd: int = -1
    status: int = 0

    def add_argument(self, value: str) -> None:
        """Append an argument word."""
        self.arguments.append(value)

    def add_redirection(self, type: str, target: str) -> None:
        """Append a redirection; raises ValueError if either part is empty."""
        if not type or not target:
            raise ValueError("a redirection needs both an operator and a target")
        self.redirections.append(Redirection(type, target))


def parse_command(tokens: Sequence[str]) -> Tuple[Command, int]:
    """Build the first command of ``tokens``.

    Returns the command and the number of tokens it consumed, so that the
    next command starts at that index.  The pipe that ends a command is
    consumed with it.
    """
    command = Command()
    previous: Optional[str] = None
    consumed = 0
    for token in tokens:
        if previous is not None and is_redirection(previous):
            command.add_redirection(previous, token)
        elif previous is not None and is_pipe(previous):
            break
        elif not is_redirection(token) and not is_pipe(token):
            command.add_argument(token)
        previous = token
        consumed += 1
    return command, consumed


def extract_commands(tokens: Sequence[str]) -> List[Command]:
    """Split ``tokens`` at pipes into a list of commands."""
    commands: List[Command] = []
    remaining = list(tokens)
    while remaining:
        command, consumed = parse_command(remaining)
        commands.append(command)
        remaining = remaining[consumed:]
    return commands