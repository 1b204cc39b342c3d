"""The interactive loop: read a line, parse and expand it, print the commands."""

from __future__ import annotations

import os
import sys
from typing import IO, Iterable, Iterator, List, Mapping, Optional, Sequence

from minish.chars import all_chars, is_space
from minish.commands import Command, extract_commands
from minish.env import Environment
from minish.expand import AmbiguousRedirectError, expand_commands
from minish.tokens import ShellSyntaxError, extract_tokens, validate_tokens

PROMPT = "$ "
_ERROR_PREFIX = "minishell: "


def format_commands(commands: Sequence[Command]) -> str:
    """Describe each command's arguments and redirections, one per line."""
    lines: List[str] = []
    for command in commands:
        lines.extend(f"Argument: {argument}\n" for argument in command.arguments)
        lines.extend(
            f"Redirection: {redir.type} {redir.target}\n" for redir in command.redirections
        )
        lines.append("----------\n")
    return "".join(lines)


class Shell:
    """Shell state kept between input lines."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.env = Environment.from_mapping(os.environ if environ is None else environ)
        self.last_status = 0
        self.history: List[str] = []

    @staticmethod
    def _report(message: str) -> None:
        sys.stderr.write(f"{_ERROR_PREFIX}{message}\n")

    def process_input(self, line: str) -> Optional[List[Command]]:
        """Parse and expand ``line``; None when it yields no usable commands.

        Syntax errors and ambiguous redirections are reported on standard error.
        """
        try:
            tokens = extract_tokens(line)
            if not tokens:
                return None
            validate_tokens(tokens)
        except ShellSyntaxError as error:
            self._report(str(error))
            return None
        commands = extract_commands(tokens)
        if not commands:
            return None
        try:
            return expand_commands(self.env, self.last_status, commands)
        except AmbiguousRedirectError as error:
            self._report(str(error))
            return None
        except ValueError:
            return None

    def run(self, lines: Iterable[str], out: Optional[IO[str]] = None) -> int:
        """Process ``lines`` until they run out or one reads ``exit``.

        Returns the last status.
        """
        stream = out if out is not None else sys.stdout
        for raw in lines:
            line = raw.rstrip("\n")
            if line == "exit":
                break
            commands = self.process_input(line)
            if commands:
                stream.write(format_commands(commands))
            if not all_chars(line, is_space):
                self.history.append(line)
        return self.last_status


def _prompt_lines() -> Iterator[str]:
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive shell on the process environment."""
    try:
        shell = Shell(os.environ)
    except ValueError:
        return 1
    if not len(shell.env):
        return 1
    shell.run(_prompt_lines(), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())