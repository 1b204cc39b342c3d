"""Tokenizing, syntax checking, command parsing and variable expansion for a small shell."""

__version__ = "0.1.0"
__all__ = ["chars", "commands", "env", "expand", "shell", "strings", "tokens"]