"""The shell's environment variables, kept newest first."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Tuple


@dataclass
class _Var:
    key: str
    value: str


def env_string(key: str, value: str) -> str:
    """Return ``key=value``; raises ValueError for an empty key or a missing value."""
    if not key or value is None:
        raise ValueError("an environment entry needs a non-empty key and a value")
    return f"{key}={value}"


def _parse_entry(entry: str) -> Tuple[str, str]:
    if not entry or entry.startswith("="):
        raise ValueError(f"invalid environment entry {entry!r}")
    key, _, value = entry.partition("=")
    return key, value


class Environment:
    """An ordered collection of variables; the most recently added comes first."""

    def __init__(self) -> None:
        self._vars: List[_Var] = []

    def _find(self, key: str) -> Optional[_Var]:
        if not key:
            return None
        return next((var for var in self._vars if var.key == key), None)

    def get(self, key: str) -> Optional[str]:
        """The value of ``key``, or None when it is not set."""
        var = self._find(key)
        return var.value if var is not None else None

    def add(self, key: str, value: str) -> None:
        """Put a new variable in front; raises ValueError for an empty key or no value."""
        if not key or value is None:
            raise ValueError("a variable needs a non-empty key and a value")
        self._vars.insert(0, _Var(key, value))

    def set(self, key: str, value: str) -> None:
        """Replace the value of ``key``, adding the variable if it is absent."""
        var = self._find(key)
        if var is None:
            self.add(key, value)
            return
        if value is None:
            raise ValueError("a variable needs a value")
        var.value = value

    def unset(self, key: str) -> None:
        """Remove ``key``; raises KeyError when it is not set."""
        var = self._find(key)
        if var is None:
            raise KeyError(key)
        self._vars.remove(var)

    def items(self) -> List[Tuple[str, str]]:
        """The ``(key, value)`` pairs in order."""
        return [(var.key, var.value) for var in self._vars]

    def to_envp(self) -> List[str]:
        """The variables as ``key=value`` strings, in order."""
        return [env_string(var.key, var.value) for var in self._vars]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Environment":
        """Build an environment from a mapping such as ``os.environ``.

        Each pair is read as the entry ``key=value`` split at its first ``=``.
        Raises ValueError for an empty key or one starting with ``=``.
        """
        env = cls()
        for key, value in mapping.items():
            env.add(*_parse_entry(f"{key}={value}" if key else ""))
        return env

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[str]:
        return (var.key for var in self._vars)