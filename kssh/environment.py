"""The shell's environment variables, kept in insertion order."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

_SHLVL_LIMIT = "999"
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def is_valid_identifier(char: str, index: int) -> bool:
    """Return True if ``char`` may appear at position ``index`` of a variable name."""
    if len(char) != 1 or not char.isascii():
        return False
    if char.isalpha() or char == "_":
        return True
    return index != 0 and char.isdigit()


def export_key(variable: str) -> str:
    """Return the name part of an ``export`` argument such as ``A=1`` or ``A+=1``."""
    match = re.match(r"(?:[^=+]|\+(?!=))*", variable)
    return match.group()


class Environment:
    """Ordered mapping of environment variable names to values."""

    def __init__(self) -> None:
        self._vars: dict[str, str] = {}

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build an environment from ``KEY=VALUE`` strings."""
        env = cls()
        for entry in entries:
            key, _, value = entry.partition("=")
            env._vars[key] = value
        return env

    def get(self, key: str) -> Optional[str]:
        return self._vars.get(key)

    def set(self, key: str, value: str) -> None:
        """Set a variable, keeping its place if it already exists."""
        self._vars[key] = value

    def sorted_items(self) -> list[tuple[str, str]]:
        """Return the variables sorted by name."""
        return sorted(self._vars.items(), key=lambda item: item[0].encode())

    def to_strings(self) -> list[str]:
        """Return the variables as ``KEY=VALUE`` strings, in order."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def change_pwd(self, old_pwd: str, pwd: str) -> None:
        """Record a directory change in OLDPWD and PWD."""
        self.set("OLDPWD", old_pwd)
        self.set("PWD", pwd)

    def set_underscore(self, value: Optional[str]) -> None:
        """Update ``_`` with the last argument, if ``_`` is defined."""
        if value is None or "_" not in self._vars:
            return
        self._vars["_"] = value

    def increment_shlvl(self) -> None:
        """Raise SHLVL by one, resetting it to 1 when it has reached the limit."""
        current = self._vars.get("SHLVL")
        if current is None:
            return
        if current == _SHLVL_LIMIT:
            print(f"warning: shell level ({_SHLVL_LIMIT}) too high, resetting to 1")
            self._vars["SHLVL"] = "1"
            return
        self._vars["SHLVL"] = str(_atoi(current) + 1)

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)