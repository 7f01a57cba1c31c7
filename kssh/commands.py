"""Turn a refined token list into argument vectors and locate programs."""

from __future__ import annotations

import os
import re
from typing import Iterable, Optional

from .tokens import Token, TokenList, TokenType

BUILTINS = frozenset({"echo", "cd", "pwd", "export", "unset", "env", "exit"})

_ARG_TYPES = frozenset({TokenType.CMD, TokenType.STRING, TokenType.WORD})
_SEPARATORS = frozenset({TokenType.WHITESPACE, TokenType.PIPE})
_DOT_AT_END = re.compile(r"\.(?=\Z|[ \t\n\v\f\r])")


def _split_token(tokens: TokenList, token: Token, separator: str) -> None:
    words = [word for word in token.text.split(separator) if word]
    if len(words) < 2:
        return
    token.text = words[0]
    for word in words[1:]:
        tokens.append(Token(" ", TokenType.WHITESPACE))
        tokens.append(Token(word, TokenType.WORD))
        tokens.append(Token(" ", TokenType.WHITESPACE))


def split_words(tokens: TokenList) -> TokenList:
    """Split word tokens holding spaces or tabs into separate words.

    The first word stays in place; every further word is appended to the end
    of the list, surrounded by whitespace tokens.
    """
    node = tokens.head
    while node is not None:
        if node.type == TokenType.WORD:
            _split_token(tokens, node, " ")
            _split_token(tokens, node, "\t")
        node = node.next
    return tokens


def command_argv(start: Optional[Token]) -> list[str]:
    """Collect the arguments of the pipeline segment beginning at ``start``.

    Each run of tokens between whitespace becomes one argument made of its
    command, word and string pieces; runs without such pieces are dropped.
    """
    node = start
    if node is not None and node.type == TokenType.PIPE:
        node = node.next
        if node is not None and node.type == TokenType.WHITESPACE:
            node = node.next
    argv: list[str] = []
    while node is not None and node.type != TokenType.PIPE:
        if node.type == TokenType.WHITESPACE:
            node = node.next
            continue
        parts: list[str] = []
        found = False
        while node is not None and node.type not in _SEPARATORS:
            if node.type in _ARG_TYPES:
                parts.append(node.text)
                found = True
            node = node.next
        if found:
            argv.append("".join(parts))
    return argv


def _is_empty_quote(arg: str) -> bool:
    return '""'.startswith(arg) or "''".startswith(arg)


def blank_quote_args(argv: Iterable[str]) -> list[str]:
    """Replace empty-quote arguments (after the command name) with ''."""
    args = list(argv)
    if not args:
        return args
    return args[:1] + ["" if _is_empty_quote(arg) else arg for arg in args[1:]]


def is_builtin(name: str) -> bool:
    """Return True if ``name`` is one of the shell's built-in commands."""
    return name in BUILTINS


def command_name(text: str) -> str:
    """Return ``text`` up to its first space."""
    return text.split(" ", 1)[0]


def path_entry(env_entries: Iterable[str]) -> Optional[str]:
    """Return the first ``KEY=VALUE`` entry whose text starts with PATH."""
    return next((entry for entry in env_entries if entry.startswith("PATH")), None)


def find_command(name: str, env_entries: Iterable[str]) -> Optional[str]:
    """Search the PATH entry for an executable ``name`` and return its path.

    The whole entry, ``PATH=`` included, is split on ':' and empty parts are
    skipped. Names starting with '.' are never searched.
    """
    entry = path_entry(env_entries)
    if entry is None or name.startswith("."):
        return None
    for directory in filter(None, entry.split(":")):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def is_dot_path(path: str) -> bool:
    """Return True if a component of ``path`` ends in '.' or '..'."""
    return _DOT_AT_END.search(path) is not None