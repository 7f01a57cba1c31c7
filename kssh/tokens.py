"""Token types and the doubly linked token list shared by every stage."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Iterator, Optional

_SPACE_CHARS = frozenset(" \t\n\v\f\r")


class TokenType(IntEnum):
    """Kinds of tokens produced by the lexer and refined by later stages."""

    WHITESPACE = 0
    PIPE = 1
    WORD = 2
    STRING = 3
    SINGLE_QUOTE = 4
    DOUBLE_QUOTE = 5
    RBRACKET = 6
    LBRACKET = 7
    LEFT_REDIRECT = 8
    RIGHT_REDIRECT = 9
    HEREDOC = 10
    APPEND = 11
    CMD = 12
    FILENAME = 20
    FILENAME_TK = 21


def is_space(char: str) -> bool:
    """Return True for a space or any of the control whitespace characters."""
    return len(char) == 1 and char in _SPACE_CHARS


@dataclass(eq=False)
class Token:
    """One token of the command line, linked to its neighbours."""

    text: str
    type: TokenType
    order: int = 0
    next: Optional["Token"] = field(default=None, repr=False)
    previous: Optional["Token"] = field(default=None, repr=False)

    @property
    def length(self) -> int:
        return len(self.text)


class TokenList:
    """A doubly linked list of tokens that supports removal while walking."""

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self.head: Optional[Token] = None
        for token in tokens:
            self.append(token)

    def _contains(self, token: Token) -> bool:
        return any(node is token for node in self)

    @staticmethod
    def _require_unlinked(token: Token) -> None:
        if token.next is not None or token.previous is not None:
            raise ValueError("token is already linked into a list")

    def append(self, token: Token) -> Token:
        """Link a token at the end of the list and return it."""
        self._require_unlinked(token)
        if self.head is token:
            raise ValueError("token is already linked into a list")
        tail = self.last()
        token.previous = tail
        if tail is None:
            self.head = token
        else:
            tail.next = token
        return token

    def insert_after(self, token: Token, new: Token) -> Token:
        """Link ``new`` directly after ``token`` and return ``new``."""
        if not self._contains(token):
            raise ValueError("token is not in this list")
        self._require_unlinked(new)
        if self.head is new:
            raise ValueError("token is already linked into a list")
        new.previous = token
        new.next = token.next
        if token.next is not None:
            token.next.previous = new
        token.next = new
        return new

    def remove(self, token: Token) -> Optional[Token]:
        """Unlink a token and return the one that followed it."""
        if not self._contains(token):
            raise ValueError("token is not in this list")
        following = token.next
        before = token.previous
        if before is None:
            self.head = following
        else:
            before.next = following
        if following is not None:
            following.previous = before
        token.next = None
        token.previous = None
        return following

    def last(self) -> Optional[Token]:
        """Return the final token, or None for an empty list."""
        node = self.head
        while node is not None and node.next is not None:
            node = node.next
        return node

    def renumber(self) -> None:
        """Give the tokens consecutive orders starting at 1."""
        for order, token in enumerate(self, start=1):
            token.order = order

    def strip_trailing_pipes(self) -> None:
        """Drop every pipe token at the end of the list."""
        tail = self.last()
        while tail is not None and tail.type == TokenType.PIPE:
            before = tail.previous
            self.remove(tail)
            tail = before

    def texts(self) -> list[str]:
        return [token.text for token in self]

    def types(self) -> list[TokenType]:
        return [token.type for token in self]

    def __iter__(self) -> Iterator[Token]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)