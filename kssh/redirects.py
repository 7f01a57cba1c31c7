"""Apply the input and output redirections of one pipeline segment."""

from __future__ import annotations

import os
from typing import Optional

from .tokens import Token, TokenType

_OUTPUT_TYPES = frozenset({TokenType.RIGHT_REDIRECT, TokenType.APPEND})


class RedirectionError(Exception):
    """Raised when a redirection target cannot be used."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


def open_output(token: Token) -> int:
    """Open the file named by an output target, truncating or appending."""
    flags = os.O_WRONLY | os.O_CREAT
    flags |= os.O_TRUNC if token.type == TokenType.RIGHT_REDIRECT else os.O_APPEND
    try:
        return os.open(token.text, flags, 0o644)
    except OSError as exc:
        raise RedirectionError(f"kssh: {exc.strerror}") from exc


def _open_input(token: Token, target_fd: int) -> None:
    try:
        fd = os.open(token.text, os.O_RDONLY)
    except OSError as exc:
        if token.text == "":
            raise RedirectionError("kssh: ambigious redirection") from exc
        raise RedirectionError("kssh: No such file or directory") from exc
    os.dup2(fd, target_fd)
    os.close(fd)


def _input_target(node: Optional[Token]) -> Optional[Token]:
    """Find the target after a '<' within the segment, or the stopping token."""
    while node is not None:
        if node.type == TokenType.LEFT_REDIRECT:
            return node
        node = node.next
        if node is not None and node.type == TokenType.PIPE:
            return node
    return None


def apply_input_redirections(start: Optional[Token], target_fd: int = 0) -> list[str]:
    """Redirect ``target_fd`` from every '<' target of the segment.

    Returns the paths opened, in order; the last one stays in effect.
    """
    opened: list[str] = []
    node = start
    while node is not None:
        if node.type == TokenType.LEFT_REDIRECT:
            node = _input_target(node.next)
            if node is None or node.type == TokenType.PIPE:
                break
            _open_input(node, target_fd)
            opened.append(node.text)
        node = node.next
        if node is not None and node.type == TokenType.PIPE:
            break
    return opened


def _usable_output(token: Token) -> bool:
    return token.text != "" and not token.text.startswith(">")


def _output_target(node: Optional[Token], target_fd: int) -> Optional[Token]:
    """Open and apply the target after an output operator; return where it stopped."""
    while node is not None:
        if node.type in _OUTPUT_TYPES:
            if not _usable_output(node):
                raise RedirectionError("kssh: ambigious redirect")
            fd = open_output(node)
            os.dup2(fd, target_fd)
            os.close(fd)
            return node
        node = node.next
        if node is not None and node.type == TokenType.PIPE:
            return node
    return None


def apply_output_redirections(start: Optional[Token], target_fd: int = 1) -> list[str]:
    """Redirect ``target_fd`` to every '>' and '>>' target of the segment.

    Returns the paths opened, in order; the last one stays in effect.
    """
    opened: list[str] = []
    node = start
    while node is not None:
        if node.type in _OUTPUT_TYPES:
            node = _output_target(node.next, target_fd)
            if node is None or node.type == TokenType.PIPE:
                break
            opened.append(node.text)
        node = node.next
        if node is not None and node.type == TokenType.PIPE:
            break
    return opened