"""Syntax checks run on a token list before anything is executed."""

from __future__ import annotations

from typing import Iterable, Optional

from .tokens import Token, TokenType

_MAX_HEREDOCS = 16

_PIPE_ERROR = "kssh: syntax error near unexpected token `|'"
_PIPE_ERROR_LEADING = "minishell: syntax error near unexpected token `|'"
_PIPE_ERROR_AFTER_REDIRECT = "minishell : syntax error near unexpected token `|'"
_NEWLINE_ERROR = "syntax error near unexpected token `newline'"
_EMPTY_FILENAME_ERROR = ": : No such file or directory"
_HEREDOC_LIMIT_ERROR = "minishell : maximum here-document count exceeded"

_REDIRECTS = frozenset(
    {
        TokenType.LEFT_REDIRECT,
        TokenType.RIGHT_REDIRECT,
        TokenType.HEREDOC,
        TokenType.APPEND,
    }
)
_SINGLE_REDIRECTS = frozenset({TokenType.LEFT_REDIRECT, TokenType.RIGHT_REDIRECT})
_QUOTES = frozenset({TokenType.SINGLE_QUOTE, TokenType.DOUBLE_QUOTE})


class ShellSyntaxError(ValueError):
    """Raised when the command line is not valid shell syntax."""


def _first(tokens: Iterable[Token]) -> Optional[Token]:
    return next(iter(tokens), None)


def check_semicolons(tokens: Iterable[Token]) -> None:
    """Reject any ';' outside a quoted string."""
    for token in tokens:
        if ";" in token.text and token.type != TokenType.STRING:
            raise ShellSyntaxError("minishell: syntax error near unexpected token `;'")


def check_backslashes(tokens: Iterable[Token]) -> None:
    """Reject any backslash, quoted or not."""
    for token in tokens:
        if "\\" in token.text:
            raise ShellSyntaxError("minishell: syntax error near unexpected token `\\'")


def check_pipes(tokens: Iterable[Token]) -> None:
    """Reject leading, trailing, doubled pipes and pipes right after a redirection."""
    tokens = list(tokens)
    head = _first(tokens)
    if head is None:
        return
    if head.type == TokenType.PIPE:
        raise ShellSyntaxError(_PIPE_ERROR)
    for token in tokens:
        if token.type == TokenType.PIPE and (
            token.next is None or token.next.type == TokenType.PIPE
        ):
            raise ShellSyntaxError(_PIPE_ERROR)
    leading = next((t for t in tokens if t.type != TokenType.WHITESPACE), None)
    if leading is not None and leading.type == TokenType.PIPE:
        raise ShellSyntaxError(_PIPE_ERROR_LEADING)
    if tokens[-1].type == TokenType.PIPE:
        raise ShellSyntaxError(_PIPE_ERROR)
    for token in tokens:
        if (
            token.type == TokenType.PIPE
            and token.previous is not None
            and token.previous.type in _REDIRECTS
        ):
            raise ShellSyntaxError(_PIPE_ERROR_AFTER_REDIRECT)


def check_redirections(tokens: Iterable[Token]) -> None:
    """Reject redirections with no target or followed by another redirection."""
    tokens = list(tokens)
    for token in tokens:
        if token.type in (TokenType.LEFT_REDIRECT, TokenType.RIGHT_REDIRECT, TokenType.APPEND):
            following = token.next
            if following is None or following.type in _SINGLE_REDIRECTS:
                raise ShellSyntaxError(_NEWLINE_ERROR)
            if following.type in _QUOTES:
                closing = following.next
                if closing is None or closing.next is None:
                    raise ShellSyntaxError(_EMPTY_FILENAME_ERROR)
    head = _first(tokens)
    if (
        head is not None
        and head.type in _SINGLE_REDIRECTS
        and head.next is not None
        and head.next.type in _SINGLE_REDIRECTS
    ):
        char = "<" if head.next.type == TokenType.LEFT_REDIRECT else ">"
        raise ShellSyntaxError(f"syntax error near unexpected token `{char}'")
    for token in tokens:
        if token.type in _SINGLE_REDIRECTS and token.next is not None:
            if token.next.type == TokenType.HEREDOC:
                raise ShellSyntaxError("syntax error near unexpected token `<<'")
            if token.next.type == TokenType.APPEND:
                raise ShellSyntaxError("syntax error near unexpected token `>>'")


def check_heredoc_append(tokens: Iterable[Token]) -> None:
    """Reject '<<' and '>>' without a target, and too many here-documents."""
    tokens = list(tokens)
    for kind in (TokenType.HEREDOC, TokenType.APPEND):
        for token in tokens:
            if token.type == kind and (
                token.next is None or token.next.type in _REDIRECTS
            ):
                raise ShellSyntaxError(_NEWLINE_ERROR)
    if sum(1 for token in tokens if token.type == TokenType.HEREDOC) > _MAX_HEREDOCS:
        raise ShellSyntaxError(_HEREDOC_LIMIT_ERROR)


def check_syntax(tokens: Iterable[Token]) -> None:
    """Run the pipe, redirection and here-document checks in order."""
    tokens = list(tokens)
    check_pipes(tokens)
    check_redirections(tokens)
    check_heredoc_append(tokens)