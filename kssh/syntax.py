"""Refine lexer tokens: mark commands, redirection targets and empty quotes."""

from __future__ import annotations

from typing import Iterable, Optional

from .tokens import Token, TokenList, TokenType

_REDIRECTIONS = frozenset(
    {
        TokenType.HEREDOC,
        TokenType.LEFT_REDIRECT,
        TokenType.RIGHT_REDIRECT,
        TokenType.APPEND,
    }
)
_QUOTES = frozenset({TokenType.DOUBLE_QUOTE, TokenType.SINGLE_QUOTE})
_TARGETS = frozenset({TokenType.WORD, TokenType.STRING, TokenType.FILENAME_TK})
_MERGEABLE = frozenset({TokenType.STRING, TokenType.WORD, TokenType.CMD})
_COMMAND_ENDS = frozenset(
    {
        TokenType.WHITESPACE,
        TokenType.LEFT_REDIRECT,
        TokenType.RIGHT_REDIRECT,
        TokenType.APPEND,
        TokenType.HEREDOC,
        TokenType.PIPE,
    }
)
_BEFORE_EMPTY_QUOTE = frozenset({TokenType.WHITESPACE, TokenType.PIPE})
_AFTER_EMPTY_QUOTE = frozenset(
    {
        TokenType.WHITESPACE,
        TokenType.DOUBLE_QUOTE,
        TokenType.SINGLE_QUOTE,
        TokenType.LEFT_REDIRECT,
        TokenType.RIGHT_REDIRECT,
        TokenType.APPEND,
    }
)


def pipeline_count(tokens: Iterable[Token]) -> int:
    """Return the number of pipeline segments: one more than the pipes."""
    return 1 + sum(1 for token in tokens if token.type == TokenType.PIPE)


def next_pipe(token: Optional[Token]) -> Optional[Token]:
    """Return the first pipe token after ``token``, or None."""
    node = token.next if token is not None else None
    while node is not None and node.type != TokenType.PIPE:
        node = node.next
    return node


def is_redirection(token_type: TokenType) -> bool:
    """Return True for <, >, << and >>."""
    return token_type in _REDIRECTIONS


def has_command(token: Optional[Token]) -> bool:
    """Return True if ``token`` or any token after it is a command."""
    node = token
    while node is not None:
        if node.type == TokenType.CMD:
            return True
        node = node.next
    return False


def only_whitespace(tokens: Iterable[Token]) -> bool:
    """Return True if every token is whitespace (or there are none)."""
    return all(token.type == TokenType.WHITESPACE for token in tokens)


def _mark_redirection_targets(start: Optional[Token]) -> None:
    """Give the word following each redirection the redirection's type."""
    node = start
    while node is not None:
        if is_redirection(node.type):
            kind = node.type
            node = node.next
            while node is not None and node.type not in _TARGETS:
                node = node.next
            if node is None:
                return
            node.type = kind
        node = node.next
        if node is None or node.type == TokenType.PIPE:
            return


def _quoted_command_ends(node: Optional[Token]) -> bool:
    """Return True if the run of quotes at ``node`` is followed by a separator."""
    following = node
    while following is not None and following.type in _QUOTES:
        following = following.next
    if following is None:
        return True
    return following.type in _COMMAND_ENDS


def _claim_quoted_command(node: Token) -> tuple[bool, Token]:
    """Decide whether command search ends here; mark empty quotes as a command."""
    if node.next is not None and node.next.type not in _QUOTES:
        return True, node
    if node.type not in _QUOTES:
        return False, node
    if _quoted_command_ends(node):
        node.type = TokenType.CMD
        if node.next is not None:
            node.next.type = TokenType.CMD
        return True, node
    return False, node.next


def _assign_command(start: Optional[Token]) -> None:
    """Mark the command word of one pipeline segment."""
    node = start
    while node is not None:
        if node.type == TokenType.WHITESPACE:
            node = node.next
            continue
        claimed, node = _claim_quoted_command(node)
        if claimed or node is None:
            return
        if node.type in (TokenType.WORD, TokenType.STRING):
            node.type = TokenType.CMD
            return
        node = node.next
        if node is None or node.type == TokenType.PIPE:
            return


def _quote_run_ends(node: Token) -> bool:
    """Return True if the quotes after ``node`` run into whitespace or the end."""
    following = node.next
    while following is not None:
        if following.type == TokenType.WHITESPACE:
            return True
        if following.type not in _QUOTES:
            return False
        following = following.next
    return True


def _promote_empty_quotes(node: Token) -> None:
    """Turn a standalone pair of empty quotes into word tokens."""
    following = node.next
    if following is None or has_command(node):
        return
    after = following.next
    after_ok = after is None or after.type in _AFTER_EMPTY_QUOTE
    before = node.previous
    before_ok = before is not None and before.type in _BEFORE_EMPTY_QUOTE
    if following.type in _QUOTES and before_ok and after_ok:
        if after is not None and after.type in _QUOTES and not _quote_run_ends(node):
            return
        node.type = TokenType.WORD
        following.type = TokenType.WORD


def _mark_empty_quotes(start: Optional[Token]) -> None:
    """Walk one segment turning empty quoted arguments into words."""
    node = start
    if node is None:
        return
    if node.type == TokenType.PIPE:
        node = node.next
    while node is not None:
        if node.type == TokenType.PIPE:
            return
        if node.type in _QUOTES:
            if node.previous is None:
                node = node.next
                if node is None or node.type == TokenType.PIPE:
                    return
                continue
            _promote_empty_quotes(node)
        node = node.next
        if node is None or node.type == TokenType.PIPE:
            return


def _absorb_following(tokens: TokenList, target: Token) -> tuple[bool, Optional[Token]]:
    """Join the words glued to a redirection target into its text."""
    node: Optional[Token] = target
    kind = target.type
    while kind not in (TokenType.WHITESPACE, TokenType.PIPE):
        if kind in _MERGEABLE:
            target.text += node.text
            node = tokens.remove(node)
        if node is None:
            return False, None
        if node.type == TokenType.WHITESPACE:
            return True, node
        node = node.next
        if node is None:
            return False, None
        kind = node.type
    return True, node


def merge_redirection_targets(tokens: TokenList, start: Optional[Token]) -> None:
    """Merge the pieces of every redirection target in the segment at ``start``."""
    node = start
    while node is not None:
        kind = node.type
        if is_redirection(kind):
            target = node.next
            while target is not None and target.type != kind:
                target = target.next
            if target is None:
                return
            completed, node = _absorb_following(tokens, target)
            if not completed or node is None:
                return
        node = node.next
        if node is None or node.type == TokenType.PIPE:
            return


def build_syntax(tokens: TokenList) -> TokenList:
    """Refine the token types of every pipeline segment in place."""
    start = tokens.head
    for _ in range(pipeline_count(tokens)):
        _mark_redirection_targets(start)
        _assign_command(start)
        _mark_empty_quotes(start)
        merge_redirection_targets(tokens, start)
        pipe = next_pipe(start)
        if pipe is None:
            break
        start = pipe.next
    return tokens