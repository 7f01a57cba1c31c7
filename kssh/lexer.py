"""Split a command line into the simplest tokens."""

from __future__ import annotations

import re

from .tokens import Token, TokenList, TokenType, is_space

_QUOTE_CHARS = {"'": TokenType.SINGLE_QUOTE, '"': TokenType.DOUBLE_QUOTE}
_OPERATORS = {
    "|": TokenType.PIPE,
    "<": TokenType.LEFT_REDIRECT,
    ">": TokenType.RIGHT_REDIRECT,
}
_WORD = re.compile(r"[^ \t\n\v\f\r|<>\"']+")


class QuoteError(ValueError):
    """Raised when a quote is opened but never closed."""

    def __init__(self, quote: TokenType) -> None:
        self.quote = quote
        char = "'" if quote == TokenType.SINGLE_QUOTE else '"'
        super().__init__(f"unexpected EOF while looking for matching `{char}'")


def char_type(char: str) -> TokenType:
    """Return the token type a single character starts."""
    if is_space(char):
        return TokenType.WHITESPACE
    if char in _OPERATORS:
        return _OPERATORS[char]
    if char in _QUOTE_CHARS:
        return _QUOTE_CHARS[char]
    return TokenType.WORD


def _scan(text: str):
    """Yield (text, type) pairs for every token of the input."""
    pos = 0
    end = len(text)
    while pos < end:
        char = text[pos]
        kind = char_type(char)
        if kind in (TokenType.LEFT_REDIRECT, TokenType.RIGHT_REDIRECT) and text[pos + 1:pos + 2] == char:
            doubled = TokenType.HEREDOC if kind == TokenType.LEFT_REDIRECT else TokenType.APPEND
            yield char * 2, doubled
            pos += 2
        elif kind in (TokenType.SINGLE_QUOTE, TokenType.DOUBLE_QUOTE):
            closing = text.find(char, pos + 1)
            if closing == -1:
                raise QuoteError(kind)
            yield char, kind
            if closing > pos + 1:
                yield text[pos + 1:closing], TokenType.STRING
            yield char, kind
            pos = closing + 1
        elif kind == TokenType.WORD:
            match = _WORD.match(text, pos)
            yield match.group(), TokenType.WORD
            pos = match.end()
        else:
            yield char, kind
            pos += 1


def tokenize(text: str) -> TokenList:
    """Turn a command line into a token list; raise QuoteError on an open quote."""
    tokens = TokenList()
    for order, (chunk, kind) in enumerate(_scan(text), start=1):
        tokens.append(Token(chunk, kind, order))
    return tokens