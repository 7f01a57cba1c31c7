"""Tokens, lexer, syntax checks, environment, command lookup and redirections for a small shell."""

__version__ = "0.1.0"