"""Lexer."""

from pbrtpy.lexer.lexer import (
    Lexer,
    is_integer,
    is_number,
    parse_number,
    token_text,
)
from pbrtpy.lexer.tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "is_integer",
    "is_number",
    "parse_number",
    "token_text",
]
