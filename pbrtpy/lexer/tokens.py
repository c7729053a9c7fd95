"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from pbrtpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12

    # -------------------------
    # Words / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21  # quoted string
    NUMBER = 22

    # -------------------------
    # Punctuation
    # -------------------------
    LBRACKET = 30  # [
    RBRACKET = 31  # ]

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.COMMENT,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
