"""Lexer."""

import math
import re

from pbrtpy.diagnostics import raise_error
from pbrtpy.diagnostics.codes import (
    LEXER_INVALID_IDENTIFIER,
    LEXER_MALFORMED_NUMBER,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
)
from pbrtpy.lexer.tokens import Token, TokenKind
from pbrtpy.text import TextRange, TextSize, slice_text_range

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER_RE = re.compile(r"[+-]?\d+")
_IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9_.\-]*")

# Characters that end a bare word (identifier or number).
_WORD_BREAKS = frozenset(' \t\r\n"[]#')
_NUMBER_STARTS = frozenset("0123456789+-.")


def is_number(text: str) -> bool:
    """Match the numeric literal grammar; literals that overflow a float are rejected."""
    return _NUMBER_RE.fullmatch(text) is not None and math.isfinite(float(text))


def is_integer(text: str) -> bool:
    return _INTEGER_RE.fullmatch(text) is not None


def parse_number(text: str) -> int | float:
    """Read a whole string as a numeric literal.

    Integer forms (`5`, `-5`, `+5`) come back as `int`, everything else as
    `float`. Raises `LexicalError` for anything that is not a single number.
    """
    if not is_number(text):
        raise_error(
            LEXER_MALFORMED_NUMBER,
            text,
            TextRange(0, len(text)),
            f"Malformed numeric literal {text!r}.",
        )
    if is_integer(text):
        return int(text)
    return float(text)


class Lexer:
    """Lexer that emits trivia and non-trivia tokens.

    Tokens are produced on demand so that a malformed token is only
    reported once the parser actually reaches it.
    """

    def __init__(self, source: str, *, path: str | None = None) -> None:
        self._source = source
        self._path = path
        self._position = 0
        self._current_start = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange(self._current_start, self._position)

    def next_token(self) -> Token:
        self._current_start = self._position
        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(self._position)))
        kind = self._lex_token()
        return Token(kind, self.current_range)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "\r" or ch == "\n":
            self._consume_newline()
            return TokenKind.NEWLINE

        if ch == " " or ch == "\t":
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if ch == "#":
            return self._lex_comment()

        if ch == '"':
            return self._lex_string()

        if ch == "[":
            self._advance(1)
            return TokenKind.LBRACKET
        if ch == "]":
            self._advance(1)
            return TokenKind.RBRACKET

        return self._lex_word()

    def _lex_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_string(self) -> TokenKind:
        self._advance(1)
        end = self._source.find('"', self._position)
        if end == -1:
            self._position = len(self._source)
            raise_error(LEXER_UNTERMINATED_STRING, self._source, self.current_range, path=self._path)
        self._position = end + 1
        return TokenKind.STRING

    def _lex_word(self) -> TokenKind:
        first = self._current_char()
        while not self.is_eof and self._current_char() not in _WORD_BREAKS:
            self._advance(1)
        text = self._source[self._current_start : self._position]

        if first.isascii() and first.isalpha():
            if _IDENTIFIER_RE.fullmatch(text) is None:
                raise_error(
                    LEXER_INVALID_IDENTIFIER,
                    self._source,
                    self.current_range,
                    f"Invalid identifier {text!r}.",
                    path=self._path,
                )
            return TokenKind.IDENTIFIER

        if first in _NUMBER_STARTS:
            if not is_number(text):
                raise_error(
                    LEXER_MALFORMED_NUMBER,
                    self._source,
                    self.current_range,
                    f"Malformed numeric literal {text!r}.",
                    path=self._path,
                )
            return TokenKind.NUMBER

        raise_error(
            LEXER_UNEXPECTED_CHARACTER,
            self._source,
            TextRange(self._current_start, self._current_start + 1),
            f"Unexpected character {first!r}.",
            path=self._path,
        )

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t":
                self._advance(1)
                continue
            break

    def _consume_newline(self) -> None:
        if self._current_char() == "\r" and self._peek_char() == "\n":
            self._advance(2)
        else:
            self._advance(1)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)
