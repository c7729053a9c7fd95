"""Token source that hides trivia from the parser."""

from pbrtpy.lexer import Lexer, Token, TokenKind
from pbrtpy.text import TextRange, TextSize


class TokenSource:
    """Bridge between lexer and parser that skips whitespace, newlines and comments."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current: Token = Token(TokenKind.EOF, TextRange.empty(TextSize.from_int(0)))
        self._current_has_preceding_trivia = False
        self._previous_end = TextSize.from_int(0)
        self._next_non_trivia_token()

    @property
    def current(self) -> TokenKind:
        return self._current.kind

    @property
    def current_range(self) -> TextRange:
        return self._current.range

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def path(self) -> str | None:
        return self._lexer.path

    @property
    def position(self) -> TextSize:
        return self._current.range.start

    @property
    def has_preceding_trivia(self) -> bool:
        return self._current_has_preceding_trivia

    @property
    def previous_end(self) -> TextSize:
        """End offset of the last consumed non-trivia token."""
        return self._previous_end

    def bump(self) -> None:
        if self._current.kind != TokenKind.EOF:
            self._previous_end = self._current.range.end
            self._next_non_trivia_token()

    def _next_non_trivia_token(self) -> None:
        saw_trivia = False
        while True:
            token = self._lexer.next_token()
            if token.kind.is_trivia:
                saw_trivia = True
                continue
            self._current = token
            self._current_has_preceding_trivia = saw_trivia
            break
