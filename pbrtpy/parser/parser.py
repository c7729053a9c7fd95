"""Recursive-descent parser cursor."""

from dataclasses import dataclass
from typing import NoReturn

from pbrtpy.diagnostics import raise_error
from pbrtpy.diagnostics.codes import (
    PARSER_EXPECTED_TOKEN,
    PARSER_UNEXPECTED_END_OF_INPUT,
    DiagnosticSpec,
)
from pbrtpy.lexer import TokenKind
from pbrtpy.parser.options import ParserOptions
from pbrtpy.parser.token_source import TokenSource
from pbrtpy.text import TextRange, TextSize, slice_text_range

_TOKEN_DESCRIPTIONS: dict[TokenKind, str] = {
    TokenKind.EOF: "end of input",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.STRING: "quoted string",
    TokenKind.NUMBER: "number",
    TokenKind.LBRACKET: "`[`",
    TokenKind.RBRACKET: "`]`",
}


def describe_token(kind: TokenKind) -> str:
    return _TOKEN_DESCRIPTIONS.get(kind, kind.name)


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    """Cursor over non-trivia tokens with fail-fast error reporting."""

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def current_text(self) -> str:
        return slice_text_range(self._source.text, self._source.current_range)

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def has_preceding_trivia(self) -> bool:
        return self._source.has_preceding_trivia

    @property
    def previous_end(self) -> TextSize:
        return self._source.previous_end

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind]) -> bool:
        return self.current in kinds

    def bump(self) -> None:
        self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, context: str) -> str:
        """Consume a token of `kind` and return its text."""
        if not self.at(kind):
            self.fail_expected(describe_token(kind), context)
        text = self.current_text
        self.bump()
        return text

    def expect_string(self, context: str) -> str:
        """Consume a quoted string and return its content without quotes."""
        return self.expect(TokenKind.STRING, context)[1:-1]

    def fail_expected(self, expected: str, context: str) -> NoReturn:
        if self.at(TokenKind.EOF):
            self.fail(
                PARSER_UNEXPECTED_END_OF_INPUT,
                f"Unexpected end of input in {context}, expected {expected}",
            )
        self.fail(
            PARSER_EXPECTED_TOKEN,
            f"Expected {expected} in {context}, found {describe_token(self.current)} {self.current_text!r}",
        )

    def fail(
        self,
        spec: DiagnosticSpec,
        message: str | None = None,
        range: TextRange | None = None,
    ) -> NoReturn:
        raise_error(
            spec,
            self._source.text,
            range if range is not None else self.current_range,
            message,
            path=self._source.path,
        )
