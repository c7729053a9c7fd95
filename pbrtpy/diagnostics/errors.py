"""Exceptions raised when a scene file cannot be parsed."""

from __future__ import annotations

from typing import ClassVar, NoReturn

from pbrtpy.diagnostics.codes import DiagnosticSpec, ErrorKind
from pbrtpy.diagnostics.diagnostic import Diagnostic, Position
from pbrtpy.text import TextRange


class PbrtParseError(Exception):
    """Base class for every fatal parse failure.

    Carries the diagnostic that describes the failure and its resolved
    position in the source text.
    """

    kind: ClassVar[ErrorKind]

    def __init__(self, diagnostic: Diagnostic, position: Position) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
        self.position = position

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def format(self) -> str:
        return f"{self.position.describe()}: {self.diagnostic.code} {self.diagnostic.message}"

    def __str__(self) -> str:
        return self.format()


class LexicalError(PbrtParseError):
    kind = ErrorKind.LEXICAL


class SceneSyntaxError(PbrtParseError):
    kind = ErrorKind.SYNTAX


class UnknownDirectiveError(PbrtParseError):
    kind = ErrorKind.UNKNOWN_DIRECTIVE


class UnknownParameterTypeError(PbrtParseError):
    kind = ErrorKind.UNKNOWN_PARAMETER_TYPE


class ArityError(PbrtParseError):
    kind = ErrorKind.ARITY


class ShapeError(PbrtParseError):
    kind = ErrorKind.SHAPE


class UnbalancedBlockError(PbrtParseError):
    kind = ErrorKind.UNBALANCED_BLOCK


class UnexpectedEndOfInputError(PbrtParseError):
    kind = ErrorKind.UNEXPECTED_END_OF_INPUT


class IncludeError(PbrtParseError):
    """An `Include`d file could not be read, parsed or formed a cycle.

    The position names the `Include` directive in the parent file; the
    nested failure, if any, is chained as `__cause__`.
    """

    kind = ErrorKind.INCLUDE


_ERROR_TYPES: dict[ErrorKind, type[PbrtParseError]] = {
    error_type.kind: error_type
    for error_type in (
        LexicalError,
        SceneSyntaxError,
        UnknownDirectiveError,
        UnknownParameterTypeError,
        ArityError,
        ShapeError,
        UnbalancedBlockError,
        UnexpectedEndOfInputError,
        IncludeError,
    )
}


def build_error(
    spec: DiagnosticSpec,
    source: str,
    range: TextRange,
    message: str | None = None,
    *,
    path: str | None = None,
) -> PbrtParseError:
    diagnostic = Diagnostic.from_spec(spec, range, message)
    position = Position.resolve(source, range, path)
    return _ERROR_TYPES[spec.kind](diagnostic, position)


def raise_error(
    spec: DiagnosticSpec,
    source: str,
    range: TextRange,
    message: str | None = None,
    *,
    path: str | None = None,
) -> NoReturn:
    raise build_error(spec, source, range, message, path=path)
