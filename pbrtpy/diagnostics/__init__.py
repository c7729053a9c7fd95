"""Diagnostics."""

from pbrtpy.diagnostics.codes import DiagnosticSpec, ErrorKind, Severity
from pbrtpy.diagnostics.diagnostic import Diagnostic, Position
from pbrtpy.diagnostics.errors import (
    ArityError,
    IncludeError,
    LexicalError,
    PbrtParseError,
    SceneSyntaxError,
    ShapeError,
    UnbalancedBlockError,
    UnexpectedEndOfInputError,
    UnknownDirectiveError,
    UnknownParameterTypeError,
    build_error,
    raise_error,
)

__all__ = [
    "ArityError",
    "Diagnostic",
    "DiagnosticSpec",
    "ErrorKind",
    "IncludeError",
    "LexicalError",
    "PbrtParseError",
    "Position",
    "SceneSyntaxError",
    "Severity",
    "ShapeError",
    "UnbalancedBlockError",
    "UnexpectedEndOfInputError",
    "UnknownDirectiveError",
    "UnknownParameterTypeError",
    "build_error",
    "raise_error",
]
