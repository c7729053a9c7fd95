"""Diagnostic codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Literal

Severity = Literal["error", "warning"]


class ErrorKind(StrEnum):
    """Failure classes a parse can end with."""

    LEXICAL = "lexical"
    SYNTAX = "syntax"
    UNKNOWN_DIRECTIVE = "unknown_directive"
    UNKNOWN_PARAMETER_TYPE = "unknown_parameter_type"
    ARITY = "arity"
    SHAPE = "shape"
    UNBALANCED_BLOCK = "unbalanced_block"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    INCLUDE = "include"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    kind: ErrorKind
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_MALFORMED_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_MALFORMED_NUMBER",
    message="Malformed numeric literal.",
    kind=ErrorKind.LEXICAL,
    hint="Numbers look like `5`, `-5.`, `.5` or `5.5e+2`.",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    kind=ErrorKind.LEXICAL,
    hint="Close the string with a double quote.",
    category="lexer",
)

LEXER_INVALID_IDENTIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_IDENTIFIER",
    message="Invalid identifier.",
    kind=ErrorKind.LEXICAL,
    hint="Identifiers start with a letter followed by letters, digits, `_`, `.` or `-`.",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    kind=ErrorKind.LEXICAL,
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    kind=ErrorKind.SYNTAX,
    category="parser",
)

PARSER_MISSING_VALUE_TERMINATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_VALUE_TERMINATOR",
    message="Expected whitespace, a comment or end of input after a parameter value",
    kind=ErrorKind.SYNTAX,
    category="parser",
)

PARSER_MALFORMED_PARAMETER_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MALFORMED_PARAMETER_HEADER",
    message='Malformed parameter declaration, expected `"<type> <name>"`',
    kind=ErrorKind.SYNTAX,
    hint='Declare parameters like `"float fov"`.',
    category="parser",
)

PARSER_INVALID_MEDIUM_SIDE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_MEDIUM_SIDE",
    message='Medium side must be "inside", "outside" or ""',
    kind=ErrorKind.SYNTAX,
    category="parser",
)

PARSER_INVALID_ACTIVE_TRANSFORM: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_ACTIVE_TRANSFORM",
    message="ActiveTransform expects StartTime, EndTime or All",
    kind=ErrorKind.SYNTAX,
    category="parser",
)

PARSER_UNKNOWN_DIRECTIVE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNKNOWN_DIRECTIVE",
    message="Unknown directive",
    kind=ErrorKind.UNKNOWN_DIRECTIVE,
    category="parser",
)

PARSER_UNKNOWN_PARAMETER_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNKNOWN_PARAMETER_TYPE",
    message="Unknown parameter type",
    kind=ErrorKind.UNKNOWN_PARAMETER_TYPE,
    category="parser",
)

PARSER_ARITY_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ARITY_MISMATCH",
    message="Wrong number of values",
    kind=ErrorKind.ARITY,
    category="parser",
)

PARSER_VALUE_SHAPE_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_VALUE_SHAPE_MISMATCH",
    message="Value does not match the declared parameter type",
    kind=ErrorKind.SHAPE,
    category="parser",
)

PARSER_EMPTY_LIST: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EMPTY_LIST",
    message="Expected at least one value between `[` and `]`",
    kind=ErrorKind.SHAPE,
    category="parser",
)

PARSER_UNEXPECTED_END_OF_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_END_OF_INPUT",
    message="Unexpected end of input",
    kind=ErrorKind.UNEXPECTED_END_OF_INPUT,
    category="parser",
)

PARSER_UNMATCHED_BLOCK_END: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNMATCHED_BLOCK_END",
    message="Block end does not match an open block",
    kind=ErrorKind.UNBALANCED_BLOCK,
    category="parser",
)

PARSER_UNCLOSED_BLOCK: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_BLOCK",
    message="Block is never closed",
    kind=ErrorKind.UNBALANCED_BLOCK,
    category="parser",
)

LOADER_INCLUDE_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOADER_INCLUDE_FAILED",
    message="Included file could not be loaded",
    kind=ErrorKind.INCLUDE,
    category="loader",
)

LOADER_INCLUDE_CYCLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LOADER_INCLUDE_CYCLE",
    message="Include cycle detected",
    kind=ErrorKind.INCLUDE,
    category="loader",
)
