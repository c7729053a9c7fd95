"""Typed parameter lists: `"<type> <name>" <value>`."""

import re
from dataclasses import dataclass
from typing import Final, NoReturn

from pbrtpy.ast import Parameter, ParamType, ParamValues, ValueShape
from pbrtpy.diagnostics.codes import (
    LEXER_MALFORMED_NUMBER,
    PARSER_ARITY_MISMATCH,
    PARSER_EMPTY_LIST,
    PARSER_MALFORMED_PARAMETER_HEADER,
    PARSER_MISSING_VALUE_TERMINATOR,
    PARSER_UNKNOWN_PARAMETER_TYPE,
    PARSER_VALUE_SHAPE_MISMATCH,
)
from pbrtpy.lexer import TokenKind, is_integer
from pbrtpy.parser.parser import Parser, ParserProgress
from pbrtpy.text import TextRange

PARAMETER_TYPES: Final[dict[str, ParamType]] = {
    "float": ParamType.FLOAT,
    "integer": ParamType.INTEGER,
    "bool": ParamType.BOOL,
    "string": ParamType.STRING,
    "point": ParamType.POINT3,
    "point3": ParamType.POINT3,
    "vector": ParamType.VECTOR3,
    "vector3": ParamType.VECTOR3,
    "normal": ParamType.NORMAL3,
    "normal3": ParamType.NORMAL3,
    "point2": ParamType.POINT2,
    "vector2": ParamType.VECTOR2,
    "color": ParamType.COLOR,
    "rgb": ParamType.COLOR,
    "xyz": ParamType.COLOR,
    "spectrum": ParamType.SPECTRUM,
    "blackbody": ParamType.BLACKBODY,
    "texture": ParamType.TEXTURE,
}

_STRICT_HEADER_RE = re.compile(r"(\S+)[ \t](\S+)")
_BOOL_WORDS: Final[dict[str, bool]] = {"true": True, "false": False}
_VALUE_TOKENS: frozenset[TokenKind] = frozenset({TokenKind.NUMBER, TokenKind.STRING, TokenKind.IDENTIFIER})


@dataclass(frozen=True, slots=True)
class ValueToken:
    """One raw element of a parameter value, before conversion."""

    kind: TokenKind
    text: str
    range: TextRange


def parse_parameter_list(parser: Parser) -> tuple[Parameter, ...]:
    """Parse parameters until the next token is not a quoted header.

    Directive keywords are bare identifiers, so a quoted string is always
    the start of another parameter.
    """
    parameters: list[Parameter] = []
    progress = ParserProgress()
    while parser.at(TokenKind.STRING):
        progress.assert_progressing(parser)
        parameters.append(parse_parameter(parser))
    return tuple(parameters)


def parse_parameter(parser: Parser) -> Parameter:
    header_range = parser.current_range
    header = parser.expect_string("parameter declaration")
    type_word, name = _split_header(parser, header, header_range)

    param_type = PARAMETER_TYPES.get(type_word)
    if param_type is None:
        parser.fail(
            PARSER_UNKNOWN_PARAMETER_TYPE,
            f'Unknown parameter type {type_word!r} in "{header}"',
            header_range,
        )

    context = f'parameter "{header}"'
    tokens = _read_value_tokens(parser, param_type, context)
    values = _convert_values(parser, param_type, tokens, context)

    arity = param_type.arity
    if len(values) % arity != 0:
        parser.fail(
            PARSER_ARITY_MISMATCH,
            f"{context} expects a multiple of {arity} values, got {len(values)}",
            tokens[0].range.cover(tokens[-1].range),
        )

    return Parameter(name=name, type=param_type, values=values, declared_type=type_word)


def _split_header(parser: Parser, header: str, header_range: TextRange) -> tuple[str, str]:
    if parser.options.strict_parameter_header:
        match = _STRICT_HEADER_RE.fullmatch(header)
        if match is not None:
            return match.group(1), match.group(2)
    else:
        parts = header.split()
        if len(parts) == 2:
            return parts[0], parts[1]

    parser.fail(
        PARSER_MALFORMED_PARAMETER_HEADER,
        f'Malformed parameter declaration "{header}", expected "<type> <name>"',
        header_range,
    )


def _read_value_tokens(parser: Parser, param_type: ParamType, context: str) -> list[ValueToken]:
    tokens: list[ValueToken] = []

    open_range = parser.current_range
    if parser.eat(TokenKind.LBRACKET):
        while not parser.at(TokenKind.RBRACKET):
            if not parser.at_set(_VALUE_TOKENS):
                parser.fail_expected("a value or `]`", context)
            tokens.append(_bump_value(parser))
        close_range = parser.current_range
        parser.bump()
        if not tokens:
            parser.fail(PARSER_EMPTY_LIST, f"{context} has an empty value list", open_range.cover(close_range))
    elif parser.at(TokenKind.NUMBER) or parser.at(TokenKind.STRING) or _at_bare_bool(parser, param_type):
        tokens.append(_bump_value(parser))
    else:
        parser.fail_expected("a value", context)

    if parser.options.require_value_terminator and not parser.at(TokenKind.EOF) and not parser.has_preceding_trivia:
        parser.fail(PARSER_MISSING_VALUE_TERMINATOR)

    return tokens


def _at_bare_bool(parser: Parser, param_type: ParamType) -> bool:
    return (
        param_type == ParamType.BOOL
        and parser.options.allow_bare_bool
        and parser.at(TokenKind.IDENTIFIER)
        and parser.current_text in _BOOL_WORDS
    )


def _bump_value(parser: Parser) -> ValueToken:
    token = ValueToken(parser.current, parser.current_text, parser.current_range)
    parser.bump()
    return token


def _convert_values(parser: Parser, param_type: ParamType, tokens: list[ValueToken], context: str) -> ParamValues:
    match param_type.shape:
        case ValueShape.NUMBERS:
            return tuple(_as_float(parser, token, context) for token in tokens)
        case ValueShape.INTEGERS:
            return tuple(_as_int(parser, token, context) for token in tokens)
        case ValueShape.BOOLS:
            return tuple(_as_bool(parser, token, context) for token in tokens)
        case ValueShape.STRINGS:
            return tuple(_as_string(parser, token, context) for token in tokens)
        case ValueShape.NUMBERS_OR_NAME:
            if len(tokens) == 1 and tokens[0].kind == TokenKind.STRING:
                return (tokens[0].text[1:-1],)
            return tuple(_as_float(parser, token, context) for token in tokens)


def _as_float(parser: Parser, token: ValueToken, context: str) -> float:
    if token.kind == TokenKind.NUMBER:
        return float(token.text)
    _reject_word_or_mismatch(parser, token, "numbers", context)


def _as_int(parser: Parser, token: ValueToken, context: str) -> int:
    if token.kind == TokenKind.NUMBER:
        if not is_integer(token.text):
            _mismatch(parser, token, "integers", context)
        return int(token.text)
    _reject_word_or_mismatch(parser, token, "integers", context)


def _as_bool(parser: Parser, token: ValueToken, context: str) -> bool:
    if token.kind == TokenKind.STRING:
        value = _BOOL_WORDS.get(token.text[1:-1])
        if value is not None:
            return value
    elif token.kind == TokenKind.IDENTIFIER and parser.options.allow_bare_bool:
        value = _BOOL_WORDS.get(token.text)
        if value is not None:
            return value
    _mismatch(parser, token, '"true" or "false"', context)


def _as_string(parser: Parser, token: ValueToken, context: str) -> str:
    if token.kind != TokenKind.STRING:
        _mismatch(parser, token, "quoted strings", context)
    return token.text[1:-1]


def _reject_word_or_mismatch(parser: Parser, token: ValueToken, expected: str, context: str) -> NoReturn:
    if token.kind == TokenKind.IDENTIFIER:
        parser.fail(LEXER_MALFORMED_NUMBER, f"Malformed numeric literal {token.text!r} in {context}", token.range)
    _mismatch(parser, token, expected, context)


def _mismatch(parser: Parser, token: ValueToken, expected: str, context: str) -> NoReturn:
    parser.fail(
        PARSER_VALUE_SHAPE_MISMATCH,
        f"{context} expects {expected}, found {token.text}",
        token.range,
    )
