"""PBRT scene grammar: directives and the document loop."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final

from pbrtpy.ast import (
    ActiveTime,
    AstActiveTransform,
    AstBareDirective,
    AstDirective,
    AstDocument,
    AstEntityDirective,
    AstInclude,
    AstMediumInterface,
    AstReferenceDirective,
    AstTexture,
    AstTransformDirective,
    DirectiveKind,
    MediumSide,
)
from pbrtpy.diagnostics.codes import (
    PARSER_ARITY_MISMATCH,
    PARSER_EXPECTED_TOKEN,
    PARSER_INVALID_ACTIVE_TRANSFORM,
    PARSER_INVALID_MEDIUM_SIDE,
    PARSER_UNKNOWN_DIRECTIVE,
)
from pbrtpy.lexer import TokenKind
from pbrtpy.parser.blocks import find_block_imbalance
from pbrtpy.parser.params import parse_parameter_list
from pbrtpy.parser.parser import Parser, ParserProgress, describe_token
from pbrtpy.text import TextRange

BARE_DIRECTIVES: Final[frozenset[DirectiveKind]] = frozenset(
    {
        DirectiveKind.WORLD_BEGIN,
        DirectiveKind.WORLD_END,
        DirectiveKind.ATTRIBUTE_BEGIN,
        DirectiveKind.ATTRIBUTE_END,
        DirectiveKind.TRANSFORM_BEGIN,
        DirectiveKind.TRANSFORM_END,
        DirectiveKind.OBJECT_END,
        DirectiveKind.REVERSE_ORIENTATION,
        DirectiveKind.IDENTITY,
    }
)

REFERENCE_DIRECTIVES: Final[frozenset[DirectiveKind]] = frozenset(
    {
        DirectiveKind.OBJECT_BEGIN,
        DirectiveKind.NAMED_MATERIAL,
        DirectiveKind.OBJECT_INSTANCE,
        DirectiveKind.COORDINATE_SYSTEM,
        DirectiveKind.COORD_SYS_TRANSFORM,
    }
)

ENTITY_DIRECTIVES: Final[frozenset[DirectiveKind]] = frozenset(
    {
        DirectiveKind.ACCELERATOR,
        DirectiveKind.CAMERA,
        DirectiveKind.FILM,
        DirectiveKind.FILTER,
        DirectiveKind.PIXEL_FILTER,
        DirectiveKind.INTEGRATOR,
        DirectiveKind.MAKE_NAMED_MEDIUM,
        DirectiveKind.SAMPLER,
        DirectiveKind.AREA_LIGHT_SOURCE,
        DirectiveKind.LIGHT_SOURCE,
        DirectiveKind.MAKE_NAMED_MATERIAL,
        DirectiveKind.MATERIAL,
        DirectiveKind.SHAPE,
    }
)

# Transform directives that take a fixed run of bare numbers.
TRANSFORM_ARITY: Final[dict[DirectiveKind, int]] = {
    DirectiveKind.TRANSLATE: 3,
    DirectiveKind.SCALE: 3,
    DirectiveKind.ROTATE: 4,
    DirectiveKind.LOOK_AT: 9,
    DirectiveKind.TRANSFORM_TIMES: 2,
}

MATRIX_DIRECTIVES: Final[frozenset[DirectiveKind]] = frozenset(
    {DirectiveKind.TRANSFORM, DirectiveKind.CONCAT_TRANSFORM}
)
MATRIX_SIZE: Final[int] = 16

_KEYWORDS: Final[dict[str, DirectiveKind]] = {kind.value: kind for kind in DirectiveKind}
_MEDIUM_SIDES: Final[frozenset[str]] = frozenset(side.value for side in MediumSide)
_ACTIVE_TIMES: Final[frozenset[str]] = frozenset(time.value for time in ActiveTime)


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Document plus the source range of each directive.

    Ranges are kept beside the document, not on the nodes, for callers
    that report problems spanning several directives (block balance,
    include splicing).
    """

    document: AstDocument
    ranges: tuple[TextRange, ...]


def parse_source_file(parser: Parser) -> ParsedDocument:
    directives: list[AstDirective] = []
    ranges: list[TextRange] = []
    progress = ParserProgress()

    while not parser.at(TokenKind.EOF):
        progress.assert_progressing(parser)
        start = parser.current_range
        directives.append(parse_directive(parser))
        ranges.append(TextRange.new(start.start, parser.previous_end))

    if parser.options.check_block_balance:
        imbalance = find_block_imbalance([directive.kind for directive in directives])
        if imbalance is not None:
            parser.fail(imbalance.spec, imbalance.message, ranges[imbalance.index])

    return ParsedDocument(document=AstDocument(tuple(directives)), ranges=tuple(ranges))


def parse_directive(parser: Parser) -> AstDirective:
    if not parser.at(TokenKind.IDENTIFIER):
        parser.fail(
            PARSER_EXPECTED_TOKEN,
            f"Expected a directive keyword, found {describe_token(parser.current)} {parser.current_text!r}",
        )

    keyword = parser.current_text
    kind = _KEYWORDS.get(keyword)
    if kind is None:
        parser.fail(PARSER_UNKNOWN_DIRECTIVE, f'Unknown directive "{keyword}"')
    parser.bump()

    return _directive_parser(kind)(parser, kind)


def _directive_parser(kind: DirectiveKind) -> Callable[[Parser, DirectiveKind], AstDirective]:
    if kind in BARE_DIRECTIVES:
        return _parse_bare
    if kind in REFERENCE_DIRECTIVES:
        return _parse_reference
    if kind in ENTITY_DIRECTIVES:
        return _parse_entity
    if kind in TRANSFORM_ARITY:
        return _parse_fixed_transform
    if kind in MATRIX_DIRECTIVES:
        return _parse_matrix
    return _SPECIAL_DIRECTIVES[kind]


def _parse_bare(parser: Parser, kind: DirectiveKind) -> AstDirective:
    return AstBareDirective(kind)


def _parse_reference(parser: Parser, kind: DirectiveKind) -> AstDirective:
    return AstReferenceDirective(kind, parser.expect_string(kind.value))


def _parse_include(parser: Parser, kind: DirectiveKind) -> AstDirective:
    return AstInclude(parser.expect_string(kind.value))


def _parse_entity(parser: Parser, kind: DirectiveKind) -> AstDirective:
    class_name = parser.expect_string(kind.value)
    return AstEntityDirective(kind, class_name, parse_parameter_list(parser))


def _parse_texture(parser: Parser, kind: DirectiveKind) -> AstDirective:
    name = parser.expect_string("Texture name")
    value_type = parser.expect_string("Texture type")
    class_name = parser.expect_string("Texture class")
    return AstTexture(name, value_type, class_name, parse_parameter_list(parser))


def _parse_medium_interface(parser: Parser, kind: DirectiveKind) -> AstDirective:
    side_range = parser.current_range
    side = parser.expect_string(kind.value)
    if side not in _MEDIUM_SIDES:
        parser.fail(PARSER_INVALID_MEDIUM_SIDE, f'Invalid medium side "{side}"', side_range)
    medium = parser.expect_string(kind.value)
    return AstMediumInterface(MediumSide(side), medium)


def _parse_active_transform(parser: Parser, kind: DirectiveKind) -> AstDirective:
    word_range = parser.current_range
    word = parser.expect(TokenKind.IDENTIFIER, kind.value)
    if word not in _ACTIVE_TIMES:
        parser.fail(PARSER_INVALID_ACTIVE_TRANSFORM, f"Invalid ActiveTransform {word!r}", word_range)
    return AstActiveTransform(ActiveTime(word))


def _parse_fixed_transform(parser: Parser, kind: DirectiveKind) -> AstDirective:
    return _parse_number_run(parser, kind, TRANSFORM_ARITY[kind])


def _parse_matrix(parser: Parser, kind: DirectiveKind) -> AstDirective:
    if not parser.at(TokenKind.LBRACKET):
        return _parse_number_run(parser, kind, MATRIX_SIZE)

    open_range = parser.current_range
    parser.bump()
    values: list[float] = []
    while not parser.at(TokenKind.RBRACKET):
        if not parser.at(TokenKind.NUMBER):
            parser.fail_expected("a number or `]`", kind.value)
        values.append(float(parser.current_text))
        parser.bump()
    close_range = parser.current_range
    parser.bump()

    if len(values) != MATRIX_SIZE:
        parser.fail(
            PARSER_ARITY_MISMATCH,
            f"{kind.value} expects {MATRIX_SIZE} numbers, got {len(values)}",
            open_range.cover(close_range),
        )
    return AstTransformDirective(kind, tuple(values))


def _parse_number_run(parser: Parser, kind: DirectiveKind, count: int) -> AstDirective:
    """Read exactly `count` bare numbers; comments between them are trivia."""
    values: list[float] = []
    for _ in range(count):
        if parser.at(TokenKind.EOF):
            parser.fail_expected("a number", kind.value)
        if not parser.at(TokenKind.NUMBER):
            parser.fail(
                PARSER_ARITY_MISMATCH,
                f"{kind.value} expects {count} numbers, got {len(values)}",
            )
        values.append(float(parser.current_text))
        parser.bump()
    if parser.at(TokenKind.NUMBER):
        parser.fail(PARSER_ARITY_MISMATCH, f"{kind.value} expects {count} numbers, found more")
    return AstTransformDirective(kind, tuple(values))


_SPECIAL_DIRECTIVES: Final[dict[DirectiveKind, Callable[[Parser, DirectiveKind], AstDirective]]] = {
    DirectiveKind.INCLUDE: _parse_include,
    DirectiveKind.TEXTURE: _parse_texture,
    DirectiveKind.MEDIUM_INTERFACE: _parse_medium_interface,
    DirectiveKind.ACTIVE_TRANSFORM: _parse_active_transform,
}
