import pytest

from pbrtpy.diagnostics import (
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
)
from pbrtpy.diagnostics.codes import (
    LEXER_MALFORMED_NUMBER,
    LOADER_INCLUDE_CYCLE,
    PARSER_ARITY_MISMATCH,
    PARSER_EMPTY_LIST,
    PARSER_EXPECTED_TOKEN,
    PARSER_UNCLOSED_BLOCK,
    PARSER_UNEXPECTED_END_OF_INPUT,
    PARSER_UNKNOWN_DIRECTIVE,
    PARSER_UNKNOWN_PARAMETER_TYPE,
    DiagnosticSpec,
    ErrorKind,
)
from pbrtpy.parser import ParseMode, parse, parse_result
from pbrtpy.text import TextRange


@pytest.mark.parametrize(
    ("spec", "error_type"),
    [
        (LEXER_MALFORMED_NUMBER, LexicalError),
        (PARSER_EXPECTED_TOKEN, SceneSyntaxError),
        (PARSER_UNKNOWN_DIRECTIVE, UnknownDirectiveError),
        (PARSER_UNKNOWN_PARAMETER_TYPE, UnknownParameterTypeError),
        (PARSER_ARITY_MISMATCH, ArityError),
        (PARSER_EMPTY_LIST, ShapeError),
        (PARSER_UNCLOSED_BLOCK, UnbalancedBlockError),
        (PARSER_UNEXPECTED_END_OF_INPUT, UnexpectedEndOfInputError),
        (LOADER_INCLUDE_CYCLE, IncludeError),
    ],
)
def test_build_error_picks_class_by_kind(spec: DiagnosticSpec, error_type: type[PbrtParseError]) -> None:
    error = build_error(spec, "abc", TextRange(1, 2))

    assert type(error) is error_type
    assert isinstance(error, PbrtParseError)
    assert error.kind == spec.kind
    assert error.code == spec.code
    assert error.message == spec.message


def test_every_error_kind_has_a_class() -> None:
    kinds = {
        error_type.kind
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
    assert kinds == set(ErrorKind)


def test_position_counts_lines_and_characters() -> None:
    with pytest.raises(UnknownDirectiveError) as excinfo:
        parse("# café\nWorldBegin\n    Frobnicate\n")

    position = excinfo.value.position
    assert (position.line, position.column) == (3, 5)
    assert position.offset == 22
    assert position.byte_offset == 23


@pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
def test_position_line_breaks(newline: str) -> None:
    with pytest.raises(UnknownDirectiveError) as excinfo:
        parse(f"WorldBegin{newline}Frobnicate", mode=ParseMode.PERMISSIVE)
    assert (excinfo.value.position.line, excinfo.value.position.column) == (2, 1)


def test_error_format_with_path() -> None:
    with pytest.raises(PbrtParseError) as excinfo:
        parse("WorldBegin\nFrobnicate\n", path="scenes/room.pbrt")

    expected = 'scenes/room.pbrt:2:1: PARSER_UNKNOWN_DIRECTIVE Unknown directive "Frobnicate"'
    assert excinfo.value.format() == expected
    assert str(excinfo.value) == expected
    assert excinfo.value.position.path == "scenes/room.pbrt"


def test_error_format_without_path() -> None:
    with pytest.raises(PbrtParseError) as excinfo:
        parse("Frobnicate")
    assert excinfo.value.format() == '1:1: PARSER_UNKNOWN_DIRECTIVE Unknown directive "Frobnicate"'


def test_diagnostic_carries_range() -> None:
    with pytest.raises(PbrtParseError) as excinfo:
        parse("Shape Frobnicate")
    diagnostic = excinfo.value.diagnostic
    assert diagnostic.range == TextRange(6, 16)
    assert diagnostic.severity == "error"


def test_parse_result_success() -> None:
    result = parse_result("WorldBegin\nWorldEnd\n")

    assert result.has_errors is False
    assert result.diagnostics == []
    assert result.error is None
    assert result.unwrap() is result.document
    assert len(result.unwrap()) == 2


def test_parse_result_failure_does_not_raise() -> None:
    result = parse_result('Shape "sphere" "point3 P" [1 2]')

    assert result.has_errors is True
    assert result.document is None
    assert isinstance(result.error, ArityError)
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["PARSER_ARITY_MISMATCH"]
    with pytest.raises(ArityError):
        result.unwrap()


def test_parse_result_keeps_resolved_options() -> None:
    result = parse_result("AttributeBegin\n", mode=ParseMode.PERMISSIVE)
    assert result.options.mode == ParseMode.PERMISSIVE
    assert result.has_errors is False
