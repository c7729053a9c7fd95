import pytest

from pbrtpy.ast import AstMediumInterface, MediumSide, Parameter, ParamType
from pbrtpy.format import format_directive, format_document, format_parameter, run_format
from pbrtpy.parser import ParseMode, ParserOptions, parse, parse_result
from pbrtpy.pipeline import run_format as pipeline_run_format
from tests._shared_cases import CLEAN_STRICT_CASES, END_TO_END_SCENE, SceneCase, case_id


@pytest.mark.parametrize("case", CLEAN_STRICT_CASES, ids=case_id)
def test_formatted_text_parses_to_same_document(case: SceneCase) -> None:
    document = parse(case.source)
    formatted = format_document(document)

    assert parse(formatted) == document
    assert format_document(parse(formatted)) == formatted


def test_format_end_to_end_scene() -> None:
    assert format_document(parse(END_TO_END_SCENE)) == (
        "LookAt 0.0 0.0 0.0 0.0 0.0 1.0 0.0 1.0 0.0\n"
        'Camera "perspective"\n'
        '    "float fov" [90.0]\n'
        "WorldBegin\n"
        '  Shape "sphere"\n'
        '      "float radius" [1.0]\n'
        "WorldEnd\n"
    )


def test_format_keeps_declared_type_word() -> None:
    parameter = Parameter("L", ParamType.COLOR, (1.0, 0.5, 0.25), "rgb")
    assert format_parameter(parameter) == ['"rgb L" [1.0 0.5 0.25]']


@pytest.mark.parametrize(
    ("parameter", "expected"),
    [
        (Parameter("alpha", ParamType.BOOL, (False, True), "bool"), '"bool alpha" ["false" "true"]'),
        (Parameter("n", ParamType.INTEGER, (1, -2), "integer"), '"integer n" [1 -2]'),
        (Parameter("eta", ParamType.SPECTRUM, ("metal-Cu-eta",), "spectrum"), '"spectrum eta" ["metal-Cu-eta"]'),
        (Parameter("tex", ParamType.TEXTURE, ("checks",), "texture"), '"texture tex" ["checks"]'),
    ],
)
def test_format_scalar_kinds(parameter: Parameter, expected: str) -> None:
    assert format_parameter(parameter) == [expected]


def test_long_value_lists_wrap() -> None:
    values = tuple(float(i) + 0.125 for i in range(60))
    parameter = Parameter("P", ParamType.POINT3, values, "point3")
    lines = format_parameter(parameter)

    assert len(lines) > 1
    assert all(len(line) <= 80 for line in lines[:-1])

    document = parse(f'Shape "trianglemesh" {" ".join(lines)}')
    assert document.directives[0].parameters == (parameter,)


def test_format_medium_interface_with_unset_side() -> None:
    assert format_directive(AstMediumInterface(MediumSide.UNSET, "fog")) == ['MediumInterface "" "fog"']


def test_format_nested_block_indentation() -> None:
    text = "WorldBegin AttributeBegin TransformBegin Identity TransformEnd AttributeEnd WorldEnd"
    assert format_document(parse(text)).splitlines() == [
        "WorldBegin",
        "  AttributeBegin",
        "    TransformBegin",
        "      Identity",
        "    TransformEnd",
        "  AttributeEnd",
        "WorldEnd",
    ]


def test_format_unbalanced_permissive_document_does_not_go_negative() -> None:
    document = parse("AttributeEnd\nShape \"sphere\"\n", mode=ParseMode.PERMISSIVE)
    assert format_document(document) == 'AttributeEnd\nShape "sphere"\n'


def test_run_format_reports_change() -> None:
    result = run_format('Shape "sphere"   "float radius" [ 1 ]')

    assert result.changed is True
    assert result.formatted_text == 'Shape "sphere"\n    "float radius" [1.0]\n'
    assert result.diagnostics == []


def test_run_format_is_noop_on_formatted_text() -> None:
    formatted = format_document(parse(END_TO_END_SCENE))
    assert run_format(formatted).changed is False


def test_run_format_returns_source_on_parse_failure() -> None:
    source = "Frobnicate\n"
    result = run_format(source)

    assert result.formatted_text == source
    assert result.changed is False
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["PARSER_UNKNOWN_DIRECTIVE"]


def test_run_format_reuses_parse_result() -> None:
    parsed = parse_result("WorldBegin WorldEnd")
    result = pipeline_run_format("ignored", parse=parsed)

    assert result.parse is parsed
    assert result.formatted_text == "WorldBegin\nWorldEnd\n"


def test_run_format_rejects_parse_with_options() -> None:
    parsed = parse_result("WorldBegin WorldEnd")
    with pytest.raises(ValueError):
        run_format("WorldBegin WorldEnd", ParserOptions(), parse=parsed)


@pytest.mark.parametrize(
    "source",
    ["Translate 1e999 0 0", 'Shape "sphere" "float radius" [1e999]', 'Shape "sphere" "float radius" -1E400'],
)
def test_overflowing_literals_are_rejected_before_formatting(source: str) -> None:
    result = run_format(source)
    assert result.formatted_text == source
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["LEXER_MALFORMED_NUMBER"]


@pytest.mark.parametrize(
    "source",
    ["Translate 1.7976931348623157e308 -5e-324 0", 'Shape "sphere" "float radius" [1e300 2.5e-300]'],
)
def test_extreme_finite_values_round_trip(source: str) -> None:
    document = parse(source)
    assert parse(format_document(document)) == document
