import pytest

from pbrtpy.ast import (
    ActiveTime,
    AstActiveTransform,
    AstBareDirective,
    AstDocument,
    AstEntityDirective,
    AstInclude,
    AstMediumInterface,
    AstReferenceDirective,
    AstTexture,
    AstTransformDirective,
    DirectiveKind,
    MediumSide,
    Parameter,
    ParamType,
)
from pbrtpy.diagnostics import (
    ArityError,
    SceneSyntaxError,
    UnbalancedBlockError,
    UnexpectedEndOfInputError,
    UnknownDirectiveError,
)
from pbrtpy.parser import ParseMode, ParserOptions, parse, parse_document
from tests._shared_cases import END_TO_END_SCENE, PARSER_CASES, SceneCase, case_id


def _only(text: str, mode: ParseMode = ParseMode.STRICT):
    document = parse(text, mode=mode)
    assert len(document) == 1
    return document.directives[0]


def test_end_to_end_scene_document() -> None:
    document = parse(END_TO_END_SCENE)

    assert document == AstDocument(
        (
            AstTransformDirective(DirectiveKind.LOOK_AT, (0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 1.0, 0.0)),
            AstEntityDirective(
                DirectiveKind.CAMERA,
                "perspective",
                (Parameter("fov", ParamType.FLOAT, (90.0,), "float"),),
            ),
            AstBareDirective(DirectiveKind.WORLD_BEGIN),
            AstEntityDirective(
                DirectiveKind.SHAPE,
                "sphere",
                (Parameter("radius", ParamType.FLOAT, (1.0,), "float"),),
            ),
            AstBareDirective(DirectiveKind.WORLD_END),
        )
    )


@pytest.mark.parametrize("case", PARSER_CASES, ids=case_id)
def test_parser_cases_strict(case: SceneCase) -> None:
    if case.strict_should_parse_cleanly:
        parse(case.source, mode=ParseMode.STRICT)
    else:
        with pytest.raises(UnbalancedBlockError):
            parse(case.source, mode=ParseMode.STRICT)


@pytest.mark.parametrize("case", PARSER_CASES, ids=case_id)
def test_parser_cases_permissive(case: SceneCase) -> None:
    parse(case.source, mode=ParseMode.PERMISSIVE)


def test_full_scene_directive_order() -> None:
    source = next(case.source for case in PARSER_CASES if case.name == "full_scene")
    document = parse(source)

    assert len(document) == 42
    assert document.directives[0].kind == DirectiveKind.FILM
    assert document.directives[-1].kind == DirectiveKind.WORLD_END
    assert len(document.of_kind(DirectiveKind.ACTIVE_TRANSFORM)) == 2
    assert len(document.of_kind(DirectiveKind.SHAPE)) == 3


def test_empty_and_comment_only_sources_are_empty_documents() -> None:
    assert parse("") == AstDocument(())
    assert parse("# nothing\n\n  # here\n") == AstDocument(())


def test_comments_between_transform_arguments_are_ignored() -> None:
    directive = _only("LookAt 0 1 4 # eye\n 0 1 0 # at\n 0 1 0 # up\n")
    assert directive == AstTransformDirective(
        DirectiveKind.LOOK_AT, (0.0, 1.0, 4.0, 0.0, 1.0, 0.0, 0.0, 1.0, 0.0)
    )


def test_parameter_list_stops_at_next_keyword() -> None:
    document = parse('Shape "sphere" "float radius" 2 Shape "disk"')
    assert document == AstDocument(
        (
            AstEntityDirective(
                DirectiveKind.SHAPE, "sphere", (Parameter("radius", ParamType.FLOAT, (2.0,), "float"),)
            ),
            AstEntityDirective(DirectiveKind.SHAPE, "disk"),
        )
    )


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("WorldBegin", DirectiveKind.WORLD_BEGIN),
        ("ReverseOrientation", DirectiveKind.REVERSE_ORIENTATION),
        ("Identity", DirectiveKind.IDENTITY),
    ],
)
def test_bare_directives(text: str, kind: DirectiveKind) -> None:
    assert _only(text, ParseMode.PERMISSIVE) == AstBareDirective(kind)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('NamedMaterial "floor"', AstReferenceDirective(DirectiveKind.NAMED_MATERIAL, "floor")),
        ('ObjectInstance "tree"', AstReferenceDirective(DirectiveKind.OBJECT_INSTANCE, "tree")),
        ('CoordinateSystem "cam"', AstReferenceDirective(DirectiveKind.COORDINATE_SYSTEM, "cam")),
        ('CoordSysTransform "camera"', AstReferenceDirective(DirectiveKind.COORD_SYS_TRANSFORM, "camera")),
        ('NamedMaterial "with spaces inside"', AstReferenceDirective(DirectiveKind.NAMED_MATERIAL, "with spaces inside")),
    ],
)
def test_reference_directives(text: str, expected: AstReferenceDirective) -> None:
    assert _only(text) == expected


def test_include_path_is_kept_literal() -> None:
    directive = _only('Include "../shared/lights.pbrt"')
    assert directive == AstInclude("../shared/lights.pbrt")
    assert directive.kind == DirectiveKind.INCLUDE


def test_texture_directive() -> None:
    directive = _only('Texture "checks" "spectrum" "checkerboard" "float uscale" [8]')
    assert directive == AstTexture(
        "checks",
        "spectrum",
        "checkerboard",
        (Parameter("uscale", ParamType.FLOAT, (8.0,), "float"),),
    )


@pytest.mark.parametrize(
    ("side", "expected"),
    [("inside", MediumSide.INSIDE), ("outside", MediumSide.OUTSIDE), ("", MediumSide.UNSET)],
)
def test_medium_interface_sides(side: str, expected: MediumSide) -> None:
    assert _only(f'MediumInterface "{side}" "fog"') == AstMediumInterface(expected, "fog")


def test_medium_interface_rejects_unknown_side() -> None:
    with pytest.raises(SceneSyntaxError) as excinfo:
        parse('MediumInterface "above" "fog"')
    assert excinfo.value.code == "PARSER_INVALID_MEDIUM_SIDE"
    assert excinfo.value.position.column == 17


@pytest.mark.parametrize(
    ("word", "expected"),
    [("StartTime", ActiveTime.START_TIME), ("EndTime", ActiveTime.END_TIME), ("All", ActiveTime.ALL)],
)
def test_active_transform(word: str, expected: ActiveTime) -> None:
    assert _only(f"ActiveTransform {word}") == AstActiveTransform(expected)


@pytest.mark.parametrize("text", ["ActiveTransform Middle", 'ActiveTransform "All"'])
def test_active_transform_rejects_other_arguments(text: str) -> None:
    with pytest.raises(SceneSyntaxError):
        parse(text)


@pytest.mark.parametrize(
    ("text", "kind", "values"),
    [
        ("Translate 1 2 3", DirectiveKind.TRANSLATE, (1.0, 2.0, 3.0)),
        ("Scale -1 1 1", DirectiveKind.SCALE, (-1.0, 1.0, 1.0)),
        ("Rotate 90 0 0 1", DirectiveKind.ROTATE, (90.0, 0.0, 0.0, 1.0)),
        ("TransformTimes 0 .5", DirectiveKind.TRANSFORM_TIMES, (0.0, 0.5)),
    ],
)
def test_fixed_transforms(text: str, kind: DirectiveKind, values: tuple[float, ...]) -> None:
    assert _only(text) == AstTransformDirective(kind, values)


def test_transform_values_are_floats() -> None:
    directive = _only("Translate 1 2 3")
    assert isinstance(directive, AstTransformDirective)
    assert all(isinstance(value, float) for value in directive.values)


@pytest.mark.parametrize("keyword", ["Transform", "ConcatTransform"])
def test_matrix_transforms_accept_brackets_or_bare_numbers(keyword: str) -> None:
    numbers = " ".join(str(i) for i in range(16))
    expected = AstTransformDirective(DirectiveKind(keyword), tuple(float(i) for i in range(16)))

    assert _only(f"{keyword} [ {numbers} ]") == expected
    assert _only(f"{keyword} {numbers}") == expected


def test_matrix_with_wrong_count_is_arity_error() -> None:
    with pytest.raises(ArityError) as excinfo:
        parse("Transform [1 0 0 0 0 1 0 0 0 0 1 0]")
    assert "expects 16 numbers, got 12" in excinfo.value.message


def test_transform_with_too_few_numbers_before_keyword_is_arity_error() -> None:
    with pytest.raises(ArityError) as excinfo:
        parse("Translate 1 2\nWorldBegin\nWorldEnd\n")
    assert excinfo.value.position.line == 2


def test_transform_with_too_many_numbers_is_arity_error() -> None:
    with pytest.raises(ArityError):
        parse("Translate 1 2 3 4")


def test_transform_cut_short_by_end_of_input() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        parse("LookAt 0 0 0 0 0 1")


def test_unknown_directive_reports_keyword_and_position() -> None:
    with pytest.raises(UnknownDirectiveError) as excinfo:
        parse("WorldBegin\n  Frobnicate 1 2 3\nWorldEnd\n")

    error = excinfo.value
    assert error.message == 'Unknown directive "Frobnicate"'
    assert (error.position.line, error.position.column) == (2, 3)
    assert error.position.offset == 13


def test_directive_keywords_are_case_sensitive() -> None:
    with pytest.raises(UnknownDirectiveError):
        parse("worldbegin")


@pytest.mark.parametrize("text", ['"sphere"', "5", "[ ]"])
def test_statement_must_start_with_keyword(text: str) -> None:
    with pytest.raises(SceneSyntaxError) as excinfo:
        parse(text)
    assert excinfo.value.code == "PARSER_EXPECTED_TOKEN"


def test_entity_without_class_name() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        parse("Shape")
    with pytest.raises(SceneSyntaxError):
        parse("Shape 5")


def test_parameter_without_value_at_end_of_input() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        parse('Shape "sphere" "float radius"')


def test_parse_document_ranges_cover_each_directive() -> None:
    text = 'WorldBegin\nShape "sphere" "float radius" [1]  # tail\nWorldEnd'
    parsed = parse_document(text)

    spans = [text[r.start.value : r.end.value] for r in parsed.ranges]
    assert spans == ["WorldBegin", 'Shape "sphere" "float radius" [1]', "WorldEnd"]


def test_options_and_mode_are_mutually_exclusive() -> None:
    with pytest.raises(ValueError):
        parse("WorldBegin WorldEnd", ParserOptions(), mode=ParseMode.STRICT)


def test_mode_selects_option_profile() -> None:
    assert ParserOptions.for_mode(ParseMode.STRICT) == ParserOptions()
    permissive = ParserOptions.for_mode(ParseMode.PERMISSIVE)
    assert permissive.mode == ParseMode.PERMISSIVE
    assert permissive.check_block_balance is False
    assert permissive.allow_bare_bool is True
