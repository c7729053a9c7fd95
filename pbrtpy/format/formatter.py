"""Render documents back to PBRT scene text."""

from __future__ import annotations

from pbrtpy.ast import (
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
    Parameter,
    ParamScalar,
)
from pbrtpy.parser.blocks import BLOCK_PAIRS

INDENT = "  "
LINE_WIDTH = 80

_BLOCK_ENDS = frozenset(BLOCK_PAIRS.values())


def format_document(document: AstDocument) -> str:
    """Format a document with one directive per line, indented by block depth.

    Parsing the output yields a document equal to the input.
    """
    lines: list[str] = []
    depth = 0
    for directive in document:
        if directive.kind in _BLOCK_ENDS:
            depth = max(depth - 1, 0)
        lines.extend(INDENT * depth + line for line in format_directive(directive))
        if directive.kind in BLOCK_PAIRS:
            depth += 1
    return "".join(f"{line}\n" for line in lines)


def format_directive(directive: AstDirective) -> list[str]:
    match directive:
        case AstBareDirective(kind=kind):
            return [kind.value]
        case AstReferenceDirective(kind=kind, name=name):
            return [f"{kind.value} {_quote(name)}"]
        case AstInclude(path=path):
            return [f"{DirectiveKind.INCLUDE.value} {_quote(path)}"]
        case AstEntityDirective(kind=kind, class_name=class_name, parameters=parameters):
            return _with_parameters(f"{kind.value} {_quote(class_name)}", parameters)
        case AstTexture(name=name, value_type=value_type, class_name=class_name, parameters=parameters):
            head = f"{DirectiveKind.TEXTURE.value} {_quote(name)} {_quote(value_type)} {_quote(class_name)}"
            return _with_parameters(head, parameters)
        case AstMediumInterface(side=side, medium=medium):
            return [f"{DirectiveKind.MEDIUM_INTERFACE.value} {_quote(side.value)} {_quote(medium)}"]
        case AstActiveTransform(time=time):
            return [f"{DirectiveKind.ACTIVE_TRANSFORM.value} {time.value}"]
        case AstTransformDirective(kind=kind, values=values):
            numbers = " ".join(_format_scalar(value) for value in values)
            if kind in (DirectiveKind.TRANSFORM, DirectiveKind.CONCAT_TRANSFORM):
                return [f"{kind.value} [{numbers}]"]
            return [f"{kind.value} {numbers}"]
    raise TypeError(f"Unsupported directive {directive!r}")


def format_parameter(parameter: Parameter) -> list[str]:
    """Format one parameter, wrapping its value list past `LINE_WIDTH` characters."""
    header = f'"{parameter.declared_type} {parameter.name}"'
    rendered = [_format_scalar(value) for value in parameter.values]

    lines: list[str] = []
    current = f"{header} ["
    for index, text in enumerate(rendered):
        separator = "" if index == 0 else " "
        if index > 0 and len(current) + len(separator) + len(text) > LINE_WIDTH:
            lines.append(current)
            current = INDENT + text
            continue
        current += separator + text
    lines.append(current + "]")
    return lines


def _with_parameters(head: str, parameters: tuple[Parameter, ...]) -> list[str]:
    lines = [head]
    for parameter in parameters:
        lines.extend(INDENT * 2 + line for line in format_parameter(parameter))
    return lines


def _format_scalar(value: ParamScalar) -> str:
    if isinstance(value, bool):
        return '"true"' if value else '"false"'
    if isinstance(value, str):
        return _quote(value)
    return repr(value)


def _quote(text: str) -> str:
    return f'"{text}"'
