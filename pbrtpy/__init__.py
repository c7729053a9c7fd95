"""PBRT scene file parser."""

from pbrtpy.ast import AstDocument, DirectiveKind, Parameter, ParamSetView, ParamType
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
)
from pbrtpy.format import format_document
from pbrtpy.lexer import parse_number
from pbrtpy.loader import load_scene
from pbrtpy.parser import ParseMode, ParserOptions, parse, parse_result

__version__ = "0.1.0"

__all__ = [
    "ArityError",
    "AstDocument",
    "DirectiveKind",
    "IncludeError",
    "LexicalError",
    "ParamSetView",
    "ParamType",
    "Parameter",
    "ParseMode",
    "ParserOptions",
    "PbrtParseError",
    "SceneSyntaxError",
    "ShapeError",
    "UnbalancedBlockError",
    "UnexpectedEndOfInputError",
    "UnknownDirectiveError",
    "UnknownParameterTypeError",
    "format_document",
    "load_scene",
    "parse",
    "parse_number",
    "parse_result",
]
