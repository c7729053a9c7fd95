"""Parser infrastructure (token source + recursive-descent grammar)."""

from pbrtpy.parser.blocks import BLOCK_PAIRS, BlockImbalance, find_block_imbalance
from pbrtpy.parser.grammar import ParsedDocument, parse_directive, parse_source_file
from pbrtpy.parser.options import ParseMode, ParserOptions
from pbrtpy.parser.params import PARAMETER_TYPES, parse_parameter, parse_parameter_list
from pbrtpy.parser.parser import Parser, ParserProgress
from pbrtpy.parser.scene import parse, parse_document, parse_result
from pbrtpy.parser.token_source import TokenSource

__all__ = [
    "BLOCK_PAIRS",
    "PARAMETER_TYPES",
    "BlockImbalance",
    "ParseMode",
    "ParsedDocument",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "TokenSource",
    "find_block_imbalance",
    "parse",
    "parse_directive",
    "parse_document",
    "parse_parameter",
    "parse_parameter_list",
    "parse_result",
    "parse_source_file",
]
