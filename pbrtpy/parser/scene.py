"""High-level parse entrypoints for PBRT scene text."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pbrtpy.ast import AstDocument
from pbrtpy.diagnostics import PbrtParseError
from pbrtpy.lexer import Lexer
from pbrtpy.parser.grammar import ParsedDocument, parse_source_file
from pbrtpy.parser.options import ParseMode, ParserOptions
from pbrtpy.parser.parser import Parser
from pbrtpy.parser.token_source import TokenSource

if TYPE_CHECKING:
    from pbrtpy.pipeline import SceneParseResult

logger = logging.getLogger(__name__)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse_document(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    path: str | None = None,
) -> ParsedDocument:
    """Parse and keep per-directive source ranges alongside the document."""
    resolved_options = resolve_options(options=options, mode=mode)

    lexer = Lexer(text, path=path)
    source = TokenSource(lexer)
    parser = Parser(source, options=resolved_options)

    parsed = parse_source_file(parser)
    logger.debug("Parsed %d directives from %s", len(parsed.document), path or "<text>")
    return parsed


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    path: str | None = None,
) -> AstDocument:
    """Parse scene text into a document, raising `PbrtParseError` on the first failure."""
    return parse_document(text, options, mode=mode, path=path).document


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    path: str | None = None,
) -> SceneParseResult:
    """Parse without raising; failures are reported as diagnostics."""
    from pbrtpy.pipeline import SceneParseResult

    resolved_options = resolve_options(options=options, mode=mode)
    try:
        document = parse(text, resolved_options, path=path)
    except PbrtParseError as error:
        return SceneParseResult(source_text=text, options=resolved_options, document=None, error=error)
    return SceneParseResult(source_text=text, options=resolved_options, document=document)
