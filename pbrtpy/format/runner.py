"""Format runner over a shared scene parse result."""

from __future__ import annotations

from pbrtpy.format.formatter import format_document
from pbrtpy.parser import ParseMode, ParserOptions, parse_result
from pbrtpy.pipeline.result import SceneParseResult
from pbrtpy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: SceneParseResult | None = None,
) -> FormatRunResult:
    """Run formatting from a single parse lifecycle.

    Text that does not parse is returned unchanged with its diagnostic.
    """
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)

    if resolved_parse.document is None:
        formatted_text = resolved_parse.source_text
    else:
        formatted_text = format_document(resolved_parse.document)

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=resolved_parse.diagnostics,
        changed=formatted_text != resolved_parse.source_text,
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: SceneParseResult | None,
) -> SceneParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)
