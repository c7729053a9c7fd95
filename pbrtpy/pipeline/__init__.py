"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from pbrtpy.parser.options import ParseMode, ParserOptions
from pbrtpy.pipeline.result import SceneParseResult
from pbrtpy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: SceneParseResult | None = None,
) -> FormatRunResult:
    from pbrtpy.format.runner import run_format as _run_format

    return _run_format(text, options=options, mode=mode, parse=parse)


__all__ = [
    "FormatRunResult",
    "SceneParseResult",
    "run_format",
]
