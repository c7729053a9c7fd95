"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from pbrtpy.diagnostics import Diagnostic
from pbrtpy.pipeline.result import SceneParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: SceneParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
