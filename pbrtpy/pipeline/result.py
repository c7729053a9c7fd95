"""Parse carriers for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass

from pbrtpy.ast import AstDocument
from pbrtpy.diagnostics import Diagnostic, PbrtParseError
from pbrtpy.parser.options import ParserOptions


@dataclass(frozen=True, slots=True)
class SceneParseResult:
    """Outcome of one parse: either a document or the error that stopped it."""

    source_text: str
    options: ParserOptions
    document: AstDocument | None
    error: PbrtParseError | None = None

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self.error is None:
            return []
        return [self.error.diagnostic]

    @property
    def has_errors(self) -> bool:
        return self.error is not None

    def unwrap(self) -> AstDocument:
        """Return the document or re-raise the parse error."""
        if self.error is not None:
            raise self.error
        assert self.document is not None
        return self.document
