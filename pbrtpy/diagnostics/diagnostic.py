"""Diagnostics core types."""

from dataclasses import dataclass

from pbrtpy.diagnostics.codes import DiagnosticSpec, Severity
from pbrtpy.text import LineIndex, TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser and loader."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )


@dataclass(frozen=True, slots=True)
class Position:
    """Resolved location of a diagnostic in its source text."""

    offset: int
    byte_offset: int
    line: int
    column: int
    path: str | None = None

    @staticmethod
    def resolve(source: str, range: TextRange, path: str | None = None) -> "Position":
        line_column = LineIndex(source).line_column(range.start)
        return Position(
            offset=range.start.value,
            byte_offset=line_column.byte_offset,
            line=line_column.line,
            column=line_column.column,
            path=path,
        )

    def describe(self) -> str:
        location = f"{self.line}:{self.column}"
        if self.path:
            return f"{self.path}:{location}"
        return location
