"""Scene text formatting."""

from pbrtpy.format.formatter import format_directive, format_document, format_parameter
from pbrtpy.format.runner import run_format

__all__ = [
    "format_directive",
    "format_document",
    "format_parameter",
    "run_format",
]
