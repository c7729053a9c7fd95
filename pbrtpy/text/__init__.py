"""Text offsets and ranges."""

from pbrtpy.text.text import (
    LineColumn,
    LineIndex,
    TextRange,
    TextSize,
    slice_text_range,
)

__all__ = [
    "LineColumn",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
