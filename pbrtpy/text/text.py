from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        """Create a TextSize from an integer."""
        return TextSize(value)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) in text, represented by TextSize offsets.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def new(start: TextSize, end: TextSize) -> "TextRange":
        """Create a TextRange from start and end TextSizes."""
        return TextRange(start.value, end.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        """Create an empty TextRange at the given offset."""
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        """Get the start offset as a TextSize."""
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        """Get the end offset as a TextSize."""
        return TextSize(self._end)

    def as_tuple(self) -> tuple[int, int]:
        """Get the range as a tuple of (start, end) integers."""
        return (self._start, self._end)

    def cover(self, other: "TextRange") -> "TextRange":
        """Get the minimal range that covers both this range and another range."""
        start = min(self._start, other._start)
        end = max(self._end, other._end)
        return TextRange(start, end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Get the substring of the source text covered by the given TextRange.

    Coord system matches python string indices so we can just do this.
    """
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True)
class LineColumn:
    """1-based line/column pair plus the UTF-8 byte offset of the same point."""

    line: int
    column: int
    byte_offset: int


class LineIndex:
    """Maps character offsets to line/column.

    Lines break on `\\n`, `\\r\\n` and lone `\\r`. Columns count characters.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        starts = [0]
        index = 0
        length = len(source)
        while index < length:
            ch = source[index]
            if ch == "\r":
                if index + 1 < length and source[index + 1] == "\n":
                    index += 1
                starts.append(index + 1)
            elif ch == "\n":
                starts.append(index + 1)
            index += 1
        self._line_starts = starts

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_column(self, offset: TextSize) -> LineColumn:
        value = min(offset.value, len(self._source))
        line = bisect_right(self._line_starts, value) - 1
        column = value - self._line_starts[line]
        byte_offset = len(self._source[:value].encode("utf-8"))
        return LineColumn(line=line + 1, column=column + 1, byte_offset=byte_offset)
