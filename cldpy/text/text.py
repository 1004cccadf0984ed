"""Offsets, ranges and line/column lookup over CLD source text."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Opaque measure of text length / index into text."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open range [start, end) of string indices. Invariant: 0 <= start <= end."""

    _start: int
    _end: int

    def __post_init__(self) -> None:
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: TextSize) -> TextRange:
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def cover(self, other: TextRange) -> TextRange:
        """Minimal range covering both ranges."""
        return TextRange(min(self._start, other._start), max(self._end, other._end))

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    return source[range.start.value : range.end.value]


@dataclass(frozen=True, slots=True)
class LineCol:
    """1-based line and column of an offset."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class LineIndex:
    """Maps offsets to line/column positions.

    Lines break on `\\n`; a `\\r\\n` pair counts as one break because the
    column is measured from the character after the `\\n`.
    """

    __slots__ = ("_line_starts", "_length")

    def __init__(self, source: str) -> None:
        starts = [0]
        for index, ch in enumerate(source):
            if ch == "\n":
                starts.append(index + 1)
        self._line_starts = tuple(starts)
        self._length = len(source)

    def line_col(self, offset: TextSize | int) -> LineCol:
        value = offset.value if isinstance(offset, TextSize) else offset
        value = min(max(value, 0), self._length)
        line = bisect_right(self._line_starts, value) - 1
        return LineCol(line=line + 1, column=value - self._line_starts[line] + 1)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)


__all__ = [
    "LineCol",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
