"""Text positions."""

from cldpy.text.text import LineCol, LineIndex, TextRange, TextSize, slice_text_range

__all__ = [
    "LineCol",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
