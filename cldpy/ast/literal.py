"""Literal text helpers for value nodes."""

from __future__ import annotations

import re
from typing import Final

_NUMBER_RE = re.compile(r"^-?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?$")

TRIPLE_QUOTE: Final[str] = '"""'
QUOTE: Final[str] = '"'


def parse_string_literal(text: str) -> str | None:
    """Strip exactly one layer of delimiters: `\"\"\"...\"\"\"` or `"..."`."""
    if len(text) >= 6 and text.startswith(TRIPLE_QUOTE) and text.endswith(TRIPLE_QUOTE):
        return text[3:-3]
    if len(text) >= 2 and text.startswith(QUOTE) and text.endswith(QUOTE):
        return text[1:-1]
    return None


def parse_number_literal(text: str) -> float | None:
    if _NUMBER_RE.fullmatch(text) is None:
        return None
    return float(text)


def parse_boolean_literal(text: str) -> bool | None:
    if text == "true":
        return True
    if text == "false":
        return False
    return None


__all__ = [
    "parse_boolean_literal",
    "parse_number_literal",
    "parse_string_literal",
]
