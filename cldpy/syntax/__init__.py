"""Syntax kinds."""

from cldpy.syntax.kind import (
    DECLARATION_KINDS,
    DIRECTIVE_DECLARATIONS,
    VALUE_KINDS,
    CldSyntaxKind,
)

__all__ = [
    "DECLARATION_KINDS",
    "DIRECTIVE_DECLARATIONS",
    "VALUE_KINDS",
    "CldSyntaxKind",
]
