"""Unified syntax kinds for the CLD parser and syntax tree."""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from cldpy.lexer import TokenKind


class CldSyntaxKind(IntEnum):
    """Language syntax vocabulary (tokens + nodes).

    Token kinds reuse the `TokenKind` values; node kinds start at `ROOT`.
    """

    EOF = 1

    # Trivia tokens
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12
    SKIPPED = 13

    # Lexical tokens
    DIRECTIVE = 20
    IDENTIFIER = 21
    STRING = 22
    NUMBER = 23
    TRUE = 24
    FALSE = 25

    COLON = 40
    COMMA = 41
    LBRACE = 42
    RBRACE = 43
    LBRACKET = 44
    RBRACKET = 45

    # Node kinds
    ROOT = 1000
    ERROR = 1001
    SOURCE_FILE = 1002

    # Declarations
    ORIGIN_DECL = 1010
    TIMELINE_DECL = 1011
    EVENT_DECL = 1012
    CORE_EVENT_DECL = 1013
    NICHE_DECL = 1014
    ERA_DECL = 1015
    GENERATOR_DECL = 1016
    MEMORY_DECL = 1017
    IMMUNE_DECL = 1018

    NAME = 1030
    FIELD = 1031
    FIELD_KEY = 1032

    # Values
    STRING_VALUE = 1040
    NUMBER_VALUE = 1041
    BOOLEAN_VALUE = 1042
    LIST_VALUE = 1043
    IDENTIFIER_VALUE = 1044

    @property
    def is_declaration(self) -> bool:
        return self in DECLARATION_KINDS

    @property
    def is_value(self) -> bool:
        return self in VALUE_KINDS

    @staticmethod
    def from_token_kind(kind: TokenKind) -> CldSyntaxKind:
        try:
            return CldSyntaxKind[kind.name]
        except KeyError:
            raise ValueError(f"Unsupported TokenKind mapping: {kind!r}") from None


DECLARATION_KINDS: Final[frozenset[CldSyntaxKind]] = frozenset(
    {
        CldSyntaxKind.ORIGIN_DECL,
        CldSyntaxKind.TIMELINE_DECL,
        CldSyntaxKind.EVENT_DECL,
        CldSyntaxKind.CORE_EVENT_DECL,
        CldSyntaxKind.NICHE_DECL,
        CldSyntaxKind.ERA_DECL,
        CldSyntaxKind.GENERATOR_DECL,
        CldSyntaxKind.MEMORY_DECL,
        CldSyntaxKind.IMMUNE_DECL,
    }
)

VALUE_KINDS: Final[frozenset[CldSyntaxKind]] = frozenset(
    {
        CldSyntaxKind.STRING_VALUE,
        CldSyntaxKind.NUMBER_VALUE,
        CldSyntaxKind.BOOLEAN_VALUE,
        CldSyntaxKind.LIST_VALUE,
        CldSyntaxKind.IDENTIFIER_VALUE,
    }
)

DIRECTIVE_DECLARATIONS: Final[dict[str, CldSyntaxKind]] = {
    "@Origin": CldSyntaxKind.ORIGIN_DECL,
    "@Timeline": CldSyntaxKind.TIMELINE_DECL,
    "@Event": CldSyntaxKind.EVENT_DECL,
    "@CoreEvent": CldSyntaxKind.CORE_EVENT_DECL,
    "@Niche": CldSyntaxKind.NICHE_DECL,
    "@Era": CldSyntaxKind.ERA_DECL,
    "@Generator": CldSyntaxKind.GENERATOR_DECL,
    "@Memory": CldSyntaxKind.MEMORY_DECL,
    "@Immune": CldSyntaxKind.IMMUNE_DECL,
}
