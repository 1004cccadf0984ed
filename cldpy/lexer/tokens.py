"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from cldpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer, hidden from the parser)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12
    SKIPPED = 13  # unrecognised character, reported by the lexer

    # -------------------------
    # Identifiers / literals
    # -------------------------
    DIRECTIVE = 20  # @Origin, @CoreEvent, ...
    IDENTIFIER = 21
    STRING = 22  # "..." or """..."""
    NUMBER = 23
    TRUE = 24
    FALSE = 25

    # -------------------------
    # Punctuation
    # -------------------------
    COLON = 40  # :
    COMMA = 41  # ,
    LBRACE = 42  # {
    RBRACE = 43  # }
    LBRACKET = 44  # [
    RBRACKET = 45  # ]

    @property
    def is_trivia(self) -> bool:
        return self in TRIVIA_KINDS

    @property
    def display(self) -> str:
        return TOKEN_DISPLAY.get(self, self.name.lower())


TRIVIA_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.WHITESPACE,
        TokenKind.NEWLINE,
        TokenKind.COMMENT,
        TokenKind.SKIPPED,
    }
)

KEYWORDS: Final[dict[str, TokenKind]] = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
}

TOKEN_DISPLAY: Final[dict[TokenKind, str]] = {
    TokenKind.EOF: "end of file",
    TokenKind.DIRECTIVE: "declaration directive",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.STRING: "string",
    TokenKind.NUMBER: "number",
    TokenKind.TRUE: "`true`",
    TokenKind.FALSE: "`false`",
    TokenKind.COLON: "`:`",
    TokenKind.COMMA: "`,`",
    TokenKind.LBRACE: "`{`",
    TokenKind.RBRACE: "`}`",
    TokenKind.LBRACKET: "`[`",
    TokenKind.RBRACKET: "`]`",
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    range: TextRange
