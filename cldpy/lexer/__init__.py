"""CLD lexer."""

from cldpy.lexer.lexer import Lexer, token_text
from cldpy.lexer.tokens import KEYWORDS, TRIVIA_KINDS, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "TRIVIA_KINDS",
    "Lexer",
    "Token",
    "TokenKind",
    "token_text",
]
