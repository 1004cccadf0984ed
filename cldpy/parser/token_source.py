"""Token source that hides trivia from the parser."""

from __future__ import annotations

from cldpy.diagnostics import Diagnostic
from cldpy.lexer import Lexer, Token, TokenKind
from cldpy.text import TextRange


class TokenSource:
    """Bridge between lexer and parser that skips trivia tokens.

    Trivia is dropped rather than kept: the syntax tree slices node text
    straight from the source, so comments and whitespace need no owner.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._current = self._next_non_trivia_token()

    @property
    def current(self) -> TokenKind:
        return self._current.kind

    @property
    def current_range(self) -> TextRange:
        return self._current.range

    @property
    def current_text(self) -> str:
        return self.text[self._current.range.start.value : self._current.range.end.value]

    @property
    def text(self) -> str:
        return self._lexer.source

    def bump(self) -> None:
        if self._current.kind == TokenKind.EOF:
            return
        self._current = self._next_non_trivia_token()

    def finish(self) -> list[Diagnostic]:
        return self._lexer.diagnostics

    def _next_non_trivia_token(self) -> Token:
        while True:
            token = self._lexer.next_token()
            if not token.kind.is_trivia:
                return token
