"""Recursive-descent parser core that feeds a `TreeBuilder`."""

from __future__ import annotations

from dataclasses import dataclass

from cldpy.cst import SyntaxNode, TreeBuilder
from cldpy.diagnostics import PARSER_EXPECTED_TOKEN, Diagnostic, DiagnosticSpec
from cldpy.lexer import TokenKind
from cldpy.parser.options import ParserOptions
from cldpy.parser.token_source import TokenSource
from cldpy.syntax import CldSyntaxKind
from cldpy.text import TextRange


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: int | None = None

    def has_progressed(self, parser: Parser) -> bool:
        position = parser.current_range.start.value
        has_progressed = self._position is None or self._position < position
        self._position = position
        return has_progressed

    def assert_progressing(self, parser: Parser) -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._builder = TreeBuilder(source.text)
        self._diagnostics: list[Diagnostic] = []

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def current_text(self) -> str:
        return self._source.current_text

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def start_node(self, kind: CldSyntaxKind) -> None:
        self._builder.start_node(kind)

    def finish_node(self) -> SyntaxNode:
        return self._builder.finish_node()

    def bump(self) -> None:
        if self.current == TokenKind.EOF:
            return
        self._builder.token(CldSyntaxKind.from_token_kind(self.current), self.current_range)
        self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind) -> bool:
        if self.eat(kind):
            return True
        self.error_at_current(
            PARSER_EXPECTED_TOKEN,
            f"Expected {kind.display}, found {self.current.display}",
        )
        return False

    def error_at_current(self, spec: DiagnosticSpec, message: str | None = None) -> None:
        self.error(Diagnostic.from_spec(spec, self.current_range, message=message))

    def error(self, diagnostic: Diagnostic) -> None:
        if self._diagnostics:
            previous = self._diagnostics[-1]
            if previous.range.start == diagnostic.range.start:
                return
        self._diagnostics.append(diagnostic)

    def finish(self) -> tuple[SyntaxNode, list[Diagnostic]]:
        return self._builder.finish(), self._diagnostics
