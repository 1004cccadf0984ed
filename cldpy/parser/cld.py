"""High-level parse entrypoints and the grammar-adapter capability."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from loguru import logger

from cldpy.cst import ParseTreeNode, SyntaxNode
from cldpy.diagnostics import Diagnostic, collect_diagnostics, has_errors
from cldpy.errors import ParseError
from cldpy.lexer import Lexer
from cldpy.parser.grammar import parse_source_file
from cldpy.parser.options import ParserOptions
from cldpy.parser.parser import Parser
from cldpy.parser.token_source import TokenSource
from cldpy.syntax import CldSyntaxKind


class GrammarAdapter(Protocol):
    """Given source text, produce a tagged parse tree or raise `ParseError`."""

    def parse_tree(self, text: str) -> ParseTreeNode: ...


@dataclass(frozen=True, slots=True)
class ParsedTree:
    source_text: str
    root: SyntaxNode
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def source_file(self) -> SyntaxNode:
        source_file = self.root.first_child_node(CldSyntaxKind.SOURCE_FILE)
        if source_file is None:
            raise RuntimeError("Parser produced a tree without a SOURCE_FILE node")
        return source_file


def parse(text: str, options: ParserOptions | None = None) -> ParsedTree:
    """Parse a whole document, collecting every lexer and parser diagnostic."""
    lexer = Lexer(text)
    source = TokenSource(lexer)
    parser = Parser(source, options=options)

    parse_source_file(parser)
    root, parser_diagnostics = parser.finish()
    diagnostics = collect_diagnostics(source.finish(), parser_diagnostics)
    logger.debug(
        "parsed {} characters: {} declarations, {} diagnostics",
        len(text),
        _count_declarations(root),
        len(diagnostics),
    )
    return ParsedTree(source_text=text, root=root, diagnostics=diagnostics)


def parse_tree(text: str, options: ParserOptions | None = None) -> SyntaxNode:
    """Parse a document and return its SOURCE_FILE node, raising `ParseError` on syntax errors."""
    parsed = parse(text, options=options)
    if parsed.has_errors:
        raise ParseError(parsed.diagnostics, text)
    return parsed.source_file()


@dataclass(frozen=True, slots=True)
class CldGrammar:
    """Default grammar adapter backed by the CLD lexer and parser."""

    options: ParserOptions = field(default_factory=ParserOptions)

    def parse_tree(self, text: str) -> SyntaxNode:
        return parse_tree(text, options=self.options)


def _count_declarations(root: SyntaxNode) -> int:
    source_file = root.first_child_node(CldSyntaxKind.SOURCE_FILE)
    if source_file is None:
        return 0
    return sum(1 for child in source_file.child_nodes() if child.kind.is_declaration)
