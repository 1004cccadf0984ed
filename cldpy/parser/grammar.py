"""CLD grammar routines that drive the tree builder.

    document    := declaration*
    declaration := DIRECTIVE name "{" (field ","?)* "}"
    field       := key ":" value
    value       := STRING | NUMBER | BOOLEAN | IDENTIFIER | list
    list        := "[" (value ("," value)* ","?)? "]"
"""

from __future__ import annotations

from typing import Final

from cldpy.diagnostics import (
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNKNOWN_DIRECTIVE,
)
from cldpy.lexer import TokenKind
from cldpy.parser.parser import Parser, ParserProgress
from cldpy.syntax import DIRECTIVE_DECLARATIONS, CldSyntaxKind

NAME_TOKENS: Final[frozenset[TokenKind]] = frozenset({TokenKind.IDENTIFIER, TokenKind.STRING})

SCALAR_VALUE_KINDS: Final[dict[TokenKind, CldSyntaxKind]] = {
    TokenKind.STRING: CldSyntaxKind.STRING_VALUE,
    TokenKind.NUMBER: CldSyntaxKind.NUMBER_VALUE,
    TokenKind.TRUE: CldSyntaxKind.BOOLEAN_VALUE,
    TokenKind.FALSE: CldSyntaxKind.BOOLEAN_VALUE,
    TokenKind.IDENTIFIER: CldSyntaxKind.IDENTIFIER_VALUE,
}

_BODY_STOP: Final[frozenset[TokenKind]] = frozenset({TokenKind.RBRACE, TokenKind.DIRECTIVE, TokenKind.EOF})
_LIST_STOP: Final[frozenset[TokenKind]] = frozenset(
    {TokenKind.RBRACKET, TokenKind.RBRACE, TokenKind.DIRECTIVE, TokenKind.EOF}
)


def parse_source_file(parser: Parser) -> None:
    parser.start_node(CldSyntaxKind.SOURCE_FILE)
    progress = ParserProgress()
    while not parser.at(TokenKind.EOF):
        progress.assert_progressing(parser)
        if parser.at(TokenKind.DIRECTIVE):
            parse_declaration(parser)
            continue
        parser.error_at_current(
            PARSER_UNEXPECTED_TOKEN,
            f"Unexpected {parser.current.display}; expected a declaration such as `@Origin`",
        )
        _skip_until_directive(parser, include_current=True)
    parser.finish_node()


def parse_declaration(parser: Parser) -> None:
    kind = DIRECTIVE_DECLARATIONS.get(parser.current_text)
    if kind is None:
        parser.error_at_current(
            PARSER_UNKNOWN_DIRECTIVE,
            f"{PARSER_UNKNOWN_DIRECTIVE.message} Found `{parser.current_text}`.",
        )
        _skip_until_directive(parser, include_current=True)
        return

    parser.start_node(kind)
    parser.bump()

    if parser.at_set(NAME_TOKENS):
        parser.start_node(CldSyntaxKind.NAME)
        parser.bump()
        parser.finish_node()
    else:
        parser.error_at_current(
            PARSER_EXPECTED_TOKEN,
            f"Expected a declaration name, found {parser.current.display}",
        )

    if not parser.expect(TokenKind.LBRACE):
        _skip_until_directive(parser)
        parser.finish_node()
        return

    progress = ParserProgress()
    while not parser.at_set(_BODY_STOP):
        progress.assert_progressing(parser)
        if parser.at_set(NAME_TOKENS):
            parse_field(parser)
            parser.eat(TokenKind.COMMA)
            continue
        parser.error_at_current(
            PARSER_UNEXPECTED_TOKEN,
            f"Unexpected {parser.current.display}; expected a field `key: value`",
        )
        _bump_as_error(parser)

    parser.expect(TokenKind.RBRACE)
    parser.finish_node()


def parse_field(parser: Parser) -> None:
    parser.start_node(CldSyntaxKind.FIELD)
    parser.start_node(CldSyntaxKind.FIELD_KEY)
    parser.bump()
    parser.finish_node()

    if parser.expect(TokenKind.COLON):
        parse_value(parser, depth=0)
    parser.finish_node()


def parse_value(parser: Parser, *, depth: int) -> bool:
    """Parse one value; returns False, consuming nothing, when no value starts here."""
    if parser.at(TokenKind.LBRACKET):
        parse_list(parser, depth=depth + 1)
        return True

    value_kind = SCALAR_VALUE_KINDS.get(parser.current)
    if value_kind is None:
        parser.error_at_current(
            PARSER_EXPECTED_VALUE,
            f"{PARSER_EXPECTED_VALUE.message}, found {parser.current.display}",
        )
        return False

    parser.start_node(value_kind)
    parser.bump()
    parser.finish_node()
    return True


def parse_list(parser: Parser, *, depth: int) -> None:
    if depth > parser.options.max_nesting_depth:
        parser.error_at_current(
            PARSER_NESTING_TOO_DEEP,
            f"{PARSER_NESTING_TOO_DEEP.message} Limit is {parser.options.max_nesting_depth}.",
        )
        _skip_balanced_brackets(parser)
        return

    parser.start_node(CldSyntaxKind.LIST_VALUE)
    parser.bump()

    progress = ParserProgress()
    while not parser.at_set(_LIST_STOP):
        progress.assert_progressing(parser)
        if not parse_value(parser, depth=depth):
            _bump_as_error(parser)
            continue
        if not parser.eat(TokenKind.COMMA):
            break

    parser.expect(TokenKind.RBRACKET)
    parser.finish_node()


def _bump_as_error(parser: Parser) -> None:
    parser.start_node(CldSyntaxKind.ERROR)
    parser.bump()
    parser.finish_node()


def _skip_until_directive(parser: Parser, *, include_current: bool = False) -> None:
    parser.start_node(CldSyntaxKind.ERROR)
    if include_current:
        parser.bump()
    while not parser.at_set({TokenKind.DIRECTIVE, TokenKind.EOF}):
        parser.bump()
    parser.finish_node()


def _skip_balanced_brackets(parser: Parser) -> None:
    parser.start_node(CldSyntaxKind.ERROR)
    balance = 0
    while not parser.at(TokenKind.EOF):
        if parser.at(TokenKind.LBRACKET):
            balance += 1
        elif parser.at(TokenKind.RBRACKET):
            balance -= 1
        parser.bump()
        if balance == 0:
            break
    parser.finish_node()
