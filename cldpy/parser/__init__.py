"""Parser infrastructure (token source + recursive-descent parser + tree builder)."""

from cldpy.parser.cld import CldGrammar, GrammarAdapter, ParsedTree, parse, parse_tree
from cldpy.parser.grammar import parse_declaration, parse_field, parse_list, parse_source_file, parse_value
from cldpy.parser.options import DEFAULT_MAX_NESTING_DEPTH, ParserOptions
from cldpy.parser.parser import Parser, ParserProgress
from cldpy.parser.token_source import TokenSource

__all__ = [
    "DEFAULT_MAX_NESTING_DEPTH",
    "CldGrammar",
    "GrammarAdapter",
    "ParsedTree",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "TokenSource",
    "parse",
    "parse_declaration",
    "parse_field",
    "parse_list",
    "parse_source_file",
    "parse_tree",
    "parse_value",
]
