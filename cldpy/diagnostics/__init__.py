"""Diagnostics."""

from cldpy.diagnostics.codes import (
    AST_DUPLICATE_FIELD,
    AST_STRUCTURAL,
    AST_VALUE_TYPE,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_TOKEN,
    PARSER_EXPECTED_VALUE,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNKNOWN_DIRECTIVE,
    VALIDATION_MISSING_ORIGIN,
    VALIDATION_RULE_FAILED,
    VALIDATION_TYPE_MISMATCH,
    VALIDATION_UNRESOLVED_REFERENCE,
    WORLD_DUPLICATE_DECLARATION,
    WORLD_MULTIPLE_ORIGIN,
    DiagnosticSpec,
)
from cldpy.diagnostics.codes import Severity
from cldpy.diagnostics.diagnostic import Diagnostic
from cldpy.diagnostics.report import (
    collect_diagnostics,
    has_errors,
    render_diagnostic,
    sort_diagnostics,
)

__all__ = [
    "AST_DUPLICATE_FIELD",
    "AST_STRUCTURAL",
    "AST_VALUE_TYPE",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_EXPECTED_VALUE",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_TOKEN",
    "PARSER_UNKNOWN_DIRECTIVE",
    "VALIDATION_MISSING_ORIGIN",
    "VALIDATION_RULE_FAILED",
    "VALIDATION_TYPE_MISMATCH",
    "VALIDATION_UNRESOLVED_REFERENCE",
    "WORLD_DUPLICATE_DECLARATION",
    "WORLD_MULTIPLE_ORIGIN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "render_diagnostic",
    "sort_diagnostics",
]
