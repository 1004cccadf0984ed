"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint='Close the string with `"`, or use `"""` for text spanning several lines.',
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    category="lexer",
)

PARSER_UNKNOWN_DIRECTIVE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNKNOWN_DIRECTIVE",
    message="Unknown declaration directive.",
    hint="Use one of @Origin, @Timeline, @Event, @CoreEvent, @Niche, @Era, @Generator, @Memory, @Immune.",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    category="parser",
)

PARSER_EXPECTED_VALUE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_VALUE",
    message="Expected a value",
    hint="Values are strings, numbers, `true`/`false`, identifiers or `[...]` lists.",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Lists are nested deeper than the parser allows.",
    hint="Flatten the value or raise ParserOptions.max_nesting_depth.",
    category="parser",
)

AST_STRUCTURAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_STRUCTURAL",
    message="Parse tree is missing a required child.",
    category="ast",
)

AST_DUPLICATE_FIELD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_DUPLICATE_FIELD",
    message="Field key declared more than once.",
    hint="Keep one entry per key, or allow overwriting duplicates.",
    category="ast",
)

AST_VALUE_TYPE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="AST_VALUE_TYPE",
    message="Value text does not match its literal type.",
    category="ast",
)

WORLD_MULTIPLE_ORIGIN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="WORLD_MULTIPLE_ORIGIN",
    message="Multiple @Origin declarations found.",
    hint="A world has exactly one @Origin.",
    category="world",
)

WORLD_DUPLICATE_DECLARATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="WORLD_DUPLICATE_DECLARATION",
    message="Declaration name used more than once for the same kind.",
    hint="Rename one of the declarations.",
    category="world",
)

VALIDATION_MISSING_ORIGIN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_MISSING_ORIGIN",
    message="!Origin missing: A world must have exactly one @Origin.",
    hint="Add an `@Origin <name> { ... }` declaration.",
    category="validation",
)

VALIDATION_TYPE_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_TYPE_MISMATCH",
    message="Field value has the wrong type.",
    category="validation",
)

VALIDATION_UNRESOLVED_REFERENCE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_UNRESOLVED_REFERENCE",
    message="Reference does not resolve to a declaration.",
    category="validation",
)

VALIDATION_RULE_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="VALIDATION_RULE_FAILED",
    message="World rule failed.",
    category="validation",
)
