"""Error hierarchy shared by the grammar adapter and the core layers."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from cldpy.diagnostics import (
    AST_DUPLICATE_FIELD,
    AST_STRUCTURAL,
    AST_VALUE_TYPE,
    VALIDATION_MISSING_ORIGIN,
    VALIDATION_RULE_FAILED,
    VALIDATION_TYPE_MISMATCH,
    VALIDATION_UNRESOLVED_REFERENCE,
    WORLD_DUPLICATE_DECLARATION,
    WORLD_MULTIPLE_ORIGIN,
    Diagnostic,
    DiagnosticSpec,
)
from cldpy.text import LineCol, LineIndex, TextRange, TextSize


class CldError(Exception):
    """Base class for every error raised while loading or checking a world."""

    spec: DiagnosticSpec = AST_STRUCTURAL

    def __init__(self, message: str, *, range: TextRange | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.range = range

    @property
    def code(self) -> str:
        return self.spec.code


class ParseError(CldError):
    """Malformed source text. Carries every syntax diagnostic, first one leading."""

    def __init__(self, diagnostics: Sequence[Diagnostic], source: str = "") -> None:
        if not diagnostics:
            raise ValueError("ParseError requires at least one diagnostic")
        self.diagnostics = tuple(diagnostics)
        first = self.diagnostics[0]
        self.location: LineCol = LineIndex(source).line_col(first.range.start)
        suffix = f" (+{len(self.diagnostics) - 1} more)" if len(self.diagnostics) > 1 else ""
        super().__init__(f"{self.location}: {first.message}{suffix}", range=first.range)

    @property
    def code(self) -> str:
        return self.diagnostics[0].code

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def column(self) -> int:
        return self.location.column


class StructuralError(CldError):
    """A parse-tree node lacks a child the grammar contract guarantees."""

    spec = AST_STRUCTURAL


class DuplicateFieldError(StructuralError):
    spec = AST_DUPLICATE_FIELD

    def __init__(self, declaration: str, key: str, *, range: TextRange | None = None) -> None:
        super().__init__(f"field `{key}` declared more than once in `{declaration}`", range=range)
        self.declaration = declaration
        self.key = key


class ValueTypeError(CldError):
    """Value node text does not conform to its literal type, or the rule is not a value rule."""

    spec = AST_VALUE_TYPE

    def __init__(self, rule: str, raw_text: str, *, range: TextRange | None = None) -> None:
        super().__init__(f"unexpected {rule} value: {raw_text!r}", range=range)
        self.rule = rule
        self.raw_text = raw_text


class ConstructionError(CldError):
    """World assembly failed; no World is produced."""


class MultipleOriginError(ConstructionError):
    spec = WORLD_MULTIPLE_ORIGIN

    def __init__(self, existing: str, duplicate: str) -> None:
        super().__init__(
            f"Multiple @Origin declarations found: `{existing}` and `{duplicate}`"
        )
        self.existing = existing
        self.duplicate = duplicate


class DuplicateDeclarationError(ConstructionError):
    spec = WORLD_DUPLICATE_DECLARATION

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} `{name}` declared more than once")
        self.kind = kind
        self.name = name


class ValidationError(CldError):
    """A semantic rule failed. `rule` names the rule that raised it."""

    spec = VALIDATION_RULE_FAILED

    def __init__(self, message: str, *, rule: str, code: str | None = None) -> None:
        super().__init__(message)
        self.rule = rule
        self._code = code

    @property
    def code(self) -> str:
        return self._code or self.spec.code


class MissingOriginError(ValidationError):
    spec = VALIDATION_MISSING_ORIGIN

    def __init__(self, *, rule: str = "OriginExists") -> None:
        super().__init__(VALIDATION_MISSING_ORIGIN.message, rule=rule)


class TypeMismatchError(ValidationError):
    spec = VALIDATION_TYPE_MISMATCH

    def __init__(self, message: str, *, rule: str, field: str) -> None:
        super().__init__(message, rule=rule)
        self.field = field


class UnresolvedReferenceError(ValidationError):
    spec = VALIDATION_UNRESOLVED_REFERENCE

    def __init__(self, *, rule: str, name: str, message: str | None = None) -> None:
        super().__init__(message or f"`{name}` does not resolve to a declaration", rule=rule)
        self.name = name


def is_syntax_error(error: BaseException) -> bool:
    return isinstance(error, ParseError)


def to_diagnostic(error: CldError) -> Diagnostic:
    """Render a core error in the same shape as parser diagnostics."""
    if isinstance(error, ParseError):
        return error.diagnostics[0]
    diagnostic = Diagnostic.from_spec(
        error.spec,
        error.range if error.range is not None else TextRange.empty(TextSize(0)),
        message=error.message,
    )
    if diagnostic.code != error.code:
        return replace(diagnostic, code=error.code)
    return diagnostic


__all__ = [
    "CldError",
    "ConstructionError",
    "DuplicateDeclarationError",
    "DuplicateFieldError",
    "MissingOriginError",
    "MultipleOriginError",
    "ParseError",
    "StructuralError",
    "TypeMismatchError",
    "UnresolvedReferenceError",
    "ValidationError",
    "ValueTypeError",
    "is_syntax_error",
    "to_diagnostic",
]
