"""Diagnostics core types."""

from __future__ import annotations

from dataclasses import dataclass

from cldpy.diagnostics.codes import DiagnosticSpec, Severity
from cldpy.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser and core layers."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        range: TextRange,
        *,
        message: str | None = None,
        hint: str | None = None,
    ) -> Diagnostic:
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=hint if hint is not None else spec.hint,
            category=spec.category,
        )
