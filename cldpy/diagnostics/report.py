"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from cldpy.diagnostics.diagnostic import Diagnostic
from cldpy.text import LineIndex


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return sort_diagnostics(diagnostics)


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def sort_diagnostics(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    return sorted(
        diagnostics,
        key=lambda diagnostic: (
            diagnostic.range.start.value,
            diagnostic.range.end.value,
            diagnostic.code,
            diagnostic.message,
        ),
    )


def render_diagnostic(diagnostic: Diagnostic, source: str | None = None, *, path: str | None = None) -> str:
    """One-line `path:line:col: severity[CODE] message` rendering."""
    location = ""
    if source is not None:
        location = f"{LineIndex(source).line_col(diagnostic.range.start)}: "
    if path is not None:
        location = f"{path}:{location}" if location else f"{path}: "
    rendered = f"{location}{diagnostic.severity}[{diagnostic.code}] {diagnostic.message}"
    if diagnostic.hint:
        rendered += f" (hint: {diagnostic.hint})"
    return rendered
