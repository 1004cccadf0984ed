import pytest

from cldpy.diagnostics import Diagnostic, render_diagnostic, sort_diagnostics
from cldpy.errors import (
    DuplicateDeclarationError,
    MissingOriginError,
    ParseError,
    StructuralError,
    ValueTypeError,
    is_syntax_error,
    to_diagnostic,
)
from cldpy.text import LineIndex, TextRange


def test_line_index_positions() -> None:
    index = LineIndex("ab\ncd\r\nef")

    assert str(index.line_col(0)) == "1:1"
    assert str(index.line_col(4)) == "2:2"
    assert str(index.line_col(7)) == "3:1"
    assert str(index.line_col(100)) == "3:3"
    assert index.line_count == 3


def test_parse_error_requires_diagnostics() -> None:
    with pytest.raises(ValueError):
        ParseError([])


def test_parse_error_leads_with_first_diagnostic() -> None:
    diagnostics = [
        Diagnostic(code="PARSER_EXPECTED_TOKEN", message="Expected `:`", range=TextRange(4, 5)),
        Diagnostic(code="PARSER_EXPECTED_VALUE", message="Expected a value", range=TextRange(9, 10)),
    ]

    error = ParseError(diagnostics, "a\nbc d\nef gh")

    assert (error.line, error.column) == (2, 3)
    assert error.code == "PARSER_EXPECTED_TOKEN"
    assert str(error) == "2:3: Expected `:` (+1 more)"
    assert to_diagnostic(error) is error.diagnostics[0]
    assert is_syntax_error(error)


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (StructuralError("missing name"), "AST_STRUCTURAL"),
        (ValueTypeError("NUMBER_VALUE", "x"), "AST_VALUE_TYPE"),
        (DuplicateDeclarationError("Era", "E"), "WORLD_DUPLICATE_DECLARATION"),
        (MissingOriginError(), "VALIDATION_MISSING_ORIGIN"),
    ],
)
def test_core_errors_render_as_diagnostics(error, code: str) -> None:
    diagnostic = to_diagnostic(error)

    assert not is_syntax_error(error)
    assert diagnostic.code == code == error.code
    assert diagnostic.message == error.message
    assert diagnostic.range.is_empty()


def test_render_diagnostic() -> None:
    diagnostic = Diagnostic(
        code="PARSER_EXPECTED_TOKEN",
        message="Expected `{`",
        range=TextRange(3, 4),
        hint="Open the body",
    )

    assert render_diagnostic(diagnostic) == "error[PARSER_EXPECTED_TOKEN] Expected `{` (hint: Open the body)"
    assert render_diagnostic(diagnostic, "x\nyz", path="w.cld").startswith("w.cld:2:2: error")
    assert render_diagnostic(diagnostic, path="w.cld").startswith("w.cld: error")


def test_sort_diagnostics_by_position() -> None:
    late = Diagnostic(code="B", message="b", range=TextRange(5, 6))
    early = Diagnostic(code="A", message="a", range=TextRange(1, 2))

    assert sort_diagnostics([late, early]) == [early, late]
