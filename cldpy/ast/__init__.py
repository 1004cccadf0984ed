from cldpy.ast.build import build_citizen, build_citizens, parse_value
from cldpy.ast.citizen import CITIZEN_KIND_BY_DECLARATION, Citizen, CitizenKind
from cldpy.ast.literal import parse_boolean_literal, parse_number_literal, parse_string_literal
from cldpy.ast.options import BuildOptions
from cldpy.ast.value import (
    BooleanValue,
    IdentifierValue,
    ListValue,
    NumberValue,
    ScalarValue,
    StringValue,
    Value,
    ValueKind,
    to_python,
)

__all__ = [
    "CITIZEN_KIND_BY_DECLARATION",
    "BooleanValue",
    "BuildOptions",
    "Citizen",
    "CitizenKind",
    "IdentifierValue",
    "ListValue",
    "NumberValue",
    "ScalarValue",
    "StringValue",
    "Value",
    "ValueKind",
    "build_citizen",
    "build_citizens",
    "parse_boolean_literal",
    "parse_number_literal",
    "parse_string_literal",
    "parse_value",
    "to_python",
]
