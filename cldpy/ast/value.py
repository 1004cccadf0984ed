"""Recursive field value model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias


class ValueKind(StrEnum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    LIST = "list"
    IDENTIFIER = "identifier"


@dataclass(frozen=True, slots=True)
class StringValue:
    """String literal with its delimiters already stripped."""

    text: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.STRING


@dataclass(frozen=True, slots=True)
class NumberValue:
    value: float

    @property
    def kind(self) -> ValueKind:
        return ValueKind.NUMBER


@dataclass(frozen=True, slots=True)
class BooleanValue:
    value: bool

    @property
    def kind(self) -> ValueKind:
        return ValueKind.BOOLEAN


@dataclass(frozen=True, slots=True)
class IdentifierValue:
    """Bare name kept verbatim; resolving it is up to validation rules."""

    name: str

    @property
    def kind(self) -> ValueKind:
        return ValueKind.IDENTIFIER


@dataclass(frozen=True, slots=True)
class ListValue:
    items: tuple[Value, ...] = ()

    @property
    def kind(self) -> ValueKind:
        return ValueKind.LIST

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


ScalarValue: TypeAlias = StringValue | NumberValue | BooleanValue | IdentifierValue
Value: TypeAlias = ScalarValue | ListValue


def to_python(value: Value) -> object:
    """Plain Python data for a value: str, float, bool or (nested) lists.

    Identifiers become their name. Nested lists are walked with an explicit
    stack, so depth is not limited by the interpreter's recursion limit.
    """
    if not isinstance(value, ListValue):
        return _scalar_to_python(value)

    root: list[object] = []
    pending: list[tuple[tuple[Value, ...], int, list[object]]] = [(value.items, 0, root)]
    while pending:
        items, index, out = pending.pop()
        if index >= len(items):
            continue
        pending.append((items, index + 1, out))
        item = items[index]
        if isinstance(item, ListValue):
            nested: list[object] = []
            out.append(nested)
            pending.append((item.items, 0, nested))
        else:
            out.append(_scalar_to_python(item))
    return root


def _scalar_to_python(value: ScalarValue) -> object:
    if isinstance(value, StringValue):
        return value.text
    if isinstance(value, IdentifierValue):
        return value.name
    return value.value


__all__ = [
    "BooleanValue",
    "IdentifierValue",
    "ListValue",
    "NumberValue",
    "ScalarValue",
    "StringValue",
    "Value",
    "ValueKind",
    "to_python",
]
