"""Lower parse-tree declarations into `Citizen` records."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from loguru import logger

from cldpy.ast.citizen import CITIZEN_KIND_BY_DECLARATION, Citizen
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
)
from cldpy.cst import ParseTreeNode, SyntaxNode
from cldpy.errors import DuplicateFieldError, StructuralError, ValueTypeError
from cldpy.policy import insert_named
from cldpy.syntax import CldSyntaxKind
from cldpy.text import TextRange

_DEFAULT_OPTIONS = BuildOptions()


def build_citizens(root: ParseTreeNode, options: BuildOptions | None = None) -> list[Citizen]:
    """Build every declaration under `root`, in source order.

    `root` may be a ROOT node (unwrapped to its SOURCE_FILE child) or the
    SOURCE_FILE node itself. Children that are not declarations are ignored.
    """
    options = options or _DEFAULT_OPTIONS
    source_file = _unwrap_root(root)
    citizens: list[Citizen] = []
    for child in source_file.child_nodes():
        if child.kind not in CITIZEN_KIND_BY_DECLARATION:
            logger.debug("ignoring top-level {} node", child.kind.name)
            continue
        citizens.append(build_citizen(child, options))
    logger.debug("built {} citizens", len(citizens))
    return citizens


def build_citizen(node: ParseTreeNode, options: BuildOptions | None = None) -> Citizen:
    options = options or _DEFAULT_OPTIONS
    kind = CITIZEN_KIND_BY_DECLARATION.get(node.kind)
    if kind is None:
        raise StructuralError(
            f"expected a declaration node, found {node.kind.name}", range=_node_range(node)
        )

    children = node.child_nodes()
    if not children or children[0].kind != CldSyntaxKind.NAME:
        raise StructuralError("missing name", range=_node_range(node))
    name = children[0].text

    fields: dict[str, Value] = {}
    for child in children[1:]:
        if child.kind != CldSyntaxKind.FIELD:
            continue
        key, value = _build_field(child)
        replaced = insert_named(
            fields,
            key,
            value,
            policy=options.duplicate_fields,
            rejection=lambda: DuplicateFieldError(name, key, range=_node_range(child)),
        )
        if replaced:
            logger.debug("{} `{}`: field `{}` overwritten by later entry", kind, name, key)

    citizen = Citizen(kind=kind, name=name, fields=fields)
    logger.debug("built {}", citizen)
    return citizen


def _build_field(node: ParseTreeNode) -> tuple[str, Value]:
    parts = node.child_nodes()
    if not parts or parts[0].kind != CldSyntaxKind.FIELD_KEY:
        raise StructuralError("missing field key", range=_node_range(node))
    if len(parts) < 2:
        raise StructuralError("missing field value", range=_node_range(node))
    return parts[0].text, parse_value(parts[1])


def parse_value(node: ParseTreeNode) -> Value:
    """Convert one value node into a `Value`.

    Lists are walked with an explicit frame stack, so hand-built trees nested
    deeper than the parser would allow are still accepted.
    """
    if node.kind != CldSyntaxKind.LIST_VALUE:
        return _parse_scalar(node)

    frames = [_ListFrame(tuple(node.child_nodes()))]
    while True:
        frame = frames[-1]
        if frame.index < len(frame.children):
            child = frame.children[frame.index]
            frame.index += 1
            if child.kind == CldSyntaxKind.LIST_VALUE:
                frames.append(_ListFrame(tuple(child.child_nodes())))
            else:
                frame.items.append(_parse_scalar(child))
            continue

        frames.pop()
        completed = ListValue(tuple(frame.items))
        if not frames:
            return completed
        frames[-1].items.append(completed)


@dataclass(slots=True)
class _ListFrame:
    children: tuple[ParseTreeNode, ...]
    index: int = 0
    items: list[Value] = field(default_factory=list)


def _parse_scalar(node: ParseTreeNode) -> ScalarValue:
    text = node.text
    match node.kind:
        case CldSyntaxKind.STRING_VALUE:
            string = parse_string_literal(text)
            if string is not None:
                return StringValue(string)
        case CldSyntaxKind.NUMBER_VALUE:
            number = parse_number_literal(text)
            if number is not None:
                return NumberValue(number)
        case CldSyntaxKind.BOOLEAN_VALUE:
            boolean = parse_boolean_literal(text)
            if boolean is not None:
                return BooleanValue(boolean)
        case CldSyntaxKind.IDENTIFIER_VALUE:
            return IdentifierValue(text)
        case _:
            pass
    raise ValueTypeError(node.kind.name, text, range=_node_range(node))


def _unwrap_root(root: ParseTreeNode) -> ParseTreeNode:
    if root.kind != CldSyntaxKind.ROOT:
        return root
    for child in root.child_nodes():
        if child.kind == CldSyntaxKind.SOURCE_FILE:
            return child
    raise StructuralError("missing source file", range=_node_range(root))


def _node_range(node: ParseTreeNode) -> TextRange | None:
    return node.range if isinstance(node, SyntaxNode) else None


__all__ = ["build_citizen", "build_citizens", "parse_value"]
