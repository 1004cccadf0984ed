"""Immutable CLD syntax tree and the parse-tree interface the AST builder consumes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from cldpy.syntax import CldSyntaxKind
from cldpy.text import TextRange, TextSize, slice_text_range


class ParseTreeNode(Protocol):
    """Narrow view of a parse-tree node: rule tag, matched text, ordered child nodes."""

    @property
    def kind(self) -> CldSyntaxKind: ...

    @property
    def text(self) -> str: ...

    def child_nodes(self) -> Sequence[ParseTreeNode]: ...


@dataclass(frozen=True, slots=True)
class TreeNode:
    """Plain parse-tree node for trees built by hand or by another grammar engine."""

    kind: CldSyntaxKind
    text: str = ""
    children: tuple[TreeNode, ...] = ()

    def child_nodes(self) -> tuple[TreeNode, ...]:
        return self.children


@dataclass(frozen=True, slots=True)
class SyntaxToken:
    kind: CldSyntaxKind
    range: TextRange
    text: str


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """Parser output node. `text` is the source slice from first to last token."""

    kind: CldSyntaxKind
    range: TextRange
    text: str
    children: tuple[SyntaxElement, ...]

    def child_nodes(self) -> tuple[SyntaxNode, ...]:
        return tuple(child for child in self.children if isinstance(child, SyntaxNode))

    def first_child_node(self, kind: CldSyntaxKind) -> SyntaxNode | None:
        for child in self.children:
            if isinstance(child, SyntaxNode) and child.kind == kind:
                return child
        return None


SyntaxElement: TypeAlias = SyntaxNode | SyntaxToken


class TreeBuilder:
    """Stack-based builder producing immutable `SyntaxNode`s."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._stack: list[tuple[CldSyntaxKind, list[SyntaxElement], int]] = []
        self._roots: list[SyntaxElement] = []
        self._offset = 0

    def start_node(self, kind: CldSyntaxKind) -> None:
        self._stack.append((kind, [], self._offset))

    def token(self, kind: CldSyntaxKind, range: TextRange) -> None:
        self._offset = range.end.value
        self._push_element(SyntaxToken(kind=kind, range=range, text=slice_text_range(self._source, range)))

    def finish_node(self) -> SyntaxNode:
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children, started_at = self._stack.pop()
        if children:
            range = children[0].range.cover(children[-1].range)
        else:
            range = TextRange.empty(TextSize(started_at))
        node = SyntaxNode(
            kind=kind,
            range=range,
            text=slice_text_range(self._source, range),
            children=tuple(children),
        )
        self._push_element(node)
        return node

    def finish(self) -> SyntaxNode:
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")

        if len(self._roots) == 1 and isinstance(self._roots[0], SyntaxNode):
            root = self._roots[0]
            if root.kind == CldSyntaxKind.ROOT:
                return root

        self.start_node(CldSyntaxKind.ROOT)
        self._stack[-1][1].extend(self._roots)
        self._roots = []
        return self.finish_node()

    def _push_element(self, element: SyntaxElement) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)


def dump_tree(node: ParseTreeNode) -> str:
    """Indented `KIND text` listing, one node per line."""
    lines: list[str] = []
    pending: list[tuple[ParseTreeNode, int]] = [(node, 0)]
    while pending:
        current, depth = pending.pop()
        children = current.child_nodes()
        label = current.kind.name
        if not children:
            label += f" {current.text!r}"
        lines.append(f"{'  ' * depth}{label}")
        pending.extend((child, depth + 1) for child in reversed(children))
    return "\n".join(lines)


__all__ = [
    "ParseTreeNode",
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "TreeBuilder",
    "TreeNode",
    "dump_tree",
]
