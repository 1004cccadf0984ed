"""Syntax tree structures."""

from cldpy.cst.tree import (
    ParseTreeNode,
    SyntaxElement,
    SyntaxNode,
    SyntaxToken,
    TreeBuilder,
    TreeNode,
    dump_tree,
)

__all__ = [
    "ParseTreeNode",
    "SyntaxElement",
    "SyntaxNode",
    "SyntaxToken",
    "TreeBuilder",
    "TreeNode",
    "dump_tree",
]
