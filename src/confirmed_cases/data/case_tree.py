"""Labeled counter tree structures and helpers."""
from __future__ import annotations

from typing import NotRequired, Optional, TypedDict


class LabeledNode(TypedDict):
    """Counter node of the dashboard summary tree."""

    label: str
    value: int
    children: NotRequired[Optional[list["LabeledNode"]]]


def iter_case_nodes(root: LabeledNode) -> list[tuple[int, LabeledNode]]:
    """Flatten a summary tree into a list preserving preorder traversal.

    Args:
        root: Root node of the summary tree.

    Returns:
        List of `(depth, node)` pairs in preorder, the root at depth 0.
    """
    nodes: list[tuple[int, LabeledNode]] = []

    def _walk(node: LabeledNode, depth: int) -> None:
        nodes.append((depth, node))
        for child in node.get("children") or []:
            _walk(child, depth + 1)

    _walk(root, 0)
    return nodes


__all__ = ["LabeledNode", "iter_case_nodes"]
