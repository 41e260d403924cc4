"""Linked binary tree nodes and the three depth-first traversals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer."""

    data: int
    left: Node | None = None
    right: Node | None = None


def pre_order(root: Node | None) -> list[int]:
    """Return the values in root, left, right order."""
    if root is None:
        return []
    return [root.data, *pre_order(root.left), *pre_order(root.right)]


def post_order(root: Node | None) -> list[int]:
    """Return the values in left, right, root order."""
    if root is None:
        return []
    return [*post_order(root.left), *post_order(root.right), root.data]


def in_order(root: Node | None) -> list[int]:
    """Return the values in left, root, right order."""
    if root is None:
        return []
    return [*in_order(root.left), root.data, *in_order(root.right)]