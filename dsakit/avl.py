"""Self-balancing AVL tree insertion."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AVLNode:
    """An AVL tree node; ``height`` counts nodes on the longest downward path."""

    key: int
    left: AVLNode | None = None
    right: AVLNode | None = None
    height: int = 1


def height(node: AVLNode | None) -> int:
    """Return the node's height, 0 for an empty tree."""
    return 0 if node is None else node.height


def balance_factor(node: AVLNode | None) -> int:
    """Left height minus right height, 0 for an empty tree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = max(height(node.left), height(node.right)) + 1


def right_rotate(node: AVLNode) -> AVLNode:
    """Rotate right around ``node``; return the new subtree root."""
    pivot = node.left
    if pivot is None:
        raise ValueError("right rotation needs a left child")
    node.left = pivot.right
    pivot.right = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def left_rotate(node: AVLNode) -> AVLNode:
    """Rotate left around ``node``; return the new subtree root."""
    pivot = node.right
    if pivot is None:
        raise ValueError("left rotation needs a right child")
    node.right = pivot.left
    pivot.left = node
    _update_height(node)
    _update_height(pivot)
    return pivot


def insert(node: AVLNode | None, key: int) -> AVLNode:
    """Insert ``key`` unless present, rebalancing; return the new root."""
    if node is None:
        return AVLNode(key)
    if key < node.key:
        node.left = insert(node.left, key)
    elif key > node.key:
        node.right = insert(node.right, key)
    else:
        return node

    _update_height(node)
    bf = balance_factor(node)

    if bf > 1 and node.left is not None:
        if key < node.left.key:
            return right_rotate(node)
        if key > node.left.key:
            node.left = left_rotate(node.left)
            return right_rotate(node)
    if bf < -1 and node.right is not None:
        if key > node.right.key:
            return left_rotate(node)
        if key < node.right.key:
            node.right = right_rotate(node.right)
            return left_rotate(node)
    return node


def pre_order(root: AVLNode | None) -> list[int]:
    """Return the keys in root, left, right order."""
    if root is None:
        return []
    return [root.key, *pre_order(root.left), *pre_order(root.right)]