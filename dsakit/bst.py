"""Binary search tree checks, lookup, insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterator

from dsakit.binary_tree import Node


def _values_in_order(root: Node | None) -> Iterator[int]:
    if root is not None:
        yield from _values_in_order(root.left)
        yield root.data
        yield from _values_in_order(root.right)


def is_bst(root: Node | None) -> bool:
    """Whether the in-order values are strictly increasing."""
    previous: int | None = None
    for value in _values_in_order(root):
        if previous is not None and value <= previous:
            return False
        previous = value
    return True


def search(root: Node | None, key: int) -> Node | None:
    """Find the node holding ``key`` recursively, or None."""
    if root is None:
        return None
    if root.data == key:
        return root
    if key < root.data:
        return search(root.left, key)
    return search(root.right, key)


def iterative_search(root: Node | None, key: int) -> Node | None:
    """Find the node holding ``key`` by walking down the tree, or None."""
    while root is not None:
        if root.data == key:
            return root
        root = root.left if key < root.data else root.right
    return None


def insert(root: Node | None, key: int) -> Node:
    """Insert ``key`` as a new leaf unless present; return the root."""
    if root is None:
        return Node(key)
    current = root
    while True:
        if key == current.data:
            return root
        if key < current.data:
            if current.left is None:
                current.left = Node(key)
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = Node(key)
                return root
            current = current.right


def in_order_predecessor(node: Node) -> Node:
    """Return the rightmost node of ``node``'s left subtree."""
    current = node.left
    if current is None:
        raise ValueError("node has no left subtree")
    while current.right is not None:
        current = current.right
    return current


def delete(root: Node | None, key: int) -> Node | None:
    """Remove ``key`` from the tree if present; return the new root."""
    if root is None:
        return None
    if key < root.data:
        root.left = delete(root.left, key)
    elif key > root.data:
        root.right = delete(root.right, key)
    elif root.left is None:
        return root.right
    elif root.right is None:
        return root.left
    else:
        predecessor = in_order_predecessor(root)
        root.data = predecessor.data
        root.left = delete(root.left, predecessor.data)
    return root