"""Linked-list and binary-tree node types with a few classic operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list from values; an empty iterable gives None."""
        head: Optional[ListNode] = None
        for value in reversed(list(values)):
            head = cls(value, head)
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


@dataclass
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list to the right by k places and return the new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None or head.next is None or k == 0:
        return head

    size = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        size += 1

    k %= size
    if k == 0:
        return head

    new_tail = head
    for _ in range(size - k - 1):
        assert new_tail.next is not None
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return node values in root, left, right order."""
    result: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.val)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Return every root-to-leaf path as values joined by '->'."""
    paths: list[str] = []

    def walk(node: TreeNode, prefix: str) -> None:
        path = prefix + str(node.val)
        if node.left is not None:
            walk(node.left, path + "->")
        if node.right is not None:
            walk(node.right, path + "->")
        if node.left is None and node.right is None:
            paths.append(path)

    if root is not None:
        walk(root, "")
    return paths