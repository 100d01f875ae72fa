"""Binary trees and pruning of all-zero subtrees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def prune_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Remove every subtree that holds no value other than 0; return the new root."""
    if root is None:
        return None
    root.left = prune_tree(root.left)
    root.right = prune_tree(root.right)
    if root.left is None and root.right is None and root.val == 0:
        return None
    return root


def inorder(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the tree in in-order sequence."""
    values: list[int] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.val)
        node = node.right
    return values