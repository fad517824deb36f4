"""Pre-order tree traversal with a parent side-table.

The walker never writes into the tree. Parent links are recorded in a
``ParentTable`` keyed by node id and returned to the caller. Input trees are
assumed to be acyclic, which tree-sitter guarantees.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from tree_sitter import Node

Visitor = Callable[[Node], None]


class ParentTable:
    """Navigational child -> parent links collected during a walk."""

    def __init__(self) -> None:
        self._parents: dict[int, Node] = {}

    def record(self, child: Node, parent: Node) -> None:
        self._parents[child.id] = parent

    def parent_of(self, node: Node) -> Optional[Node]:
        """Return the node the walker reached `node` through, or None for the root."""
        return self._parents.get(node.id)

    def ancestors(self, node: Node) -> Iterator[Node]:
        """Yield parent, grandparent, ... up to the walk root."""
        current = self.parent_of(node)
        while current is not None:
            yield current
            current = self.parent_of(current)

    def __contains__(self, node: Node) -> bool:
        return node.id in self._parents

    def __len__(self) -> int:
        return len(self._parents)


def walk(node: Node, visitor: Visitor, parents: Optional[ParentTable] = None) -> ParentTable:
    """Visit `node` and every descendant in pre-order.

    Children are visited in grammar order, anonymous tokens included. Each
    child's parent is recorded before the child is visited, so a visitor can
    query ancestry of the node it is handed. Uses an explicit stack so deep
    expression chains do not exhaust the interpreter's recursion limit.

    Args:
        node: Root of the subtree to walk
        visitor: Called once per visited node
        parents: Table to record into; a fresh one is created when omitted

    Returns:
        The parent table for the walked subtree
    """
    if parents is None:
        parents = ParentTable()

    stack = [node]
    while stack:
        current = stack.pop()
        visitor(current)
        children = current.children
        for child in reversed(children):
            parents.record(child, current)
            stack.append(child)

    return parents


def count_nodes(node: Node, predicate: Callable[[Node], bool]) -> int:
    """Count nodes in the subtree rooted at `node` (inclusive) matching predicate."""
    count = 0

    def visit(current: Node) -> None:
        nonlocal count
        if predicate(current):
            count += 1

    walk(node, visit)
    return count
