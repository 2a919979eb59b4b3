"""Huffman tree nodes, the frequency-ordered node list and tree building."""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(eq=False)
class Node:
    """A Huffman tree node; leaves carry a byte value."""

    byte: int
    frequency: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


class _HasLeaves(Protocol):
    def leaves(self) -> list[Node]: ...


class NodeList:
    """Nodes kept in ascending order of frequency."""

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def insert_sorted(self, node: Node) -> None:
        """Insert ``node`` before the first node whose frequency is not lower."""
        index = bisect.bisect_left(self._nodes, node.frequency, key=lambda n: n.frequency)
        self._nodes.insert(index, node)

    def pop_first(self) -> Node:
        """Remove and return the node with the lowest frequency."""
        if not self._nodes:
            raise IndexError("node list is empty")
        return self._nodes.pop(0)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)


def build_node_list(table: _HasLeaves) -> NodeList:
    """Build a sorted node list from the leaves of a frequency table."""
    nodes = NodeList()
    for leaf in table.leaves():
        nodes.insert_sorted(leaf)
    return nodes


def build_tree(nodes: NodeList) -> Node:
    """Merge the list into a single Huffman tree and return its root."""
    if len(nodes) == 0:
        raise ValueError("cannot build a tree from an empty node list")
    while len(nodes) > 1:
        left = nodes.pop_first()
        right = nodes.pop_first()
        nodes.insert_sorted(Node(0, left.frequency + right.frequency, left, right))
    return nodes.pop_first()