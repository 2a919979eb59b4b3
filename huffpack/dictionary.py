"""Derivation of the byte-to-code dictionary from a Huffman tree."""

from __future__ import annotations

from typing import Optional

from huffpack.code import BitCode
from huffpack.tree import Node


def build_dictionary(root: Optional[Node]) -> dict[int, BitCode]:
    """Map each leaf byte to its path code: left is 0, right is 1."""
    dictionary: dict[int, BitCode] = {}
    if root is None:
        return dictionary
    stack: list[tuple[Node, BitCode]] = [(root, BitCode())]
    while stack:
        node, code = stack.pop()
        if node.is_leaf():
            dictionary[node.byte] = code
            continue
        for child, bit in ((node.right, 1), (node.left, 0)):
            if child is None:
                continue
            child_code = code.copy()
            child_code.append_bit(bit)
            stack.append((child, child_code))
    return dictionary