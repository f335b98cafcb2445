"""Huffman tree nodes and tree construction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

INTERNAL = "\0"
"""Character carried by internal (non-leaf) nodes."""


@dataclass(eq=False)
class Node:
    """A Huffman tree node: a character with its frequency and two children."""

    character: str
    frequency: int
    left: Node | None = None
    right: Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _by_frequency_descending(nodes: list[Node]) -> None:
    nodes.sort(key=lambda node: node.frequency, reverse=True)


def build_tree(nodes: Iterable[Node]) -> Node:
    """Merge the given leaves into a single Huffman tree and return its root.

    The two least frequent nodes are joined repeatedly; the least frequent
    becomes the left child of the new internal node.
    """
    pending = list(nodes)
    if not pending:
        raise ValueError("cannot build a tree from no nodes")

    _by_frequency_descending(pending)
    while len(pending) > 1:
        left = pending.pop()
        right = pending.pop()
        pending.append(
            Node(INTERNAL, left.frequency + right.frequency, left, right)
        )
        _by_frequency_descending(pending)

    return pending[0]