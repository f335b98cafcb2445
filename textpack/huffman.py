"""Huffman coding of text into strings of '0' and '1'."""

from __future__ import annotations

from collections import Counter
from typing import Iterator, Mapping

from .tree import Node, build_tree


def decode_huffman(decode_map: Mapping[str, str], encoded: str) -> str:
    """Decode a bit string using a mapping from codes to characters."""
    decoded: list[str] = []
    current = ""
    for bit in encoded:
        current += bit
        character = decode_map.get(current)
        if character is not None:
            decoded.append(character)
            current = ""
    return "".join(decoded)


def _codes(node: Node, prefix: str = "") -> Iterator[tuple[str, str]]:
    if node.is_leaf:
        yield node.character, prefix
        return
    if node.left is not None:
        yield from _codes(node.left, prefix + "0")
    if node.right is not None:
        yield from _codes(node.right, prefix + "1")


class HuffmanEncoder:
    """Builds a Huffman code for a text and holds the encoded result."""

    def __init__(self) -> None:
        self.encoded_text = ""
        self.codes: dict[str, str] = {}
        self.decode_map: dict[str, str] = {}

    def encode(self, text: str) -> str:
        """Encode ``text`` and return the resulting bit string."""
        if not text:
            raise ValueError("cannot encode empty text")

        frequencies = Counter(text)
        leaves = [Node(ch, frequencies[ch]) for ch in sorted(frequencies)]
        root = build_tree(leaves)

        self.codes = dict(_codes(root))
        self.decode_map = {code: ch for ch, code in self.codes.items()}
        self.encoded_text = "".join(self.codes[ch] for ch in text)
        return self.encoded_text

    def decode(self) -> str:
        """Recover the original text from the last encoding."""
        return decode_huffman(self.decode_map, self.encoded_text)