"""Encode text to a data file and decode it back."""

from __future__ import annotations

from pathlib import Path

from . import lz77
from .huffman import HuffmanEncoder, decode_huffman
from .storage import (
    CodingType,
    read_huffman,
    read_lz77,
    save_huffman,
    save_lz77,
)


def _to_byte_chars(text: str) -> str:
    return text.encode("utf-8").decode("latin-1")


def _from_byte_chars(raw: str) -> str:
    return raw.encode("latin-1").decode("utf-8", errors="replace")


def encode(text: str, path: str | Path, kind: int | CodingType) -> Path:
    """Encode ``text`` with the given coding type into a file in ``path``.

    Returns the path of the written file.
    """
    try:
        kind = CodingType(kind)
    except ValueError:
        raise ValueError(f"unknown coding type {kind!r}") from None

    raw = _to_byte_chars(text)
    if kind is CodingType.HUFFMAN:
        encoder = HuffmanEncoder()
        encoder.encode(raw)
        return save_huffman(encoder.encoded_text, encoder.decode_map, path)
    return save_lz77(lz77.encode(raw), path)


def decode(path: str | Path) -> str:
    """Read an encoded data file and return the original text."""
    with open(path, "rb") as stream:
        kind = CodingType.from_tag(stream.read(1))
        if kind is CodingType.HUFFMAN:
            encoded, decode_map = read_huffman(stream)
            raw = decode_huffman(decode_map, encoded)
        else:
            raw = lz77.decode(read_lz77(stream))
    return _from_byte_chars(raw)