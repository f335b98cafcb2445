"""Binary file layout for Huffman- and LZ77-encoded text."""

from __future__ import annotations

import struct
from enum import IntEnum
from pathlib import Path
from typing import BinaryIO, Iterable, Mapping

from .lz77 import Pointer

DATA_FILE_NAME = "encoded_data.bin"
"""Name of the file written inside the output directory."""

_INT = struct.Struct("<i")
_COUNT = struct.Struct("<Q")
_PACKED = struct.Struct("<H")

_OFFSET_MASK = 0x0FFF
_LENGTH_MASK = 0x0F


class CodingType(IntEnum):
    """How the text in a data file is encoded."""

    HUFFMAN = 1
    LZ77 = 2

    @property
    def tag(self) -> bytes:
        """The leading byte that marks this coding type in a file."""
        return str(self.value).encode("ascii")

    @classmethod
    def from_tag(cls, tag: bytes) -> CodingType:
        """Return the coding type marked by a file's leading byte."""
        try:
            return cls(int(tag.decode("ascii")))
        except (UnicodeDecodeError, ValueError):
            raise ValueError(f"unknown coding type {tag!r}") from None


def _char_byte(character: str) -> bytes:
    if len(character) != 1:
        raise ValueError(f"expected a single character, got {character!r}")
    try:
        return character.encode("latin-1")
    except UnicodeEncodeError:
        raise ValueError(
            f"character {character!r} does not fit in one byte"
        ) from None


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ValueError(
            f"truncated data: expected {size} bytes, got {len(data)}"
        )
    return data


def _read_int(stream: BinaryIO) -> int:
    (value,) = _INT.unpack(_read_exact(stream, _INT.size))
    if value < 0:
        raise ValueError(f"negative size {value} in data")
    return value


def _data_path(directory: str | Path) -> Path:
    return Path(directory) / DATA_FILE_NAME


def save_huffman(
    encoded_text: str, decode_map: Mapping[str, str], directory: str | Path
) -> Path:
    """Write a Huffman bit string and its code table; return the file path."""
    text_bytes = encoded_text.encode("latin-1")
    parts = [
        CodingType.HUFFMAN.tag,
        _INT.pack(len(text_bytes)),
        text_bytes,
        _INT.pack(len(decode_map)),
    ]
    for code in sorted(decode_map):
        code_bytes = code.encode("latin-1")
        parts += [_INT.pack(len(code_bytes)), code_bytes, _char_byte(decode_map[code])]

    path = _data_path(directory)
    path.write_bytes(b"".join(parts))
    return path


def read_huffman(stream: BinaryIO) -> tuple[str, dict[str, str]]:
    """Read a bit string and code table from a stream past its type byte."""
    encoded_text = _read_exact(stream, _read_int(stream)).decode("latin-1")
    decode_map: dict[str, str] = {}
    for _ in range(_read_int(stream)):
        code = _read_exact(stream, _read_int(stream)).decode("latin-1")
        decode_map[code] = _read_exact(stream, 1).decode("latin-1")
    return encoded_text, decode_map


def save_lz77(pointers: Iterable[Pointer], directory: str | Path) -> Path:
    """Write LZ77 pointers, 12-bit offset and 4-bit length each; return the path."""
    pointers = list(pointers)
    parts = [CodingType.LZ77.tag, _COUNT.pack(len(pointers))]
    for pointer in pointers:
        packed = (pointer.offset & _OFFSET_MASK) << 4 | (pointer.length & _LENGTH_MASK)
        parts += [_PACKED.pack(packed), _char_byte(pointer.character)]

    path = _data_path(directory)
    path.write_bytes(b"".join(parts))
    return path


def read_lz77(stream: BinaryIO) -> list[Pointer]:
    """Read LZ77 pointers from a stream past its type byte."""
    (count,) = _COUNT.unpack(_read_exact(stream, _COUNT.size))
    pointers: list[Pointer] = []
    for _ in range(count):
        (packed,) = _PACKED.unpack(_read_exact(stream, _PACKED.size))
        character = _read_exact(stream, 1).decode("latin-1")
        pointers.append(
            Pointer((packed >> 4) & _OFFSET_MASK, packed & _LENGTH_MASK, character)
        )
    return pointers