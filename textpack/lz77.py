"""LZ77 compression into (offset, length, character) pointers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

NUL = "\0"
"""Character marking a pointer that has no literal after its match."""

MAX_OFFSET = 0x0FFF
MAX_LENGTH = 0x0F


@dataclass(frozen=True)
class Pointer:
    """A back-reference of ``length`` characters ``offset`` back, then a literal."""

    offset: int
    length: int
    character: str


def _longest_match(text: str, pos: int, window: int) -> tuple[int, int]:
    best_length = 0
    best_offset = 0
    for start in range(max(0, pos - window), pos):
        length = 0
        while pos + length < len(text) and text[start + length] == text[pos + length]:
            length += 1
            if start + length >= pos or length >= MAX_LENGTH:
                break
        if length > best_length:
            best_length = length
            best_offset = pos - start
    return best_offset, best_length


def encode(text: str) -> list[Pointer]:
    """Compress ``text`` into a list of pointers."""
    if not text:
        return [Pointer(0, 0, NUL)]

    pointers: list[Pointer] = []
    pos = 0
    while pos < len(text):
        offset, length = _longest_match(text, pos, MAX_OFFSET)
        end = pos + length
        character = text[end] if end < len(text) else NUL
        pointers.append(Pointer(offset, length, character))
        pos = end + 1
    return pointers


def decode(pointers: Iterable[Pointer]) -> str:
    """Expand a sequence of pointers back into text."""
    decoded: list[str] = []
    for pointer in pointers:
        if pointer.length:
            if pointer.offset == 0 or pointer.offset > len(decoded):
                raise ValueError(
                    f"pointer offset {pointer.offset} is outside the "
                    f"{len(decoded)} characters decoded so far"
                )
            current = len(decoded) - pointer.offset
            for _ in range(pointer.length):
                decoded.append(decoded[current])
                current += 1
        if pointer.character != NUL:
            decoded.append(pointer.character)
    return "".join(decoded)