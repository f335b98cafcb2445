"""Interactive menu for encoding text to a file and decoding it back."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, TextIO

from . import codec
from .storage import CodingType

MENU = (
    "Choose the option: \n"
    " '1' - Encode text \n"
    " '2' - Decode text from file \n"
    " '3' To exit the app \n"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _clear_screen(out: TextIO) -> None:
    if out.isatty():
        out.write("\033[2J\033[H")


def _encode(tokens: Iterator[str], out: TextIO) -> bool:
    out.write("Print text for encoding \n")
    text = next(tokens, None)
    if text is None:
        return False
    out.write("Provide path for the output \n")
    directory = next(tokens, None)
    if directory is None:
        return False
    try:
        codec.encode(text, directory, CodingType.LZ77)
    except OSError:
        print("Invalid path! ", file=sys.stderr)
    return True


def _decode(tokens: Iterator[str], out: TextIO) -> bool:
    out.write("Provide path to a .bin file with an encoded text \n")
    path = next(tokens, None)
    if path is None:
        return False
    try:
        text = codec.decode(path)
    except OSError:
        print("Couldn't open file ", file=sys.stderr)
        text = "Error: Could not open the file"
    except ValueError:
        text = "Error: Text wasn't read"
    out.write("Decoded text: \n" + text)
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the menu loop on standard input until the user exits."""
    parser = argparse.ArgumentParser(
        prog="textpack",
        description="Interactively compress text to a file and read it back.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    tokens = _tokens(sys.stdin)
    while True:
        out.write(MENU)
        out.flush()
        choice = next(tokens, None)
        if choice is None:
            return 0
        _clear_screen(out)
        if choice == "1":
            if not _encode(tokens, out):
                return 0
        elif choice == "2":
            if not _decode(tokens, out):
                return 0
        elif choice == "3":
            return 0


if __name__ == "__main__":
    sys.exit(main())