# textpack

textpack turns a piece of text into a compact binary file and reads it back.
It has two encoders:

- **Huffman coding** builds a prefix code from how often each character appears.
- **LZ77** replaces repeated runs with back-references into a sliding window.
  Each reference keeps a 12-bit offset and a 4-bit length.

Both write a file named `encoded_data.bin` into a directory you pick. The first
byte of the file (`1` or `2`) records which encoder was used, so decoding needs
only the file path.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from textpack.codec import encode, decode

path = encode("abracadabra", "/tmp/out", 2)   # 1 = Huffman, 2 = LZ77
print(path)                                   # /tmp/out/encoded_data.bin
print(decode(path))                           # abracadabra
```

`encode` accepts an `int` or a `textpack.storage.CodingType` member
(`CodingType.HUFFMAN`, `CodingType.LZ77`) and raises `ValueError` for any other
kind. Text is stored as its UTF-8 bytes, so any Unicode text can be encoded;
`decode` turns the bytes back into text, replacing invalid sequences. `decode`
raises `ValueError` for a file with an unknown type byte or truncated contents,
and `OSError` if the file cannot be opened.

The encoders can also be used directly:

```python
from textpack import lz77
from textpack.huffman import HuffmanEncoder, decode_huffman

pointers = lz77.encode("Hello Hello")
assert lz77.decode(pointers) == "Hello Hello"

encoder = HuffmanEncoder()
bits = encoder.encode("mississippi")          # a string of '0' and '1'
assert encoder.decode() == "mississippi"
assert decode_huffman(encoder.decode_map, bits) == "mississippi"
```

`lz77.Pointer` is a frozen dataclass with `offset`, `length` and `character`.
`lz77.decode` raises `ValueError` for a pointer that refers back past the start
of the text decoded so far.

`textpack.tree` holds the `Node` dataclass and `build_tree`, which merges leaf
nodes into a Huffman tree and returns its root.

`textpack.storage` holds the functions that read and write the binary format:
`save_huffman` and `save_lz77` write `encoded_data.bin` into a directory and
return its path; `read_huffman` and `read_lz77` read from a binary stream
positioned just after the type byte. `CodingType.tag` gives a type's leading
byte and `CodingType.from_tag` reads it back.

## Command line

```
textpack
```

This starts an interactive menu that reads whitespace-separated words from
standard input:

1. Encode text. Enter a single word of text, then an output directory. The text
   is written with LZ77.
2. Decode text. Enter the path to an `encoded_data.bin` file, and the decoded
   text is printed. If the file cannot be opened, or its contents cannot be
   read, an error message is printed instead.
3. Exit.

The menu also ends when standard input runs out.

## Limits

- The LZ77 format stores offsets in 12 bits and lengths in 4 bits, so matches
  are at most 15 characters long and reach back at most 4095 characters.
- In LZ77 the NUL character marks a pointer with no literal, so NUL characters
  in the input are not preserved.
- The Huffman encoder rejects empty text. Text made of a single repeated
  character gets an empty code and does not decode back.
- `save_huffman` and `save_lz77` store each character in one byte and raise
  `ValueError` for characters outside Latin-1; `codec.encode` avoids this by
  encoding the text as UTF-8 first.