"""Text compression with Huffman coding and LZ77, stored in a small binary file format."""

__version__ = "0.1.0"
__all__ = ["cli", "codec", "huffman", "lz77", "storage", "tree"]