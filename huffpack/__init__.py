"""Huffman coding compressor and decompressor for files and byte strings."""

__version__ = "0.1.0"
__all__ = ["__version__"]