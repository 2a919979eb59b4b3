"""Encoding and decoding of the Huffman container format.

The container starts with 256 dictionary entries.
Each entry is a byte value, a little-endian 16-bit code length and the packed
code bits.
An end marker follows: byte 255 with length 0xFFFF.
After that come a little-endian 32-bit count of payload bits and the payload
itself, packed most significant bit first.
"""

from __future__ import annotations

import io
import struct
from itertools import islice
from typing import BinaryIO, Mapping

from huffpack.code import MAX_BITS, BitCode
from huffpack.dictionary import build_dictionary
from huffpack.frequencies import FrequencyTable
from huffpack.tree import Node, build_node_list, build_tree

END_BYTE = 255
END_LENGTH = 0xFFFF

_ENTRY = struct.Struct("<BH")
_TOTAL = struct.Struct("<I")
_CHUNK = 64 * 1024


class FormatError(ValueError):
    """Raised when encoded data does not follow the container format."""


def _header_bytes(dictionary: Mapping[int, BitCode]) -> bytes:
    parts = []
    for byte in range(256):
        code = dictionary.get(byte)
        if code is not None and len(code) > 0:
            parts.append(_ENTRY.pack(byte, len(code)))
            parts.append(code.to_bytes())
        else:
            parts.append(_ENTRY.pack(byte, 0))
    parts.append(_ENTRY.pack(END_BYTE, END_LENGTH))
    return b"".join(parts)


def encode(source: BinaryIO, dest: BinaryIO, dictionary: Mapping[int, BitCode]) -> int:
    """Encode everything read from ``source`` into ``dest``.

    Returns the number of payload bits written.
    Raises ValueError for a byte that has no non-empty code in ``dictionary``.
    """
    table = {
        byte: (int(str(code), 2), len(code))
        for byte, code in dictionary.items()
        if len(code) > 0
    }
    payload = bytearray()
    accumulator = 0
    pending = 0
    total_bits = 0

    while chunk := source.read(_CHUNK):
        for byte in chunk:
            try:
                value, length = table[byte]
            except KeyError:
                raise ValueError(f"byte not found in dictionary: {byte}") from None
            accumulator = (accumulator << length) | value
            pending += length
            total_bits += length
            while pending >= 8:
                pending -= 8
                payload.append((accumulator >> pending) & 0xFF)
            accumulator &= (1 << pending) - 1

    if pending:
        payload.append((accumulator << (8 - pending)) & 0xFF)
    if total_bits > 0xFFFFFFFF:
        raise OverflowError("payload too long for the bit counter")

    dest.write(_header_bytes(dictionary))
    dest.write(_TOTAL.pack(total_bits))
    dest.write(payload)
    return total_bits


def _read_exact(source: BinaryIO, size: int) -> bytes:
    data = source.read(size)
    if len(data) != size:
        raise FormatError("truncated header")
    return data


def read_header(source: BinaryIO) -> tuple[dict[int, BitCode], int]:
    """Read the code table and the payload bit count from ``source``."""
    codes: dict[int, BitCode] = {}
    for _ in range(256):
        byte, length = _ENTRY.unpack(_read_exact(source, _ENTRY.size))
        if length == 0:
            continue
        if length > MAX_BITS:
            raise FormatError(f"code length out of range: {length}")
        codes[byte] = BitCode.from_bytes(_read_exact(source, (length + 7) // 8), length)

    byte, length = _ENTRY.unpack(_read_exact(source, _ENTRY.size))
    if byte != END_BYTE or length != END_LENGTH:
        raise FormatError("end-of-dictionary marker not found")

    (total_bits,) = _TOTAL.unpack(_read_exact(source, _TOTAL.size))
    return codes, total_bits


def _tree_from_codes(codes: Mapping[int, BitCode]) -> Node:
    root = Node(0, 0)
    for byte, code in codes.items():
        node = root
        for bit in code:
            if bit:
                if node.right is None:
                    node.right = Node(0, 0)
                node = node.right
            else:
                if node.left is None:
                    node.left = Node(0, 0)
                node = node.left
        node.byte = byte
    return root


def decode(source: BinaryIO, dest: BinaryIO) -> int:
    """Decode a container read from ``source`` into ``dest``.

    Returns the number of bytes written.
    """
    codes, total_bits = read_header(source)
    if not codes:
        return 0
    root = _tree_from_codes(codes)
    payload = source.read()

    bits = ((byte >> shift) & 1 for byte in payload for shift in range(7, -1, -1))
    out = bytearray()
    node = root
    for bit in islice(bits, total_bits):
        node = node.right if bit else node.left
        if node is None:
            raise FormatError("encoded data does not match the code table")
        if node.is_leaf():
            out.append(node.byte)
            node = root

    dest.write(out)
    return len(out)


def encode_bytes(data: bytes) -> bytes:
    """Build a Huffman code for ``data`` and return the encoded container."""
    table = FrequencyTable()
    table.add_bytes(data)
    dictionary = build_dictionary(build_tree(build_node_list(table)))
    out = io.BytesIO()
    encode(io.BytesIO(data), out, dictionary)
    return out.getvalue()


def decode_bytes(data: bytes) -> bytes:
    """Decode a container held in memory."""
    out = io.BytesIO()
    decode(io.BytesIO(data), out)
    return out.getvalue()