"""Byte frequency table used to seed the Huffman tree."""

from __future__ import annotations

from collections.abc import Iterable

from huffpack.tree import Node


class FrequencyTable:
    """Counts how many times each byte value occurs."""

    def __init__(self) -> None:
        self._counts: dict[int, int] = {}

    def add_byte(self, byte: int) -> None:
        """Count one occurrence of ``byte``."""
        if not 0 <= byte <= 255:
            raise ValueError(f"byte value out of range: {byte}")
        self._counts[byte] = self._counts.get(byte, 0) + 1

    def add_bytes(self, data: Iterable[int]) -> None:
        """Count every byte in ``data``."""
        for byte in data:
            self.add_byte(byte)

    def leaves(self) -> list[Node]:
        """Return a fresh leaf node for every counted byte, in byte order."""
        return [Node(byte, count) for byte, count in sorted(self._counts.items())]

    @property
    def total(self) -> int:
        """Number of bytes counted."""
        return sum(self._counts.values())

    def __getitem__(self, byte: int) -> int:
        return self._counts.get(byte, 0)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, byte: object) -> bool:
        return byte in self._counts