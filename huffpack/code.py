"""Variable-length bit codes packed most significant bit first."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

MAX_BITS = 255


@dataclass
class BitCode:
    """A sequence of bits forming one Huffman code."""

    bits: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.bits) > MAX_BITS:
            raise OverflowError(f"code longer than {MAX_BITS} bits")
        for bit in self.bits:
            _check_bit(bit)

    def append_bit(self, bit: int) -> None:
        """Append one bit to the end of the code."""
        _check_bit(bit)
        if len(self.bits) >= MAX_BITS:
            raise OverflowError(f"code longer than {MAX_BITS} bits")
        self.bits.append(bit)

    def drop_bit(self) -> int:
        """Remove and return the last bit."""
        if not self.bits:
            raise IndexError("code is empty")
        return self.bits.pop()

    def copy(self) -> "BitCode":
        """Return an independent copy."""
        return BitCode(list(self.bits))

    def to_bytes(self) -> bytes:
        """Pack the bits into bytes, padding the last byte with zeros."""
        out = bytearray((len(self.bits) + 7) // 8)
        for index, bit in enumerate(self.bits):
            if bit:
                out[index // 8] |= 0x80 >> (index % 8)
        return bytes(out)

    @classmethod
    def from_bytes(cls, data: bytes, length: int) -> "BitCode":
        """Unpack ``length`` bits from ``data``."""
        if not 0 <= length <= MAX_BITS:
            raise ValueError(f"code length out of range: {length}")
        if len(data) < (length + 7) // 8:
            raise ValueError("not enough data for the code length")
        return cls([(data[i // 8] >> (7 - i % 8)) & 1 for i in range(length)])

    def __len__(self) -> int:
        return len(self.bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self.bits)

    def __str__(self) -> str:
        return "".join(map(str, self.bits))


def _check_bit(bit: int) -> None:
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, not {bit!r}")