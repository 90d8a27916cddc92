"""
Packed, immutable bit sequence produced by the interleaver.

Bits are stored MSB first: position 0 is the most significant bit of the
code and lives in the high bit of the first byte. Pad bits in the final
byte are always zero.
"""
from __future__ import annotations

from functools import total_ordering
from typing import Iterator, List, Optional, Sequence, Tuple

from zdex.config import ZdexConfig
from zdex.utils.bits_bytes_utils import (
    bytes_to_bitstring,
    int_to_words,
    pack_bitstring,
    words_to_int,
)


def _byte_len(length: int) -> int:
    return (length + 7) // 8


class BitPositions:
    """
    Positions in `[lo, hi)` whose bit equals `value`.

    Iterating twice walks the range twice; nothing is cached.
    """

    def __init__(self, zindex: "ZIndex", value: int, lo: int, hi: int):
        self._zindex = zindex
        self._value = value
        self._lo = lo
        self._hi = hi

    def __iter__(self) -> Iterator[int]:
        data = self._zindex._data
        value = self._value
        # Whole bytes that cannot contain a match are skipped.
        skip = 0x00 if value else 0xFF
        i, hi = self._lo, self._hi
        while i < hi:
            byte = data[i >> 3]
            offset = i & 7
            if offset == 0 and byte == skip:
                i += 8
                continue
            if ((byte >> (7 - offset)) & 1) == value:
                yield i
            i += 1

    def __repr__(self) -> str:
        kind = "ones" if self._value else "zeros"
        return f"BitPositions({kind}, lo={self._lo}, hi={self._hi})"


@total_ordering
class ZIndex:
    """
    Z-order code: an ordered bit sequence of known length.

    Also satisfies the dimension contract (`width` / `bit_at`), so a code can
    be fed back into the interleaver as one dimension.
    """

    __slots__ = ("_data", "_length")

    def __init__(self, data: bytes = b"", length: Optional[int] = None):
        if length is None:
            length = len(data) * 8
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if len(data) != _byte_len(length):
            raise ValueError(
                f"{length} bits need {_byte_len(length)} bytes, got {len(data)}"
            )
        self._data = bytearray(data)
        pad = len(self._data) * 8 - length
        if pad:
            self._data[-1] &= (0xFF << pad) & 0xFF
        self._length = length

    @classmethod
    def _from_buffer(cls, buf: bytearray, length: int) -> "ZIndex":
        # Takes ownership of `buf`; caller guarantees size and zero pad bits.
        obj = cls.__new__(cls)
        obj._data = buf
        obj._length = length
        return obj

    # ------------------------------------------------------------------
    # Bit access
    # ------------------------------------------------------------------

    def length(self) -> int:
        return self._length

    def width(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def bit_at(self, index: int) -> int:
        if not 0 <= index < self._length:
            raise IndexError(f"bit index {index} out of range for length {self._length}")
        return (self._data[index >> 3] >> (7 - (index & 7))) & 1

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ZIndex.from_bitstring(self.to_bitstring()[index])
        if index < 0:
            index += self._length
        return self.bit_at(index)

    def __iter__(self) -> Iterator[int]:
        for i in range(self._length):
            yield (self._data[i >> 3] >> (7 - (i & 7))) & 1

    def _bounds(self, lo: int, hi: Optional[int]) -> Tuple[int, int]:
        if hi is None:
            hi = self._length
        if lo < 0 or hi < 0:
            raise ValueError(f"range bounds must be non-negative, got [{lo}, {hi})")
        return min(lo, self._length), min(hi, self._length)

    def ones(self, lo: int = 0, hi: Optional[int] = None) -> BitPositions:
        """Set positions in `[lo, hi)`, clamped to the code length."""
        lo, hi = self._bounds(lo, hi)
        return BitPositions(self, 1, lo, hi)

    def zeros(self, lo: int = 0, hi: Optional[int] = None) -> BitPositions:
        """Unset positions in `[lo, hi)`, clamped to the code length."""
        lo, hi = self._bounds(lo, hi)
        return BitPositions(self, 0, lo, hi)

    def count_ones(self) -> int:
        return sum(byte.bit_count() for byte in self._data)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_bitstring(self) -> str:
        return bytes_to_bitstring(self._data)[:self._length]

    @classmethod
    def from_bitstring(cls, bits: str) -> "ZIndex":
        return cls._from_buffer(pack_bitstring(bits), len(bits))

    def to_bytes(self) -> bytes:
        """Packed bytes, MSB first, final byte zero-filled in its low bits."""
        return bytes(self._data)

    @classmethod
    def from_bytes(cls, data: bytes, length: Optional[int] = None) -> "ZIndex":
        return cls(data, length)

    def to_int(self) -> int:
        pad = len(self._data) * 8 - self._length
        return int.from_bytes(self._data, "big") >> pad

    def __int__(self) -> int:
        return self.to_int()

    @classmethod
    def from_int(cls, value: int, length: int) -> "ZIndex":
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if value < 0 or value >> length:
            raise ValueError(f"value {value} does not fit in {length} bits")
        n = _byte_len(length)
        pad = n * 8 - length
        return cls._from_buffer(bytearray((value << pad).to_bytes(n, "big")), length)

    def to_words(self, word_width: int) -> List[int]:
        """
        Split into MSB-first unsigned words of `word_width` bits.

        A trailing partial word holds the remaining bits in its low positions.
        """
        return int_to_words(self.to_int(), self._length, word_width)

    @classmethod
    def from_words(cls, words: Sequence[int], word_width: int, length: int) -> "ZIndex":
        return cls.from_int(words_to_int(words, length, word_width), length)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, ZIndex):
            return NotImplemented
        return self._length == other._length and self._data == other._data

    def __lt__(self, other) -> bool:
        # Lexicographic over bits; a proper prefix sorts first.
        if not isinstance(other, ZIndex):
            return NotImplemented
        common = min(self._length, other._length)
        a = self.to_int() >> (self._length - common)
        b = other.to_int() >> (other._length - common)
        if a != b:
            return a < b
        return self._length < other._length

    def __hash__(self) -> int:
        return hash((self._length, bytes(self._data)))

    def __repr__(self) -> str:
        bits = self.to_bitstring()
        if len(bits) > 64:
            bits = bits[:64] + "..."
        return f"ZIndex('{bits}', length={self._length})"

    def __str__(self) -> str:
        return self.to_bitstring()


def to_key(zindex: ZIndex, cfg: ZdexConfig | None = None) -> Tuple[int, ...]:
    """
    Sortable storage key: the code's words followed by its bit length.

    Keys of equal-length codes sort exactly like the codes themselves.
    """
    if cfg is None:
        cfg = ZdexConfig()
    return tuple(zindex.to_words(cfg.word_width)) + (len(zindex),)
