"""
The dimension contract consumed by the interleaver, plus coercion of
common Python objects into dimensions.

A dimension is any object with `width() -> int` and `bit_at(i) -> bit`.
Position 0 is the dimension's most significant bit.
"""
from typing import Any, Protocol, runtime_checkable

import numpy as np

from zdex.dimensions.arrays import numpy_dimension
from zdex.utils.bits_bytes_utils import check_bitstring


@runtime_checkable
class Dimension(Protocol):
    def width(self) -> int:
        ...

    def bit_at(self, index: int) -> int:
        ...


def _check_index(index: int, width: int) -> None:
    if not 0 <= index < width:
        raise IndexError(f"bit index {index} out of range for width {width}")


class BitString:
    """Dimension over a '0'/'1' string, read left to right."""

    def __init__(self, bits: str):
        check_bitstring(bits)
        self.bits = bits

    def width(self) -> int:
        return len(self.bits)

    def bit_at(self, index: int) -> int:
        _check_index(index, len(self.bits))
        return 1 if self.bits[index] == "1" else 0

    def __eq__(self, other):
        if not isinstance(other, BitString):
            return NotImplemented
        return self.bits == other.bits

    def __hash__(self):
        return hash(self.bits)

    def __repr__(self):
        return f"BitString({self.bits!r})"


class BytesDimension:
    """Dimension over raw bytes, 8 bits per byte, MSB first."""

    def __init__(self, data: bytes):
        self.data = bytes(data)

    def width(self) -> int:
        return len(self.data) * 8

    def bit_at(self, index: int) -> int:
        _check_index(index, len(self.data) * 8)
        return (self.data[index >> 3] >> (7 - (index & 7))) & 1

    def __eq__(self, other):
        if not isinstance(other, BytesDimension):
            return NotImplemented
        return self.data == other.data

    def __hash__(self):
        return hash(self.data)

    def __repr__(self):
        return f"BytesDimension({self.data!r})"


def as_dimension(obj: Any) -> Dimension:
    """
    Coerce `obj` into a dimension.

    Plain ints are rejected: they carry no width. Wrap them in `FixedWidth`
    or one of the `UInt*` types instead.
    """
    if isinstance(obj, (bool, np.bool_)):
        raise TypeError("bool is not a dimension; use FixedWidth(int(flag), 1)")
    if callable(getattr(obj, "width", None)) and callable(getattr(obj, "bit_at", None)):
        return obj
    if isinstance(obj, str):
        return BitString(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BytesDimension(obj)
    if isinstance(obj, np.integer):
        return numpy_dimension(obj)
    if isinstance(obj, int):
        raise TypeError(
            f"int {obj} has no width; wrap it in FixedWidth(value, width) or UInt8..UInt128"
        )
    raise TypeError(f"Unsupported dimension type: {type(obj).__name__}")
