from dataclasses import dataclass
from numbers import Integral


@dataclass(frozen=True)
class FixedWidth:
    """
    Unsigned integer read as a `bits`-wide, MSB-first dimension.
    """
    value: int
    bits: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, Integral):
            raise TypeError(f"value must be an integer, got {type(self.value).__name__}")
        if isinstance(self.bits, bool) or not isinstance(self.bits, Integral) or self.bits < 0:
            raise ValueError(f"bits must be a non-negative integer, got {self.bits!r}")
        # Normalise numpy scalars to plain ints.
        object.__setattr__(self, "value", int(self.value))
        object.__setattr__(self, "bits", int(self.bits))
        if self.value < 0 or self.value >> self.bits:
            raise ValueError(f"value {self.value} does not fit in {self.bits} unsigned bits")

    @staticmethod
    def minimal(value: int) -> "FixedWidth":
        """Width = position of the highest set bit + 1 (0 for value 0)."""
        return FixedWidth(value, int(value).bit_length() if value >= 0 else 0)

    def width(self) -> int:
        return self.bits

    def bit_at(self, index: int) -> int:
        if not 0 <= index < self.bits:
            raise IndexError(f"bit index {index} out of range for width {self.bits}")
        return (self.value >> (self.bits - 1 - index)) & 1

    def __int__(self) -> int:
        return self.value


class UInt8(FixedWidth):
    def __init__(self, value: int):
        super().__init__(value, 8)


class UInt16(FixedWidth):
    def __init__(self, value: int):
        super().__init__(value, 16)


class UInt32(FixedWidth):
    def __init__(self, value: int):
        super().__init__(value, 32)


class UInt64(FixedWidth):
    def __init__(self, value: int):
        super().__init__(value, 64)


class UInt128(FixedWidth):
    def __init__(self, value: int):
        super().__init__(value, 128)
