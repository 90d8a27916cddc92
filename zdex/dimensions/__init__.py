from zdex.dimensions.base import BitString, BytesDimension, Dimension, as_dimension
from zdex.dimensions.integers import FixedWidth, UInt8, UInt16, UInt32, UInt64, UInt128
from zdex.dimensions.arrays import numpy_dimension, rows_to_dimensions

__all__ = [
    "Dimension",
    "as_dimension",
    "BitString",
    "BytesDimension",
    "FixedWidth",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt128",
    "numpy_dimension",
    "rows_to_dimensions",
]
