"""
zdex: z-order (Morton) indexes for tuples and sequences of bit-bearing
dimensions.

Interleaving the bits of several dimensions gives one sortable code whose
order approximates multi-dimensional locality, for use as a key in an
ordered map.
"""

from zdex.config import ZdexConfig
from zdex.dimensions import (
    BitString,
    BytesDimension,
    Dimension,
    FixedWidth,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UInt128,
    as_dimension,
    numpy_dimension,
)
from zdex.encoding import ZIndex, to_key
from zdex.interleaving import (
    MAX_ARITY,
    AccessFailure,
    deinterleave,
    interleave,
    z_index1,
    z_index2,
    z_index3,
    z_index4,
    z_index5,
    z_index6,
    z_index7,
    z_index8,
    z_index_iter,
    z_index_rows,
    z_index_tuple,
)

__all__ = [
    "ZdexConfig",
    "Dimension",
    "as_dimension",
    "numpy_dimension",
    "BitString",
    "BytesDimension",
    "FixedWidth",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt128",
    "ZIndex",
    "to_key",
    "AccessFailure",
    "MAX_ARITY",
    "interleave",
    "deinterleave",
    "z_index1",
    "z_index2",
    "z_index3",
    "z_index4",
    "z_index5",
    "z_index6",
    "z_index7",
    "z_index8",
    "z_index_iter",
    "z_index_rows",
    "z_index_tuple",
]
