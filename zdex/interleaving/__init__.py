from zdex.interleaving.interleaver import AccessFailure, deinterleave, interleave
from zdex.interleaving.registry import (
    ARITY_ENTRY_POINTS,
    MAX_ARITY,
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
    "AccessFailure",
    "interleave",
    "deinterleave",
    "ARITY_ENTRY_POINTS",
    "MAX_ARITY",
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
