"""
numpy adapters: unsigned integer scalars and coordinate arrays.

Widths come from the dtype (uint8 -> 8 bits, ..., uint64 -> 64 bits).
"""
from typing import List

import numpy as np

from zdex.dimensions.integers import FixedWidth


def _check_unsigned(dtype: np.dtype) -> None:
    if not np.issubdtype(dtype, np.unsignedinteger):
        raise TypeError(f"Expected an unsigned integer dtype, got {dtype}")


def numpy_dimension(scalar: np.integer) -> FixedWidth:
    """Dimension for a numpy unsigned scalar, as wide as its dtype."""
    dtype = np.asarray(scalar).dtype
    _check_unsigned(dtype)
    return FixedWidth(int(scalar), dtype.itemsize * 8)


def rows_to_dimensions(array) -> List[List[FixedWidth]]:
    """
    Turn an (n_points, n_dims) unsigned array into one dimension list per row.
    """
    arr = np.asarray(array)
    _check_unsigned(arr.dtype)
    if arr.ndim != 2:
        raise ValueError(f"Expected a 2-D (n_points, n_dims) array, got shape {arr.shape}")

    bits = arr.dtype.itemsize * 8
    return [[FixedWidth(int(v), bits) for v in row] for row in arr.tolist()]
