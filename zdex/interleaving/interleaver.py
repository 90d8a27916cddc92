"""
Round-robin bit interleaving of several dimensions into one z-order code.

Each round takes the next bit of every dimension that still has bits left,
in dimension order. Exhausted dimensions are skipped, never padded, so the
output length is always the sum of the input widths.
"""
import sys
from numbers import Integral
from typing import Any, List, Sequence

from zdex.config import env_flag
from zdex.dimensions.base import Dimension, as_dimension
from zdex.encoding.zindex import ZIndex

# Debug logging controlled by environment variable ZDEX_DEBUG
_DEBUG = env_flag("ZDEX_DEBUG")


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[ZDEX] {msg}", file=sys.stderr)


class AccessFailure(Exception):
    """
    A dimension could not report its width or one of its bits.

    The underlying exception, if any, is chained as `__cause__`.
    """

    def __init__(self, message: str, dimension_index: int, bit_index: int | None = None):
        super().__init__(message)
        self.dimension_index = dimension_index
        self.bit_index = bit_index


def _read_width(dim: Dimension, d: int) -> int:
    try:
        width = dim.width()
    except Exception as err:
        raise AccessFailure(f"dimension {d}: width() failed: {err}", d) from err
    if isinstance(width, bool) or not isinstance(width, Integral) or width < 0:
        raise AccessFailure(f"dimension {d}: invalid width {width!r}", d)
    return int(width)


def _read_bit(dim: Dimension, d: int, k: int) -> bool:
    try:
        return bool(dim.bit_at(k))
    except Exception as err:
        raise AccessFailure(f"dimension {d}: bit_at({k}) failed: {err}", d, k) from err


def interleave(dimensions: Sequence[Any]) -> ZIndex:
    """
    Merge `dimensions` into one ZIndex, dimension 0 most significant.

    For equal widths W, output bit `d + D*k` is bit `k` of dimension `d`.
    Elements go through `as_dimension` first, so unsupported objects raise
    TypeError before anything is read. Raises AccessFailure, with no
    output, if any dimension read fails.
    """
    dims: List[Dimension] = [as_dimension(dim) for dim in dimensions]
    # Widths are read once up front and reused for the whole pass.
    widths = [_read_width(dim, d) for d, dim in enumerate(dims)]
    total = sum(widths)
    _dbg(f"interleave dims={len(dims)} widths={widths} bits={total}")

    out = bytearray((total + 7) // 8)
    cursors = [0] * len(dims)
    active = [d for d, w in enumerate(widths) if w > 0]
    pos = 0
    while active:
        remaining = []
        for d in active:
            k = cursors[d]
            if _read_bit(dims[d], d, k):
                out[pos >> 3] |= 0x80 >> (pos & 7)
            pos += 1
            cursors[d] = k + 1
            if k + 1 < widths[d]:
                remaining.append(d)
        active = remaining

    return ZIndex._from_buffer(out, total)


def deinterleave(zindex: ZIndex, widths: Sequence[int]) -> List[ZIndex]:
    """
    Reverse of `interleave` for a known width profile.

    Returns one ZIndex per dimension holding that dimension's bits.
    """
    widths = list(widths)
    if any(w < 0 for w in widths):
        raise ValueError(f"widths must be non-negative, got {widths}")
    if sum(widths) != len(zindex):
        raise ValueError(
            f"widths sum to {sum(widths)} bits but the code has {len(zindex)}"
        )

    rows: List[List[str]] = [[] for _ in widths]
    bits = zindex.to_bitstring()
    idx = 0
    max_len = max(widths, default=0)
    for k in range(max_len):
        for d, w in enumerate(widths):
            if k < w:
                rows[d].append(bits[idx])
                idx += 1
    return [ZIndex.from_bitstring("".join(r)) for r in rows]
