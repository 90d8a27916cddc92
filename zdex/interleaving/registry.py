"""
Front-ends over `interleave`.

Fixed-arity entry points `z_index1` .. `z_index8` take positional,
possibly differently typed dimensions. `z_index_iter` takes a same-typed
collection of any length. Both delegate to the one shared interleaver.
"""
import sys
from typing import Any, Callable, Dict, Iterable, List, Sequence

from zdex.config import ZdexConfig, env_flag
from zdex.dimensions.arrays import rows_to_dimensions
from zdex.encoding.zindex import ZIndex
from zdex.interleaving.interleaver import interleave

# Debug logging controlled by environment variable ZDEX_DEBUG
_DEBUG = env_flag("ZDEX_DEBUG")

MAX_ARITY = 8


def _dbg(msg: str) -> None:
    if _DEBUG:
        print(f"[ZDEX] {msg}", file=sys.stderr)


def _z_index(*values: Any) -> ZIndex:
    return interleave(values)


def z_index1(a: Any) -> ZIndex:
    return _z_index(a)


def z_index2(a: Any, b: Any) -> ZIndex:
    return _z_index(a, b)


def z_index3(a: Any, b: Any, c: Any) -> ZIndex:
    return _z_index(a, b, c)


def z_index4(a: Any, b: Any, c: Any, d: Any) -> ZIndex:
    return _z_index(a, b, c, d)


def z_index5(a: Any, b: Any, c: Any, d: Any, e: Any) -> ZIndex:
    return _z_index(a, b, c, d, e)


def z_index6(a: Any, b: Any, c: Any, d: Any, e: Any, f: Any) -> ZIndex:
    return _z_index(a, b, c, d, e, f)


def z_index7(a: Any, b: Any, c: Any, d: Any, e: Any, f: Any, g: Any) -> ZIndex:
    return _z_index(a, b, c, d, e, f, g)


def z_index8(a: Any, b: Any, c: Any, d: Any, e: Any, f: Any, g: Any, h: Any) -> ZIndex:
    return _z_index(a, b, c, d, e, f, g, h)


# Arity -> entry point. Arities outside this table are unsupported.
ARITY_ENTRY_POINTS: Dict[int, Callable[..., ZIndex]] = {
    1: z_index1,
    2: z_index2,
    3: z_index3,
    4: z_index4,
    5: z_index5,
    6: z_index6,
    7: z_index7,
    8: z_index8,
}


def z_index_tuple(values: Sequence[Any]) -> ZIndex:
    """
    Z-index a fixed-size tuple through the entry point for its arity.
    """
    arity = len(values)
    if arity not in ARITY_ENTRY_POINTS:
        raise ValueError(
            f"Unsupported arity: {arity} (supported: 1..{MAX_ARITY}); use z_index_iter"
        )
    _dbg(f"z_index_tuple arity={arity}")
    return ARITY_ENTRY_POINTS[arity](*values)


def z_index_iter(dimensions: Iterable[Any], cfg: ZdexConfig | None = None) -> ZIndex:
    """
    Z-index a same-typed collection whose length is only known at call time.
    """
    if cfg is None:
        cfg = ZdexConfig()

    items = list(dimensions)
    if cfg.require_homogeneous and items:
        kinds = {type(item) for item in items}
        if len(kinds) > 1:
            names = sorted(k.__name__ for k in kinds)
            raise TypeError(f"z_index_iter expects one dimension type, got {names}")

    return interleave(items)


def z_index_rows(array, cfg: ZdexConfig | None = None) -> List[ZIndex]:
    """
    One ZIndex per row of an (n_points, n_dims) unsigned numpy array.
    """
    rows = rows_to_dimensions(array)
    _dbg(f"z_index_rows rows={len(rows)}")
    return [z_index_iter(row, cfg) for row in rows]
