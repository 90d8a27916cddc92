from zdex.encoding.zindex import BitPositions, ZIndex, to_key

__all__ = [
    "BitPositions",
    "ZIndex",
    "to_key",
]
