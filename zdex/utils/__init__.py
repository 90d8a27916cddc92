"""Bit helpers shared across zdex components."""

from zdex.utils.bits_bytes_utils import (
    bitstring_to_bytes,
    bytes_to_bitstring,
    int_to_words,
    pack_bitstring,
    words_to_int,
)

__all__ = [
    "bitstring_to_bytes",
    "bytes_to_bitstring",
    "int_to_words",
    "pack_bitstring",
    "words_to_int",
]
